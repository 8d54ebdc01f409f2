from job_board.controller import JobListController
from job_board.models import JobRecord

HEADER = "Job Listing"
LOADING_MESSAGE = "Loading job listings..."
RETRY_CONTROL = "[Try Again]"
EMPTY_MESSAGE = "No jobs found matching your criteria.\nTry adjusting your search or filters."
CARD_SEPARATOR = "-" * 40


class JobFormatter:
    """
    Renders the job list as plain text for a terminal.
    """

    @staticmethod
    def _control(label: str, enabled: bool) -> str:
        # Disabled controls use parentheses instead of brackets
        return f"[{label}]" if enabled else f"({label})"

    @classmethod
    def format_card(cls, job: JobRecord) -> str:
        """Format a single job as a card."""
        lines = [
            job.title,
            f"  💰 {job.salary}",
            f"  🏷️ {job.category}",
            f"  📍 {job.location}",
            f"  /jobs/{job.id}",
        ]
        return "\n".join(lines)

    @classmethod
    def format_active_filters(cls, search_term: str, category: str) -> str:
        if not search_term and not category:
            return ""

        parts = []
        if search_term:
            parts.append(f'Search: "{search_term}"')
        if category:
            parts.append(f"Category: {category}")
        return "Active filters: " + "  ".join(parts)

    @classmethod
    def format_pagination(cls, controller: JobListController) -> str:
        first, last = controller.showing_range
        state = controller.state
        summary = f"Showing {first} - {last} of {state.total_count} jobs"
        controls = "  ".join(
            [
                cls._control("< Previous", controller.can_go_previous),
                f"Page {state.current_page}",
                cls._control("Next >", controller.can_go_next),
            ]
        )
        return f"{summary}\n{controls}"

    @classmethod
    def format_view(cls, controller: JobListController) -> str:
        """
        Format the whole view for the controller's current state.
        Exactly one of loading, error or the listing is shown.
        """
        status = controller.status
        if status == "loading":
            return LOADING_MESSAGE
        if status == "error":
            return f"{controller.state.error}\n\n{RETRY_CONTROL}"

        sections = [HEADER]

        active = cls.format_active_filters(
            controller.state.search_term, controller.state.category_filter
        )
        if active:
            sections.append(active)

        if status == "empty":
            sections.append(EMPTY_MESSAGE)
        else:
            cards = [cls.format_card(job) for job in controller.visible_jobs]
            sections.append(f"\n{CARD_SEPARATOR}\n".join(cards))

        sections.append(cls.format_pagination(controller))
        return "\n\n".join(sections)
