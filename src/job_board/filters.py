from job_board.models import JobRecord


class JobFilter:
    """
    Narrows a page of job records by title search and category.

    Matching is a case-insensitive substring test on the title and an exact
    test on the category. An empty criterion matches everything.
    """

    def __init__(self, search_term: str = "", category: str = ""):
        self.search_term = search_term
        self.category = category

    @property
    def is_active(self) -> bool:
        return bool(self.search_term or self.category)

    def matches(self, job: JobRecord) -> bool:
        if self.search_term.lower() not in job.title.lower():
            return False
        return not self.category or job.category == self.category

    def apply(self, jobs: list[JobRecord]) -> list[JobRecord]:
        """Return the matching jobs, keeping their original order."""
        if not self.is_active:
            return list(jobs)
        return [job for job in jobs if self.matches(job)]
