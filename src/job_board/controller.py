import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import BaseModel

from job_board.api import fetch_jobs
from job_board.filters import JobFilter
from job_board.models import CATEGORIES, FetchEnvelope, FetchSuccess, JobRecord

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
LOAD_ERROR_MESSAGE = "Failed to load job listings"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

Fetcher = Callable[[int, int, dict[str, Any]], Awaitable[FetchEnvelope]]


class ViewState(BaseModel):
    """Interactive state of the job list. Owned by a single JobListController."""

    items: list[JobRecord] = []
    search_term: str = ""
    category_filter: str = ""
    is_loading: bool = True
    error: str | None = None
    current_page: int = 1
    total_count: int = 0


class JobListController:
    """
    Bridges the fetch adapter and the text view.

    Changing the page refetches; changing the search term or category only
    changes which of the loaded jobs are visible. Responses that settle after
    a newer request has been issued are discarded.
    """

    def __init__(self, fetcher: Fetcher | None = None, page_size: int = DEFAULT_PAGE_SIZE):
        self._fetcher: Fetcher = fetcher or fetch_jobs
        self.page_size = page_size
        self.state = ViewState()
        self._request_seq = 0

    def _is_current(self, seq: int) -> bool:
        return seq == self._request_seq

    async def load(self) -> None:
        """Fetch the current page and store the outcome."""
        self._request_seq += 1
        seq = self._request_seq
        page = self.state.current_page
        self.state.is_loading = True

        try:
            result = await self._fetcher(page, self.page_size, {})
        except Exception as e:
            if self._is_current(seq):
                logger.exception(f"Unexpected error while loading page {page}")
                self.state.error = UNEXPECTED_ERROR_MESSAGE
            else:
                logger.warning(f"Discarding error from superseded request for page {page}: {e}")
        else:
            if self._is_current(seq):
                self._apply_result(result)
            else:
                logger.debug(f"Discarding stale response for page {page}")
        finally:
            if self._is_current(seq):
                self.state.is_loading = False

    def _apply_result(self, result: FetchEnvelope) -> None:
        if isinstance(result, FetchSuccess):
            self.state.items = result.items
            self.state.total_count = result.total
            self.state.error = None
        else:
            # Keep the previously loaded items; only the error changes
            self.state.error = result.message or LOAD_ERROR_MESSAGE

    async def reload(self) -> None:
        """Start over from the initial state, as a full page reload would."""
        self.state = ViewState()
        await self.load()

    # --- Filtering ---

    @property
    def job_filter(self) -> JobFilter:
        return JobFilter(self.state.search_term, self.state.category_filter)

    @property
    def visible_jobs(self) -> list[JobRecord]:
        """The loaded jobs that match the current search and category."""
        return self.job_filter.apply(self.state.items)

    def set_search(self, term: str) -> None:
        self.state.search_term = term

    def set_category(self, category: str) -> None:
        if category and category not in CATEGORIES:
            raise ValueError(
                f"Unknown category '{category}'. Expected one of: {', '.join(CATEGORIES)}"
            )
        self.state.category_filter = category

    def clear_search(self) -> None:
        self.state.search_term = ""

    def clear_category(self) -> None:
        self.state.category_filter = ""

    def clear_filters(self) -> None:
        self.clear_search()
        self.clear_category()

    # --- Pagination ---

    @property
    def can_go_previous(self) -> bool:
        return self.state.current_page > 1

    @property
    def can_go_next(self) -> bool:
        return self.state.current_page * self.page_size < self.state.total_count

    @property
    def showing_range(self) -> tuple[int, int]:
        """1-based (first, last) positions of the current page within the total."""
        page = self.state.current_page
        first = (page - 1) * self.page_size + 1
        last = min(page * self.page_size, self.state.total_count)
        return first, last

    async def go_to_page(self, page: int) -> None:
        if page < 1:
            raise ValueError(f"Page must be a positive integer, got {page}")
        self.state.current_page = page
        await self.load()

    async def next_page(self) -> bool:
        """Advance one page. Returns False without fetching when already on the last page."""
        if not self.can_go_next:
            return False
        await self.go_to_page(self.state.current_page + 1)
        return True

    async def previous_page(self) -> bool:
        """Go back one page. Returns False without fetching when on the first page."""
        if not self.can_go_previous:
            return False
        await self.go_to_page(self.state.current_page - 1)
        return True

    @property
    def status(self) -> str:
        """Which view to show: 'loading', 'error', 'empty' or 'grid', checked in that order."""
        if self.state.is_loading:
            return "loading"
        if self.state.error:
            return "error"
        if not self.visible_jobs:
            return "empty"
        return "grid"
