import os

import pytest

# Set environment variables for tests before any imports happen
os.environ["JOBS_API_BASE_URL"] = "https://api.test"
os.environ["PAGE_SIZE"] = "10"

from job_board.models import FetchSuccess, JobRecord  # noqa: E402


def build_job(
    id: int | str = 1,
    title: str = "Senior Software Engineer",
    category: str = "IT",
    location: str = "Remote",
    salary: str = "$4200",
) -> JobRecord:
    return JobRecord(
        id=id,
        title=title,
        salary=salary,
        category=category,
        location=location,
        posted_date="2026-10-19",
    )


@pytest.fixture
def make_job():
    """Factory for JobRecords with sensible defaults."""
    return build_job


@pytest.fixture
def sample_jobs():
    """A page of jobs spanning every category."""
    return [
        build_job(id=1, title="Senior Software Engineer", category="IT"),
        build_job(id=2, title="Graphic Designer", category="Design", location="Hybrid"),
        build_job(id=3, title="Marketing Manager", category="Marketing", location="On-site"),
        build_job(id=4, title="Software Engineer in Test", category="Design"),
    ]


@pytest.fixture
def sample_posts():
    """Raw posts as returned by the placeholder API."""
    return [
        {"userId": 1, "id": 1, "title": "sunt aut facere", "body": "quia et suscipit"},
        {"userId": 1, "id": 2, "title": "qui est esse", "body": "est rerum tempore"},
        {"userId": 1, "id": 3, "title": "ea molestias quasi", "body": "et iusto sed quo"},
    ]


def success(items: list[JobRecord], total: int | None = None, page: int = 1) -> FetchSuccess:
    return FetchSuccess(
        items=items,
        total=len(items) if total is None else total,
        page=page,
        limit=10,
    )


@pytest.fixture
def make_success():
    """Factory for successful fetch envelopes."""
    return success
