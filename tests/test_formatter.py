from unittest.mock import AsyncMock

import pytest

from job_board.controller import JobListController
from job_board.formatter import EMPTY_MESSAGE, LOADING_MESSAGE, RETRY_CONTROL, JobFormatter
from job_board.models import FetchFailure


async def loaded_controller(fetch_result) -> JobListController:
    controller = JobListController(fetcher=AsyncMock(return_value=fetch_result))
    await controller.load()
    return controller


def test_format_card(make_job):
    job = make_job(id=7, title="Data Engineer", salary="$3100", category="IT", location="Hybrid")

    card = JobFormatter.format_card(job)

    lines = card.split("\n")
    assert lines[0] == "Data Engineer"
    assert "💰 $3100" in card
    assert "🏷️ IT" in card
    assert "📍 Hybrid" in card
    assert "/jobs/7" in card


def test_format_active_filters_none():
    assert JobFormatter.format_active_filters("", "") == ""


def test_format_active_filters_search_only():
    assert JobFormatter.format_active_filters("dev", "") == 'Active filters: Search: "dev"'


def test_format_active_filters_both():
    text = JobFormatter.format_active_filters("dev", "Design")
    assert text.startswith("Active filters:")
    assert 'Search: "dev"' in text
    assert "Category: Design" in text


def test_format_view_loading():
    controller = JobListController(fetcher=AsyncMock())
    assert JobFormatter.format_view(controller) == LOADING_MESSAGE


@pytest.mark.asyncio
async def test_format_view_error():
    """Scenario: a server error shows the message and a retry control."""
    controller = await loaded_controller(FetchFailure(message="Server error", status=500))

    view = JobFormatter.format_view(controller)

    assert controller.state.is_loading is False
    assert "Server error" in view
    assert RETRY_CONTROL in view
    assert "Job Listing" not in view


@pytest.mark.asyncio
async def test_format_view_single_card_then_empty(make_job, make_success):
    """Scenario: one 'Engineer' card renders; searching 'zzz' shows the empty state."""
    controller = await loaded_controller(make_success([make_job(id="1", title="Engineer")]))

    view = JobFormatter.format_view(controller)
    assert view.count("Engineer") == 1
    assert "/jobs/1" in view
    assert EMPTY_MESSAGE not in view

    controller.set_search("zzz")
    view = JobFormatter.format_view(controller)

    assert EMPTY_MESSAGE in view
    assert "Engineer" not in view
    assert 'Search: "zzz"' in view


@pytest.mark.asyncio
async def test_format_view_lists_only_visible_cards(sample_jobs, make_success):
    controller = await loaded_controller(make_success(sample_jobs, total=25))
    controller.set_category("Design")

    view = JobFormatter.format_view(controller)

    assert "Graphic Designer" in view
    assert "Software Engineer in Test" in view
    assert "Marketing Manager" not in view
    assert "Category: Design" in view


@pytest.mark.asyncio
async def test_format_pagination_first_page(sample_jobs, make_success):
    controller = await loaded_controller(make_success(sample_jobs, total=25))

    text = JobFormatter.format_pagination(controller)

    assert "Showing 1 - 10 of 25 jobs" in text
    # Previous is disabled on page 1, Next is enabled
    assert "(< Previous)" in text
    assert "[Next >]" in text
    assert "Page 1" in text


@pytest.mark.asyncio
async def test_format_pagination_last_page(sample_jobs, make_success):
    controller = JobListController(
        fetcher=AsyncMock(return_value=make_success(sample_jobs, total=25))
    )
    await controller.go_to_page(3)

    text = JobFormatter.format_pagination(controller)

    assert "Showing 21 - 25 of 25 jobs" in text
    assert "[< Previous]" in text
    assert "(Next >)" in text
    assert "Page 3" in text
