import logging
import random
from datetime import date
from typing import Any

import httpx
from pydantic import ValidationError

from job_board import config
from job_board.models import (
    CATEGORIES,
    LOCATIONS,
    FetchEnvelope,
    FetchFailure,
    FetchSuccess,
    JobRecord,
)

logger = logging.getLogger(__name__)

USER_AGENT = "JobBoard/0.1"
TOTAL_COUNT_HEADER = "x-total-count"
DEFAULT_ERROR_MESSAGE = "Failed to fetch job listings"
DEFAULT_ERROR_STATUS = 500
SALARY_MIN = 1000
SALARY_MAX = 6000  # exclusive


def decorate_job(raw: dict[str, Any]) -> JobRecord:
    """
    Build a JobRecord from a placeholder post, attaching synthetic
    salary, category, location and posted date.

    The synthetic fields are drawn again on every call, so the same post
    gets different values across fetches.
    """
    return JobRecord(
        id=raw["id"],
        title=raw["title"],
        body=raw.get("body"),
        salary=f"${random.randrange(SALARY_MIN, SALARY_MAX)}",
        category=random.choice(CATEGORIES),
        location=random.choice(LOCATIONS),
        posted_date=date.today().isoformat(),
    )


def _parse_total(response: httpx.Response, fallback: int) -> int:
    """Read the total count header, falling back when it is absent or malformed."""
    raw = response.headers.get(TOTAL_COUNT_HEADER)
    if raw is None:
        return fallback
    try:
        total = int(raw)
    except ValueError:
        total = -1
    if total < 0:
        logger.debug(f"Ignoring malformed {TOTAL_COUNT_HEADER} header: {raw!r}")
        return fallback
    return total


def _error_message(response: httpx.Response) -> str:
    """Pull a `message` out of an error body, if the body is a JSON object carrying one."""
    try:
        body = response.json()
    except ValueError:
        return DEFAULT_ERROR_MESSAGE
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return DEFAULT_ERROR_MESSAGE


async def _get(
    client: httpx.AsyncClient | None, url: str, params: dict[str, Any]
) -> httpx.Response:
    if client is not None:
        return await client.get(url, params=params)
    async with httpx.AsyncClient(headers={"User-Agent": USER_AGENT}) as own_client:
        return await own_client.get(url, params=params)


async def fetch_jobs(
    page: int = 1,
    limit: int = 10,
    filters: dict[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
) -> FetchEnvelope:
    """
    Fetch one page of posts and normalize them into job records.

    Makes a single attempt; there is no retry. Every failure is logged and
    returned as a FetchFailure instead of being raised.
    """
    url = f"{config.JOBS_API_BASE_URL}/posts"
    params: dict[str, Any] = {"_page": page, "_limit": limit, **(filters or {})}

    try:
        response = await _get(client, url, params)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise ValueError(f"expected a JSON array, got {type(payload).__name__}")
        items = [decorate_job(raw) for raw in payload]
    except httpx.HTTPStatusError as e:
        logger.error(f"Error fetching jobs from {url} (page {page}): {e}")
        return FetchFailure(
            message=_error_message(e.response),
            status=e.response.status_code,
        )
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Error fetching jobs from {url} (page {page}): {e}")
        return FetchFailure(message=DEFAULT_ERROR_MESSAGE, status=DEFAULT_ERROR_STATUS)
    except (ValidationError, ValueError, KeyError, TypeError) as e:
        logger.error(f"Malformed job listing response from {url} (page {page}): {e}")
        return FetchFailure(message=DEFAULT_ERROR_MESSAGE, status=DEFAULT_ERROR_STATUS)

    return FetchSuccess(
        items=items,
        total=_parse_total(response, fallback=len(items)),
        page=page,
        limit=limit,
    )
