from typing import Literal

from pydantic import BaseModel

CATEGORIES = ("IT", "Design", "Marketing")
LOCATIONS = ("Remote", "On-site", "Hybrid")

Category = Literal["IT", "Design", "Marketing"]
Location = Literal["Remote", "On-site", "Hybrid"]


class JobRecord(BaseModel):
    """
    A job listing built from a placeholder post.
    Only id, title and body come from the source; the rest is generated at fetch time.
    """

    id: int | str
    title: str
    body: str | None = None
    salary: str
    category: Category
    location: Location
    posted_date: str


class FetchSuccess(BaseModel):
    success: Literal[True] = True
    items: list[JobRecord]
    total: int
    page: int
    limit: int


class FetchFailure(BaseModel):
    success: Literal[False] = False
    message: str
    status: int


FetchEnvelope = FetchSuccess | FetchFailure
