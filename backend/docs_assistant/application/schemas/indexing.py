"""Pydantic schemas for documentation indexing runs."""

from pydantic import BaseModel


class IndexingStartedResponse(BaseModel):
    """Returned immediately; the crawl itself runs in the background."""

    status: str = "started"
    message: str
