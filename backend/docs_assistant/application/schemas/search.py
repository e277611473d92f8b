"""Pydantic schemas for semantic documentation search."""

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """One or more phrasings of the same question, optionally narrowed by category."""

    queries: list[str] = Field(
        ...,
        min_length=1,
        max_length=10,
        examples=[["how do I mute my microphone", "mute local audio track"]],
    )
    categories: list[str] | None = Field(
        default=None,
        description="Only return chunks from resources in these categories",
        examples=[["Home", "Agents"]],
    )


class SearchResultSchema(BaseModel):
    """A single matching chunk with the provenance of its document."""

    content: str
    similarity: float
    resource_id: str | None = None
    category: str | None = None
    source_url: str | None = None
    source_title: str | None = None

    model_config = {"from_attributes": True}


class SearchResponse(BaseModel):
    results: list[SearchResultSchema] = []
    total: int = 0
