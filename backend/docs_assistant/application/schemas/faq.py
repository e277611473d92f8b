"""Pydantic DTOs for the FAQ cache."""

from datetime import datetime

from pydantic import BaseModel, Field


class FaqSearchRequest(BaseModel):
    """Fuzzy lookup of a question against the curated FAQ list."""

    query: str = Field(..., min_length=1, examples=["how do I mute audio?"])
    threshold: float | None = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Maximum normalized edit distance; omitted uses the configured faq_threshold",
    )


class FaqMatchResponse(BaseModel):
    question: str
    answer: str
    similarity: float

    model_config = {"from_attributes": True}


class FaqSearchResponse(BaseModel):
    """``match`` is null when nothing is within the threshold."""

    match: FaqMatchResponse | None = None


class FaqCreate(BaseModel):
    """Schema for adding a curated FAQ entry."""

    question: str = Field(..., min_length=1, examples=["how to mute audio"])
    answer: str = Field(..., min_length=1)
    category: str | None = Field(None, max_length=255, examples=["Home"])


class FaqResponse(BaseModel):
    id: str
    question: str
    answer: str
    category: str | None = None
    hits: int = 0
    last_used: datetime | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
