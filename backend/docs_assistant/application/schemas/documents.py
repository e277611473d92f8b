"""Pydantic schemas for indexed documents and categories."""

from pydantic import BaseModel


class FullDocumentResponse(BaseModel):
    """A whole document rebuilt from its stored chunks."""

    resource_id: str
    content: str
    chunk_count: int
    category: str | None = None
    source_url: str | None = None
    source_title: str | None = None

    model_config = {"from_attributes": True}


class CategoryCountSchema(BaseModel):
    name: str
    count: int

    model_config = {"from_attributes": True}
