"""Pydantic schemas for SDK changelog endpoints."""

from pydantic import BaseModel


class SDKInfoSchema(BaseModel):
    """An SDK with its display name and the slug used in URLs."""

    name: str
    slug: str


class SDKListResponse(BaseModel):
    sdks: list[SDKInfoSchema]


class ChangelogResponse(BaseModel):
    sdk: str
    slug: str
    link: str
    content: str
