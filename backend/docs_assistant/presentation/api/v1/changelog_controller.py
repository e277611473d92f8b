"""Changelog API controller — recent release notes per LiveKit SDK."""

from fastapi import APIRouter, Depends, HTTPException, status

from docs_assistant.application.schemas import (
    ChangelogResponse,
    SDKInfoSchema,
    SDKListResponse,
)
from docs_assistant.application.services import ChangelogService
from docs_assistant.domain.entities import SDKName
from docs_assistant.domain.exceptions import ChangelogUnavailableError
from docs_assistant.infrastructure.dependencies import get_changelog_service

router = APIRouter(prefix="/changelog", tags=["Changelog"])


@router.get("", response_model=SDKListResponse)
async def list_sdks(
    service: ChangelogService = Depends(get_changelog_service),
) -> SDKListResponse:
    return SDKListResponse(
        sdks=[SDKInfoSchema(name=sdk.value, slug=sdk.slug) for sdk in service.available_sdks()]
    )


@router.get("/{sdk_slug}", response_model=ChangelogResponse)
async def get_changelog(
    sdk_slug: str,
    service: ChangelogService = Depends(get_changelog_service),
) -> ChangelogResponse:
    """Latest changelog for one SDK, served from a 24h cache."""
    try:
        sdk = SDKName.from_identifier(sdk_slug)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    try:
        changelog = await service.fetch(sdk)
    except ChangelogUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return ChangelogResponse(
        sdk=changelog.sdk.value,
        slug=changelog.sdk.slug,
        link=changelog.link,
        content=changelog.content,
    )
