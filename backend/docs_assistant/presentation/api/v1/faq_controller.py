"""FAQ API controller — fuzzy lookup and curation of FAQ entries."""

from fastapi import APIRouter, Depends, status

from docs_assistant.application.schemas import (
    FaqCreate,
    FaqMatchResponse,
    FaqResponse,
    FaqSearchRequest,
    FaqSearchResponse,
)
from docs_assistant.application.services import FaqCacheService
from docs_assistant.infrastructure.dependencies import get_faq_cache_service

router = APIRouter(prefix="/faq", tags=["FAQ"])


@router.post("/search", response_model=FaqSearchResponse)
async def search_faq(
    body: FaqSearchRequest,
    service: FaqCacheService = Depends(get_faq_cache_service),
) -> FaqSearchResponse:
    """Closest FAQ entry within the threshold, or ``match: null``."""
    match = await service.search(body.query, threshold=body.threshold)
    if match is None:
        return FaqSearchResponse(match=None)
    return FaqSearchResponse(match=FaqMatchResponse.model_validate(match))


@router.post("", response_model=FaqResponse, status_code=status.HTTP_201_CREATED)
async def create_faq(
    data: FaqCreate,
    service: FaqCacheService = Depends(get_faq_cache_service),
) -> FaqResponse:
    """Add a curated question/answer pair."""
    entry = await service.add_faq(data.question, data.answer, data.category)
    return FaqResponse.model_validate(entry)
