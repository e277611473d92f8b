"""Search API controller — semantic retrieval over indexed documentation."""

from fastapi import APIRouter, Depends

from docs_assistant.application.schemas import (
    SearchRequest,
    SearchResponse,
    SearchResultSchema,
)
from docs_assistant.application.services import RetrievalService
from docs_assistant.infrastructure.dependencies import get_retrieval_service

router = APIRouter(prefix="/search", tags=["Search"])


@router.post("", response_model=SearchResponse)
async def search_docs(
    body: SearchRequest,
    service: RetrievalService = Depends(get_retrieval_service),
) -> SearchResponse:
    """Search with every phrasing concurrently; one result per document."""
    results = await service.find_relevant_many(body.queries, body.categories)
    return SearchResponse(
        results=[SearchResultSchema.model_validate(r) for r in results],
        total=len(results),
    )
