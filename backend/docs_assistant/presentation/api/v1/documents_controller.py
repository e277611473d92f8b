"""Documents API controller — full-document reads and category listing."""

from fastapi import APIRouter, Depends, HTTPException, status

from docs_assistant.application.schemas import CategoryCountSchema, FullDocumentResponse
from docs_assistant.application.services import DocumentService
from docs_assistant.infrastructure.dependencies import get_document_service

router = APIRouter(tags=["Documents"])


@router.get("/documents/{resource_id}", response_model=FullDocumentResponse)
async def get_full_document(
    resource_id: str,
    service: DocumentService = Depends(get_document_service),
) -> FullDocumentResponse:
    """Reassemble a document from all of its chunks."""
    document = await service.get_full_document(resource_id)
    if document is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Document '{resource_id}' not found",
        )
    return FullDocumentResponse.model_validate(document)


@router.get("/categories", response_model=list[CategoryCountSchema])
async def list_categories(
    service: DocumentService = Depends(get_document_service),
) -> list[CategoryCountSchema]:
    """Indexed categories with their document counts, largest first."""
    categories = await service.list_categories()
    return [CategoryCountSchema.model_validate(c) for c in categories]
