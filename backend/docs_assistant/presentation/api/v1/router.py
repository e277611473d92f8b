"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from docs_assistant.presentation.api.v1.endpoints.health import router as health_router
from docs_assistant.presentation.api.v1.search_controller import router as search_router
from docs_assistant.presentation.api.v1.documents_controller import router as documents_router
from docs_assistant.presentation.api.v1.faq_controller import router as faq_router
from docs_assistant.presentation.api.v1.indexing_controller import router as indexing_router
from docs_assistant.presentation.api.v1.changelog_controller import router as changelog_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(search_router)
router.include_router(documents_router)
router.include_router(faq_router)
router.include_router(indexing_router)
router.include_router(changelog_router)
