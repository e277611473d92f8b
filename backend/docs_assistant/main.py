"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docs_assistant.config import get_settings
from docs_assistant.infrastructure.database import engine
from docs_assistant.infrastructure.database.bootstrap import init_database
from docs_assistant.infrastructure.dependencies import seed_faq
from docs_assistant.infrastructure.logging.log_config import setup_logging
from docs_assistant.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables and seed the FAQ cache."""
    setup_logging()

    await init_database()

    try:
        created = await seed_faq()
        logger.info("FAQ seed: %d new entries", created)
    except Exception as exc:
        logger.warning("Could not seed FAQ entries: %s", exc)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "docs_assistant.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
