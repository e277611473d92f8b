from .resource_repository import SQLAlchemyResourceRepository
from .chunk_repository import PgChunkRepository
from .faq_repository import SQLAlchemyFaqRepository

__all__ = [
    "SQLAlchemyResourceRepository",
    "PgChunkRepository",
    "SQLAlchemyFaqRepository",
]
