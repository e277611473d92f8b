"""SQLAlchemy ORM model for resource chunks with pgvector embeddings."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from pgvector.sqlalchemy import Vector

from docs_assistant.config import get_settings
from docs_assistant.infrastructure.database.base import Base

EMBEDDING_DIMENSIONS = get_settings().embedding_dimensions  # HNSW max: 2000


class ResourceChunkModel(Base):
    """A text chunk from an indexed resource, with a vector embedding.

    The autoincrement ``id`` preserves insertion order, which is the
    original chunk order and is used to reassemble full documents.
    """

    __tablename__ = "resource_chunks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    resource_id = Column(
        String(36),
        ForeignKey("resources.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    chunk_index = Column(Integer, nullable=False)
    content = Column(Text, nullable=False)
    embedding = Column(Vector(EMBEDDING_DIMENSIONS), nullable=False)
    has_code = Column(Boolean, nullable=False, default=False)
    language = Column(String(30), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    resource = relationship("ResourceModel", back_populates="chunks")

    __table_args__ = (
        UniqueConstraint("resource_id", "chunk_index", name="uq_chunk_position"),
        Index("idx_chunks_embedding_hnsw", embedding, postgresql_using="hnsw",
              postgresql_ops={"embedding": "vector_cosine_ops"}),
    )
