"""SQLAlchemy ORM model for indexed documentation resources."""

import uuid

from sqlalchemy import (
    Column,
    DateTime,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from docs_assistant.infrastructure.database.base import Base


def _generate_uuid() -> str:
    return str(uuid.uuid4())


class ResourceModel(Base):
    """One ingested documentation page.

    Owns its chunks: deleting a resource cascades to ``resource_chunks``
    both in the ORM and through the foreign key.
    """

    __tablename__ = "resources"

    id = Column(String(36), primary_key=True, default=_generate_uuid)
    content = Column(Text, nullable=False)
    category = Column(String(255), nullable=True, index=True)
    source_url = Column(Text, nullable=True)
    source_title = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    chunks = relationship(
        "ResourceChunkModel",
        back_populates="resource",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
