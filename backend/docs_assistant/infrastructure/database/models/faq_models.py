"""SQLAlchemy ORM model for the curated FAQ table."""

import uuid

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    String,
    Text,
    func,
)

from docs_assistant.infrastructure.database.base import Base


def _generate_uuid() -> str:
    return str(uuid.uuid4())


class FaqModel(Base):
    """A curated question/answer pair with usage tracking."""

    __tablename__ = "faq"

    id = Column(String(36), primary_key=True, default=_generate_uuid)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(String(255), nullable=True)
    hits = Column(Integer, nullable=False, default=0, server_default="0")
    last_used = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<FaqModel(id={self.id}, question='{self.question[:40]}')>"
