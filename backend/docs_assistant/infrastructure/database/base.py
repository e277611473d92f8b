"""SQLAlchemy ORM base for resources, chunks and FAQ entries."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass
