"""Book ORM — persisted row behind the Book domain record.

Invariants:
    - id is an autoincrement integer primary key, assigned on insert
    - title and author are non-nullable; the service stores them trimmed
    - created_at/updated_at are storage-only metadata, never read by the core
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import Book, BookId
from app.db.base import Base

TITLE_MAX_LENGTH = 255
AUTHOR_MAX_LENGTH = 255
# Integer maps to int4 on PostgreSQL
MAX_BOOK_ID = 2**31 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookRecord(Base):
    """Catalog entry row."""
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH), nullable=False,
    )
    author: Mapped[str] = mapped_column(
        String(AUTHOR_MAX_LENGTH), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    def to_domain(self) -> Book:
        return Book(title=self.title, author=self.author, id=BookId(self.id))
