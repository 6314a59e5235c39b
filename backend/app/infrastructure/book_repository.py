"""SQLAlchemy Book Repository — BookRepository implementation over an AsyncSession.

Invariants:
    - Returns core Book dataclasses, never ORM rows
    - save inserts when id is None, otherwise replaces the row with that id
    - save with an id that has no row inserts it under that id; on PostgreSQL this
      does not advance books_id_seq, so later autoincrement inserts may collide.
      CatalogService never does this: update always loads the row first
    - Every write commits before returning; ids are populated by the flush
    - find_all and save_all preserve order (id ascending / input order)
"""

import logging
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Book, BookId
from app.models.book import BookRecord

logger = logging.getLogger(__name__)


class SqlAlchemyBookRepository:
    """Book persistence backed by the books table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _apply(self, book: Book) -> BookRecord:
        """Stage book on the session: new row, or fields copied onto the stored row."""
        if book.id is not None:
            row = await self.db.get(BookRecord, book.id)
            if row is not None:
                row.title = book.title
                row.author = book.author
                return row
        row = BookRecord(title=book.title, author=book.author)
        if book.id is not None:
            row.id = book.id
        self.db.add(row)
        return row

    async def save(self, book: Book) -> Book:
        row = await self._apply(book)
        await self.db.commit()
        return row.to_domain()

    async def save_all(self, books: Sequence[Book]) -> list[Book]:
        rows = [await self._apply(book) for book in books]
        await self.db.commit()
        logger.debug(f"Saved {len(rows)} books", extra={"count": len(rows)})
        return [row.to_domain() for row in rows]

    async def find_all(self) -> list[Book]:
        result = await self.db.execute(
            select(BookRecord).order_by(BookRecord.id),
        )
        return [row.to_domain() for row in result.scalars().all()]

    async def find_by_id(self, book_id: BookId) -> Book | None:
        row = await self.db.get(BookRecord, book_id)
        return row.to_domain() if row else None

    async def exists_by_id(self, book_id: BookId) -> bool:
        result = await self.db.execute(
            select(BookRecord.id).where(BookRecord.id == book_id),
        )
        return result.scalar_one_or_none() is not None

    async def delete_by_id(self, book_id: BookId) -> None:
        await self.db.execute(
            delete(BookRecord).where(BookRecord.id == book_id),
        )
        await self.db.commit()
