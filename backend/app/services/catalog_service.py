"""Catalog Service — validation gate plus store orchestration for book records.

Invariants:
    - Every write (create, create_many, update) passes validate_book first;
      a failing record never reaches the store
    - Persisted title/author are always trimmed, on every write path
    - create_many validates the whole batch before a single save_all call
    - delete checks existence before delete_by_id; update loads before validating,
      so a missing id reports BookNotFoundError regardless of payload
    - update keeps the stored id, never the payload id
    - Stateless: the only attribute besides locale is the store reference

Design Decisions:
    - Errors propagate unlogged: the API error handlers own error logging
"""

import logging
from typing import Sequence

from app.core.book_validation import validate_book, validate_books
from app.core.domain_types import Book, BookId, Locale
from app.core.errors import BookNotFoundError, InvalidBookError
from app.core.language_strings import MessageKey
from app.core.repository_protocols import BookRepository

logger = logging.getLogger(__name__)


class CatalogService:
    """Create, read, update and delete books through a BookRepository."""

    def __init__(self, repository: BookRepository, locale: Locale = Locale.EN):
        self.repository = repository
        self.locale = locale

    async def create(self, book: Book) -> Book:
        """Validate, trim, and save a single book."""
        result = validate_book(book, self.locale)
        if isinstance(result, InvalidBookError):
            raise result
        stored = await self.repository.save(result)
        logger.info(f"Book created: {stored.id}", extra={"book_id": stored.id})
        return stored

    async def create_many(self, books: Sequence[Book]) -> list[Book]:
        """Validate every book, then save them all in one call."""
        result = validate_books(books, self.locale)
        if isinstance(result, InvalidBookError):
            raise result
        stored = await self.repository.save_all(result)
        logger.info(f"Books created: {len(stored)}", extra={"count": len(stored)})
        return stored

    async def get_all(self) -> list[Book]:
        return await self.repository.find_all()

    async def get_by_id(self, book_id: BookId) -> Book | None:
        """Stored book, or None when absent."""
        return await self.repository.find_by_id(book_id)

    async def delete(self, book_id: BookId) -> None:
        if not await self.repository.exists_by_id(book_id):
            raise BookNotFoundError(
                book_id, MessageKey.BOOK_NOT_FOUND, self.locale,
            )
        await self.repository.delete_by_id(book_id)
        logger.info(f"Book deleted: {book_id}", extra={"book_id": book_id})

    async def update(self, book_id: BookId, new_data: Book) -> Book:
        """Overwrite title/author of the stored book, keeping its id."""
        existing = await self.repository.find_by_id(book_id)
        if existing is None:
            raise BookNotFoundError(
                book_id, MessageKey.UPDATE_NOT_FOUND, self.locale,
            )

        result = validate_book(new_data, self.locale)
        if isinstance(result, InvalidBookError):
            raise result

        existing.title = result.title
        existing.author = result.author
        stored = await self.repository.save(existing)
        logger.info(f"Book updated: {stored.id}", extra={"book_id": stored.id})
        return stored
