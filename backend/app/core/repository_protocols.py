"""Boundary Protocols — contract between the catalog core and its store.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, but the validation gate that
      guards these calls is never async itself
"""

from typing import Protocol, Sequence

from app.core.domain_types import Book, BookId


class BookRepository(Protocol):
    """Contract for book persistence, implemented by shell."""
    async def save(self, book: Book) -> Book:
        """Insert when book.id is None, else replace by identity."""
        ...

    async def save_all(self, books: Sequence[Book]) -> list[Book]: ...
    async def find_all(self) -> list[Book]: ...
    async def find_by_id(self, book_id: BookId) -> Book | None: ...
    async def exists_by_id(self, book_id: BookId) -> bool: ...

    async def delete_by_id(self, book_id: BookId) -> None:
        """Callers confirm existence first."""
        ...
