"""In-Memory Book Repository — BookRepository fake for CatalogService tests.

Invariants:
    - Records every call as (method, args) in .calls, in call order
    - Stores and returns copies: callers cannot mutate stored state without save
    - Assigns ids 1, 2, 3, ... on insert, like an autoincrement column
"""

from dataclasses import replace
from typing import Sequence

from app.core.domain_types import Book, BookId


class InMemoryBookRepository:
    def __init__(self, books: Sequence[Book] = ()):
        self.rows: dict[int, Book] = {}
        self.calls: list[tuple[str, object]] = []
        self._next_id = 1
        for book in books:
            self._store(book)

    def _store(self, book: Book) -> Book:
        if book.id is None:
            book = replace(book, id=BookId(self._next_id))
        self._next_id = max(self._next_id, book.id + 1)
        self.rows[book.id] = replace(book)
        return replace(book)

    def called(self, method: str) -> bool:
        return any(name == method for name, _ in self.calls)

    async def save(self, book: Book) -> Book:
        self.calls.append(("save", replace(book)))
        return self._store(book)

    async def save_all(self, books: Sequence[Book]) -> list[Book]:
        self.calls.append(("save_all", [replace(b) for b in books]))
        return [self._store(b) for b in books]

    async def find_all(self) -> list[Book]:
        self.calls.append(("find_all", None))
        return [replace(b) for b in self.rows.values()]

    async def find_by_id(self, book_id: BookId) -> Book | None:
        self.calls.append(("find_by_id", book_id))
        book = self.rows.get(book_id)
        return replace(book) if book else None

    async def exists_by_id(self, book_id: BookId) -> bool:
        self.calls.append(("exists_by_id", book_id))
        return book_id in self.rows

    async def delete_by_id(self, book_id: BookId) -> None:
        self.calls.append(("delete_by_id", book_id))
        self.rows.pop(book_id, None)
