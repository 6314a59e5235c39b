"""Book Validation Gate — checks and normalizes title/author before any write.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Inputs are never mutated; normalize_book returns a copy with the same id
    - Title is checked before author; first error wins
    - validate_books stops at the first invalid record in sequence order

Design Decisions:
    - Return the error instead of raising: callers decide when the gate fails,
      and the gate is testable without pytest.raises
"""

from dataclasses import replace
from typing import Sequence

from app.core.domain_types import Book, BookField, Locale
from app.core.errors import InvalidBookError


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def check_field(
    book: Book, field: BookField, locale: Locale = Locale.EN,
) -> InvalidBookError | None:
    """Error when the field is None or whitespace-only, else None."""
    if is_blank(book.get(field)):
        return InvalidBookError(field, locale)
    return None


def normalize_book(book: Book) -> Book:
    """Copy of book with surrounding whitespace stripped from title and author."""
    return replace(
        book,
        title=book.title.strip() if book.title is not None else None,
        author=book.author.strip() if book.author is not None else None,
    )


def validate_book(book: Book, locale: Locale = Locale.EN) -> Book | InvalidBookError:
    """Normalized copy of book, or the first field error."""
    for field in BookField:
        error = check_field(book, field, locale)
        if error:
            return error
    return normalize_book(book)


def validate_books(
    books: Sequence[Book], locale: Locale = Locale.EN,
) -> list[Book] | InvalidBookError:
    """Normalized copies of every book, or the first error in sequence order."""
    validated = []
    for book in books:
        result = validate_book(book, locale)
        if isinstance(result, InvalidBookError):
            return result
        validated.append(result)
    return validated
