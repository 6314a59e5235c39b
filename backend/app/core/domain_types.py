"""Domain Types — book record and the enums shared across the catalog.

Invariants:
    - Book.id is None until the store assigns it; the core never sets or changes it
    - BookId wraps int; never use a bare int for an identifier in domain logic
    - All valid field names and locales encoded as Enums, no raw string matching

Design Decisions:
    - Book is a plain dataclass, not the ORM model: core/ stays free of SQLAlchemy
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BookId = NewType("BookId", int)


# ─── Enums ───────────────────────────────────────────────────────

class BookField(str, Enum):
    """Text fields guarded by the validation gate, in check order."""
    TITLE = "title"
    AUTHOR = "author"


class Locale(str, Enum):
    """Languages available for user-facing error messages."""
    EN = "en"
    ES = "es"


# ─── Records ─────────────────────────────────────────────────────

@dataclass
class Book:
    """Catalog entry. title/author may be None or blank before validation."""
    title: str | None = None
    author: str | None = None
    id: BookId | None = None

    def get(self, field: BookField) -> str | None:
        return getattr(self, field.value)
