"""Book Schemas — Pydantic models for the books API boundary.

Invariants:
    - Request bodies never carry an id; ids come from the path or the store
    - title/author are optional here so the core gate reports missing fields
    - Length limits apply to the trimmed value, the one that gets stored
    - BookResponse is built from the domain Book (from_attributes)
"""

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from app.core.domain_types import Book
from app.models.book import AUTHOR_MAX_LENGTH, TITLE_MAX_LENGTH

_MAX_LENGTHS = {"title": TITLE_MAX_LENGTH, "author": AUTHOR_MAX_LENGTH}


class BookPayload(BaseModel):
    """Book create/update body."""
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    author: str | None = None

    @field_validator("title", "author")
    @classmethod
    def check_trimmed_length(cls, v: str | None, info: ValidationInfo) -> str | None:
        """Reject values longer than the column once trimmed. Blank stays for the core."""
        limit = _MAX_LENGTHS[info.field_name]
        if v is not None and len(v.strip()) > limit:
            raise ValueError(f"{info.field_name} must be at most {limit} characters")
        return v

    def to_domain(self) -> Book:
        return Book(title=self.title, author=self.author)


class BookBatch(BaseModel):
    """Bulk create body, validated in order, all or nothing."""
    books: list[BookPayload]


class BookResponse(BaseModel):
    """Stored book."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
