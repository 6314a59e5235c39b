"""Language Strings — locale-specific text for catalog error messages.

Invariants:
    - All strings are pure data (no IO, no computation beyond lookup)
    - Every MessageKey has an entry for every Locale
    - Unknown locale strings fall back to English

Design Decisions:
    - Messages keyed by (MessageKey, Locale): errors.py stays language-agnostic
"""

from enum import Enum

from app.core.domain_types import BookField, Locale


class MessageKey(str, Enum):
    INVALID_TITLE = "invalid_title"
    INVALID_AUTHOR = "invalid_author"
    BOOK_NOT_FOUND = "book_not_found"
    UPDATE_NOT_FOUND = "update_not_found"


_MESSAGES: dict[MessageKey, dict[Locale, str]] = {
    MessageKey.INVALID_TITLE: {
        Locale.EN: "The book must have a valid title",
        Locale.ES: "El libro debe tener un título válido",
    },
    MessageKey.INVALID_AUTHOR: {
        Locale.EN: "The book must have a valid author",
        Locale.ES: "El libro debe tener un autor válido",
    },
    MessageKey.BOOK_NOT_FOUND: {
        Locale.EN: "The book does not exist",
        Locale.ES: "El libro no existe",
    },
    MessageKey.UPDATE_NOT_FOUND: {
        Locale.EN: "Cannot update: the book does not exist",
        Locale.ES: "No se puede actualizar: el libro no existe",
    },
}

_INVALID_FIELD_KEYS: dict[BookField, MessageKey] = {
    BookField.TITLE: MessageKey.INVALID_TITLE,
    BookField.AUTHOR: MessageKey.INVALID_AUTHOR,
}


def resolve_locale(value: str | Locale | None) -> Locale:
    """Map a configured locale string to Locale. Unknown or empty → English."""
    if isinstance(value, Locale):
        return value
    try:
        return Locale((value or "").strip().lower())
    except ValueError:
        return Locale.EN


def get_message(key: MessageKey, locale: Locale = Locale.EN) -> str:
    """Return the message for key in locale."""
    return _MESSAGES[key][locale]


def get_invalid_field_message(field: BookField, locale: Locale = Locale.EN) -> str:
    """Message for a blank/missing title or author."""
    return get_message(_INVALID_FIELD_KEYS[field], locale)
