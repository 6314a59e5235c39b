"""Language Strings tests — every message exists in every locale."""

import pytest

from app.core.domain_types import BookField, Locale
from app.core.language_strings import (
    MessageKey, get_invalid_field_message, get_message, resolve_locale,
)


def test_every_message_covers_all_locales():
    for key in MessageKey:
        for locale in Locale:
            assert get_message(key, locale)


def test_invalid_field_message_per_field():
    assert get_invalid_field_message(BookField.TITLE) == "The book must have a valid title"
    assert get_invalid_field_message(BookField.AUTHOR, Locale.ES) == (
        "El libro debe tener un autor válido"
    )


@pytest.mark.parametrize("raw, expected", [
    ("es", Locale.ES),
    (" ES ", Locale.ES),
    ("en", Locale.EN),
    ("fr", Locale.EN),
    ("", Locale.EN),
    (None, Locale.EN),
    (Locale.ES, Locale.ES),
])
def test_resolve_locale(raw, expected):
    assert resolve_locale(raw) == expected
