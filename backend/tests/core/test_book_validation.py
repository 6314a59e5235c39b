"""Book Validation Gate — tests for the pure title/author checks.

Tests cover:
    - check_field flags None, empty, and whitespace-only values
    - validate_book returns a trimmed copy on success, first error otherwise
    - title is checked before author
    - validate_books stops at the first invalid record in order
    - inputs are never mutated
"""

import pytest

from app.core.book_validation import (
    check_field, is_blank, normalize_book, validate_book, validate_books,
)
from app.core.domain_types import Book, BookField, BookId, Locale
from app.core.errors import InvalidBookError


BLANKS = [None, "", " ", "\t", "\n  \t"]


@pytest.mark.parametrize("value", BLANKS)
def test_is_blank_for_missing_or_whitespace(value):
    assert is_blank(value)


def test_is_blank_false_for_text_with_padding():
    assert not is_blank("  x  ")


# ─── check_field ─────────────────────────────────────────────────

@pytest.mark.parametrize("title", BLANKS)
def test_check_field_rejects_blank_title(title):
    error = check_field(Book(title=title, author="Valid Author"), BookField.TITLE)
    assert isinstance(error, InvalidBookError)
    assert error.field == BookField.TITLE
    assert error.message == "The book must have a valid title"


@pytest.mark.parametrize("author", BLANKS)
def test_check_field_rejects_blank_author(author):
    error = check_field(Book(title="Valid Title", author=author), BookField.AUTHOR)
    assert isinstance(error, InvalidBookError)
    assert error.field == BookField.AUTHOR
    assert error.message == "The book must have a valid author"


def test_check_field_returns_none_for_valid_value():
    book = Book(title="1984", author="George Orwell")
    assert check_field(book, BookField.TITLE) is None
    assert check_field(book, BookField.AUTHOR) is None


def test_check_field_uses_requested_locale():
    error = check_field(Book(title=" ", author="x"), BookField.TITLE, Locale.ES)
    assert error.message == "El libro debe tener un título válido"


# ─── normalize_book ──────────────────────────────────────────────

def test_normalize_book_trims_and_keeps_id():
    book = Book(title=" 1984 ", author=" George Orwell ", id=BookId(7))
    normalized = normalize_book(book)
    assert normalized == Book(title="1984", author="George Orwell", id=BookId(7))


def test_normalize_book_does_not_mutate_input():
    book = Book(title=" 1984 ", author=" George Orwell ")
    normalize_book(book)
    assert book.title == " 1984 "
    assert book.author == " George Orwell "


def test_normalize_book_leaves_none_fields():
    assert normalize_book(Book()) == Book()


# ─── validate_book ───────────────────────────────────────────────

def test_validate_book_returns_trimmed_copy():
    result = validate_book(Book(title=" 1984 ", author=" George Orwell "))
    assert result == Book(title="1984", author="George Orwell")


def test_validate_book_checks_title_before_author():
    result = validate_book(Book(title=None, author=None))
    assert isinstance(result, InvalidBookError)
    assert result.field == BookField.TITLE


def test_validate_book_reports_author_when_title_valid():
    result = validate_book(Book(title="1984", author="   "))
    assert isinstance(result, InvalidBookError)
    assert result.field == BookField.AUTHOR


# ─── validate_books ──────────────────────────────────────────────

def test_validate_books_returns_all_trimmed_in_order():
    result = validate_books([
        Book(title=" A ", author="X"),
        Book(title="B", author=" Y "),
        Book(title="C", author="Z"),
    ])
    assert [b.title for b in result] == ["A", "B", "C"]
    assert [b.author for b in result] == ["X", "Y", "Z"]


def test_validate_books_returns_first_error_in_order():
    result = validate_books([
        Book(title="A", author="X"),
        Book(title="B", author=""),
        Book(title="", author="Z"),
    ])
    assert isinstance(result, InvalidBookError)
    assert result.field == BookField.AUTHOR


def test_validate_books_empty_sequence_is_valid():
    assert validate_books([]) == []
