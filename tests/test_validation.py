# tests/test_validation.py
import pytest

from bookshelf.errors import BookValidationError
from bookshelf.validation import validate_book_payload


def test_valid_payload_passes(make_payload):
    assert validate_book_payload(make_payload(), "create") is None


def test_read_page_equal_to_page_count_is_valid(make_payload):
    validate_book_payload(make_payload(pageCount=10, readPage=10), "update")


@pytest.mark.parametrize(
    "overrides, expected",
    [
        # name is checked first, even when the page numbers are also wrong
        (
            {"name": None, "readPage": 500, "pageCount": 0},
            "Gagal menambahkan buku. Mohon isi nama buku",
        ),
        ({"readPage": None}, "Gagal menambahkan buku. Mohon isi readPage"),
        ({"pageCount": None}, "Gagal menambahkan buku. Mohon isi pageCount"),
        # readPage > pageCount wins over pageCount < 1
        (
            {"readPage": 5, "pageCount": 0},
            "Gagal menambahkan buku. readPage tidak boleh lebih besar dari pageCount",
        ),
        (
            {"readPage": -1, "pageCount": 0},
            "Gagal menambahkan buku. pageCount tidak boleh kurang dari 1",
        ),
    ],
)
def test_first_failing_rule_wins(make_payload, overrides, expected):
    with pytest.raises(BookValidationError) as exc_info:
        validate_book_payload(make_payload(**overrides), "create")
    assert exc_info.value.message == expected


def test_update_messages_use_update_prefix(make_payload):
    with pytest.raises(BookValidationError) as exc_info:
        validate_book_payload(make_payload(readPage=101), "update")
    assert exc_info.value.message == (
        "Gagal memperbarui buku. readPage tidak boleh lebih besar dari pageCount"
    )
