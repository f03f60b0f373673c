"""Tests for read-only library views."""

from kourend_library import Book, LibraryCustomer, WorldPoint
from kourend_library.queries import (
    book_to_dict,
    bookcase_to_dict,
    customer_summary,
    describe_bookcase,
    find_book,
    library_summary,
)

FIRST = WorldPoint(1626, 3795, 0)


def test_describe_bookcase(library):
    """Descriptions name the floor and the room."""
    bookcase = library.get_bookcase(WorldPoint(1618, 3794, 2))

    assert describe_bookcase(bookcase) == "Top floor, Southwest room (1618, 3794)"


def test_book_to_dict():
    """Books serialize with their member name, item id and short name."""
    assert book_to_dict(Book.SOUL_JOURNEY) == {
        "id": "SOUL_JOURNEY",
        "item_id": 19637,
        "name": "Soul Journey",
    }
    assert book_to_dict(None) is None


def test_bookcase_to_dict_unknown(library):
    """An unchecked bookcase is reported as unknown."""
    result = bookcase_to_dict(library.get_bookcase(FIRST))

    assert result["index"] == [0]
    assert result["known"] is False
    assert result["book"] is None
    assert result["possible_books"] == []
    assert result["description"] == "Ground floor, Southwest room (1626, 3795)"


def test_bookcase_to_dict_known(library):
    """A checked bookcase reports its book."""
    library.mark(FIRST, Book.HOSIDIUS_LETTER)

    result = bookcase_to_dict(library.get_bookcase(FIRST))

    assert result["known"] is True
    assert result["book"]["id"] == "HOSIDIUS_LETTER"


def test_find_book(library):
    """Candidates for a book list every bookcase that may hold it."""
    library.mark(FIRST, Book.HOSIDIUS_LETTER)

    found = find_book(library, Book.SOUL_JOURNEY)

    assert [(r["x"], r["y"], r["plane"]) for r in found] == library.locate(Book.SOUL_JOURNEY)
    for result in found:
        assert result["known"] or "SOUL_JOURNEY" in result["possible_books"]


def test_library_summary_fresh(library):
    """A fresh library reports no data."""
    summary = library_summary(library)

    assert summary["state"] == "no_data"
    assert summary["available_sequences"] is None
    assert summary["bookcases"] == 348
    assert summary["known_bookcases"] == 0
    assert summary["unknown_bookcases"] == 348
    assert len(summary["available_manuscripts"]) == 10
    assert summary["customer"] is None


def test_library_summary_solved(solved_library):
    """A solved library knows every bookcase and all 26 books."""
    summary = library_summary(solved_library)

    assert summary["state"] == "complete"
    assert summary["available_sequences"] == 1
    assert summary["known_bookcases"] == 348
    assert summary["known_books"] == 26
    assert summary["candidate_bookcases"] == 0


def test_customer_summary(solved_library, truth):
    """The requested book is located for the customer."""
    assert customer_summary(solved_library) is None

    solved_library.set_customer(LibraryCustomer.VILLIA, Book.TWILL_ACCORD)
    summary = customer_summary(solved_library)

    expected = next(loc for loc, b in truth.items() if b is Book.TWILL_ACCORD)
    assert summary["customer"] == "Villia"
    assert summary["book"]["id"] == "TWILL_ACCORD"
    assert [(r["x"], r["y"], r["plane"]) for r in summary["locations"]] == [expected]
