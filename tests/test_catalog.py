"""Tests for books, sequences and customers."""

import pytest
from kourend_library import DARK_MANUSCRIPTS, SEQUENCES, Book, Library, LibraryConfig, LibraryCustomer
from kourend_library.books import validate_sequences


def test_book_universe():
    """There are 26 books, 10 of them dark manuscripts."""
    assert len(Book) == 26
    assert len(DARK_MANUSCRIPTS) == 10
    assert all(book.name.startswith("DARK_MANUSCRIPT_") for book in DARK_MANUSCRIPTS)
    assert not Book.SOUL_JOURNEY.is_dark_manuscript
    assert Book.DARK_MANUSCRIPT_13514.is_dark_manuscript


def test_sequences_have_distinct_books():
    """Every sequence shelves each of the 26 books exactly once."""
    assert len(SEQUENCES) == 5
    for sequence in SEQUENCES:
        assert len(sequence) == 26
        assert len(set(sequence)) == len(sequence)
        assert set(sequence) == set(Book)


def test_lookup_by_item_id():
    """Books are found by item id."""
    assert Book.by_item_id(13524) is Book.RADAS_CENSUS
    assert Book.by_item_id(21756) is Book.VARLAMORE_ENVOY
    assert Book.by_item_id(1) is None


def test_lookup_by_name():
    """Member names match ignoring case and surrounding space."""
    assert Book.by_name("soul_journey") is Book.SOUL_JOURNEY
    assert Book.by_name("  Twill_Accord ") is Book.TWILL_ACCORD
    assert Book.by_name("Necronomicon") is None


def test_customer_by_id():
    """Customers are found by npc id."""
    assert LibraryCustomer.by_id(7047) is LibraryCustomer.VILLIA
    assert LibraryCustomer.by_id(7048).display_name == "Prof. Gracklebone"
    assert LibraryCustomer.by_id(1) is None


def test_validate_sequences_rejects_repeats():
    """A sequence shelving a book twice is a data error."""
    broken = (SEQUENCES[0][:-1] + (SEQUENCES[0][0],),)

    with pytest.raises(ValueError, match="same book twice"):
        validate_sequences(broken)


def test_validate_sequences_rejects_empty():
    """Empty tables are data errors."""
    with pytest.raises(ValueError):
        validate_sequences(())
    with pytest.raises(ValueError, match="empty"):
        validate_sequences(((),))


def test_library_refuses_bad_sequences():
    """Construction aborts when a sequence repeats a book."""
    config = LibraryConfig(sequences=((Book.SOUL_JOURNEY, Book.SOUL_JOURNEY),))

    with pytest.raises(ValueError):
        Library(config)
