"""Pytest fixtures for Kourend library tests."""

import pytest
from kourend_library import SEQUENCES, Library


def shelve(library, sequence, origin):
    """Where every book really is for a sequence starting at origin."""
    total = len(library.bookcase_by_index)
    contents = {bookcase.location: None for bookcase in library.bookcases}
    for ordinal, book in enumerate(sequence):
        bookcase = library.bookcase_by_index[(origin + ordinal * library.step) % total]
        contents[bookcase.location] = book
    return contents


@pytest.fixture
def library():
    """A fresh library with nothing observed."""
    return Library()


@pytest.fixture
def truth(library):
    """Real contents for sequence 2 starting at index 0.

    Index 260 belongs to the duplicated bookcase at (1618, 3794, 2), so this
    layout shelves a book on a duplicated bookcase's second index.
    """
    return shelve(library, SEQUENCES[2], 0)


@pytest.fixture
def solved_library(library, truth):
    """Library with every bookcase checked against the truth fixture."""
    for location, book in truth.items():
        library.mark(location, book)
    return library


@pytest.fixture
def make_truth(library):
    """Build real contents for any sequence and starting index."""
    return lambda sequence, origin: shelve(library, sequence, origin)
