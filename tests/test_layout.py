"""Tests for floors, rooms and bookcase indices."""

import pytest
from kourend_library import Library, LibraryConfig, WorldPoint
from kourend_library.layout import BOOKCASE_PLACEMENTS, ROOMS


def test_index_counts(library):
    """353 indices over 348 bookcases, shelving every 13th index."""
    assert len(library.bookcase_by_index) == 353
    assert len(library.bookcases) == 348
    assert library.step == 13


def test_duplicated_bookcases(library):
    """Five top floor bookcases own two indices."""
    duplicated = [b for b in library.bookcases if b.is_duplicated]

    assert [b.index for b in duplicated] == [
        [234, 263],
        [236, 261],
        [238, 260],
        [239, 259],
        [243, 265],
    ]
    assert all(b.location.plane == 2 for b in duplicated)
    assert all(b.room.name == "Southwest" for b in duplicated)


def test_indices_are_dense(library):
    """Every index maps back to a bookcase that owns it."""
    for index, bookcase in enumerate(library.bookcase_by_index):
        assert index in bookcase.index


def test_bookcases_ordered_by_lowest_index(library):
    """Distinct bookcases come in order of their first index."""
    firsts = [b.index[0] for b in library.bookcases]
    assert firsts == sorted(firsts)


def test_floors_and_rooms(library):
    """Three floors; every bookcase sits in a room on its own floor."""
    assert [f.name for f in library.floors] == ["Ground", "Middle", "Top"]
    assert sum(len(f.rooms) for f in library.floors) == len(ROOMS)

    room_total = sum(len(r.bookcases) for f in library.floors for r in f.rooms)
    assert room_total == len(library.bookcases)
    for bookcase in library.bookcases:
        assert bookcase.room.contains(bookcase.location)
        assert bookcase.room.floor.plane == bookcase.location.plane


def test_get_bookcase(library):
    """Bookcases are found by location; other tiles are not bookcases."""
    bookcase = library.get_bookcase(WorldPoint(1626, 3795, 0))

    assert bookcase is not None
    assert bookcase.index == [0]
    assert library.get_bookcase(WorldPoint(0, 0, 0)) is None


def test_out_of_order_index_rejected():
    """Indices must be listed densely and in order."""
    placements = BOOKCASE_PLACEMENTS[:5] + ((1626, 3787, 0, 99),)

    with pytest.raises(ValueError, match="index 99"):
        Library(LibraryConfig(placements=placements))


def test_bookcase_outside_rooms_rejected():
    """Every bookcase must be inside a room."""
    placements = ((1000, 1000, 0, 0),)

    with pytest.raises(ValueError, match="rooms"):
        Library(LibraryConfig(placements=placements))


def test_overlapping_rooms_rejected():
    """Rooms on one floor may not overlap."""
    rooms = ROOMS + (("Annex", 1610, 1620, 3790, 3795, 0),)

    with pytest.raises(ValueError, match="overlaps"):
        Library(LibraryConfig(rooms=rooms))


def test_too_few_bookcases_rejected():
    """The library needs room for a full sequence."""
    with pytest.raises(ValueError, match="cannot hold"):
        Library(LibraryConfig(placements=BOOKCASE_PLACEMENTS[:10]))
