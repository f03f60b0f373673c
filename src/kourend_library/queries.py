"""Read-only views over a Library for display and serialization."""

from __future__ import annotations

from kourend_library.books import Book
from kourend_library.engine import Library
from kourend_library.models import Bookcase


def describe_bookcase(bookcase: Bookcase) -> str:
    """Human-readable position, e.g. 'Top floor, Southwest room (1624, 3797)'."""
    point = bookcase.location
    room = bookcase.room
    if room is None or room.floor is None:
        return f"({point.x}, {point.y}, {point.plane})"
    return f"{room.floor.name} floor, {room.name} room ({point.x}, {point.y})"


def book_to_dict(book: Book | None) -> dict | None:
    if book is None:
        return None
    return {"id": book.name, "item_id": book.item_id, "name": book.short_name}


def bookcase_to_dict(bookcase: Bookcase) -> dict:
    """Serialize what is known about a bookcase."""
    point = bookcase.location
    return {
        "x": point.x,
        "y": point.y,
        "plane": point.plane,
        "index": list(bookcase.index),
        "description": describe_bookcase(bookcase),
        "known": bookcase.is_book_set,
        "book": book_to_dict(bookcase.book) if bookcase.is_book_set else None,
        "possible_books": sorted({b.name for b in bookcase.possible_books}),
    }


def find_book(library: Library, book: Book) -> list[dict]:
    """Bookcases that hold or may hold a book, lowest index first."""
    return [bookcase_to_dict(b) for b in library.get_bookcases_with_book(book)]


def library_summary(library: Library) -> dict:
    """Overall solver progress."""
    snapshot = library.snapshot()
    total = len(library.bookcases)
    return {
        "state": snapshot.state.value,
        "available_sequences": snapshot.available_sequences,
        "bookcases": total,
        "known_bookcases": len(snapshot.books),
        "known_books": sum(1 for b in snapshot.books.values() if b is not None),
        "candidate_bookcases": len(snapshot.possible_books),
        "unknown_bookcases": total - len(snapshot.books),
        "customer": snapshot.customer.display_name if snapshot.customer else None,
        "customer_book": book_to_dict(snapshot.customer_book),
        "available_manuscripts": sorted(
            book.name for book, available in snapshot.manuscripts.items() if available
        ),
    }


def customer_summary(library: Library) -> dict | None:
    """Where the active customer's book may be, or None without a request."""
    book = library.customer_book
    if book is None:
        return None
    customer = library.customer
    return {
        "customer": customer.display_name if customer else None,
        "book": book_to_dict(book),
        "locations": find_book(library, book),
    }
