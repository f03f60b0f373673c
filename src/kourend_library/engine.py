"""Library solver - Core implementation.

The library reshuffles its books every hour or so. The game picks one of
the 5 sequences and a starting bookcase index, then shelves the sequence
into every ``step``-th bookcase by index. Each observation of a bookcase
narrows the (sequence, starting index) pairs that can still explain what
has been seen, until only one pair is left and every bookcase is known.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Sequence

from kourend_library.books import DARK_MANUSCRIPTS, Book, LibraryCustomer, validate_sequences
from kourend_library.layout import WorldPoint
from kourend_library.models import (
    Bookcase,
    Floor,
    LibraryConfig,
    LibrarySnapshot,
    ManuscriptAvailability,
    Room,
    SolvedState,
)

logger = logging.getLogger(__name__)


class Library:
    """Deduces where every book is shelved from individual bookcase checks.

    All mutation and every read that walks bookcase state happen under one
    lock, so an analysis pass is never observed half done.
    """

    def __init__(self, config: LibraryConfig | None = None):
        self.config = config or LibraryConfig()
        validate_sequences(self.config.sequences)
        self._lock = threading.RLock()

        self._floors: list[Floor] = []
        self._bookcases: list[Bookcase] = []
        self._bookcase_by_point: dict[WorldPoint, Bookcase] = {}
        self._bookcase_by_index: list[Bookcase] = []
        self._sequences = tuple(tuple(sequence) for sequence in self.config.sequences)

        self._populate_floors()
        self._populate_rooms()
        self._populate_bookcases()

        self._step = len(self._bookcase_by_index) // len(Book)
        if self._step == 0:
            raise ValueError(
                f"{len(self._bookcase_by_index)} bookcases cannot hold {len(Book)} books"
            )

        self._manuscripts = {
            book: ManuscriptAvailability(book)
            for book in sorted(DARK_MANUSCRIPTS, key=lambda b: b.item_id)
        }
        self._state = SolvedState.NO_DATA
        self._available_sequences: int | None = None
        self._customer: LibraryCustomer | None = None
        self._customer_book: Book | None = None

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def _populate_floors(self) -> None:
        for name, plane in self.config.floors:
            if plane != len(self._floors):
                raise ValueError(f"Floor {name!r} is out of order (plane {plane})")
            self._floors.append(Floor(name, plane))

    def _populate_rooms(self) -> None:
        for name, min_x, max_x, min_y, max_y, plane in self.config.rooms:
            if not 0 <= plane < len(self._floors):
                raise ValueError(f"Room {name!r} is on unknown plane {plane}")
            floor = self._floors[plane]
            room = Room(name, min_x, max_x, min_y, max_y, plane, floor=floor)
            for other in floor.rooms:
                if room.overlaps(other):
                    raise ValueError(
                        f"Room {name!r} overlaps room {other.name!r} on the {floor.name} floor"
                    )
            floor.rooms.append(room)

    def _populate_bookcases(self) -> None:
        for x, y, plane, index in self.config.placements:
            point = WorldPoint(x, y, plane)
            bookcase = self._bookcase_by_point.get(point)
            if bookcase is None:
                room = self._find_room(point)
                bookcase = Bookcase(point, room=room)
                room.bookcases.append(bookcase)
                self._bookcase_by_point[point] = bookcase
                self._bookcases.append(bookcase)
            if index != len(self._bookcase_by_index):
                raise ValueError(
                    f"Bookcase {point} has index {index}, expected {len(self._bookcase_by_index)}"
                )
            bookcase.index.append(index)
            self._bookcase_by_index.append(bookcase)

    def _find_room(self, point: WorldPoint) -> Room:
        if not 0 <= point.plane < len(self._floors):
            raise ValueError(f"Bookcase {point} is on unknown plane {point.plane}")
        rooms = [r for r in self._floors[point.plane].rooms if r.contains(point)]
        if len(rooms) != 1:
            raise ValueError(f"Bookcase {point} is inside {len(rooms)} rooms, expected 1")
        return rooms[0]

    @property
    def floors(self) -> list[Floor]:
        return list(self._floors)

    @property
    def bookcases(self) -> list[Bookcase]:
        """Distinct bookcases ordered by their lowest index."""
        return list(self._bookcases)

    @property
    def bookcase_by_index(self) -> list[Bookcase]:
        return list(self._bookcase_by_index)

    @property
    def sequences(self) -> tuple[tuple[Book, ...], ...]:
        return self._sequences

    @property
    def step(self) -> int:
        return self._step

    def get_bookcase(self, location: WorldPoint) -> Bookcase | None:
        """Get the bookcase at a location, or None outside the library."""
        return self._bookcase_by_point.get(location)

    # -------------------------------------------------------------------------
    # Customer
    # -------------------------------------------------------------------------

    def set_customer(self, customer: LibraryCustomer | None, book: Book | None) -> None:
        """Remember who asked for which book. Does not affect the deduction."""
        with self._lock:
            self._customer = customer
            self._customer_book = book

    @property
    def customer(self) -> LibraryCustomer | None:
        return self._customer

    @property
    def customer_book(self) -> Book | None:
        return self._customer_book

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> SolvedState:
        return self._state

    @property
    def available_sequences(self) -> int | None:
        """Sequence/offset pairs that survived the last analysis pass."""
        return self._available_sequences

    def reset(self) -> None:
        """Forget every observation and deduction."""
        with self._lock:
            self._reset()

    def _reset(self) -> None:
        self._state = SolvedState.NO_DATA
        self._available_sequences = None
        for bookcase in self._bookcases:
            bookcase.reset()
        for record in self._manuscripts.values():
            record.available = True

    # -------------------------------------------------------------------------
    # Dark manuscripts
    # -------------------------------------------------------------------------

    def is_manuscript_available(self, book: Book) -> bool:
        """Whether a dark manuscript has not been ruled out yet.

        Raises:
            ValueError: if book is not a dark manuscript
        """
        record = self._manuscripts.get(book)
        if record is None:
            raise ValueError(f"Not a dark manuscript: {book.name}")
        with self._lock:
            return record.available

    def count_available_manuscripts(self) -> int:
        with self._lock:
            return sum(1 for record in self._manuscripts.values() if record.available)

    def obtainable_manuscript(self) -> Book | None:
        """The one dark manuscript left to take, if all others are ruled out."""
        with self._lock:
            available = [r.book for r in self._manuscripts.values() if r.available]
        return available[0] if len(available) == 1 else None

    def _record_manuscript_check(self, bookcase: Bookcase, book: Book | None) -> None:
        if (
            self._state is SolvedState.COMPLETE
            and bookcase.book is not None
            and bookcase.book.is_dark_manuscript
        ):
            self._manuscripts[bookcase.book].available = book is not None

    # -------------------------------------------------------------------------
    # Observations
    # -------------------------------------------------------------------------

    def mark(self, location: WorldPoint, book: Book | None) -> None:
        """Record what was found in a bookcase and rerun the deduction.

        An observation that contradicts what is already known throws away
        every earlier deduction; the library has most likely been
        reshuffled and this observation becomes the first new fact.

        Args:
            location: Where the bookcase stands
            book: The book found, or None if the bookcase was empty
        """
        with self._lock:
            bookcase = self._bookcase_by_point.get(location)
            if bookcase is None:
                logger.debug("Ignoring observation at %s: not a library bookcase", location)
                return
            self._mark(bookcase, book)

    def _mark(self, bookcase: Bookcase, book: Book | None) -> None:
        if bookcase.is_book_set:
            known = bookcase.book
            if book is known or self._is_manuscript_taken(known, book):
                # Nothing new about the layout
                self._record_manuscript_check(bookcase, book)
                return
            if not self._is_manuscript_returned(known, book):
                logger.info(
                    "Bookcase %s holds %s, expected %s; resetting",
                    bookcase.location,
                    _book_name(book),
                    _book_name(known),
                )
                self._reset()
        elif (
            self._state is not SolvedState.NO_DATA
            and book is not None
            and book not in bookcase.possible_books
        ):
            logger.info(
                "Bookcase %s holds %s, which no remaining sequence puts there; resetting",
                bookcase.location,
                book.name,
            )
            self._reset()

        bookcase.set_book(book)

        if book is not None:
            reference = bookcase
        elif self._state is SolvedState.NO_DATA:
            # An empty bookcase says nothing until some book has been found
            return
        else:
            reference = self._pick_reference()
            if reference is None:
                logger.debug("No bookcase with a known book to align sequences on")
                return

        if not self._analyse(reference):
            # No pair explains every observation, so the library was reshuffled
            logger.info(
                "Bookcase %s holding %s fits no remaining sequence; resetting",
                bookcase.location,
                _book_name(book),
            )
            self._reset()
            bookcase.set_book(book)
            if book is None:
                return
            self._analyse(bookcase)
        self._record_manuscript_check(bookcase, book)

    def _is_manuscript_taken(self, known: Book | None, book: Book | None) -> bool:
        """A solved manuscript bookcase seen empty: someone holds a manuscript.

        Only acceptable while it is ambiguous which manuscript is held. Once
        every other manuscript is ruled out the last one should still be
        there, so finding it gone counts as a reshuffle.
        """
        return (
            self._state is SolvedState.COMPLETE
            and book is None
            and known is not None
            and known.is_dark_manuscript
            and (
                not self._manuscripts[known].available
                or self.count_available_manuscripts() > 1
            )
        )

    def _is_manuscript_returned(self, known: Book | None, book: Book | None) -> bool:
        """A manuscript appeared in a bookcase previously seen empty."""
        return (
            self._state is not SolvedState.COMPLETE
            and known is None
            and book is not None
            and book.is_dark_manuscript
        )

    def _pick_reference(self) -> Bookcase | None:
        """Lowest-index bookcase with a known book, preferring single-index ones."""
        fallback = None
        for bookcase in self._bookcases:
            if bookcase.book is None:
                continue
            if not bookcase.is_duplicated:
                return bookcase
            if fallback is None:
                fallback = bookcase
        return fallback

    # -------------------------------------------------------------------------
    # Analysis
    # -------------------------------------------------------------------------

    def _analyse(self, reference: Bookcase) -> int:
        """Score every sequence/offset pair and project the survivors.

        Returns:
            How many sequence/offset pairs survived
        """
        logger.debug(
            "Aligning sequences on %s at %s (indices %s)",
            _book_name(reference.book),
            reference.location,
            reference.index,
        )
        for bookcase in self._bookcases:
            bookcase.possible_books.clear()

        self._state = SolvedState.INCOMPLETE

        survivors: list[tuple[Sequence[Book], int]] = []
        for index in reference.index:
            for sequence in self._sequences:
                origin = self._origin_for(sequence, index)
                if origin is not None and self._score(sequence, origin) > 0:
                    survivors.append((sequence, origin))

        self._available_sequences = len(survivors)
        if len(survivors) == 1:
            self._state = SolvedState.COMPLETE
            logger.info(
                "Library solved: sequence %d starting at index %d",
                self._sequences.index(survivors[0][0]),
                survivors[0][1],
            )
        else:
            logger.debug("%d sequence/offset pairs remain", len(survivors))

        for sequence, origin in survivors:
            self._project(sequence, origin)
        self._collapse()
        return len(survivors)

    def _origin_for(self, sequence: Sequence[Book], index: int) -> int | None:
        """Index of the sequence's first book, if the book at index lines up.

        Returns None when the sequence does not contain that book.
        """
        book = self._bookcase_by_index[index].book
        if book not in sequence:
            return None
        return (index - sequence.index(book) * self._step) % len(self._bookcase_by_index)

    def _walk(
        self, sequence: Sequence[Book], origin: int
    ) -> Iterator[tuple[Bookcase, Book | None]]:
        """Yield every bookcase by index, with the book the pair puts there."""
        total = len(self._bookcase_by_index)
        for i in range(total):
            ordinal, remainder = divmod(i, self._step)
            predicted = sequence[ordinal] if remainder == 0 and ordinal < len(sequence) else None
            yield self._bookcase_by_index[(origin + i) % total], predicted

    def _score(self, sequence: Sequence[Book], origin: int) -> int:
        """Count observations matching the pair, or 0 if any contradicts it."""
        excused: set[Bookcase] = set()
        found = 0
        for bookcase, predicted in self._walk(sequence, origin):
            if not bookcase.is_book_set:
                continue
            if predicted is not None:
                # A taken manuscript leaves its bookcase empty
                if predicted is bookcase.book or (
                    predicted.is_dark_manuscript and bookcase.book is None
                ):
                    found += 1
                else:
                    return 0
            elif bookcase.book is not None:
                # A duplicated bookcase may hold its book under its other index
                if not bookcase.is_duplicated or bookcase in excused:
                    return 0
                excused.add(bookcase)
        return found

    def _project(self, sequence: Sequence[Book], origin: int) -> None:
        for bookcase, predicted in self._walk(sequence, origin):
            if self._state is SolvedState.COMPLETE:
                if not bookcase.is_duplicated or predicted is not None or not bookcase.is_book_set:
                    bookcase.set_book(predicted)
            elif not bookcase.is_book_set and predicted is not None:
                bookcase.possible_books.append(predicted)

    def _collapse(self) -> None:
        """Settle unknown bookcases every surviving pair agrees on."""
        for bookcase in self._bookcases:
            if bookcase.is_book_set:
                continue
            possible = bookcase.possible_books
            if not possible:
                bookcase.set_book(None)
            elif len(possible) == self._available_sequences and all(
                b is possible[0] for b in possible
            ):
                logger.debug("Bookcase %s must hold %s", bookcase.location, possible[0].name)
                bookcase.set_book(possible[0])

    # -------------------------------------------------------------------------
    # Query Operations
    # -------------------------------------------------------------------------

    def get_bookcases_with_book(self, book: Book) -> list[Bookcase]:
        """Bookcases known or still able to hold a book, lowest index first."""
        with self._lock:
            return [
                bookcase
                for bookcase in self._bookcases
                if (bookcase.book is book if bookcase.is_book_set else book in bookcase.possible_books)
            ]

    def locate(self, book: Book) -> list[WorldPoint]:
        """Locations where a book is or may be shelved.

        Empty while nothing is known about the book, a single location once
        the library is solved.
        """
        return [bookcase.location for bookcase in self.get_bookcases_with_book(book)]

    def snapshot(self) -> LibrarySnapshot:
        """Take a consistent copy of everything the solver knows."""
        with self._lock:
            return LibrarySnapshot(
                state=self._state,
                available_sequences=self._available_sequences,
                customer=self._customer,
                customer_book=self._customer_book,
                books={b.location: b.book for b in self._bookcases if b.is_book_set},
                possible_books={
                    b.location: tuple(b.possible_books)
                    for b in self._bookcases
                    if not b.is_book_set and b.possible_books
                },
                manuscripts={r.book: r.available for r in self._manuscripts.values()},
            )


def _book_name(book: Book | None) -> str:
    return book.name if book is not None else "nothing"
