"""Data models for the Kourend library solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from kourend_library.books import SEQUENCES, Book, LibraryCustomer
from kourend_library.layout import BOOKCASE_PLACEMENTS, FLOORS, ROOMS, WorldPoint


class SolvedState(Enum):
    """How far the deduction has narrowed the active sequence."""

    NO_DATA = "no_data"  # nothing useful observed yet
    INCOMPLETE = "incomplete"  # several sequence/offset pairs still fit
    COMPLETE = "complete"  # exactly one sequence/offset pair fits


@dataclass(frozen=True)
class LibraryConfig:
    """Configuration for Library.

    Defaults describe the real library; tests swap in smaller or
    malformed tables.
    """

    sequences: tuple[tuple[Book, ...], ...] = SEQUENCES
    placements: tuple[tuple[int, int, int, int], ...] = BOOKCASE_PLACEMENTS
    rooms: tuple[tuple[str, int, int, int, int, int], ...] = ROOMS
    floors: tuple[tuple[str, int], ...] = FLOORS


@dataclass(eq=False)
class Floor:
    """A floor of the library."""

    name: str
    plane: int
    rooms: list[Room] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class Room:
    """A rectangular room on one floor, bounds inclusive."""

    name: str
    min_x: int
    max_x: int
    min_y: int
    max_y: int
    plane: int
    floor: Floor | None = field(default=None, repr=False)
    bookcases: list[Bookcase] = field(default_factory=list, repr=False)

    def contains(self, point: WorldPoint) -> bool:
        return (
            point.plane == self.plane
            and self.min_x <= point.x <= self.max_x
            and self.min_y <= point.y <= self.max_y
        )

    def overlaps(self, other: Room) -> bool:
        return (
            self.plane == other.plane
            and other.max_x > self.min_x
            and other.min_x < self.max_x
            and other.max_y > self.min_y
            and other.min_y < self.max_y
        )


@dataclass(eq=False)
class Bookcase:
    """What is known about one bookcase.

    ``book`` is only meaningful when ``is_book_set`` is true; ``None`` then
    means the bookcase is known to be empty. ``possible_books`` is a
    multiset rebuilt on every analysis pass while the bookcase is unknown.
    """

    location: WorldPoint
    room: Room | None = field(default=None, repr=False)
    index: list[int] = field(default_factory=list)
    book: Book | None = None
    is_book_set: bool = False
    possible_books: list[Book] = field(default_factory=list)

    @property
    def is_duplicated(self) -> bool:
        return len(self.index) > 1

    def set_book(self, book: Book | None) -> None:
        self.book = book
        self.is_book_set = True

    def reset(self) -> None:
        self.book = None
        self.is_book_set = False
        self.possible_books.clear()


@dataclass
class ManuscriptAvailability:
    """Whether a dark manuscript may still be obtained from its bookcase.

    Starts out true and becomes false once its bookcase is seen empty
    while the library is solved.
    """

    book: Book
    available: bool = True


@dataclass
class LibrarySnapshot:
    """Consistent copy of the solver state at one point in time.

    Detached from the library; later observations do not change it.
    """

    state: SolvedState
    available_sequences: int | None
    customer: LibraryCustomer | None
    customer_book: Book | None
    books: dict[WorldPoint, Book | None]
    possible_books: dict[WorldPoint, tuple[Book, ...]]
    manuscripts: dict[Book, bool]
