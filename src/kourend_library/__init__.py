"""Kourend Library - Deduces where the Arceuus library has shelved its books."""

from kourend_library.books import (
    DARK_MANUSCRIPTS,
    SEQUENCES,
    Book,
    LibraryCustomer,
)
from kourend_library.layout import WorldPoint
from kourend_library.models import (
    Bookcase,
    LibraryConfig,
    LibrarySnapshot,
    SolvedState,
)
from kourend_library.engine import Library

__version__ = "0.1.0"

__all__ = [
    "Library",
    "LibraryConfig",
    "LibrarySnapshot",
    "Book",
    "Bookcase",
    "LibraryCustomer",
    "SolvedState",
    "WorldPoint",
    "DARK_MANUSCRIPTS",
    "SEQUENCES",
]
