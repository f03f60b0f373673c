"""Books, shelving sequences and customers of the Arceuus library.

Every sequence holds all 26 books exactly once: 16 regular books and
10 dark manuscripts. The game picks one sequence and a starting bookcase
and shelves the books into every 13th bookcase from there.
"""

from __future__ import annotations

from enum import Enum


class Book(Enum):
    """A book that can be found in a library bookcase.

    Values are ``(item_id, short_name, title)``.
    """

    DARK_MANUSCRIPT_13514 = (13514, "Dark Manuscript", "Dark Manuscript 13514")
    DARK_MANUSCRIPT_13515 = (13515, "Dark Manuscript", "Dark Manuscript 13515")
    DARK_MANUSCRIPT_13516 = (13516, "Dark Manuscript", "Dark Manuscript 13516")
    DARK_MANUSCRIPT_13517 = (13517, "Dark Manuscript", "Dark Manuscript 13517")
    DARK_MANUSCRIPT_13518 = (13518, "Dark Manuscript", "Dark Manuscript 13518")
    DARK_MANUSCRIPT_13519 = (13519, "Dark Manuscript", "Dark Manuscript 13519")
    DARK_MANUSCRIPT_13520 = (13520, "Dark Manuscript", "Dark Manuscript 13520")
    DARK_MANUSCRIPT_13521 = (13521, "Dark Manuscript", "Dark Manuscript 13521")
    DARK_MANUSCRIPT_13522 = (13522, "Dark Manuscript", "Dark Manuscript 13522")
    DARK_MANUSCRIPT_13523 = (13523, "Dark Manuscript", "Dark Manuscript 13523")

    RADAS_CENSUS = (13524, "Rada's Census", "Census of King Rada III, by Matthias Vorseth.")
    RICKTORS_DIARY_7 = (13525, "Ricktor's Diary", "Diary of Steklan Ricktor, volume 7.")
    EATHRAM_RADA_EXTRACT = (13526, "Eathram & Rada extract", "An extract from Eathram & Rada, by Anonymous.")
    KILLING_OF_A_KING = (13527, "Killing of a King", "Killing of a King, by Griselle.")
    HOSIDIUS_LETTER = (13528, "Hosidius Letter", "A letter from Lord Hosidius to the Council of Elders.")
    WINTERTODT_PARABLE = (13529, "The Wintertodt Parable", "The Parable of the Wintertodt, by Anonymous.")
    TWILL_ACCORD = (13530, "Twill Accord", "The Royal Accord of Twill.")
    BYRNES_CORONATION_SPEECH = (13531, "Byrne's Coronation Speech", "Speech of King Byrne I, on the occasion of his coronation.")
    IDEOLOGY_OF_DARKNESS = (13532, "The Ideology of Darkness", "The Ideology of Darkness, by Philophaire.")
    RADAS_JOURNEY = (13533, "Rada's Journey", "The Journey of Rada, by Griselle.")
    TRANSVERGENCE_THEORY = (13534, "Transvergence Theory", "The Theory of Transvergence, by Amon Ducot.")
    TRISTESSAS_TRAGEDY = (13535, "Tristessa's Tragedy", "The Tragedy of Tristessa.")
    TREACHERY_OF_ROYALTY = (13536, "The Treachery of Royalty", "The Treachery of Royalty, by Professor Answith.")
    TRANSPORTATION_INCANTATIONS = (13537, "Transportation Incantations", "Transportation Incantations, by Amon Ducot.")
    SOUL_JOURNEY = (19637, "Soul Journey", "The Journey of Souls, by Aretha.")
    VARLAMORE_ENVOY = (21756, "Varlamore Envoy", "The Envoy to Varlamore, by Deryk Paulson.")

    def __init__(self, item_id: int, short_name: str, title: str):
        self.item_id = item_id
        self.short_name = short_name
        self.title = title

    @property
    def is_dark_manuscript(self) -> bool:
        """Dark manuscripts are interchangeable: only one can be held at a time."""
        return self.name.startswith("DARK_MANUSCRIPT_")

    @classmethod
    def by_item_id(cls, item_id: int) -> Book | None:
        return _BY_ITEM_ID.get(item_id)

    @classmethod
    def by_name(cls, name: str) -> Book | None:
        """Look up a book by member name, ignoring case and surrounding space."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            return None


_BY_ITEM_ID = {book.item_id: book for book in Book}

DARK_MANUSCRIPTS = frozenset(book for book in Book if book.is_dark_manuscript)


class LibraryCustomer(Enum):
    """NPCs who ask the player to find a book."""

    VILLIA = (7047, "Villia")
    PROFESSOR_GRACKLEBONE = (7048, "Prof. Gracklebone")
    SAM = (7049, "Sam")

    def __init__(self, npc_id: int, display_name: str):
        self.npc_id = npc_id
        self.display_name = display_name

    @classmethod
    def by_id(cls, npc_id: int) -> LibraryCustomer | None:
        for customer in cls:
            if customer.npc_id == npc_id:
                return customer
        return None


SEQUENCES: tuple[tuple[Book, ...], ...] = (
    (
        Book.DARK_MANUSCRIPT_13516,
        Book.KILLING_OF_A_KING,
        Book.DARK_MANUSCRIPT_13520,
        Book.IDEOLOGY_OF_DARKNESS,
        Book.RADAS_JOURNEY,
        Book.TRANSVERGENCE_THEORY,
        Book.TRISTESSAS_TRAGEDY,
        Book.DARK_MANUSCRIPT_13523,
        Book.DARK_MANUSCRIPT_13521,
        Book.RADAS_CENSUS,
        Book.TREACHERY_OF_ROYALTY,
        Book.HOSIDIUS_LETTER,
        Book.DARK_MANUSCRIPT_13519,
        Book.RICKTORS_DIARY_7,
        Book.DARK_MANUSCRIPT_13514,
        Book.EATHRAM_RADA_EXTRACT,
        Book.DARK_MANUSCRIPT_13522,
        Book.VARLAMORE_ENVOY,
        Book.WINTERTODT_PARABLE,
        Book.TWILL_ACCORD,
        Book.DARK_MANUSCRIPT_13515,
        Book.BYRNES_CORONATION_SPEECH,
        Book.DARK_MANUSCRIPT_13517,
        Book.SOUL_JOURNEY,
        Book.DARK_MANUSCRIPT_13518,
        Book.TRANSPORTATION_INCANTATIONS,
    ),
    (
        Book.DARK_MANUSCRIPT_13516,
        Book.KILLING_OF_A_KING,
        Book.DARK_MANUSCRIPT_13520,
        Book.IDEOLOGY_OF_DARKNESS,
        Book.RADAS_JOURNEY,
        Book.TRANSVERGENCE_THEORY,
        Book.TRISTESSAS_TRAGEDY,
        Book.DARK_MANUSCRIPT_13523,
        Book.DARK_MANUSCRIPT_13521,
        Book.RADAS_CENSUS,
        Book.TREACHERY_OF_ROYALTY,
        Book.HOSIDIUS_LETTER,
        Book.VARLAMORE_ENVOY,
        Book.DARK_MANUSCRIPT_13519,
        Book.RICKTORS_DIARY_7,
        Book.DARK_MANUSCRIPT_13514,
        Book.EATHRAM_RADA_EXTRACT,
        Book.DARK_MANUSCRIPT_13522,
        Book.SOUL_JOURNEY,
        Book.WINTERTODT_PARABLE,
        Book.TWILL_ACCORD,
        Book.DARK_MANUSCRIPT_13515,
        Book.BYRNES_CORONATION_SPEECH,
        Book.DARK_MANUSCRIPT_13517,
        Book.DARK_MANUSCRIPT_13518,
        Book.TRANSPORTATION_INCANTATIONS,
    ),
    (
        Book.RICKTORS_DIARY_7,
        Book.VARLAMORE_ENVOY,
        Book.DARK_MANUSCRIPT_13514,
        Book.EATHRAM_RADA_EXTRACT,
        Book.IDEOLOGY_OF_DARKNESS,
        Book.DARK_MANUSCRIPT_13516,
        Book.DARK_MANUSCRIPT_13521,
        Book.RADAS_CENSUS,
        Book.DARK_MANUSCRIPT_13515,
        Book.KILLING_OF_A_KING,
        Book.DARK_MANUSCRIPT_13520,
        Book.TREACHERY_OF_ROYALTY,
        Book.HOSIDIUS_LETTER,
        Book.DARK_MANUSCRIPT_13519,
        Book.BYRNES_CORONATION_SPEECH,
        Book.DARK_MANUSCRIPT_13517,
        Book.SOUL_JOURNEY,
        Book.DARK_MANUSCRIPT_13522,
        Book.WINTERTODT_PARABLE,
        Book.TWILL_ACCORD,
        Book.RADAS_JOURNEY,
        Book.TRANSVERGENCE_THEORY,
        Book.TRISTESSAS_TRAGEDY,
        Book.DARK_MANUSCRIPT_13523,
        Book.DARK_MANUSCRIPT_13518,
        Book.TRANSPORTATION_INCANTATIONS,
    ),
    (
        Book.RADAS_CENSUS,
        Book.DARK_MANUSCRIPT_13522,
        Book.RICKTORS_DIARY_7,
        Book.DARK_MANUSCRIPT_13514,
        Book.EATHRAM_RADA_EXTRACT,
        Book.DARK_MANUSCRIPT_13516,
        Book.KILLING_OF_A_KING,
        Book.DARK_MANUSCRIPT_13520,
        Book.HOSIDIUS_LETTER,
        Book.DARK_MANUSCRIPT_13519,
        Book.DARK_MANUSCRIPT_13521,
        Book.WINTERTODT_PARABLE,
        Book.TWILL_ACCORD,
        Book.DARK_MANUSCRIPT_13515,
        Book.BYRNES_CORONATION_SPEECH,
        Book.DARK_MANUSCRIPT_13517,
        Book.IDEOLOGY_OF_DARKNESS,
        Book.RADAS_JOURNEY,
        Book.TRANSVERGENCE_THEORY,
        Book.TRISTESSAS_TRAGEDY,
        Book.DARK_MANUSCRIPT_13523,
        Book.TREACHERY_OF_ROYALTY,
        Book.DARK_MANUSCRIPT_13518,
        Book.TRANSPORTATION_INCANTATIONS,
        Book.SOUL_JOURNEY,
        Book.VARLAMORE_ENVOY,
    ),
    (
        Book.RADAS_CENSUS,
        Book.TRANSVERGENCE_THEORY,
        Book.TREACHERY_OF_ROYALTY,
        Book.RADAS_JOURNEY,
        Book.KILLING_OF_A_KING,
        Book.DARK_MANUSCRIPT_13520,
        Book.VARLAMORE_ENVOY,
        Book.DARK_MANUSCRIPT_13522,
        Book.BYRNES_CORONATION_SPEECH,
        Book.DARK_MANUSCRIPT_13517,
        Book.HOSIDIUS_LETTER,
        Book.DARK_MANUSCRIPT_13516,
        Book.DARK_MANUSCRIPT_13519,
        Book.TRISTESSAS_TRAGEDY,
        Book.DARK_MANUSCRIPT_13523,
        Book.DARK_MANUSCRIPT_13521,
        Book.RICKTORS_DIARY_7,
        Book.DARK_MANUSCRIPT_13514,
        Book.IDEOLOGY_OF_DARKNESS,
        Book.WINTERTODT_PARABLE,
        Book.TWILL_ACCORD,
        Book.SOUL_JOURNEY,
        Book.DARK_MANUSCRIPT_13515,
        Book.EATHRAM_RADA_EXTRACT,
        Book.DARK_MANUSCRIPT_13518,
        Book.TRANSPORTATION_INCANTATIONS,
    ),
)


def validate_sequences(sequences) -> None:
    """Check that no sequence shelves the same book twice.

    Raises:
        ValueError: if a sequence is empty, too long or repeats a book
    """
    if not sequences:
        raise ValueError("At least one sequence is required")
    for number, sequence in enumerate(sequences):
        if not sequence:
            raise ValueError(f"Sequence {number} is empty")
        if len(sequence) > len(Book):
            raise ValueError(
                f"Sequence {number} has {len(sequence)} books, more than the {len(Book)} that exist"
            )
        if len(set(sequence)) != len(sequence):
            raise ValueError(f"Sequence {number} shelves the same book twice")
