"""Walk the library checking bookcases until the solver pins every book down.

The real layout is simulated here with a random sequence and starting
bookcase; in game the observations would come from the player searching
bookcases.
"""

import random

from kourend_library import SEQUENCES, Book, Library, LibraryCustomer, SolvedState
from kourend_library.queries import describe_bookcase


def simulate_layout(library: Library, rng: random.Random) -> dict:
    """Pick a sequence and starting index the way the game does."""
    sequence = rng.choice(SEQUENCES)
    origin = rng.randrange(len(library.bookcase_by_index))
    total = len(library.bookcase_by_index)

    contents = {bookcase.location: None for bookcase in library.bookcases}
    for ordinal, book in enumerate(sequence):
        contents[library.bookcase_by_index[(origin + ordinal * library.step) % total].location] = book
    return contents


def main():
    rng = random.Random()
    library = Library()
    contents = simulate_layout(library, rng)

    library.set_customer(LibraryCustomer.PROFESSOR_GRACKLEBONE, Book.SOUL_JOURNEY)

    checks = 0
    bookcases = library.bookcases
    rng.shuffle(bookcases)
    for bookcase in bookcases:
        if bookcase.is_book_set:
            # Already deduced, no need to walk there
            continue
        library.mark(bookcase.location, contents[bookcase.location])
        checks += 1
        print(
            f"{checks:3d}. {describe_bookcase(bookcase)}: "
            f"{bookcase.book.short_name if bookcase.book else 'empty'} "
            f"[{library.state.value}, {library.available_sequences} candidates]"
        )
        if library.state is SolvedState.COMPLETE:
            break

    print(f"\nSolved after {checks} checks")
    for bookcase in library.get_bookcases_with_book(library.customer_book):
        print(f"{library.customer.display_name} wants {library.customer_book.short_name}: {describe_bookcase(bookcase)}")


if __name__ == "__main__":
    main()
