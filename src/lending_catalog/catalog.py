"""
Catalog collections for the Lending Catalog.

The catalog keeps every book in exactly one of three collections, one per
lifecycle state. It answers title lookups and moves books between collections
when a transition is applied, but it never decides whether a transition is
allowed; that belongs to the state machine.
"""

import logging
from collections.abc import Iterable, Iterator

from .exceptions import CatalogIntegrityError, DuplicateTitleError, NotFoundError
from .models.book import Book, ItemState, title_key
from .models.outcome import BrowseEntry, Transition

logger = logging.getLogger(__name__)

# States whose books are physically on the shelf and listed when browsing
SHELF_STATES = (ItemState.AVAILABLE, ItemState.RESERVED)


class Catalog:
    """
    State-partitioned collections of books.

    Each collection maps the case-insensitive title key to the book. The
    insertion order of titles is remembered separately so that browsing stays
    stable while books move between collections.
    """

    def __init__(self, books: Iterable[Book] = ()):
        self._collections: dict[ItemState, dict[str, Book]] = {
            state: {} for state in ItemState
        }
        self._order: list[str] = []
        for book in books:
            self.add(book)

    def add(self, book: Book) -> None:
        """
        Register a new book. Books enter the catalog on the shelf.

        Raises:
            DuplicateTitleError: If the title is already catalogued
            ValueError: If the book is not AVAILABLE
        """
        if book.key in self:
            raise DuplicateTitleError(f"Title already catalogued: {book.title}")
        if book.state != ItemState.AVAILABLE:
            raise ValueError(f"New books must be available, got {book.state.value}")

        self._collections[ItemState.AVAILABLE][book.key] = book
        self._order.append(book.key)
        logger.debug("Catalogued '%s' (premium=%s)", book.title, book.requires_privilege)

    def lookup(self, title: str, states: Iterable[ItemState] | None = None) -> Book:
        """
        Find a book by exact, case-insensitive title.

        Args:
            title: Title to look for
            states: Collections to search; all of them when omitted

        Raises:
            NotFoundError: If no book with that title is in the searched scope
        """
        key = title_key(title)
        for state in ItemState if states is None else states:
            book = self._collections[state].get(key)
            if book is not None:
                return book
        raise NotFoundError(
            f"Book '{title.strip()}' not found. Please check the title and try again."
        )

    def apply(self, book: Book, transition: Transition) -> None:
        """
        Apply a decided transition to a catalogued book.

        The book's own fields and its collection membership change together.
        The book is validated before anything moves, so a bad transition leaves
        both untouched.
        """
        source = book.state
        current = self._collections[source].get(book.key)
        if current is not book:
            raise CatalogIntegrityError(
                f"'{book.title}' is not in the {source.value} collection"
            )

        book.move_to(transition.target, transition.reserved_by)
        del self._collections[source][book.key]
        self._collections[transition.target][book.key] = book
        logger.debug(
            "Moved '%s' from %s to %s", book.title, source.value, transition.target.value
        )

    def collection(self, state: ItemState) -> list[Book]:
        """Books currently in the collection for ``state``."""
        return list(self._collections[state].values())

    @property
    def available(self) -> list[Book]:
        return self.collection(ItemState.AVAILABLE)

    @property
    def borrowed(self) -> list[Book]:
        return self.collection(ItemState.BORROWED)

    @property
    def reserved(self) -> list[Book]:
        return self.collection(ItemState.RESERVED)

    def state_of(self, title: str) -> ItemState:
        """Name of the collection holding ``title``."""
        return self.lookup(title).state

    def browse(self) -> Iterator[BrowseEntry]:
        """
        List the books on the shelf in the order they were catalogued.

        Borrowed books are off the shelf and skipped. Each call starts a fresh
        pass over the current contents.
        """
        for key in self._order:
            for state in SHELF_STATES:
                book = self._collections[state].get(key)
                if book is not None:
                    yield BrowseEntry(title=book.title, status=book.browse_status)

    def check_consistency(self) -> None:
        """
        Verify collection membership against each book's own state.

        Raises:
            CatalogIntegrityError: On the first disagreement found
        """
        seen: set[str] = set()
        for state, books in self._collections.items():
            for key, book in books.items():
                if key in seen:
                    raise CatalogIntegrityError(f"'{book.title}' is in more than one collection")
                seen.add(key)
                if book.state != state:
                    raise CatalogIntegrityError(
                        f"'{book.title}' is in {state.value} but its state is "
                        f"{book.state.value}"
                    )
                if (book.reserved_by is not None) != (book.state == ItemState.RESERVED):
                    raise CatalogIntegrityError(
                        f"'{book.title}' has an inconsistent reservation holder"
                    )
        if seen != set(self._order):
            raise CatalogIntegrityError("Catalogued titles and collections disagree")

    def __contains__(self, title: object) -> bool:
        if not isinstance(title, str):
            return False
        key = title_key(title)
        return any(key in books for books in self._collections.values())

    def __iter__(self) -> Iterator[Book]:
        for key in self._order:
            yield self.lookup(key)

    def __len__(self) -> int:
        return len(self._order)
