"""
Lending desk: the entry point a front end calls with already-parsed requests.

Each request follows the same path:

1. Resolve the patron selector (a Patron or a patron name)
2. Look the title up in the catalog
3. Ask the state machine for a decision
4. Have the catalog apply it
5. Return an Outcome describing what happened

Refusals at any step come back as error outcomes. Because every decision is
made before anything is mutated, a refused request leaves the catalog exactly
as it was.
"""

import logging
from collections.abc import Callable, Iterable, Iterator

from . import state_machine
from .catalog import Catalog
from .exceptions import CirculationError, DuplicatePatronError, NotFoundError
from .models.book import Book
from .models.outcome import BrowseEntry, Outcome, Transition
from .models.patron import Patron

logger = logging.getLogger(__name__)

PatronSelector = Patron | str


class LendingDesk:
    """Facade over a catalog and the patrons allowed to use it."""

    def __init__(self, catalog: Catalog, patrons: Iterable[Patron] = ()):
        self.catalog = catalog
        self._patrons: dict[str, Patron] = {}
        for patron in patrons:
            self.register_patron(patron)

    def register_patron(self, patron: Patron) -> None:
        """
        Make a patron selectable by name.

        Raises:
            DuplicatePatronError: If another patron already uses the name
        """
        key = patron.name.casefold()
        if key in self._patrons:
            raise DuplicatePatronError(f"Patron already registered: {patron.name}")
        self._patrons[key] = patron

    @property
    def patrons(self) -> list[Patron]:
        return list(self._patrons.values())

    def find_patron(self, selector: PatronSelector) -> Patron:
        """
        Resolve a patron selector.

        A Patron instance is accepted only if it is the very instance that was
        registered under its name; a look-alike is treated as unknown.

        Raises:
            NotFoundError: If no registered patron matches the selector
        """
        if isinstance(selector, Patron):
            if self._patrons.get(selector.name.casefold()) is not selector:
                raise NotFoundError(f"Patron '{selector.name}' is not registered.")
            return selector
        patron = self._patrons.get(selector.strip().casefold())
        if patron is None:
            raise NotFoundError(f"Patron '{selector.strip()}' not found.")
        return patron

    # -- read side ------------------------------------------------------------

    def browse(self) -> Iterator[BrowseEntry]:
        """Shelf listing: title and status of every book not out on loan."""
        return self.catalog.browse()

    # -- write side -----------------------------------------------------------

    def borrow(
        self, patron: PatronSelector, title: str, credential: str | None = None
    ) -> Outcome:
        """Borrow ``title`` for ``patron``; privileged patrons supply a credential."""
        return self._handle(
            "borrow",
            title,
            lambda book, actor: state_machine.borrow(book, actor, credential),
            patron=patron,
        )

    def return_book(self, title: str) -> Outcome:
        """Return ``title`` to the shelf."""
        return self._handle(
            "return", title, lambda book, _actor: state_machine.return_book(book)
        )

    def reserve(self, patron: PatronSelector, title: str) -> Outcome:
        """Place a hold on ``title`` for ``patron``."""
        return self._handle("reserve", title, state_machine.reserve, patron=patron)

    def _handle(
        self,
        action: str,
        title: str,
        decide: Callable[[Book, Patron | None], Transition],
        patron: PatronSelector | None = None,
    ) -> Outcome:
        book: Book | None = None
        try:
            actor = self.find_patron(patron) if patron is not None else None
            book = self.catalog.lookup(title)
            transition = decide(book, actor)
        except CirculationError as e:
            logger.info("%s refused for '%s' (%s): %s", action, title, e.kind.value, e)
            return Outcome.from_error(e, state=book.state if book is not None else None)

        self.catalog.apply(book, transition)
        logger.info("%s: %s", action, transition.message)
        return Outcome.ok(transition.message, title=book.title, state=book.state)
