"""
Sample data for the Lending Catalog.

Builds the demonstration patrons and books explicitly and injects them into a
catalog and desk, so nothing lives in module-level mutable state:

- Alice, a premium member with credential ``password123``
- Bob, a regular member
- six books, two of them premium
"""

import logging

from .catalog import Catalog
from .config import CatalogConfig, get_config
from .desk import LendingDesk
from .models.book import Book
from .models.patron import Patron

logger = logging.getLogger(__name__)

# (title, requires_privilege)
SAMPLE_BOOKS: tuple[tuple[str, bool], ...] = (
    ("The Great Gatsby", False),
    ("1984", True),
    ("To Kill a Mockingbird", False),
    ("The Catcher in the Rye", False),
    ("Pride and Prejudice", False),
    ("The Lord of the Rings", True),
)


def sample_patrons() -> list[Patron]:
    """The premium and the regular demonstration patron."""
    return [
        Patron(name="Alice", is_privileged=True, credential="password123"),
        Patron(name="Bob"),
    ]


def sample_books() -> list[Book]:
    """Fresh, available copies of the sample books."""
    return [Book(title=title, requires_privilege=premium) for title, premium in SAMPLE_BOOKS]


def build_sample_catalog() -> Catalog:
    return Catalog(sample_books())


def build_sample_desk() -> LendingDesk:
    """A desk over the sample catalog with both sample patrons registered."""
    return LendingDesk(build_sample_catalog(), sample_patrons())


def build_desk(config: CatalogConfig | None = None) -> LendingDesk:
    """
    Build a desk according to configuration.

    With ``load_sample_data`` off the desk starts with an empty catalog and no
    patrons; callers add their own.
    """
    config = config or get_config()
    if not config.load_sample_data:
        logger.info("Starting %s with an empty catalog", config.catalog_name)
        return LendingDesk(Catalog())

    desk = build_sample_desk()
    logger.info(
        "Starting %s with %d sample books and %d patrons",
        config.catalog_name,
        len(desk.catalog),
        len(desk.patrons),
    )
    return desk
