"""
Lending Catalog Package.

Models the lifecycle of books in a small lending catalog: books move between
available, borrowed and reserved as standard and premium patrons act on them.

Key Components:
- models: Pydantic models for patrons, books and outcomes
- state_machine: transition decisions per lifecycle state
- catalog: state-partitioned collections and title lookup
- desk: the facade front ends call (browse, borrow, return, reserve)
- seed: sample patrons and books
- config: settings and logging setup
"""

__version__ = "0.1.0"

from .catalog import Catalog
from .config import CatalogConfig, configure_logging, get_config, reset_config
from .desk import LendingDesk
from .exceptions import (
    CatalogError,
    CirculationError,
    ErrorKind,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
    OwnershipMismatchError,
)
from .models import Book, BrowseEntry, BrowseStatus, ItemState, Outcome, Patron, Transition
from .seed import build_desk, build_sample_desk

__all__ = [
    "Book",
    "BrowseEntry",
    "BrowseStatus",
    "Catalog",
    "CatalogConfig",
    "CatalogError",
    "CirculationError",
    "ErrorKind",
    "ForbiddenError",
    "InvalidTransitionError",
    "ItemState",
    "LendingDesk",
    "NotFoundError",
    "Outcome",
    "OwnershipMismatchError",
    "Patron",
    "Transition",
    "__version__",
    "build_desk",
    "build_sample_desk",
    "configure_logging",
    "get_config",
    "reset_config",
]
