"""
Error taxonomy for the Lending Catalog.

Two families live here:

1. **CirculationError** - a request was refused. These are expected outcomes
   of normal use (unknown title, missing privilege, wrong state, somebody
   else's reservation). The lending desk catches them and turns them into
   error outcomes; nothing has been mutated when one is raised.
2. **CatalogError** - the catalog was set up or driven incorrectly
   (duplicate titles, duplicate patrons, broken invariants). These propagate.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a refused request."""

    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    INVALID_TRANSITION = "invalid_transition"
    OWNERSHIP_MISMATCH = "ownership_mismatch"


class CirculationError(Exception):
    """Base exception for refused circulation requests."""

    kind: ErrorKind

    def __init__(self, message: str, title: str | None = None):
        super().__init__(message)
        self.message = message
        self.title = title


class NotFoundError(CirculationError):
    """Raised when a title or patron is absent from the searched scope."""

    kind = ErrorKind.NOT_FOUND


class ForbiddenError(CirculationError):
    """Raised on a privilege or credential mismatch."""

    kind = ErrorKind.FORBIDDEN


class InvalidTransitionError(CirculationError):
    """Raised when the action is illegal in the item's current state."""

    kind = ErrorKind.INVALID_TRANSITION


class OwnershipMismatchError(CirculationError):
    """Raised when a reservation is held by a different patron."""

    kind = ErrorKind.OWNERSHIP_MISMATCH


class CatalogError(Exception):
    """Base exception for catalog setup and integrity problems."""


class DuplicateTitleError(CatalogError):
    """Raised when adding a title the catalog already holds."""


class DuplicatePatronError(CatalogError):
    """Raised when two patrons share a name."""


class CatalogIntegrityError(CatalogError):
    """Raised when collection membership and item state disagree."""
