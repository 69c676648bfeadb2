"""
Lifecycle state machine for catalog books.

Each action is one function that branches on the book's current ``ItemState``
and either returns the ``Transition`` the book should undergo or raises a
``CirculationError`` explaining the refusal. Nothing here mutates a book or a
collection; the catalog applies the decision afterwards.

State table:

    action   | AVAILABLE              | BORROWED            | RESERVED
    ---------+------------------------+---------------------+--------------------------
    borrow   | -> BORROWED (checked)  | refused             | -> BORROWED if holder
    return   | refused                | -> AVAILABLE        | -> AVAILABLE, hold dropped
    reserve  | -> RESERVED            | refused             | refused

"Checked" means the premium gate and, for privileged patrons, the credential
check. Borrowing a reserved book skips both: holding the reservation is enough.
"""

import logging

from .exceptions import (
    ForbiddenError,
    InvalidTransitionError,
    OwnershipMismatchError,
)
from .models.book import Book, ItemState
from .models.outcome import Transition
from .models.patron import Patron

logger = logging.getLogger(__name__)


def borrow(book: Book, patron: Patron, credential: str | None = None) -> Transition:
    """
    Decide a borrow request.

    Args:
        book: Book being borrowed
        patron: Patron asking to borrow it
        credential: Credential supplied with the request; only consulted for
            privileged patrons borrowing from the shelf

    Returns:
        Transition to BORROWED

    Raises:
        ForbiddenError: Premium book and standard patron, or wrong credential
        InvalidTransitionError: Book already borrowed
        OwnershipMismatchError: Book reserved by another patron
    """
    if book.state == ItemState.AVAILABLE:
        authorize_borrow(book, patron, credential)
        return Transition(
            target=ItemState.BORROWED,
            message=f"{patron.name} borrowed the book: {book.title}",
        )

    if book.state == ItemState.BORROWED:
        raise InvalidTransitionError(
            f"The book {book.title} is already borrowed.", title=book.title
        )

    if book.state == ItemState.RESERVED:
        holder = book.reserved_by
        if holder is not patron:
            raise OwnershipMismatchError(
                f"The book {book.title} is reserved by {holder.name} "
                f"and cannot be borrowed by {patron.name}.",
                title=book.title,
            )
        logger.debug("Reservation on '%s' authorizes %s", book.title, patron.name)
        return Transition(
            target=ItemState.BORROWED,
            message=f"{patron.name} borrowed the reserved book: {book.title}",
        )

    raise _unknown_state(book)


def return_book(book: Book) -> Transition:
    """
    Decide a return request. Any holder may return a book, so no patron.

    Raises:
        InvalidTransitionError: Book is already on the shelf
    """
    if book.state == ItemState.AVAILABLE:
        raise InvalidTransitionError(
            f"The book {book.title} is already available. No need to return.",
            title=book.title,
        )

    if book.state == ItemState.BORROWED:
        return Transition(
            target=ItemState.AVAILABLE,
            message=f"The book {book.title} has been returned.",
        )

    if book.state == ItemState.RESERVED:
        # Returning a reserved book releases the hold
        return Transition(
            target=ItemState.AVAILABLE,
            message=f"The reserved book {book.title} has been returned.",
        )

    raise _unknown_state(book)


def reserve(book: Book, patron: Patron) -> Transition:
    """
    Decide a reserve request.

    Only books on the shelf can be reserved, and only by one patron at a time.

    Raises:
        InvalidTransitionError: Book is borrowed or already reserved
    """
    if book.state == ItemState.AVAILABLE:
        return Transition(
            target=ItemState.RESERVED,
            reserved_by=patron,
            message=f"{patron.name} reserved the book: {book.title}",
        )

    if book.state == ItemState.BORROWED:
        raise InvalidTransitionError(
            f"The book {book.title} is already borrowed and cannot be reserved.",
            title=book.title,
        )

    if book.state == ItemState.RESERVED:
        raise InvalidTransitionError(
            f"The book {book.title} is already reserved.", title=book.title
        )

    raise _unknown_state(book)


def authorize_borrow(book: Book, patron: Patron, credential: str | None) -> None:
    """
    Apply the access policy for taking a book off the shelf.

    Standard patrons are never asked for a credential and are refused premium
    books outright. Privileged patrons must always present their credential.

    Raises:
        ForbiddenError: If the patron may not borrow the book
    """
    if book.requires_privilege and not patron.is_privileged:
        raise ForbiddenError(
            f"{patron.name} is not allowed to borrow the premium book: {book.title}",
            title=book.title,
        )

    if patron.is_privileged and not patron.verify_credential(credential):
        raise ForbiddenError(
            f"Incorrect credential. {patron.name} cannot borrow {book.title}.",
            title=book.title,
        )


def _unknown_state(book: Book) -> ValueError:
    return ValueError(f"Unknown state {book.state!r} for book {book.title}")
