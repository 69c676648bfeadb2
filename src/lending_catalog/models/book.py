"""
Book model for the Lending Catalog.

A book is the circulating item. Its lifecycle state is one of three tags:

- AVAILABLE: on the shelf and free to borrow or reserve (initial state)
- BORROWED: checked out by somebody
- RESERVED: on hold for exactly one patron

There is no terminal state; a book cycles between these for the life of the
process. The book owns its own ``state`` and ``reserved_by`` fields, but only
the state machine decides what they become next.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .patron import Patron


class ItemState(str, Enum):
    """Lifecycle state of a book."""

    AVAILABLE = "available"
    BORROWED = "borrowed"
    RESERVED = "reserved"


class BrowseStatus(str, Enum):
    """Status shown for a book when browsing the shelf."""

    AVAILABLE = "Available"
    PREMIUM = "Premium"
    RESERVED = "Reserved"


class Book(BaseModel):
    """
    Represents a book in the catalog.

    Title and privilege requirement are fixed at creation. State and the
    reservation holder change together through ``move_to`` so that the
    reservation invariant is never observably broken.
    """

    title: str = Field(
        ...,
        description="Title of the book, unique within the catalog",
        min_length=1,
        max_length=500,
        frozen=True,
        examples=["1984", "Pride and Prejudice"],
    )

    requires_privilege: bool = Field(
        default=False,
        description="Whether only privileged patrons may borrow this book",
        frozen=True,
    )

    state: ItemState = Field(
        default=ItemState.AVAILABLE,
        description="Current lifecycle state",
    )

    reserved_by: Patron | None = Field(
        default=None,
        description="Patron holding the reservation, set only while reserved",
    )

    @field_validator("title")
    @classmethod
    def normalize_title(cls, v: str) -> str:
        """Strip surrounding whitespace; case is preserved for display."""
        v = v.strip()
        if not v:
            raise ValueError("Title must not be blank")
        return v

    @model_validator(mode="after")
    def validate_reservation(self) -> "Book":
        """Ensure a reservation holder exists exactly when the book is reserved."""
        _check_reservation(self.state, self.reserved_by)
        return self

    @property
    def key(self) -> str:
        """Case-insensitive lookup key for the title."""
        return title_key(self.title)

    @property
    def browse_status(self) -> BrowseStatus:
        """Status shown on the shelf: a hold wins over the premium flag."""
        if self.reserved_by is not None:
            return BrowseStatus.RESERVED
        if self.requires_privilege:
            return BrowseStatus.PREMIUM
        return BrowseStatus.AVAILABLE

    def move_to(self, state: ItemState, reserved_by: Patron | None = None) -> None:
        """
        Set the lifecycle state and reservation holder in one step.

        Raises:
            ValueError: If the pair would break the reservation invariant.
                Nothing is changed in that case.
        """
        _check_reservation(state, reserved_by)
        self.state = state
        self.reserved_by = reserved_by

    model_config = ConfigDict(
        # Transitions go through move_to, which checks state and holder together
        validate_assignment=False,
        validate_default=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "title": "1984",
                "requires_privilege": True,
                "state": "available",
                "reserved_by": None,
            }
        },
    )


def title_key(title: str) -> str:
    """Normalize a title for exact, case-insensitive comparison."""
    return title.strip().casefold()


def _check_reservation(state: ItemState, reserved_by: Patron | None) -> None:
    if state == ItemState.RESERVED and reserved_by is None:
        raise ValueError("A reserved book must record who reserved it")
    if state != ItemState.RESERVED and reserved_by is not None:
        raise ValueError("Only a reserved book may record a reservation holder")
