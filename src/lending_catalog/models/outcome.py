"""
Value objects exchanged between the lending desk and its callers.

- Transition: what the state machine decided a request should do to a book
- Outcome: the result handed back to the caller for display
- BrowseEntry: one line of the shelf listing
"""

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import CirculationError, ErrorKind
from .book import BrowseStatus, ItemState
from .patron import Patron


class Transition(BaseModel):
    """A decided state change, not yet applied to any book."""

    target: ItemState = Field(..., description="State the book moves to")

    reserved_by: Patron | None = Field(
        default=None,
        description="Reservation holder after the move; set only for RESERVED",
    )

    message: str = Field(..., description="Success message for the caller")

    model_config = ConfigDict(frozen=True)


class Outcome(BaseModel):
    """
    Result of a borrow, return or reserve request.

    Successful and refused requests share this shape; ``error`` tells them
    apart and classifies refusals.
    """

    success: bool = Field(..., description="Whether the request changed the book")

    message: str = Field(..., description="Human-readable confirmation or denial")

    error: ErrorKind | None = Field(
        default=None,
        description="Category of the refusal, None on success",
    )

    title: str | None = Field(
        default=None,
        description="Stored title of the book involved, when it was found",
    )

    state: ItemState | None = Field(
        default=None,
        description="State of the book after the request, when it was found",
    )

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def ok(cls, message: str, title: str, state: ItemState) -> "Outcome":
        return cls(success=True, message=message, title=title, state=state)

    @classmethod
    def from_error(cls, exc: CirculationError, state: ItemState | None = None) -> "Outcome":
        return cls(
            success=False,
            message=exc.message,
            error=exc.kind,
            title=exc.title,
            state=state,
        )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Alice borrowed the book: 1984",
                "error": None,
                "title": "1984",
                "state": "borrowed",
            }
        },
    )


class BrowseEntry(BaseModel):
    """One book as listed on the shelf."""

    title: str
    status: BrowseStatus

    def __str__(self) -> str:
        return f"- {self.title} (Status: {self.status.value})"

    model_config = ConfigDict(frozen=True)
