"""
Patron model for the Lending Catalog.

A patron is the actor behind every borrow and reserve request. Patrons come in
two classes:

- standard patrons, who may borrow and reserve ordinary books
- privileged (premium) patrons, who may also borrow premium books once they
  prove who they are with their credential

Both classes share one model. The credential only exists on privileged
patrons, so there is never a need to narrow a patron to a subtype before
reading it.
"""

import hmac

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Patron(BaseModel):
    """
    Represents a library patron.

    Patrons are created once at startup and never change afterwards, so the
    model is frozen. Reservation ownership is checked by identity, so each
    patron must be the single instance registered with the lending desk.
    """

    name: str = Field(
        ...,
        description="Display name of the patron",
        min_length=1,
        max_length=200,
        examples=["Alice", "Bob"],
    )

    is_privileged: bool = Field(
        default=False,
        description="Whether the patron may borrow premium books",
    )

    credential: str | None = Field(
        default=None,
        description="Secret a privileged patron supplies when borrowing",
        # Never echo the secret in logs or reprs
        repr=False,
    )

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError("Patron name must not be blank")
        return v

    @field_validator("credential")
    @classmethod
    def validate_credential(cls, v: str | None) -> str | None:
        """Reject empty credentials; an empty secret is no secret."""
        if v is not None and v == "":
            raise ValueError("Credential must not be empty")
        return v

    @model_validator(mode="after")
    def validate_privilege(self) -> "Patron":
        """A credential is carried by privileged patrons and only by them."""
        if self.is_privileged and self.credential is None:
            raise ValueError("Privileged patrons require a credential")
        if not self.is_privileged and self.credential is not None:
            raise ValueError("Only privileged patrons carry a credential")
        return self

    def verify_credential(self, supplied: str | None) -> bool:
        """
        Check a supplied credential against the stored one.

        The comparison is exact and case-sensitive. Standard patrons have no
        credential, so nothing ever verifies for them.
        """
        if supplied is None or self.credential is None:
            return False
        return hmac.compare_digest(supplied.encode("utf-8"), self.credential.encode("utf-8"))

    @property
    def membership_notice(self) -> str:
        """
        Short description of what the patron's membership allows.

        The core never reads this; front ends show it before asking for a
        title to borrow.
        """
        if self.is_privileged:
            return f"{self.name} is a premium member."
        return f"{self.name} is a regular member and cannot borrow premium books."

    model_config = ConfigDict(
        # Patrons are process-scoped and immutable
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Alice",
                "is_privileged": True,
                "credential": "password123",
            }
        },
    )
