"""User domain entity - plain data and invariants, no infrastructure."""

from dataclasses import InitVar, dataclass
from datetime import datetime, timezone
from typing import Optional

from user_store.domain.exceptions import (
    BusinessRuleViolationException,
    InvalidEntityStateException,
)


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or len(value.strip()) == 0


@dataclass
class User:
    """
    User domain entity.

    Identity is a numeric surrogate key assigned by the store when the user
    is first added; it stays ``None`` until then and never changes after.

    Email is the secondary lookup key. Only emptiness is checked here, no
    format rules, and uniqueness is not guaranteed by the entity.

    The checks run when a user is built for writing. Rows loaded back from
    storage pass ``validate=False``: whatever the database holds is returned
    as-is so a lookup never fails on data it did not write.
    """

    email: str
    name: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    validate: InitVar[bool] = True

    def __post_init__(self, validate: bool):
        if not validate:
            return

        if _is_blank(self.email):
            raise InvalidEntityStateException(
                f"Invalid email address: {self.email!r}. Email must be a non-empty string."
            )

        if self.name is not None and _is_blank(self.name):
            raise InvalidEntityStateException(
                "Name cannot be blank. Leave it unset instead."
            )

    @property
    def is_persisted(self) -> bool:
        """Whether the store has assigned this user an identity."""
        return self.id is not None

    def change_email(self, new_email: str) -> None:
        """
        Change user's email.

        Args:
            new_email: The new email to set

        Raises:
            BusinessRuleViolationException: If the email is empty
        """
        if _is_blank(new_email):
            raise BusinessRuleViolationException(
                f"Cannot change email to {new_email!r}. Email must be a non-empty string."
            )

        self.email = new_email
        self.updated_at = datetime.now(timezone.utc)

    def change_name(self, new_name: str) -> None:
        """
        Change user's display name.

        Raises:
            BusinessRuleViolationException: If the name is empty
        """
        if _is_blank(new_name):
            raise BusinessRuleViolationException(
                "Cannot change name to empty value. Names must contain at least one character."
            )

        self.name = new_name
        self.updated_at = datetime.now(timezone.utc)
