"""User store interface."""

from typing import Optional, Protocol, runtime_checkable

from user_store.domain.entities.user import User
from user_store.domain.repositories.base import CrudOperations


class EmailLookup(Protocol):
    """Lookup of users by their email address."""

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by email address.

        The match is exact. If several users share the email, one of them
        is returned and which one is not defined. A missing user is
        ``None``, never an exception; storage failures propagate as raised.

        Args:
            email: The email to look up

        Returns:
            User if found, None otherwise
        """
        ...

    async def email_exists(self, email: str) -> bool:
        """
        Check if any user has this email.

        Args:
            email: The email to check

        Returns:
            True if at least one user has it, False otherwise
        """
        ...


@runtime_checkable
class UserStore(CrudOperations[User], EmailLookup, Protocol):
    """
    Typed access to persisted users.

    Composes the generic CRUD capability with the email lookup. Callers
    depend on this protocol; concrete adapters (SQLAlchemy, in-memory fakes)
    match it structurally.
    """
