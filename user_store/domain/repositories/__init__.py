"""Store interfaces - define contracts for data access."""

from user_store.domain.repositories.base import CrudOperations
from user_store.domain.repositories.user_repository import EmailLookup, UserStore

__all__ = ["CrudOperations", "EmailLookup", "UserStore"]
