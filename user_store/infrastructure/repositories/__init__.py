"""Store implementations using SQLAlchemy."""

from user_store.infrastructure.repositories.user_store_impl import SqlAlchemyUserStore

__all__ = ["SqlAlchemyUserStore"]
