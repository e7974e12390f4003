"""User store implementation using SQLAlchemy."""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from user_store.domain.entities.user import User
from user_store.domain.exceptions import (
    EntityNotFoundException,
    InvalidEntityStateException,
)
from user_store.infrastructure.persistence.models.user_model import UserModel

logger = logging.getLogger(__name__)


class SqlAlchemyUserStore:
    """
    SQLAlchemy implementation of the UserStore protocol.

    The store keeps no entity state of its own. Every call opens a session
    from the factory, which checks a connection out of the engine pool, and
    the ``async with`` block hands it back on every exit path. Writes run in
    ``session.begin()`` so they commit on success and roll back on error.

    Storage errors (``SQLAlchemyError`` subclasses) are neither caught nor
    wrapped. ORM models never leave this class; callers get domain entities.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        engine: Optional[AsyncEngine] = None,
    ):
        """
        Initialize store with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
            engine: Engine owned by this store, disposed by close().
                Leave unset when the caller manages the engine.
        """
        self._session_factory = session_factory
        self._engine = engine

    async def close(self) -> None:
        """Dispose the owned engine, closing pooled connections."""
        if self._engine is not None:
            await self._engine.dispose()

    async def get_by_id(self, id: int) -> Optional[User]:
        """Get user by ID."""
        async with self._session_factory() as session:
            user_model = await session.get(UserModel, id)
            if user_model is None:
                return None
            return user_model.to_entity()

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[User]:
        """Get users ordered by ID, with pagination."""
        if skip < 0:
            raise ValueError(f"skip must be >= 0, got {skip}")
        if limit <= 0:
            raise ValueError(f"limit must be > 0, got {limit}")

        async with self._session_factory() as session:
            result = await session.execute(
                select(UserModel).order_by(UserModel.id).offset(skip).limit(limit)
            )
            return [model.to_entity() for model in result.scalars().all()]

    async def add(self, entity: User) -> User:
        """
        Add a new user.

        The domain entity is converted to an ORM model, inserted, then
        refreshed so the generated ID and timestamps come back with it.
        """
        if entity.id is not None:
            raise InvalidEntityStateException(
                f"Cannot add user that already has ID {entity.id}"
            )

        async with self._session_factory() as session:
            async with session.begin():
                user_model = UserModel.from_entity(entity)
                session.add(user_model)
                await session.flush()  # Get generated ID
                await session.refresh(user_model)  # Load server-side timestamps
                created = user_model.to_entity()

        logger.debug(f"Added user id={created.id}")
        return created

    async def update(self, entity: User) -> User:
        """Replace email and name of an existing user."""
        if entity.id is None:
            raise InvalidEntityStateException("Cannot update user without ID")

        async with self._session_factory() as session:
            async with session.begin():
                user_model = await session.get(UserModel, entity.id)
                if user_model is None:
                    raise EntityNotFoundException("User", entity.id)

                user_model.email = entity.email
                user_model.name = entity.name
                # Set explicitly: unchanged email/name would skip onupdate.
                user_model.updated_at = func.now()

                await session.flush()
                await session.refresh(user_model)
                updated = user_model.to_entity()

        logger.debug(f"Updated user id={updated.id}")
        return updated

    async def delete(self, id: int) -> bool:
        """Delete user by ID."""
        async with self._session_factory() as session:
            async with session.begin():
                user_model = await session.get(UserModel, id)
                if user_model is None:
                    return False

                await session.delete(user_model)

        logger.debug(f"Deleted user id={id}")
        return True

    async def exists(self, id: int) -> bool:
        """Check if user exists."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(UserModel.id).where(UserModel.id == id)
            )
            return result.scalar_one_or_none() is not None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address.

        Emails are not unique in the schema, so the query is capped at one
        row instead of relying on ``scalar_one_or_none``.
        """
        async with self._session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.email == email).limit(1)
            )
            user_model = result.scalars().first()

            if user_model is None:
                return None

            return user_model.to_entity()

    async def email_exists(self, email: str) -> bool:
        """Check if any user has this email."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(UserModel.id).where(UserModel.email == email).limit(1)
            )
            return result.scalars().first() is not None
