"""Database engine, session factory and schema helpers."""

import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
    AsyncEngine,
)
from sqlalchemy.orm import DeclarativeBase

from user_store.infrastructure.config.settings import Settings

logger = logging.getLogger(__name__)


# Base class for all ORM models
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def create_database_engine(settings: Settings) -> AsyncEngine:
    """Create SQLAlchemy async engine from settings.

    Pool sizing only applies to pooled backends; SQLite engines are created
    with SQLAlchemy's default pool for the URL.

    Args:
        settings: Settings containing database configuration

    Returns:
        Configured AsyncEngine instance
    """
    url = make_url(settings.database_url)
    options: dict[str, object] = {"echo": settings.db_echo}

    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
        )

    logger.info(f"Creating database engine for {url.render_as_string(hide_password=True)}")
    return create_async_engine(url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory from engine.

    Args:
        engine: SQLAlchemy async engine

    Returns:
        Session factory that creates AsyncSession instances
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all mapped tables that do not exist yet."""
    # Model modules must be imported so their tables are registered on Base.
    from user_store.infrastructure.persistence.models import user_model  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema created")


async def drop_schema(engine: AsyncEngine) -> None:
    """Drop all mapped tables."""
    from user_store.infrastructure.persistence.models import user_model  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database schema dropped")
