"""Composition root - wires settings, logging and the SQLAlchemy store.

Inner layers never import this module. Callers that want a ready store
ask for one here and depend only on the UserStore protocol afterwards:

    store = build_user_store()
    user = await store.find_by_email("a@example.com")
"""

from typing import Optional

from user_store.infrastructure.config.logging_config import configure_logging
from user_store.infrastructure.config.settings import Settings, get_settings
from user_store.infrastructure.persistence.database import (
    create_database_engine,
    create_schema,
    create_session_factory,
)
from user_store.infrastructure.repositories.user_store_impl import SqlAlchemyUserStore


def build_user_store(settings: Optional[Settings] = None) -> SqlAlchemyUserStore:
    """Create a SqlAlchemyUserStore backed by the configured database.

    Args:
        settings: Settings to use; defaults to ``get_settings()``

    Returns:
        Store sharing one engine (and connection pool) across all calls.
        The store owns the engine; call ``await store.close()`` when done.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    engine = create_database_engine(settings)
    return SqlAlchemyUserStore(create_session_factory(engine), engine=engine)


async def init_database(settings: Optional[Settings] = None) -> None:
    """Create the users table on the configured database if it is missing."""
    settings = settings or get_settings()
    configure_logging(settings)

    engine = create_database_engine(settings)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()
