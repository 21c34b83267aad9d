"""
Catalog database configuration module.

Sets up the SQLAlchemy engine and session factory for the read-only
component catalog. Both are created on first use so the price comparison
endpoints keep working when no catalog database is configured.

Exports:
    - get_engine: SQLAlchemy database engine.
    - get_session_factory: Session factory for database interactions.
    - ping: Report whether the catalog database answers.
"""

import logging
from functools import lru_cache

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from configs import settings

logger = logging.getLogger("catalog.database")


class CatalogUnavailableError(RuntimeError):
    """Raised when the catalog database is not configured."""


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Create the engine from ``DATABASE_URL``."""
    if not settings.DATABASE_URL:
        raise CatalogUnavailableError("DATABASE_URL environment variable is not set")
    return create_engine(settings.DATABASE_URL, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def ping() -> bool:
    """Return True when a trivial query succeeds."""
    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except (CatalogUnavailableError, SQLAlchemyError) as exc:
        logger.warning("Catalog database unreachable: %s", exc)
        return False
