"""
Database session dependency.

Provides a SQLAlchemy database session for use in request handling.
Ensures proper cleanup after use.
"""

from typing import Generator

from sqlalchemy.orm import Session

from src.repositories.catalog.database import get_session_factory


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session and ensures it is closed after use.

    This function is typically used as a FastAPI dependency to provide
    a database session per request.
    """
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()
