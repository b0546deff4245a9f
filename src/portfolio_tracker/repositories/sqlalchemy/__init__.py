"""SQLAlchemy repository implementations."""

from portfolio_tracker.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    init_db_with_path,
    reset_database,
    Base,
)
from portfolio_tracker.repositories.sqlalchemy.kv_store import SqlAlchemyKeyValueStore

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemyKeyValueStore",
]
