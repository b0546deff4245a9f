"""SQLAlchemy ORM model definitions."""

from datetime import datetime

from sqlalchemy import Column, String, DateTime, Text

from portfolio_tracker.repositories.sqlalchemy.database import Base


class KeyValueORM(Base):
    """
    One opaque JSON blob per key.

    The transaction logs and the watchlist each live under a single key.
    """

    __tablename__ = "kv_store"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at_est = Column(DateTime, nullable=False, default=datetime.utcnow)
