"""SQLAlchemy implementation of KeyValueStore."""

from typing import Optional

from sqlalchemy.orm import Session

from portfolio_tracker.core.timezone import now_eastern
from portfolio_tracker.repositories.sqlalchemy.orm_models import KeyValueORM


class SqlAlchemyKeyValueStore:
    """SQLAlchemy-backed key-value store."""

    def __init__(self, db: Session):
        self._db = db

    def _find(self, key: str) -> Optional[KeyValueORM]:
        return self._db.query(KeyValueORM).filter(KeyValueORM.key == key).first()

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""
        orm_item = self._find(key)
        return orm_item.value if orm_item else None

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value under key."""
        orm_item = self._find(key)
        updated_at = now_eastern().replace(tzinfo=None)

        if orm_item:
            orm_item.value = value
            orm_item.updated_at_est = updated_at
        else:
            orm_item = KeyValueORM(key=key, value=value, updated_at_est=updated_at)
            self._db.add(orm_item)

        self._db.commit()

    def delete(self, key: str) -> None:
        """Remove key; missing keys are ignored."""
        self._db.query(KeyValueORM).filter(KeyValueORM.key == key).delete()
        self._db.commit()

    def keys(self) -> list[str]:
        """List stored keys in sorted order."""
        return [row.key for row in self._db.query(KeyValueORM.key).order_by(KeyValueORM.key).all()]
