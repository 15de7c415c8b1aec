"""Implementation of the PersistenceAdapter using SQLAlchemy"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.db.schema import DBStateEntry

logger = logging.getLogger(__name__)


class SQLStorage:
    """Values stored as rows of a key/value table (one row per storage key)."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get(self, key: str) -> Optional[bytes]:
        """Stored value for the key, or None if nothing was stored yet."""
        try:
            entry = self._fetch_entry(key)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Reading {key=} failed: {e}", exc_info=True)
            raise RepositoryError(f"Could not read value for {key=}.") from e
        if entry:
            return entry.value
        return None

    def set(self, key: str, value: bytes) -> None:
        """Insert or overwrite the row for this key."""
        try:
            entry = self._fetch_entry(key)
            if entry is None:
                self.db.add(DBStateEntry(key=key, value=value))
            else:
                entry.value = value
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Writing {key=} failed, rolled back: {e}", exc_info=True)
            raise RepositoryError(f"Could not store value for {key=}.") from e

    def _fetch_entry(self, key: str) -> DBStateEntry | None:
        query = select(DBStateEntry).where(DBStateEntry.key == key)
        return self.db.scalar(query)
