"""
Option storage.

Key-value repositories the token logic reads from and writes to. The
database store backs the running app; the memory store serves tests and
one-off scripts.
"""

import copy

import structlog
from sqlalchemy.exc import SQLAlchemyError

from models import db, Settings

logger = structlog.get_logger()


class OptionStoreError(Exception):
    """Raised when an option cannot be read from or written to the store."""
    pass


class OptionStore:
    """Interface for a key-value option store."""

    def get(self, key, default=None):
        raise NotImplementedError

    def set(self, key, value):
        raise NotImplementedError


class MemoryOptionStore(OptionStore):
    """Dict-backed store. Values are copied in and out."""

    def __init__(self, initial=None):
        self._data = copy.deepcopy(dict(initial or {}))

    def get(self, key, default=None):
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def set(self, key, value):
        self._data[key] = copy.deepcopy(value)


class DatabaseOptionStore(OptionStore):
    """Store backed by the Settings table."""

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def get(self, key, default=None):
        try:
            row = self.session.query(Settings).filter_by(key=key).first()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Option read failed", key=key, error=str(e))
            raise OptionStoreError(f'Could not read option {key!r}') from e

        if row is None or row.value is None:
            return default
        return row.value

    def set(self, key, value):
        try:
            row = self.session.query(Settings).filter_by(key=key).first()
            if row is None:
                row = Settings(key=key, value=value)
                self.session.add(row)
            else:
                row.value = value
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Option write failed", key=key, error=str(e))
            raise OptionStoreError(f'Could not save option {key!r}') from e
