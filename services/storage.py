"""
Key-value storage adapters for persisted UI preferences.

Every adapter exposes ``get(key)`` and ``set(key, value)`` and raises
StorageUnavailable when the backing store cannot be reached.
"""

from typing import Dict, Optional, Protocol

from flask import session, has_app_context, has_request_context
from sqlalchemy.exc import SQLAlchemyError

from extensions import db


class StorageUnavailable(Exception):
    """Raised when a preference cannot be read or written."""


class KeyValueStorage(Protocol):
    """Durable string key-value storage."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStorage:
    """Dictionary-backed storage for scripts and tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class SessionStorage:
    """Stores values in the signed Flask session cookie, so they follow the browser."""

    def get(self, key: str) -> Optional[str]:
        if not has_request_context():
            raise StorageUnavailable("No request context for session storage")
        return session.get(key)

    def set(self, key: str, value: str) -> None:
        if not has_request_context():
            raise StorageUnavailable("No request context for session storage")
        session[key] = value
        session.permanent = True


class DatabaseStorage:
    """Stores values in the preferences table."""

    def _require_app_context(self):
        if not has_app_context():
            raise StorageUnavailable("No application context for database storage")

    def get(self, key: str) -> Optional[str]:
        from models.preference import Preference

        self._require_app_context()
        try:
            preference = Preference.query.filter_by(key=key).first()
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"Could not read preference '{key}': {e}") from e
        return preference.value if preference else None

    def set(self, key: str, value: str) -> None:
        from models.preference import Preference

        self._require_app_context()
        try:
            preference = Preference.query.filter_by(key=key).first()
            if preference is None:
                preference = Preference(key=key)
                db.session.add(preference)
            preference.value = value
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageUnavailable(f"Could not write preference '{key}': {e}") from e
