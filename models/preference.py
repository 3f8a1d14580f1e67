"""
Persisted UI preferences.

A plain key-value table; the display-mode store is its only writer.
"""
from extensions import db
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime


class Preference(db.Model):
    """One stored preference value."""
    __tablename__ = 'preferences'

    id = Column(Integer, primary_key=True)
    key = Column(String(100), unique=True, nullable=False, index=True)
    value = Column(String(255), nullable=True)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<Preference {self.key}={self.value}>'
