"""
Unit Tests for the Display-Mode Store

Tests services/display_mode_service.py and the storage adapters.
"""

import pytest

from models import DisplayMode
from services import (
    DatabaseStorage,
    DisplayModeStore,
    InMemoryStorage,
    SessionStorage,
    StorageUnavailable
)


class TestDisplayModeStore:
    """Test reading and writing the preference."""

    def test_default_is_list(self, memory_storage):
        """Test: Never-written storage reads as list."""
        assert DisplayModeStore(memory_storage).get_display_mode() is DisplayMode.LIST

    def test_set_then_get(self, memory_storage):
        """Test: Stored grid is read back."""
        store = DisplayModeStore(memory_storage)
        store.set_display_mode('grid')

        assert store.get_display_mode() is DisplayMode.GRID

    def test_persists_across_store_instances(self, memory_storage):
        """Test: A new store over the same storage sees the saved value."""
        DisplayModeStore(memory_storage).set_display_mode(DisplayMode.GRID)
        assert DisplayModeStore(memory_storage).get_display_mode() is DisplayMode.GRID

    def test_uses_fixed_key(self, memory_storage):
        """Test: Value is stored under the configured key as a plain string."""
        DisplayModeStore(memory_storage, key='layout').set_display_mode('grid')
        assert memory_storage.get('layout') == 'grid'

    def test_unrecognised_value_reads_as_list(self):
        """Test: Garbage in storage falls back to list."""
        store = DisplayModeStore(InMemoryStorage({'blogDisplayMode': 'carousel'}))
        assert store.get_display_mode() is DisplayMode.LIST

    def test_invalid_mode_rejected(self, memory_storage):
        """Test: Setting an unknown mode is a caller error."""
        with pytest.raises(ValueError):
            DisplayModeStore(memory_storage).set_display_mode('carousel')
        assert memory_storage.get('blogDisplayMode') is None

    def test_toggle(self, memory_storage):
        """Test: Toggle flips and persists."""
        store = DisplayModeStore(memory_storage)

        assert store.toggle_display_mode() is DisplayMode.GRID
        assert store.get_display_mode() is DisplayMode.GRID
        assert store.toggle_display_mode() is DisplayMode.LIST


class TestStorageFailures:
    """Test that storage failures never escape the store."""

    def test_read_failure_uses_default(self, failing_storage):
        """Test: Unreadable storage reads as list."""
        assert DisplayModeStore(failing_storage).get_display_mode() is DisplayMode.LIST

    def test_write_failure_swallowed(self, failing_storage):
        """Test: Unwritable storage still returns the requested mode."""
        assert DisplayModeStore(failing_storage).set_display_mode('grid') is DisplayMode.GRID

    def test_unexpected_storage_error(self, caplog):
        """Test: Errors other than StorageUnavailable fall back the same way."""
        class QuotaStorage:
            def get(self, key):
                raise OSError("quota")

            def set(self, key, value):
                raise OSError("quota")

        store = DisplayModeStore(QuotaStorage())

        with caplog.at_level('WARNING', logger='services'):
            assert store.get_display_mode() is DisplayMode.LIST
            assert store.set_display_mode('grid') is DisplayMode.GRID
            assert store.toggle_display_mode() is DisplayMode.GRID

        assert 'quota' in caplog.text

    def test_session_storage_outside_request(self):
        """Test: Session storage without a request is unavailable."""
        with pytest.raises(StorageUnavailable):
            SessionStorage().get('blogDisplayMode')
        assert DisplayModeStore(SessionStorage()).get_display_mode() is DisplayMode.LIST

    def test_database_storage_outside_app(self):
        """Test: Database storage without an app context is unavailable."""
        with pytest.raises(StorageUnavailable):
            DatabaseStorage().set('blogDisplayMode', 'grid')


class TestDatabaseStorage:
    """Test the preferences table adapter."""

    def test_round_trip(self, db_app):
        """Test: Values written are read back."""
        storage = DatabaseStorage()
        assert storage.get('blogDisplayMode') is None

        storage.set('blogDisplayMode', 'grid')
        assert storage.get('blogDisplayMode') == 'grid'

    def test_overwrite_keeps_one_row(self, db_app):
        """Test: Writing twice updates the existing row."""
        from models import Preference

        storage = DatabaseStorage()
        storage.set('blogDisplayMode', 'grid')
        storage.set('blogDisplayMode', 'list')

        assert Preference.query.filter_by(key='blogDisplayMode').count() == 1
        assert storage.get('blogDisplayMode') == 'list'
