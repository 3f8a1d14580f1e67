"""
Display Mode Service - Persisted list/grid preference

Reads and writes the user's chosen presentation of blog collections through
an injected key-value storage. Adapters report failures as StorageUnavailable,
but any error raised by the storage is logged and never reaches the caller; the
default mode is used instead.
"""

import logging
from typing import Union

from models.blog import DEFAULT_DISPLAY_MODE, DisplayMode
from services.storage import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_MODE_KEY = 'blogDisplayMode'


class DisplayModeStore:
    """Service for the persisted display-mode preference."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_DISPLAY_MODE_KEY):
        """
        Initialize the store.

        Args:
            storage: Key-value storage the preference lives in
            key: Fixed storage key for the preference
        """
        self.storage = storage
        self.key = key

    def get_display_mode(self) -> DisplayMode:
        """
        Read the stored display mode.

        Returns:
            The stored mode, or list when nothing valid is stored or the
            storage cannot be read
        """
        try:
            stored = self.storage.get(self.key)
        except Exception as e:
            logger.warning(f"Display mode unreadable, using default: {e}")
            return DEFAULT_DISPLAY_MODE

        if stored is None:
            return DEFAULT_DISPLAY_MODE

        mode = DisplayMode.parse(stored)
        if mode is None:
            logger.debug(f"Ignoring unrecognised display mode {stored!r}")
            return DEFAULT_DISPLAY_MODE
        return mode

    def set_display_mode(self, mode: Union[DisplayMode, str]) -> DisplayMode:
        """
        Persist a new display mode.

        Args:
            mode: DisplayMode or its string value ('list' or 'grid')

        Returns:
            The mode that was applied

        Raises:
            ValueError: If mode is not a recognised display mode
        """
        parsed = DisplayMode.parse(mode)
        if parsed is None:
            raise ValueError(f"Unknown display mode: {mode!r}")

        try:
            self.storage.set(self.key, parsed.value)
        except Exception as e:
            logger.warning(f"Display mode not persisted: {e}")
        return parsed

    def toggle_display_mode(self) -> DisplayMode:
        """Switch between list and grid and persist the result."""
        return self.set_display_mode(self.get_display_mode().toggled())
