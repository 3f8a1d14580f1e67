"""
Services Package - Presentation Logic Layer

This package contains service classes that derive display values from blog
records, keeping route handlers thin and focused on HTTP concerns.
"""

from .blog_service import BlogService
from .display_mode_service import DisplayModeStore
from .feed_service import FeedService
from .storage import (
    DatabaseStorage,
    InMemoryStorage,
    KeyValueStorage,
    SessionStorage,
    StorageUnavailable
)

__all__ = [
    'BlogService',
    'DisplayModeStore',
    'FeedService',
    'DatabaseStorage',
    'InMemoryStorage',
    'KeyValueStorage',
    'SessionStorage',
    'StorageUnavailable'
]
