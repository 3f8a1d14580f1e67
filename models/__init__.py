"""
Models package for Devodyssey.

Provides blog records, presentation values and the persisted preference table.
"""
from .blog import (
    BlogCard,
    BlogFeed,
    BlogMetrics,
    BlogRecord,
    BlogViewState,
    Comment,
    CommentEntry,
    CommentSection,
    DEFAULT_DISPLAY_MODE,
    DisplayMode,
    Like,
    ListingState,
    NavigationTarget,
    UserRef,
    ViewStatus
)
from .preference import Preference

__all__ = [
    'BlogCard',
    'BlogFeed',
    'BlogMetrics',
    'BlogRecord',
    'BlogViewState',
    'Comment',
    'CommentEntry',
    'CommentSection',
    'DEFAULT_DISPLAY_MODE',
    'DisplayMode',
    'Like',
    'ListingState',
    'NavigationTarget',
    'UserRef',
    'ViewStatus',
    'Preference'
]
