"""
Blog record and presentation models.

BlogRecord and its parts mirror the JSON the blog API returns. The remaining
classes are the values handed to rendering layers.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlencode, quote


def _freeze(instance, *names):
    """Store the named collection fields of a frozen dataclass as tuples."""
    for name in names:
        object.__setattr__(instance, name, tuple(getattr(instance, name)))


@dataclass(frozen=True)
class UserRef:
    """Reference to an author or commenter."""
    id: Optional[str]
    username: str
    avatar_url: Optional[str] = None

    @classmethod
    def unknown(cls) -> 'UserRef':
        """Placeholder identity used when a blog has no author."""
        return cls(id=None, username='unknown', avatar_url=None)


@dataclass(frozen=True)
class Like:
    """A single like on a blog."""
    user_id: str


@dataclass(frozen=True)
class Comment:
    """A comment left on a blog."""
    id: str
    text: str
    commented_by: Optional[UserRef] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class BlogRecord:
    """Represents one article and its engagement data."""
    id: str
    title: str
    content: str = ''
    author: Optional[UserRef] = None
    tags: Tuple[str, ...] = ()
    likes: Tuple[Like, ...] = ()
    views: int = 0
    comments: Tuple[Comment, ...] = ()
    created_at: Optional[datetime] = None

    def __post_init__(self):
        _freeze(self, 'tags', 'likes', 'comments')

    @classmethod
    def from_dict(cls, data: dict) -> 'BlogRecord':
        """Build a record from the API's JSON shape (``_id``, ``avatar``, ``commentedBy``)."""
        from schemas.blog import BlogSchema
        return BlogSchema.model_validate(data).to_model()

    @property
    def like_user_ids(self) -> List[str]:
        """Distinct liking user ids, in first-seen order."""
        return list(dict.fromkeys(like.user_id for like in self.likes))


@dataclass(frozen=True)
class BlogMetrics:
    """Derived counts shown alongside a blog."""
    reading_time_minutes: int
    like_count: int
    view_count: int
    comment_count: int

    @property
    def reading_time_label(self) -> str:
        return f"{self.reading_time_minutes} mins read"


@dataclass(frozen=True)
class NavigationTarget:
    """A route plus query parameters, independent of any router."""
    path: str
    query: Tuple[Tuple[str, str], ...] = ()

    def __post_init__(self):
        # Mappings are stored as ordered (key, value) pairs
        query = self.query.items() if isinstance(self.query, dict) else self.query
        object.__setattr__(self, 'query', tuple(query))

    @property
    def params(self) -> Dict[str, str]:
        return dict(self.query)

    @property
    def url(self) -> str:
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(self.query, quote_via=quote)}"


class DisplayMode(Enum):
    """List or grid presentation of blog collections."""
    LIST = 'list'
    GRID = 'grid'

    @classmethod
    def parse(cls, value) -> Optional['DisplayMode']:
        """Return the matching mode, or None for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    def toggled(self) -> 'DisplayMode':
        return DisplayMode.GRID if self is DisplayMode.LIST else DisplayMode.LIST


DEFAULT_DISPLAY_MODE = DisplayMode.LIST


class ViewStatus(Enum):
    """Mutually exclusive presentation states of a blog view."""
    LOADING = 'loading'
    ERROR = 'error'
    NOT_FOUND = 'notFound'
    FOUND = 'found'


@dataclass(frozen=True)
class BlogFeed:
    """What the data-fetching collaborator hands over for a listing."""
    blog_list: Tuple[BlogRecord, ...] = ()
    loading: bool = False
    error: Optional[str] = None

    def __post_init__(self):
        _freeze(self, 'blog_list')


@dataclass(frozen=True)
class BlogViewState:
    """Result of resolving a detail view."""
    status: ViewStatus
    blog: Optional[BlogRecord] = None
    message: Optional[str] = None

    @property
    def is_found(self) -> bool:
        return self.status is ViewStatus.FOUND


@dataclass(frozen=True)
class CommentEntry:
    """A comment ready for display."""
    id: str
    text: str
    username: str
    avatar_url: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class CommentSection:
    """Comments of a loaded blog.

    An empty section carries ``empty_message`` so it is never confused with
    comments that have not been loaded yet.
    """
    comments: Tuple[CommentEntry, ...] = ()
    empty_message: Optional[str] = None

    def __post_init__(self):
        _freeze(self, 'comments')

    @property
    def is_empty(self) -> bool:
        return not self.comments


@dataclass(frozen=True)
class BlogCard:
    """A blog summarised for a listing or the featured section."""
    id: str
    title: str
    url: str
    author_handle: str
    avatar_url: str
    excerpt: str
    metrics: BlogMetrics
    tags: Tuple[str, ...] = ()
    tag_targets: Tuple[NavigationTarget, ...] = ()

    def __post_init__(self):
        _freeze(self, 'tags', 'tag_targets')


@dataclass(frozen=True)
class ListingState:
    """Result of resolving a listing of blogs."""
    status: ViewStatus
    cards: Tuple[BlogCard, ...] = ()
    message: Optional[str] = None

    def __post_init__(self):
        _freeze(self, 'cards')
