"""
Blog Service - Handles all blog presentation logic

This service turns blog records supplied by the feed into the values views
render: reading time, engagement counts, tag navigation, avatars, lookup
states, comment sections and listing cards.
"""

import math
import re
from typing import Iterable, List, Optional, Sequence
from urllib.parse import quote, unquote

from models.blog import (
    BlogCard,
    BlogFeed,
    BlogMetrics,
    BlogRecord,
    BlogViewState,
    Comment,
    CommentEntry,
    CommentSection,
    ListingState,
    NavigationTarget,
    UserRef,
    ViewStatus,
)

DEFAULT_WORDS_PER_MINUTE = 200
DEFAULT_AVATAR_FALLBACK_URL = 'https://api.dicebear.com/7.x/avataaars/svg?seed={seed}'
DEFAULT_ALL_BLOGS_PATH = '/all-blogs'
DEFAULT_BLOG_DETAIL_PATH = '/blog'

LOADING_BLOG_MESSAGE = "Loading blog..."
LOADING_BLOGS_MESSAGE = "Loading blogs..."
NOT_FOUND_MESSAGE = "Blog not found"
NO_COMMENTS_MESSAGE = "No comments yet on this blog."


class BlogService:
    """Service deriving presentation values from blog records."""

    def __init__(
        self,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
        avatar_fallback_url: str = DEFAULT_AVATAR_FALLBACK_URL,
        all_blogs_path: str = DEFAULT_ALL_BLOGS_PATH,
        blog_detail_path: str = DEFAULT_BLOG_DETAIL_PATH
    ):
        """
        Initialize the blog service.

        Args:
            words_per_minute: Average reading speed used for reading time
            avatar_fallback_url: Generated-avatar URL template with a {seed} field
            all_blogs_path: Route of the all-blogs listing
            blog_detail_path: Route prefix of single blog pages
        """
        if words_per_minute <= 0:
            raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
        self.words_per_minute = words_per_minute
        self.avatar_fallback_url = avatar_fallback_url
        self.all_blogs_path = all_blogs_path
        self.blog_detail_path = blog_detail_path.rstrip('/')

    # ========== CONTENT METRICS ==========

    def count_words(self, text: Optional[str]) -> int:
        """Count whitespace-separated words; empty or missing text has none."""
        if not text:
            return 0
        return len(text.split())

    def calculate_reading_time(self, text: Optional[str]) -> int:
        """
        Calculate estimated reading time based on word count.

        Args:
            text: Blog content

        Returns:
            Estimated reading time in minutes, rounded up (minimum 1)
        """
        words = self.count_words(text)
        return max(1, math.ceil(words / self.words_per_minute))

    def compute_metrics(self, blog: BlogRecord) -> BlogMetrics:
        """
        Derive reading time and engagement counts for a blog.

        Args:
            blog: Blog record

        Returns:
            BlogMetrics for display
        """
        return BlogMetrics(
            reading_time_minutes=self.calculate_reading_time(blog.content),
            like_count=len(blog.like_user_ids),
            view_count=max(0, blog.views or 0),
            comment_count=len(blog.comments)
        )

    def has_liked(self, blog: BlogRecord, user_id: Optional[str]) -> bool:
        """Whether the given user has liked the blog."""
        return user_id is not None and user_id in blog.like_user_ids

    def get_excerpt(self, text: Optional[str], sentence_count: int = 2) -> str:
        """
        Extract an excerpt from blog text.

        Args:
            text: Full blog content
            sentence_count: Number of sentences to include

        Returns:
            Excerpt string (max 200 characters)
        """
        if not text:
            return ''
        sentences = re.split(r'(?<=[.!?])\s+', text.strip())
        excerpt = ' '.join(sentences[:sentence_count])
        return (excerpt[:197] + '...') if len(excerpt) > 200 else excerpt

    # ========== NAVIGATION ==========

    def resolve_tag_target(self, tag: str) -> NavigationTarget:
        """Navigation target of the all-blogs listing filtered by ``tag``, casing kept."""
        return NavigationTarget(path=self.all_blogs_path, query={'tag': tag})

    def tag_targets(self, blog: BlogRecord) -> List[NavigationTarget]:
        return [self.resolve_tag_target(tag) for tag in blog.tags]

    def blog_path(self, blog: BlogRecord) -> str:
        """Detail page path; the title segment is percent-encoded."""
        return f"{self.blog_detail_path}/{quote(blog.title, safe='')}"

    # ========== AVATARS ==========

    def resolve_avatar(self, user: Optional[UserRef]) -> str:
        """
        Choose the avatar URL to display for a user.

        Args:
            user: Author or commenter, may be None

        Returns:
            The user's own avatar URL when set, otherwise a generated avatar
            seeded by username, then id, then 'unknown'
        """
        if user is not None and user.avatar_url:
            return user.avatar_url

        seed = 'unknown'
        if user is not None:
            seed = user.username or user.id or seed
        return self.avatar_fallback_url.format(seed=quote(seed, safe=''))

    def resolve_author(self, blog: BlogRecord) -> UserRef:
        """Blog author, or the placeholder identity when absent."""
        return blog.author if blog.author is not None else UserRef.unknown()

    def author_avatar(self, blog: BlogRecord) -> str:
        return self.resolve_avatar(self.resolve_author(blog))

    # ========== LOOKUP ==========

    def find_blog_by_encoded_title(
        self, blogs: Iterable[BlogRecord], encoded_title: str
    ) -> Optional[BlogRecord]:
        """
        Find a blog by its URL-encoded title.

        Args:
            blogs: Candidate records, in priority order
            encoded_title: Percent-encoded title from the URL

        Returns:
            First record whose title equals the decoded title, or None
        """
        title = unquote(encoded_title or '')
        return next((blog for blog in blogs if blog.title == title), None)

    def resolve_blog_view(self, feed: BlogFeed, encoded_title: str) -> BlogViewState:
        """
        Resolve what a single-blog page should show.

        Loading wins over error, and error wins over the lookup.
        """
        if feed.loading:
            return BlogViewState(status=ViewStatus.LOADING, message=LOADING_BLOG_MESSAGE)
        if feed.error:
            return BlogViewState(status=ViewStatus.ERROR, message=feed.error)

        blog = self.find_blog_by_encoded_title(feed.blog_list, encoded_title)
        if blog is None:
            return BlogViewState(status=ViewStatus.NOT_FOUND, message=NOT_FOUND_MESSAGE)
        return BlogViewState(status=ViewStatus.FOUND, blog=blog)

    # ========== COMMENTS ==========

    def comment_section(self, blog: BlogRecord) -> CommentSection:
        """
        Build the comment section of a loaded blog.

        Returns:
            CommentSection with display-ready entries, or an empty section
            carrying the 'no comments yet' message
        """
        if not blog.comments:
            return CommentSection(empty_message=NO_COMMENTS_MESSAGE)

        entries = []
        for comment in blog.comments:
            commenter = comment.commented_by or UserRef.unknown()
            entries.append(CommentEntry(
                id=comment.id,
                text=comment.text,
                username=commenter.username,
                avatar_url=self.resolve_avatar(commenter),
                created_at=comment.created_at
            ))
        return CommentSection(comments=tuple(entries))

    def can_delete_comment(self, blog: BlogRecord, comment: Comment, user_id: Optional[str]) -> bool:
        """Commenters may delete their own comments; authors may delete any on their blog."""
        if user_id is None:
            return False
        if comment.commented_by is not None and comment.commented_by.id == user_id:
            return True
        return blog.author is not None and blog.author.id == user_id

    # ========== LISTINGS ==========

    def build_card(self, blog: BlogRecord) -> BlogCard:
        """Summarise a blog for listings and the featured section."""
        author = self.resolve_author(blog)
        return BlogCard(
            id=blog.id,
            title=blog.title,
            url=self.blog_path(blog),
            author_handle=f"@{author.username}",
            avatar_url=self.resolve_avatar(author),
            excerpt=self.get_excerpt(blog.content),
            metrics=self.compute_metrics(blog),
            tags=blog.tags,
            tag_targets=tuple(self.tag_targets(blog))
        )

    def filter_by_tag(self, blogs: Sequence[BlogRecord], tag: Optional[str]) -> List[BlogRecord]:
        """Blogs carrying exactly ``tag``; no tag keeps them all."""
        if tag is None:
            return list(blogs)
        return [blog for blog in blogs if tag in blog.tags]

    def featured_blogs(self, blogs: Sequence[BlogRecord], limit: int) -> List[BlogRecord]:
        """
        Pick the blogs for the featured section.

        Ranked by likes, then views; ties keep feed order (sorted() is stable).
        """
        ranked = sorted(
            blogs,
            key=lambda blog: (len(blog.like_user_ids), blog.views),
            reverse=True
        )
        return ranked[:max(0, limit)]

    def resolve_listing(
        self,
        feed: BlogFeed,
        tag: Optional[str] = None,
        limit: Optional[int] = None
    ) -> ListingState:
        """
        Resolve what a blog listing should show.

        Args:
            feed: Feed state from the data collaborator
            tag: Optional exact tag filter
            limit: When set, only the featured top ``limit`` blogs are shown

        Returns:
            ListingState; no cards is a valid found state
        """
        if feed.loading:
            return ListingState(status=ViewStatus.LOADING, message=LOADING_BLOGS_MESSAGE)
        if feed.error:
            return ListingState(status=ViewStatus.ERROR, message=feed.error)

        blogs = self.filter_by_tag(feed.blog_list, tag)
        if limit is not None:
            blogs = self.featured_blogs(blogs, limit)
        return ListingState(status=ViewStatus.FOUND, cards=tuple(self.build_card(blog) for blog in blogs))
