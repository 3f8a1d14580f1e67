"""
Blog Validation Schemas

Pydantic models for the JSON the blog API returns and for the display-mode
request body. Schemas convert into the dataclass models used by the services.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.blog import BlogRecord, Comment, DisplayMode, Like, UserRef


class UserRefSchema(BaseModel):
    """Author or commenter as sent by the API."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, alias='_id')
    username: str = Field(default='unknown')
    avatar: Optional[str] = Field(default=None, description="Avatar URL, may be null")

    def to_model(self) -> UserRef:
        return UserRef(id=self.id, username=self.username, avatar_url=self.avatar or None)


class LikeSchema(BaseModel):
    """Single like entry."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias='userId')


class CommentSchema(BaseModel):
    """Comment entry. Listing payloads may only carry the id."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias='_id')
    text: str = ''
    commented_by: Optional[UserRefSchema] = Field(default=None, alias='commentedBy')
    created_at: Optional[datetime] = Field(default=None, alias='createdAt')

    def to_model(self) -> Comment:
        return Comment(
            id=self.id,
            text=self.text,
            commented_by=self.commented_by.to_model() if self.commented_by else None,
            created_at=self.created_at
        )


class BlogSchema(BaseModel):
    """
    Validation schema for a blog record.

    Null collections are accepted and treated as empty.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias='_id')
    title: str = Field(..., min_length=1)
    content: Optional[str] = ''
    author: Optional[UserRefSchema] = None
    tags: Optional[List[str]] = None
    likes: Optional[List[LikeSchema]] = None
    views: int = Field(default=0)
    comments: Optional[List[CommentSchema]] = None
    created_at: Optional[datetime] = Field(default=None, alias='createdAt')

    @field_validator('views')
    @classmethod
    def clamp_views(cls, v: int) -> int:
        """View counters never go negative."""
        return max(0, v)

    def to_model(self) -> BlogRecord:
        return BlogRecord(
            id=self.id,
            title=self.title,
            content=self.content or '',
            author=self.author.to_model() if self.author else None,
            tags=tuple(self.tags or ()),
            likes=tuple(Like(user_id=like.user_id) for like in self.likes or ()),
            views=self.views,
            comments=tuple(comment.to_model() for comment in self.comments or ()),
            created_at=self.created_at
        )


class DisplayModeSchema(BaseModel):
    """Request body for changing the display mode."""
    mode: DisplayMode = Field(..., description="Either 'list' or 'grid'")

    @field_validator('mode', mode='before')
    @classmethod
    def strip_mode(cls, v):
        """Strip surrounding whitespace before matching the enum."""
        return v.strip() if isinstance(v, str) else v
