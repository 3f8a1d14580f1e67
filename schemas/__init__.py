"""
Validation Schemas Package

Contains Pydantic models for parsing blog API payloads and request bodies.
"""

from .blog import BlogSchema, CommentSchema, DisplayModeSchema, LikeSchema, UserRefSchema

__all__ = ['BlogSchema', 'CommentSchema', 'DisplayModeSchema', 'LikeSchema', 'UserRefSchema']
