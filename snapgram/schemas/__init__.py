"""Pydantic schemas for request and response validation."""

from .comment import (
    Comment,
    CommentCreate,
    CommentFetchResult,
    CommentListResponse,
)
from .user import CurrentUser

__all__ = [
    "Comment",
    "CommentCreate",
    "CommentFetchResult",
    "CommentListResponse",
    "CurrentUser",
]
