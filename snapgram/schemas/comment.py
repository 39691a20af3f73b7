from typing import List

from pydantic import ConfigDict, Field

from .base import BaseSchema


class Comment(BaseSchema):
    """A comment on a post. Never edited after creation."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str = Field(..., description="Backend-unique comment identifier")
    post_id: str = Field(..., description="Owning post")
    user_id: str = Field(..., description="Authoring user")
    user_name: str = Field(..., description="Author display name, resolved at read time")
    content: str = Field(..., description="Comment text")
    created_at: str = Field(..., description="ISO-8601 creation timestamp, the display sort key")


class CommentCreate(BaseSchema):
    """Schema for posting a new comment"""
    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(..., min_length=1, description="Comment text; blank text is rejected")


class CommentFetchResult(BaseSchema):
    """Comments for a post plus whether the remote query itself succeeded."""
    succeeded: bool
    comments: List[Comment] = Field(default_factory=list)


class CommentListResponse(BaseSchema):
    post_id: str
    comments: List[Comment]
    total_count: int
