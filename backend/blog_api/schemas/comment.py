"""
Pydantic schemas for comment endpoints.

WHAT: Request/response schemas for the comment API. There is no update
schema: comments are immutable once created.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from blog_api.models.comment import COMMENT_MAX_LENGTH
from blog_api.schemas.base import CamelModel, not_blank


class CommentCreate(CamelModel):
    """Comment creation request schema."""

    content: str = Field(..., min_length=1, max_length=COMMENT_MAX_LENGTH)
    post_id: UUID = Field(..., description="Post being commented on")
    user_id: UUID = Field(..., description="Comment author")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        return not_blank(v)


class CommentResponse(CamelModel):
    """Comment response schema."""

    id: UUID
    content: str
    post_id: UUID
    user_id: UUID
    created_at: datetime
