"""
Pydantic schemas for post endpoints.

WHAT: Request/response schemas for the post API.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from blog_api.schemas.base import CamelModel, not_blank


class PostCreate(CamelModel):
    """
    Post creation request schema.

    WHY: userId must be a well-formed UUID here; whether it names an existing
    user is decided later by the validation layer.
    """

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    user_id: UUID = Field(..., description="Owning user ID")

    @field_validator("title", "content")
    @classmethod
    def text_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return not_blank(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Getting Started with FastAPI",
                "content": "FastAPI makes it easy to build APIs...",
                "userId": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
            }
        }
    )


class PostUpdate(CamelModel):
    """
    Post update request schema.

    WHAT: Only title and content can change; the owner is fixed at creation.
    Unknown fields (including userId) are ignored.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = Field(default=None, min_length=1)

    @field_validator("title", "content")
    @classmethod
    def text_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return not_blank(v)


class PostResponse(CamelModel):
    """Post response schema."""

    id: UUID
    title: str
    content: str
    user_id: UUID
    created_at: datetime
