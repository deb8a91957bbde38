"""
Pydantic schemas for user endpoints.

WHAT: Request/response schemas for user management API.

WHY: Schemas carry the structural constraints (required fields, non-blank
name, email syntax). Age is not range-checked here: a negative
age must reach the validation layer and be reported as InvalidAgeError.
"""

from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from blog_api.schemas.base import CamelModel, Email, not_blank


class UserCreate(CamelModel):
    """
    User creation request schema.

    WHAT: Validates data for creating a new user.
    """

    email: Email = Field(..., description="Unique email address")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    age: Optional[int] = Field(default=None, description="Age in years (non-negative)")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return not_blank(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "john.doe@example.com",
                "name": "John Doe",
                "age": 28,
            }
        }
    )


class UserUpdate(CamelModel):
    """
    User update request schema.

    WHAT: Partial update - only provided, non-null fields are modified.
    A null value means "no change"; there is no way to clear a field.
    """

    email: Optional[Email] = Field(default=None)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    age: Optional[int] = Field(default=None)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return not_blank(v)


class UserResponse(CamelModel):
    """User response schema."""

    id: UUID
    email: str
    name: str
    age: Optional[int] = None
