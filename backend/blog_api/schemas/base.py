"""
Shared schema configuration.

WHAT: Base class for every request/response schema, the non-blank string
validator used by required text fields, and the Email type.

WHY: The public JSON uses camelCase (userId, postId, createdAt) while the
Python side uses snake_case. Aliases bridge the two; populate_by_name also
accepts snake_case input.
"""

from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase aliases, ORM-mode reads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def not_blank(value: Optional[str]) -> Optional[str]:
    """
    Reject strings that are empty or whitespace only.

    None passes through so the same check serves optional patch fields,
    where None means "leave unchanged".
    """
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


def check_email_syntax(value: str) -> str:
    """
    Reject malformed email addresses, returning the value unchanged.

    WHY: Emails are unique and compared exactly as stored. EmailStr would
    store email-validator's normalized form (lowercased domain) instead of
    what the client sent.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


Email = Annotated[str, AfterValidator(check_email_syntax)]
