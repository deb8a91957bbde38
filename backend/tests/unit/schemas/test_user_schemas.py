"""
Tests for user request schemas.

WHY: Email syntax is checked here, but the address must come through
exactly as sent: uniqueness is an exact comparison on the stored value.
"""

import pytest
from pydantic import ValidationError

from blog_api.schemas.base import check_email_syntax
from blog_api.schemas.user import UserCreate, UserUpdate


class TestEmailField:
    """Tests for the Email type on user schemas."""

    @pytest.mark.parametrize("email", ["a@X.COM", "Alice@Example.com", "a@x.com"])
    def test_email_kept_as_sent(self, email):
        assert UserCreate(email=email, name="A").email == email

    def test_update_email_kept_as_sent(self):
        assert UserUpdate(email="b@X.Com").email == "b@X.Com"

    @pytest.mark.parametrize("email", ["not-an-email", "a@", "@x.com", "a b@x.com"])
    def test_malformed_email_rejected(self, email):
        with pytest.raises(ValidationError):
            UserCreate(email=email, name="A")

    def test_update_email_may_be_omitted(self):
        assert UserUpdate(name="A").email is None

    def test_check_email_syntax_returns_input(self):
        assert check_email_syntax("Mixed@Case.ORG") == "Mixed@Case.ORG"
