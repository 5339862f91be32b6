"""Unit tests for request validation helpers."""

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.core.validation import validate_email


@pytest.mark.unit
class TestValidateEmail:
    """Test validate_email."""

    @pytest.mark.parametrize(
        "email", ["user1@mail.com", "first.last+tag@sub.example.org"]
    )
    def test_valid_email(self, email):
        assert validate_email(email) == Success(value=email)

    def test_surrounding_whitespace_is_trimmed(self):
        assert validate_email("  user1@mail.com ") == Success(value="user1@mail.com")

    @pytest.mark.parametrize(
        "email", [None, "", "user1", "user1@", "@mail.com", "user1@mail", "a b@mail.com"]
    )
    def test_invalid_email(self, email):
        result = validate_email(email)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_INVALID
        assert result.error.field == "email"
