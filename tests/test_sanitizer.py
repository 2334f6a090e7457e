#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

from __future__ import annotations

from tests.mock_aws import (
    mock_access_key_id,
    mock_secret_access_key,
    MockAWSGenerator,
)
from irsacheck.sanitizer import (
    SensitiveValueSanitizer,
    sanitize_string,
    register_sensitive_value,
    sanitize_exception_message,
)


class TestSensitiveValueSanitizer:
    """Test SensitiveValueSanitizer class."""

    def test_registered_value_is_masked(self):
        sanitizer = SensitiveValueSanitizer()
        secret = mock_secret_access_key()
        sanitizer.register_sensitive_value(secret)

        assert sanitizer.sanitize_string(f"key={secret}") == f"key={secret[:4]}****"

    def test_short_values_ignored(self):
        """Test values shorter than 4 chars are not registered."""
        sanitizer = SensitiveValueSanitizer()
        sanitizer.register_sensitive_value("abc")

        assert sanitizer.sanitize_string("abc") == "abc"

    def test_longest_value_masked_first(self):
        """Test a token containing a registered secret is masked as a whole."""
        sanitizer = SensitiveValueSanitizer()
        token = MockAWSGenerator.mock_session_token()
        sanitizer.register_sensitive_value(token[10:60])
        sanitizer.register_sensitive_value(token)

        assert sanitizer.sanitize_string(token) == f"{token[:4]}****"

    def test_clear(self):
        sanitizer = SensitiveValueSanitizer()
        secret = mock_secret_access_key()
        sanitizer.register_sensitive_value(secret)
        assert sanitizer.sanitize_string(secret) != secret

        sanitizer.clear()
        assert sanitizer.sanitize_string(secret) == secret

    def test_non_string_passthrough(self):
        sanitizer = SensitiveValueSanitizer()

        assert sanitizer.sanitize_string(None) is None
        assert sanitizer.sanitize_string("") == ""


class TestGlobalSanitizer:
    """Test module level helpers."""

    def test_register(self):
        secret = mock_secret_access_key()
        register_sensitive_value(secret)

        assert secret not in sanitize_string(f"error with {secret}")


class TestSanitizeExceptionMessage:
    """Test sanitize_exception_message function."""

    def test_key_value_pairs(self):
        """Test credential keys rendered as dict items are masked."""
        access_key = mock_access_key_id()
        secret = mock_secret_access_key()
        message = (
            f"{{'aws_access_key_id': '{access_key}', "
            f"'aws_secret_access_key': '{secret}', 'region': 'us-east-1'}}"
        )

        result = sanitize_exception_message(message)

        assert "'aws_access_key_id': 'AKIA****'" in result
        assert f"'aws_secret_access_key': '{secret[:4]}****'" in result
        assert "'region': 'us-east-1'" in result

    def test_registered_values(self):
        secret = mock_secret_access_key()
        register_sensitive_value(secret)

        result = sanitize_exception_message(f"Invalid value {secret}")

        assert secret not in result

    def test_short_value(self):
        assert sanitize_exception_message("{'token': 'abc'}") == "{'token': '****'}"

    def test_plain_message_unchanged(self):
        message = "'region' does not match '^[a-z]{2}(-[a-z]+)+-[0-9]+$'"

        assert sanitize_exception_message(message) == message
