#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

from __future__ import annotations

import re
import threading


class SensitiveValueSanitizer:
    """Thread-safe sanitizer that tracks actual sensitive values for redaction.

    Secret access keys and session tokens seen while describing the resolved
    credentials are registered here, so that they are masked wherever they
    would otherwise show up in log lines or error text.
    """

    def __init__(self):
        self._sensitive_values: set[str] = set()
        self._lock = threading.RLock()

    def register_sensitive_value(self, value: str) -> None:
        """Register a sensitive value for sanitization.

        Args:
            value: The sensitive value to track and sanitize
        """
        if value and isinstance(value, str) and len(value) >= 4:
            with self._lock:
                self._sensitive_values.add(value)

    def sanitize_string(self, text: str) -> str:
        """Sanitize a string by replacing all registered sensitive values.

        Args:
            text: The text to sanitize

        Returns:
            Sanitized text with sensitive values redacted
        """
        if not text or not isinstance(text, str):
            return text

        sanitized = text
        with self._lock:
            # Longest first so a token containing a shorter secret is fully masked
            for sensitive_value in sorted(
                self._sensitive_values, key=len, reverse=True
            ):
                if sensitive_value in sanitized:
                    redacted = (
                        sensitive_value[:4] + "****"
                        if len(sensitive_value) > 4
                        else "****"
                    )
                    sanitized = sanitized.replace(sensitive_value, redacted)

        return sanitized

    def clear(self) -> None:
        """Clear all registered sensitive values."""
        with self._lock:
            self._sensitive_values.clear()


# Global sanitizer instance - one per process
_SANITIZER = SensitiveValueSanitizer()


def register_sensitive_value(value: str) -> None:
    """Register a sensitive value for sanitization globally."""
    _SANITIZER.register_sensitive_value(value)


def _sanitize_value(value: str) -> str:
    """Mask a value, showing only its first 4 chars or **** if shorter."""
    if not value:
        return value

    sanitized = _SANITIZER.sanitize_string(value)
    if sanitized != value:
        return sanitized

    if len(value) <= 4:
        return "****"

    return value[:4] + "****"


def sanitize_string(text: str) -> str:
    """Sanitize a string by replacing registered sensitive values.

    This is the main public API for sanitizing strings in logs.

    Args:
        text: The text to sanitize

    Returns:
        Sanitized text with sensitive values redacted
    """
    if not text or not isinstance(text, str):
        return text

    return _SANITIZER.sanitize_string(text)


def sanitize_exception_message(message: str) -> str:
    """
    Sanitize exception messages that might contain sensitive data.

    First checks against registered sensitive values, then masks the values of
    well-known credential keys rendered as ``'key': 'value'`` pairs, which is
    how jsonschema and botocore print offending instances.

    Args:
        message: Exception message string

    Returns:
        Sanitized message with sensitive values masked
    """
    sanitized_message = _SANITIZER.sanitize_string(message)

    sensitive_keys = (
        "aws_access_key_id",
        "aws_secret_access_key",
        "aws_session_token",
        "session_token",
        "secret_key",
        "password",
        "secret",
        "token",
    )
    pattern = re.compile(
        r"'(" + "|".join(sensitive_keys) + r")':\s*'([^']+)'", re.IGNORECASE
    )

    def replacer(match):
        return f"'{match.group(1)}': '{_sanitize_value(match.group(2))}'"

    return pattern.sub(replacer, sanitized_message)
