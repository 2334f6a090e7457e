# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Unit tests for settings functionality."""

from __future__ import annotations

import os

from irsacheck.settings import (
    ROLE_ARN_ENV,
    WEB_IDENTITY_TOKEN_FILE_ENV,
    get_log_level,
    get_config_file,
    _validate_log_level,
    get_irsacheck_namespace,
)


class TestLogLevelValidation:
    """Test log level validation function."""

    def test_valid_levels(self):
        """Test valid log level values."""
        for level in ("debug", "info", "warning", "error", "critical"):
            assert _validate_log_level(level) == level
            assert _validate_log_level(level.upper()) == level
            assert _validate_log_level(level.capitalize()) == level

        assert _validate_log_level("  debug  ") == "debug"

    def test_invalid_levels_fallback(self):
        """Test invalid log level values fallback to 'warning'."""
        assert _validate_log_level("invalid") == "warning"
        assert _validate_log_level("trace") == "warning"
        assert _validate_log_level("") == "warning"


class TestGetLogLevel:
    """Test get_log_level function with environment variables."""

    def setup_method(self):
        """Setup test environment."""
        self.namespace = get_irsacheck_namespace()
        self.env_var = f"{self.namespace}LOG_LEVEL"

    def teardown_method(self):
        """Cleanup test environment."""
        if self.env_var in os.environ:
            del os.environ[self.env_var]

    def test_default_level(self):
        """Test default log level when environment variable is not set."""
        if self.env_var in os.environ:
            del os.environ[self.env_var]
        assert get_log_level(self.namespace) == "warning"

    def test_valid_level_from_env(self):
        """Test getting valid level from environment variable."""
        os.environ[self.env_var] = "INFO"
        assert get_log_level(self.namespace) == "info"

        os.environ[self.env_var] = "error"
        assert get_log_level(self.namespace) == "error"

    def test_invalid_level_fallback(self):
        """Test invalid level falls back to 'warning'."""
        os.environ[self.env_var] = "verbose"
        assert get_log_level(self.namespace) == "warning"


class TestNamespaceHandling:
    """Test namespace handling in settings functions."""

    def test_default_namespace(self, monkeypatch):
        monkeypatch.delenv("IRSACHECK_NAMESPACE", raising=False)
        assert get_irsacheck_namespace() == "IRSACHECK_"

    def test_custom_namespace(self, monkeypatch):
        monkeypatch.setenv("IRSACHECK_NAMESPACE", "DIAG_")
        monkeypatch.setenv("DIAG_LOG_LEVEL", "debug")

        namespace = get_irsacheck_namespace()

        assert namespace == "DIAG_"
        assert get_log_level(namespace) == "debug"


class TestGetConfigFile:
    """Test get_config_file."""

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("IRSACHECK_CONFIG_FILE", raising=False)
        assert get_config_file("IRSACHECK_") is None

    def test_absolute_path(self, monkeypatch):
        monkeypatch.setenv("IRSACHECK_CONFIG_FILE", "config.yaml")

        result = get_config_file("IRSACHECK_")

        assert os.path.isabs(result)
        assert result.endswith("config.yaml")


class TestIrsaVariables:
    """Test the IRSA variable names."""

    def test_names(self):
        assert WEB_IDENTITY_TOKEN_FILE_ENV == "AWS_WEB_IDENTITY_TOKEN_FILE"
        assert ROLE_ARN_ENV == "AWS_ROLE_ARN"
