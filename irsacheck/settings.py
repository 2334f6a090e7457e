#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

"""
irsacheck Environment Variables Configuration

This module centralizes the environment variable names read by irsacheck, both
its own settings and the IRSA variables injected into pods by the EKS webhook.
"""

from __future__ import annotations

import os
from pathlib import Path


# Injected by the EKS pod identity webhook when a service account is annotated
WEB_IDENTITY_TOKEN_FILE_ENV: str = "AWS_WEB_IDENTITY_TOKEN_FILE"
ROLE_ARN_ENV: str = "AWS_ROLE_ARN"


def get_irsacheck_namespace() -> str:
    """Prefix of the irsacheck environment variables."""
    return os.environ.get("IRSACHECK_NAMESPACE", "IRSACHECK_")


def get_config_file(namespace: str) -> str | None:
    """Config file path from the environment, absolute, or None when unset."""
    config_file = os.environ.get(f"{namespace}CONFIG_FILE")
    if not config_file:
        return None
    return str(Path(config_file).resolve())


def _validate_log_level(log_level: str):
    """Validate log level, accepting case-insensitive values with fallback."""
    valid_levels = {"debug", "info", "warning", "error", "critical"}
    normalized_level = log_level.lower().strip()
    return normalized_level if normalized_level in valid_levels else "warning"


def get_log_level(namespace: str) -> str:
    """Get log level from environment with validation and fallback."""
    raw_level = os.environ.get(f"{namespace}LOG_LEVEL", "warning")
    return _validate_log_level(raw_level)


NAMESPACE = get_irsacheck_namespace()

# Logging
LOG_LEVEL: str = get_log_level(NAMESPACE)
