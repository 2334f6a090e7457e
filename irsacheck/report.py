#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

"""Human readable report lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from irsacheck.settings import ROLE_ARN_ENV, WEB_IDENTITY_TOKEN_FILE_ENV


if TYPE_CHECKING:
    from irsacheck.identity import CallerIdentity
    from irsacheck.environment import CredentialEnvironmentSnapshot


PASS = "✓"
FAIL = "✗"
SUCCESS = "✔"

TITLE = "AWS Identity Validator"

# botocore Credentials.method values
PROVIDER_DESCRIPTIONS: dict[str, str] = {
    "env": "environment variables",
    "assume-role-with-web-identity": "web identity token (IRSA)",
    "shared-credentials-file": "shared credentials file",
    "config-file": "shared config file",
    "container-role": "container credentials endpoint",
    "iam-role": "instance metadata service",
    "assume-role": "assumed role from profile",
    "sso": "IAM Identity Center (SSO)",
    "custom-process": "credential process",
    "explicit": "explicit credentials",
}


def format_header() -> list[str]:
    """Title banner printed before any check."""
    return [TITLE, "=" * 27]


def describe_provider(method: str) -> str:
    """Credential provider method with its description when known."""
    description = PROVIDER_DESCRIPTIONS.get(method)
    return f"{method} ({description})" if description else method


def format_environment(snapshot: CredentialEnvironmentSnapshot) -> list[str]:
    """Pass/fail lines for the IRSA variables and token file."""
    lines = ["[IRSA Environment Check]"]

    if snapshot.token_file_path:
        lines.append(
            f"{PASS} {WEB_IDENTITY_TOKEN_FILE_ENV} env var is set: "
            f"{snapshot.token_file_path}"
        )
        if snapshot.token_file_exists:
            lines.append(f"{PASS} Token file exists")
            lines.append(f"{PASS} Token file size: {snapshot.token_file_size} bytes")
        else:
            lines.append(f"{FAIL} Token file issue: {snapshot.token_file_error}")
    else:
        lines.append(
            f"{FAIL} {WEB_IDENTITY_TOKEN_FILE_ENV} env var not set - "
            "IRSA not configured"
        )

    if snapshot.role_arn:
        lines.append(f"{PASS} {ROLE_ARN_ENV} env var is set: {snapshot.role_arn}")
    else:
        lines.append(f"{FAIL} {ROLE_ARN_ENV} env var not set - IRSA not configured")

    return lines


def format_identity(identity: CallerIdentity, label: str) -> list[str]:
    """Identity lines for one strategy. Never includes the secret key."""
    lines = [
        f"{SUCCESS}  Successfully authenticated with {label}",
        f"Account ID: {identity.account_id}",
        f"User ID: {identity.user_id}",
        f"ARN: {identity.arn}",
    ]

    if identity.metadata_error is not None:
        lines.append(
            f"Failed to get credential details: {identity.metadata_error.message}"
        )
        return lines

    lines.append(f"Provider: {describe_provider(identity.provider_name)}")
    lines.append(f"Access Key ID: {identity.access_key_id}")
    if identity.has_session_token:
        lines.append("Using temporary credentials (has session token)")
    return lines


def format_comparison(identities: list[CallerIdentity]) -> list[str]:
    """Cross-strategy consistency line, empty with fewer than two identities."""
    if len(identities) < 2:
        return []

    reference = identities[0]
    mismatched = [
        identity.strategy
        for identity in identities[1:]
        if not reference.same_principal(identity)
    ]
    if mismatched:
        return [
            f"{FAIL} Identity mismatch between {reference.strategy} and "
            f"{', '.join(mismatched)}"
        ]
    strategies = ", ".join(identity.strategy for identity in identities)
    return [f"{PASS} Same identity reported by {strategies}"]
