#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

"""Caller identity check shared by every credential strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING
from dataclasses import dataclass

from botocore.exceptions import ClientError, BotoCoreError

from irsacheck.logger import LOG
from irsacheck.sanitizer import sanitize_string, register_sensitive_value


if TYPE_CHECKING:
    from botocore.credentials import Credentials

    from irsacheck.config import Config
    from irsacheck.strategies import CredentialStrategy


class IdentityCheckError(Exception):
    """Base error of an identity check, tied to the strategy that raised it."""

    def __init__(self, strategy: str, message: str):
        super().__init__(message)
        self.strategy = strategy
        self.message = message


class SetupError(IdentityCheckError):
    """The credential chain or the STS client could not be initialised."""


class RequestError(IdentityCheckError):
    """The GetCallerIdentity call failed."""


class MetadataError(IdentityCheckError):
    """Provider details for the resolved credentials are unavailable."""


@dataclass(frozen=True)
class CallerIdentity:
    """Principal reported by STS plus details of the credentials used.

    The secret access key is never kept here.
    """

    account_id: str
    user_id: str
    arn: str
    strategy: str
    provider_name: str | None = None
    access_key_id: str | None = None
    has_session_token: bool = False
    metadata_error: MetadataError | None = None

    def same_principal(self, other: CallerIdentity) -> bool:
        return (self.account_id, self.user_id, self.arn) == (
            other.account_id,
            other.user_id,
            other.arn,
        )


def _describe_credentials(credentials: Credentials) -> tuple[str, str, bool]:
    """Return provider name, access key id and session token presence.

    For refreshable credentials (web identity, container, IMDS) freezing them
    may trigger a refresh, hence a call to AWS.
    """
    frozen = credentials.get_frozen_credentials()
    register_sensitive_value(frozen.secret_key)
    register_sensitive_value(frozen.token)
    return credentials.method, frozen.access_key, bool(frozen.token)


def check_identity(strategy: CredentialStrategy, config: Config) -> CallerIdentity:
    """Resolve credentials with ``strategy`` and confirm them with STS.

    Raises:
        SetupError: no credentials found, or session/client setup failed.
        RequestError: GetCallerIdentity failed.
    """
    extra = {"strategy": strategy.name}

    try:
        session = strategy.create_session(config)
        credentials = strategy.resolve_credentials(session)
        if credentials is None:
            raise SetupError(strategy.name, "Unable to locate credentials")
        client = strategy.create_client(session, config)
    except BotoCoreError as error:
        raise SetupError(strategy.name, sanitize_string(str(error))) from error
    LOG.debug("Credentials resolved via %s", credentials.method, extra=extra)

    try:
        response = client.get_caller_identity()
    except (ClientError, BotoCoreError) as error:
        raise RequestError(strategy.name, sanitize_string(str(error))) from error
    LOG.info("Caller identity confirmed: %s", response["Arn"], extra=extra)

    provider_name = None
    access_key_id = None
    has_session_token = False
    metadata_error = None
    try:
        provider_name, access_key_id, has_session_token = _describe_credentials(
            credentials
        )
    except (ClientError, BotoCoreError) as error:
        metadata_error = MetadataError(strategy.name, sanitize_string(str(error)))
        LOG.warning(
            "Credential details unavailable: %s", metadata_error.message, extra=extra
        )

    return CallerIdentity(
        account_id=response["Account"],
        user_id=response["UserId"],
        arn=response["Arn"],
        strategy=strategy.name,
        provider_name=provider_name,
        access_key_id=access_key_id,
        has_session_token=has_session_token,
        metadata_error=metadata_error,
    )
