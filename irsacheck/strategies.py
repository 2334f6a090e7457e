#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

"""Credential resolution strategies.

Each strategy resolves credentials through an SDK's default provider chain,
without overriding its precedence, and builds an STS client from the same
session. ``botocore`` is the low-level core, ``boto3`` the high-level SDK built
on top of it; both get their own session so neither reuses the other's
resolved credentials.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import boto3
import botocore.session


if TYPE_CHECKING:
    from botocore.credentials import Credentials

    from irsacheck.config import Config


class CredentialStrategy:
    """Base strategy. Subclasses provide the session, credentials and client."""

    name: str = ""
    label: str = ""

    def create_session(self, config: Config):
        raise NotImplementedError

    def resolve_credentials(self, session) -> Credentials | None:
        return session.get_credentials()

    def create_client(self, session, config: Config):
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class BotocoreStrategy(CredentialStrategy):
    """botocore session and its default credential resolver."""

    name = "botocore"
    label = "botocore"

    def create_session(self, config: Config):
        session = botocore.session.get_session()
        if config.region:
            session.set_config_variable("region", config.region)
        return session

    def create_client(self, session, config: Config):
        return session.create_client("sts", region_name=config.region)


class Boto3Strategy(CredentialStrategy):
    """boto3 session, which wraps a fresh botocore session of its own."""

    name = "boto3"
    label = "boto3"

    def create_session(self, config: Config):
        return boto3.session.Session(region_name=config.region)

    def create_client(self, session, config: Config):
        return session.client("sts")


STRATEGIES: dict[str, type[CredentialStrategy]] = {
    BotocoreStrategy.name: BotocoreStrategy,
    Boto3Strategy.name: Boto3Strategy,
}


def get_strategies(names: list[str]) -> list[CredentialStrategy]:
    """Instantiate strategies by name, keeping the given order."""
    unknown = [name for name in names if name not in STRATEGIES]
    if unknown:
        raise ValueError(
            f"Unknown credential strategies: {', '.join(unknown)}. "
            f"Valid strategies: {', '.join(STRATEGIES)}"
        )
    return [STRATEGIES[name]() for name in names]
