#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

"""IRSA environment inspection.

Reads the two variables injected by the EKS pod identity webhook and checks the
projected service account token file. Nothing here talks to AWS.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from collections.abc import Mapping

from irsacheck.logger import LOG
from irsacheck.settings import ROLE_ARN_ENV, WEB_IDENTITY_TOKEN_FILE_ENV


@dataclass(frozen=True)
class CredentialEnvironmentSnapshot:
    """IRSA related state of the environment at startup."""

    token_file_path: str | None = None
    token_file_exists: bool = False
    token_file_size: int | None = None
    token_file_error: str | None = None
    role_arn: str | None = None

    @property
    def irsa_configured(self) -> bool:
        return bool(self.token_file_exists and self.role_arn)


def inspect_environment(environ: Mapping[str, str]) -> CredentialEnvironmentSnapshot:
    """Build a snapshot from ``environ``. Never raises.

    Empty values count as unset. The token file is only stat'ed when its
    variable is set.
    """
    token_file_path = environ.get(WEB_IDENTITY_TOKEN_FILE_ENV) or None
    role_arn = environ.get(ROLE_ARN_ENV) or None

    token_file_exists = False
    token_file_size = None
    token_file_error = None
    if token_file_path:
        try:
            token_file_size = os.stat(token_file_path).st_size
            token_file_exists = True
        except OSError as error:
            token_file_error = str(error)
            LOG.debug("Unable to stat token file %s: %s", token_file_path, error)

    snapshot = CredentialEnvironmentSnapshot(
        token_file_path=token_file_path,
        token_file_exists=token_file_exists,
        token_file_size=token_file_size,
        token_file_error=token_file_error,
        role_arn=role_arn,
    )
    LOG.info(
        "IRSA environment inspected, configured: %s", snapshot.irsa_configured
    )
    return snapshot
