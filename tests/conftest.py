# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Shared fixtures."""

from __future__ import annotations

import os

import pytest

from irsacheck.sanitizer import _SANITIZER


@pytest.fixture
def isolated_aws_env(monkeypatch, tmp_path):
    """Process environment with no ambient AWS credentials of any kind.

    Shared config files point to missing paths and IMDS is disabled, so the
    default chains resolve nothing without touching the network.
    """
    for name in list(os.environ):
        if name.startswith("AWS_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "missing-config"))
    monkeypatch.setenv(
        "AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "missing-credentials")
    )
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    return monkeypatch


@pytest.fixture(autouse=True)
def clear_sanitizer():
    yield
    _SANITIZER.clear()
