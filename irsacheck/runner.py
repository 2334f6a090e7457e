#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

"""Application runtime logic for irsacheck."""

from __future__ import annotations

import sys
import logging as logthings
from typing import TYPE_CHECKING, TextIO

from irsacheck.config import Config
from irsacheck.logger import LOG
from irsacheck.report import (
    format_header,
    format_identity,
    format_comparison,
    format_environment,
)
from irsacheck.identity import SetupError, RequestError, check_identity
from irsacheck.strategies import get_strategies
from irsacheck.environment import inspect_environment


if TYPE_CHECKING:
    import argparse

    from irsacheck.identity import CallerIdentity


def validate_config_file(config_path: str | None) -> bool:
    """Validate configuration file."""
    try:
        config = Config.from_file(config_path)
        _ = get_strategies(config.strategies)
        LOG.info("Configuration is valid")
        return True
    except Exception as error:
        LOG.error("Configuration validation failed: %s", str(error))
        return False


def setup_cli_logging(log_level: str) -> None:
    """Setup logging level from CLI arguments."""
    level = getattr(logthings, log_level.upper())
    LOG.setLevel(level)
    for handler in LOG.handlers:
        handler.setLevel(level)


def _write(stream: TextIO, lines: list[str]) -> None:
    for line in lines:
        print(line, file=stream)


def run_checks(config: Config, stream: TextIO | None = None) -> int:
    """Run the environment inspection then every identity check, in order.

    The first setup or request failure stops the run and returns 1. The
    environment inspection is advisory and never affects the return code.
    """
    if stream is None:
        stream = sys.stdout
    strategies = get_strategies(config.strategies)

    _write(stream, format_header())

    snapshot = inspect_environment(config.environ)
    _write(stream, [""] + format_environment(snapshot))

    identities: list[CallerIdentity] = []
    for strategy in strategies:
        _write(stream, ["", f"[{strategy.label}]"])
        try:
            identity = check_identity(strategy, config)
        except SetupError as error:
            _write(
                stream,
                [f"Failed to set up {strategy.label} credentials: {error.message}"],
            )
            LOG.error("Credential setup failed: %s", error.message)
            return 1
        except RequestError as error:
            _write(
                stream,
                [
                    f"Failed to get caller identity with {strategy.label}: "
                    f"{error.message}"
                ],
            )
            LOG.error("GetCallerIdentity failed: %s", error.message)
            return 1

        identities.append(identity)
        _write(stream, format_identity(identity, strategy.label))

    if config.compare_identities:
        comparison = format_comparison(identities)
        if comparison:
            _write(stream, [""] + comparison)

    return 0


def run(args: argparse.Namespace) -> int:
    """Build the configuration from CLI arguments and run the checks."""
    try:
        config = Config.from_file(args.config)
        if args.region:
            config.region = args.region
        if args.strategy:
            config.strategies = args.strategy
        if args.no_compare:
            config.compare_identities = False

        LOG.info("Running checks with strategies: %s", ", ".join(config.strategies))
        return run_checks(config)

    except KeyboardInterrupt:
        LOG.info("Interrupted")
        return 1
    except (ValueError, OSError) as error:
        LOG.error("Fatal error: %s", str(error))
        return 1
