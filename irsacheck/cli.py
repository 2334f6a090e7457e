#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

"""Command-line interface for irsacheck."""

from __future__ import annotations

import argparse

from irsacheck import __version__
from irsacheck.logger import LOG
from irsacheck.strategies import STRATEGIES


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="irsacheck",
        description=(
            "Check IRSA wiring and confirm the ambient AWS credentials with "
            "sts:GetCallerIdentity"
        ),
    )

    _ = parser.add_argument(
        "--config",
        default=None,
        help=(
            "Path to an optional configuration file "
            "(default: $IRSACHECK_CONFIG_FILE)"
        ),
    )

    _ = parser.add_argument(
        "--validate-only", action="store_true", help="Validate configuration and exit"
    )

    _ = parser.add_argument(
        "--region",
        help="AWS region for the STS clients (default: SDK region resolution)",
    )

    _ = parser.add_argument(
        "--strategy",
        action="append",
        choices=list(STRATEGIES),
        help="Credential strategy to check, repeatable (default: all, in order)",
    )

    _ = parser.add_argument(
        "--no-compare",
        action="store_true",
        help="Do not compare the identities returned by each strategy",
    )

    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point - parse arguments and delegate."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        from irsacheck.runner import setup_cli_logging

        setup_cli_logging(args.log_level)

    try:
        if args.validate_only:
            from irsacheck.runner import validate_config_file

            success = validate_config_file(args.config)
            return 0 if success else 1
    except Exception as error:
        LOG.error("Fatal error during validation: %s", str(error))
        return 1

    from irsacheck.runner import run

    return run(args)


if __name__ == "__main__":
    import sys

    sys.exit(main())
