#  SPDX-License-Identifier: MPL-2.0
#  Copyright 2025-present John Mille <john@ews-network.net>

from __future__ import annotations

import os
import json
from typing import Any
from pathlib import Path
from dataclasses import field, dataclass
from collections.abc import Mapping

import yaml
import jsonschema

from irsacheck.logger import LOG
from irsacheck.settings import NAMESPACE, get_config_file
from irsacheck.sanitizer import sanitize_exception_message


DEFAULT_STRATEGIES: tuple[str, ...] = ("botocore", "boto3")


def set_else_none(key: str, data: dict, default: Any) -> Any:
    """Get value from dict or return default if not present."""
    return data.get(key, default)


@dataclass
class Config:
    """Settings for one diagnostic run.

    ``environ`` is the environment the IRSA inspection reads. It defaults to a
    copy of the process environment and can be replaced wholesale in tests.
    """

    region: str | None = None
    strategies: list[str] = field(default_factory=lambda: list(DEFAULT_STRATEGIES))
    compare_identities: bool = True
    environ: Mapping[str, str] = field(
        default_factory=lambda: dict(os.environ), repr=False
    )

    @classmethod
    def from_file(cls, config_path: str | None = None) -> Config:
        """Load configuration from YAML or JSON file.

        Without an explicit path, ``IRSACHECK_CONFIG_FILE`` is used when set,
        otherwise the built-in defaults are returned.
        """
        if config_path is None:
            config_path = get_config_file(NAMESPACE)
            if config_path is None:
                LOG.debug("No configuration file given, using defaults")
                return cls()

        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
            LOG.info("Loaded configuration from %s as YAML", config_path)
        except yaml.YAMLError as error:
            LOG.debug("YAML parsing failed, trying JSON")
            try:
                with open(config_file, encoding="utf-8") as f:
                    config_data = json.load(f)
                LOG.info("Loaded configuration from %s as JSON", config_path)
            except json.JSONDecodeError as json_error:
                raise ValueError(
                    f"File is not valid YAML or JSON. YAML error: {error}, "
                    f"JSON error: {json_error}"
                ) from error

        return cls.from_dict(config_data or {})

    @classmethod
    def from_dict(cls, config_data: dict) -> Config:
        """Create configuration from dictionary."""
        cls.validate_schema(config_data)

        return cls(
            region=set_else_none("region", config_data, None),
            strategies=list(
                set_else_none("strategies", config_data, DEFAULT_STRATEGIES)
            ),
            compare_identities=set_else_none("compare_identities", config_data, True),
        )

    @classmethod
    def validate_schema(cls, config_data: dict) -> None:
        """Validate configuration data against JSON schema."""
        schema_path = Path(__file__).parent / "config-schema.json"

        if not schema_path.exists():
            LOG.warning("JSON schema file not found at %s", schema_path)
            return

        try:
            with open(schema_path, encoding="utf-8") as f:
                schema = json.load(f)

            jsonschema.validate(config_data, schema)
            LOG.debug("Configuration validation against JSON schema passed")

        except jsonschema.ValidationError as error:
            error_path = (
                " -> ".join(str(p) for p in error.absolute_path)
                if error.absolute_path
                else "root"
            )
            sanitized_message = sanitize_exception_message(error.message)

            LOG.error(
                "Configuration validation failed at %s: %s",
                error_path,
                sanitized_message,
            )

            raise ValueError(
                f"Configuration validation failed at {error_path}: {sanitized_message}"
            ) from error
        except jsonschema.SchemaError as error:
            LOG.error("JSON schema error: %s", error.message)
            raise ValueError(f"Invalid JSON schema: {error.message}") from error
