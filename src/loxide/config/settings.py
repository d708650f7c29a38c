# Copyright 2026 Loxide Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings model and YAML loader for the Loxide command-line tool."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".loxide.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class LoxideConfig(BaseModel):
    """User-facing settings for the command-line tool.

    Attributes:
        prompt: Prompt shown before each line in interactive mode.
        color: Whether diagnostics are colored.
        output_format: How tokens are printed, one per line or as a YAML list.
        show_tokens: Whether tokens are printed at all.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    prompt: str = "> "
    color: bool = True
    output_format: Literal["text", "yaml"] = Field(alias="output-format", default="text")
    show_tokens: bool = Field(alias="show-tokens", default=True)


def find_config(directory: Path) -> Path | None:
    """Return the path of the configuration file in ``directory``, if there is one."""
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path) -> LoxideConfig:
    """Load and validate a configuration file.

    An empty file yields the default settings.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated LoxideConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return LoxideConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc
