# Copyright 2026 Loxide Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration module."""

from pathlib import Path

import pytest

from loxide.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    LoxideConfig,
    find_config,
    load_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_config_file_name_constant() -> None:
    """CONFIG_FILE_NAME has the expected value."""
    assert CONFIG_FILE_NAME == ".loxide.yaml"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty config file yields the default settings."""
    config = load_config(_write_config(tmp_path, ""))

    assert config == LoxideConfig()
    assert config.prompt == "> "
    assert config.color is True
    assert config.output_format == "text"
    assert config.show_tokens is True


def test_all_fields(tmp_path: Path) -> None:
    """Every field is read using its kebab-case key."""
    content = """\
prompt: "lox> "
color: false
output-format: yaml
show-tokens: false
"""
    config = load_config(_write_config(tmp_path, content))

    assert config.prompt == "lox> "
    assert config.color is False
    assert config.output_format == "yaml"
    assert config.show_tokens is False


def test_find_config_present(tmp_path: Path) -> None:
    """find_config returns the config path when the file exists."""
    path = _write_config(tmp_path, "")
    assert find_config(tmp_path) == path


def test_find_config_absent(tmp_path: Path) -> None:
    """find_config returns None when there is no config file."""
    assert find_config(tmp_path) is None


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing file raises ConfigError."""
    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    """Malformed YAML raises ConfigError."""
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "prompt: [unclosed\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    """A top-level list is rejected."""
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        load_config(_write_config(tmp_path, "- a\n- b\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    """Unknown keys are rejected."""
    with pytest.raises(ConfigError, match="Invalid config file"):
        load_config(_write_config(tmp_path, "colour: true\n"))


def test_invalid_output_format_raises(tmp_path: Path) -> None:
    """Only the supported output formats are accepted."""
    with pytest.raises(ConfigError):
        load_config(_write_config(tmp_path, "output-format: json\n"))
