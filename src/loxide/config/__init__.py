# Copyright 2026 Loxide Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for the Loxide command-line tool."""

from loxide.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    LoxideConfig,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "LoxideConfig",
    "find_config",
    "load_config",
]
