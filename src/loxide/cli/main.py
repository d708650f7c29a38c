# Copyright 2026 Loxide Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Loxide command-line interface."""

import argparse
import sys
from pathlib import Path

import yaml
from yachalk import chalk

from loxide.config import ConfigError, LoxideConfig, find_config, load_config
from loxide.lexer import ErrorReporter, Token, scan

# ###############
# Public Interface
# ###############

EXIT_OK = 0
EXIT_FAILURE = 1
# sysexits.h EX_DATAERR, used when a script contains lexical errors.
EXIT_DATA_ERROR = 65


def main() -> None:
    """Run the Loxide CLI."""
    parser = argparse.ArgumentParser(
        prog="loxide",
        description="Loxide - scan Lox source into tokens",
    )
    parser.add_argument(
        "script",
        nargs="?",
        default=None,
        help="Lox script to scan (default: start an interactive prompt)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a configuration file (default: .loxide.yaml in the current directory)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "yaml"],
        default=None,
        help="Token output format (default: text)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored diagnostics",
    )

    args = parser.parse_args()
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Resolve settings and dispatch to file or interactive mode."""
    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if args.script is not None:
        return _run_file(Path(args.script), config)
    return _run_prompt(config)


def _resolve_config(args: argparse.Namespace) -> LoxideConfig:
    """Merge command-line flags over the configuration file over the defaults."""
    if args.config is not None:
        config = load_config(Path(args.config))
    else:
        config_path = find_config(Path.cwd())
        config = load_config(config_path) if config_path is not None else LoxideConfig()

    overrides: dict[str, object] = {}
    if args.format is not None:
        overrides["output_format"] = args.format
    if args.no_color:
        overrides["color"] = False
    return config.model_copy(update=overrides)


def _run_file(path: Path, config: LoxideConfig) -> int:
    """Handle file mode: scan a whole script once."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        print(f"Error: cannot read script '{path}': {exc}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        source = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        print(f"Error: script '{path}' is not valid UTF-8: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    reporter = ErrorReporter()
    _run(source, reporter, config)
    if reporter.had_error():
        return EXIT_DATA_ERROR
    return EXIT_OK


def _run_prompt(config: LoxideConfig) -> int:
    """Handle interactive mode: scan one line at a time until end of input."""
    reporter = ErrorReporter()
    while True:
        try:
            line = input(config.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return EXIT_OK
        except UnicodeDecodeError as exc:
            print(f"Error: input is not valid UTF-8: {exc}", file=sys.stderr)
            return EXIT_FAILURE
        _run(line, reporter, config)
        # A mistake on one line must not affect the next one.
        reporter.reset()


def _run(source: str, reporter: ErrorReporter, config: LoxideConfig) -> None:
    """Scan ``source`` and print its tokens and diagnostics."""
    tokens = scan(source, reporter)

    for diagnostic in reporter.diagnostics:
        text = str(diagnostic)
        print(chalk.red(text) if config.color else text, file=sys.stderr)

    if config.show_tokens:
        _print_tokens(tokens, config.output_format)


def _print_tokens(tokens: list[Token], output_format: str) -> None:
    if output_format == "yaml":
        dumped = yaml.safe_dump([token.to_dict() for token in tokens], sort_keys=False, default_flow_style=False)
        print(dumped, end="")
        return
    for token in tokens:
        print(token)
