#!/usr/bin/env python3
# Copyright 2026 Loxide Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, example scans and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=loxide", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run all CI steps and report results."""
    root = _repo_root()
    steps = STEPS + _example_steps(root)
    results: list[tuple[str, bool, float]] = []

    for name, cmd in steps:
        _print_banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=root)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _print_banner("Summary")
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        print(color(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))

    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _repo_root() -> Path:
    return Path(__file__).parent.parent


def _example_steps(root: Path) -> list[tuple[str, list[str]]]:
    """Every example script must scan without lexical errors."""
    scripts = sorted((root / "examples").glob("*.lox"))
    return [
        (f"Scan {script.name}", ["uv", "run", "loxide", "--no-color", str(script.relative_to(root))])
        for script in scripts
    ]


def _print_banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


if __name__ == "__main__":
    sys.exit(main())
