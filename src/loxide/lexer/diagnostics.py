# Copyright 2026 Loxide Contributors
# SPDX-License-Identifier: Apache-2.0

"""Collection and reporting of lexical errors.

The scanner never raises for malformed input. Instead it hands every problem
to a diagnostics sink and keeps going. The caller owns the sink and decides how
errors are presented and when the error state is cleared.
"""

import enum
from dataclasses import dataclass
from typing import Protocol

# ###############
# Public Interface
# ###############

UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."


class ErrorKind(enum.Enum):
    """Categories of lexical errors."""

    UNEXPECTED_CHARACTER = "unexpected-character"
    UNTERMINATED_STRING = "unterminated-string"


@dataclass(frozen=True)
class Diagnostic:
    """A single reported lexical error.

    Attributes:
        line: 1-based line number the error was reported at.
        message: Human-readable description of the problem.
        kind: The error category, or None for messages outside the lexical taxonomy.
    """

    line: int
    message: str
    kind: ErrorKind | None = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class DiagnosticsSink(Protocol):
    """Anything the scanner can report lexical errors to."""

    def report(self, line: int, message: str) -> None: ...


class ErrorReporter:
    """Default diagnostics sink that records errors for the caller to present."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def report(self, line: int, message: str) -> None:
        """Record an error at the given line."""
        diagnostic = Diagnostic(line, message, _KINDS_BY_MESSAGE.get(message))
        self._diagnostics.append(diagnostic)

    def had_error(self) -> bool:
        """Return True if at least one error was reported since the last reset."""
        return bool(self._diagnostics)

    def reset(self) -> None:
        """Forget all reported errors."""
        self._diagnostics.clear()

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Snapshot of the errors reported since the last reset, in order."""
        return tuple(self._diagnostics)


# ################
# Implementation
# ################

_KINDS_BY_MESSAGE: dict[str, ErrorKind] = {
    UNEXPECTED_CHARACTER: ErrorKind.UNEXPECTED_CHARACTER,
    UNTERMINATED_STRING: ErrorKind.UNTERMINATED_STRING,
}
