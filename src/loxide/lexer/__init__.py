# Copyright 2026 Loxide Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical layer for Lox source text."""

from loxide.lexer.diagnostics import Diagnostic, DiagnosticsSink, ErrorKind, ErrorReporter
from loxide.lexer.scanner import Scanner, ScannerDefect, scan
from loxide.lexer.tokens import KEYWORDS, NIL, LiteralValue, Nil, Token, TokenType

__all__ = [
    "Diagnostic",
    "DiagnosticsSink",
    "ErrorKind",
    "ErrorReporter",
    "KEYWORDS",
    "LiteralValue",
    "NIL",
    "Nil",
    "Scanner",
    "ScannerDefect",
    "Token",
    "TokenType",
    "scan",
]
