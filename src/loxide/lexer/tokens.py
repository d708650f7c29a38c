# Copyright 2026 Loxide Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token categories, literal values and the immutable token record."""

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the Loxide scanner."""

    # Single-character tokens
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One or two character tokens
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    # End of input
    EOF = "EOF"


class Nil:
    """The nil literal value. Use the ``NIL`` singleton."""

    _instance: "Nil | None" = None

    def __new__(cls) -> "Nil":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NIL"

    def __bool__(self) -> bool:
        return False


NIL = Nil()

LiteralValue = str | float | bool | Nil

KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: The kind of token.
        lexeme: The exact source text matched, quotes included for strings.
        literal: The literal value for STRING and NUMBER tokens, ``None`` otherwise.
        line: 1-based line number of the token's first character.
    """

    type: TokenType
    lexeme: str
    literal: LiteralValue | None
    line: int

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {format_literal(self.literal)}"

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping suitable for YAML or JSON serialization."""
        literal = None if isinstance(self.literal, Nil) else self.literal
        return {
            "type": self.type.name,
            "lexeme": self.lexeme,
            "literal": literal,
            "line": self.line,
        }


def format_literal(literal: LiteralValue | None) -> str:
    """Render a literal payload for human-readable token output."""
    if literal is None:
        return "null"
    if isinstance(literal, Nil):
        return "nil"
    if isinstance(literal, bool):
        return "true" if literal else "false"
    if isinstance(literal, float):
        return repr(literal)
    return literal
