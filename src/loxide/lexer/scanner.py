# Copyright 2026 Loxide Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Lox source text.

Converts raw source text into a sequence of tokens in a single left-to-right
pass. Lexical errors are reported to a diagnostics sink and skipped, so a scan
always completes and always ends with an EOF token.
"""

from loxide.lexer.diagnostics import (
    UNEXPECTED_CHARACTER,
    UNTERMINATED_STRING,
    DiagnosticsSink,
    ErrorReporter,
)
from loxide.lexer.tokens import KEYWORDS, LiteralValue, Token, TokenType

# ###############
# Public Interface
# ###############


class ScannerDefect(RuntimeError):
    """Raised when the scanner breaks one of its own invariants.

    This never signals bad input. It indicates a bug in the scanner itself.
    """


class Scanner:
    """Scanner state machine over one source string.

    A Scanner is single-use: once ``scan_tokens`` has run, further calls return
    the same tokens without scanning again.

    Args:
        source: The full source text.
        reporter: Sink that receives every lexical error.
    """

    def __init__(self, source: str, reporter: DiagnosticsSink) -> None:
        self._source = source
        self._reporter = reporter
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._done = False

    def scan_tokens(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        if not self._done:
            while not self._is_at_end():
                self._start = self._current
                self._start_line = self._line
                self._scan_token()
            self._tokens.append(Token(TokenType.EOF, "", None, self._line))
            self._done = True
        return list(self._tokens)

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        """Return the current character, or '' at end of input."""
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch on the first character of the next lexeme."""
        ch = self._advance()

        if ch in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[ch])
        elif ch in _ONE_OR_TWO_CHAR_TOKENS:
            two_char, one_char = _ONE_OR_TWO_CHAR_TOKENS[ch]
            self._add_token(two_char if self._match("=") else one_char)
        elif ch == "/":
            if self._match("/"):
                self._skip_line_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif ch in " \r\t":
            pass
        elif ch == "\n":
            self._line += 1
        elif ch == '"':
            self._scan_string()
        elif _is_digit(ch):
            self._scan_number()
        elif _is_alpha(ch):
            self._scan_identifier_or_keyword()
        else:
            self._reporter.report(self._line, UNEXPECTED_CHARACTER)

    def _skip_line_comment(self) -> None:
        """Consume through end-of-line, leaving the newline itself unread."""
        while self._peek() != "\n" and not self._is_at_end():
            self._advance()

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal. Newlines are allowed, escapes are not processed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self._reporter.report(self._line, UNTERMINATED_STRING)
            return

        self._advance()  # closing "
        self._add_token(TokenType.STRING, self._source[self._start + 1 : self._current - 1])

    def _scan_number(self) -> None:
        """Scan a number literal.

        A fractional part requires at least one digit after the decimal point,
        so a trailing '.' is left for the next token.
        """
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()  # consume the '.'
            while _is_digit(self._peek()):
                self._advance()

        text = self._source[self._start : self._current]
        try:
            value = float(text)
        except ValueError as exc:
            raise ScannerDefect(f"Matched number literal {text!r} is not a valid float") from exc
        self._add_token(TokenType.NUMBER, value)

    def _scan_identifier_or_keyword(self) -> None:
        """Scan an identifier and map it to a keyword token type if applicable."""
        while _is_alphanumeric(self._peek()):
            self._advance()
        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal: LiteralValue | None = None) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(token_type, lexeme, literal, self._start_line))


def scan(source: str, reporter: DiagnosticsSink | None = None) -> list[Token]:
    """Tokenize Lox source text into a sequence of tokens.

    Returns a list of tokens. The final token is always an EOF token with an
    empty lexeme. Comments and whitespace are consumed and not included in the
    output. Unexpected characters and unterminated strings are reported to
    ``reporter`` and skipped; they never raise.

    Args:
        source: The full source text.
        reporter: Sink for lexical errors. A private, discarded one is used if omitted.

    Returns:
        A list of Token objects ending with a single EOF token.
    """
    if reporter is None:
        reporter = ErrorReporter()
    return Scanner(source, reporter).scan_tokens()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# first character -> (type when followed by '=', type otherwise)
_ONE_OR_TWO_CHAR_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9" and len(ch) == 1


def _is_alpha(ch: str) -> bool:
    return len(ch) == 1 and ("a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_")


def _is_alphanumeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)
