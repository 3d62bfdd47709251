"""
  drift Lexer

Turns source text into a flat list of Tokens in one left-to-right scan.

- digits (with at most one '.') and an optional 'f' suffix -> Int / Num / Float
- ASCII letters, digits and '_' starting with a letter    -> Keyword / Identifier
- '"' or "'"                                             -> Quote, Str, Quote
- any other character in the syntax table                -> a single token

Malformed input never raises. The offending run is dropped, a Diagnostic is
recorded on the lexer and logged, and scanning resumes after it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, TextIO

from drift.reader.tokens import (
    DEFAULT_KEYWORDS,
    LISP_KEYWORDS,
    QUOTE_CHARS,
    SYNTAX_TABLE,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

# Skipped without producing tokens; newline is handled separately
BLANKS = " \t\r\0\x03\x04"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_alnum(c: str) -> bool:
    return _is_digit(c) or _is_alpha(c)


@dataclass(frozen=True)
class Diagnostic:
    line: int
    column: int
    message: str

    def __str__(self) -> str:
        return f"Lexing error line: {self.line}, {self.message}"


class Lexer:
    """Scanner with a caller-extensible keyword set.

    Diagnostics from the most recent call to `lex` are kept in
    `self.diagnostics`.
    """

    def __init__(self, keywords: Iterable[str] = DEFAULT_KEYWORDS):
        self.keywords: set[str] = set(keywords)
        self.diagnostics: list[Diagnostic] = []
        self._text = ""
        self._pos = 0
        self._line = 1
        self._column = 0

    def add_keyword(self, word: str) -> None:
        self.keywords.add(word)

    # --- Entry points ---
    def lex(self, source: str | TextIO) -> list[Token]:
        if not isinstance(source, str):
            source = source.read()
        self._text = source
        self._pos = 0
        self._line = 1
        self._column = 0
        self.diagnostics = []

        tokens: list[Token] = []
        while self._pos < len(self._text):
            c = self._peek()
            if c in BLANKS:
                self._advance()
            elif c == "\n":
                self._advance()
            elif _is_digit(c):
                self._lex_number(tokens)
            elif _is_alpha(c):
                self._lex_identifier(tokens)
            else:
                self._lex_syntax(tokens)
        return tokens

    def lex_file(self, path: str | os.PathLike) -> list[Token]:
        # undecodable bytes become U+FFFD and are reported as unknown syntax
        with open(Path(path), encoding="utf-8", errors="replace") as handle:
            return self.lex(handle)

    # --- Cursor helpers ---
    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _advance(self) -> str:
        c = self._text[self._pos]
        self._pos += 1
        if c == "\n":
            self._line += 1
            self._column = 0
        else:
            self._column += 1
        return c

    def _take_while(self, pred: Callable[[str], bool]) -> str:
        start = self._pos
        while self._pos < len(self._text) and pred(self._text[self._pos]):
            self._advance()
        return self._text[start:self._pos]

    def _report(self, line: int, column: int, message: str) -> None:
        diagnostic = Diagnostic(line, column, message)
        self.diagnostics.append(diagnostic)
        logger.warning("%s", diagnostic)

    # --- Token classes ---
    def _lex_number(self, tokens: list[Token]) -> None:
        line, column = self._line, self._column
        number = self._take_while(lambda c: _is_digit(c) or c == ".")
        kind = TokenKind.INT

        # The only letter allowed after a number is f, for float
        if _is_alpha(self._peek()):
            suffix = self._take_while(_is_alpha)
            if suffix != "f":
                self._report(line, column, "identifiers cannot be preceded by numbers")
                return
            kind = TokenKind.FLOAT

        dots = number.count(".")
        if dots > 1:
            self._report(line, column, "numbers cannot contain more than one '.'")
            return
        if dots == 1 and kind is TokenKind.INT:
            kind = TokenKind.NUM

        try:
            value = int(number) if kind is TokenKind.INT else float(number)
        except ValueError:
            # int() refuses strings past sys.get_int_max_str_digits()
            self._report(line, column, "integer literal too large")
            return
        tokens.append(Token(kind, value, line, column))

    def _lex_identifier(self, tokens: list[Token]) -> None:
        line, column = self._line, self._column
        word = self._take_while(lambda c: _is_alnum(c) or c == "_")
        kind = TokenKind.KEYWORD if word in self.keywords else TokenKind.IDENTIFIER
        tokens.append(Token(kind, word, line, column))

    def _lex_syntax(self, tokens: list[Token]) -> None:
        line, column = self._line, self._column
        c = self._advance()
        kind = SYNTAX_TABLE.get(c)
        if kind is None:
            self._report(line, column, f"unknown syntax: {c}")
            return
        if c not in QUOTE_CHARS:
            tokens.append(Token(kind, c, line, column))
            return

        tokens.append(Token(TokenKind.QUOTE, c, line, column))
        str_line, str_column = self._line, self._column
        text = self._take_while(lambda ch: ch != c)
        tokens.append(Token(TokenKind.STR, text, str_line, str_column))
        if self._peek() == c:
            tokens.append(Token(TokenKind.QUOTE, c, self._line, self._column))
            self._advance()
        else:
            self._report(line, column, f"unterminated string, expecting: {c}")


def make_lexer(keywords: Iterable[str] = LISP_KEYWORDS) -> Lexer:
    """A lexer with the default keywords plus `keywords` registered."""
    lexer = Lexer()
    for word in keywords:
        lexer.add_keyword(word)
    return lexer


def lex(source: str | TextIO) -> list[Token]:
    """Tokenize `source` with the language's keywords registered."""
    return make_lexer().lex(source)
