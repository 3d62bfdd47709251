"""Token kinds, the syntax table and keyword sets shared by lexer and compiler."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from drift import LispValue


class TokenKind(Enum):
    """Kinds of token. Each value is the description used in diagnostics."""

    KEYWORD = "eg. if"
    INT = "int"
    FLOAT = "float"
    NUM = "eg 1.0"
    STR = "eg. hello world"
    ARITH = "+,-,*,/"
    SEMICOLON = ";"
    COLON = ":"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    QUOTE = "\" or '"
    IDENTIFIER = "abc_123"
    LTHAN = "<"
    GTHAN = ">"
    CONDITIONAL = "== or !="
    BITWISE = "|,&,^"
    NOT = "!"

    @property
    def description(self) -> str:
        return self.value


class Token(NamedTuple):
    kind: TokenKind
    value: LispValue
    line: int = 1
    column: int = 0


# Single-character syntax. Multi-character operators are not lexed: the
# compiler would see `==` as two tokens if it ever consumed them.
SYNTAX_TABLE: dict[str, TokenKind] = {
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "<": TokenKind.LTHAN,
    ">": TokenKind.GTHAN,
    ",": TokenKind.COMMA,
    '"': TokenKind.QUOTE,
    "'": TokenKind.QUOTE,
    "&": TokenKind.BITWISE,
    "|": TokenKind.BITWISE,
    "^": TokenKind.BITWISE,
    "+": TokenKind.ARITH,
    "-": TokenKind.ARITH,
    "*": TokenKind.ARITH,
    "/": TokenKind.ARITH,
    "!": TokenKind.NOT,
}

QUOTE_CHARS = ('"', "'")

# Registered by every Lexer; only `if` has a form.
DEFAULT_KEYWORDS = ("if", "while", "for", "break", "else")

# Registered by the interpreter host before lexing.
LISP_KEYWORDS = ("define", "set", "lambda", "begin", "list")
