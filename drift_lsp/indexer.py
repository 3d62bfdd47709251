from __future__ import annotations

"""
Indexer for drift source files, used by the language server.

The document is lexed and compiled but never run. We collect:
- definitions: (define name ...), marked as functions when the value is a lambda
- lexer diagnostics (malformed numbers, unknown characters, unterminated strings)
- the first compile error, if any
- the parenthesis balance
Positions are 0-based (line, col), as LSP expects.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from drift.errors import DriftError
from drift.evaluation.compiler import parse
from drift.reader.lexer import make_lexer
from drift.reader.tokens import Token, TokenKind
from drift.types.environment import Environment


BUILTIN_SIGNATURES: Dict[str, str] = {
    "define": "(define name value)",
    "set": "(set name value)",
    "lambda": "(lambda (params...) body...)",
    "begin": "(begin expr...)",
    "list": "(list items...)",
    "if": "(if condition then else)",
    "print": "(print values...)",
    "length": "(length seq)",
    "nth": "(nth items index)",
    "first": "(first items)",
    "rest": "(rest items)",
    "not": "(not value)",
    "eq": "(eq a b...)",
}


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class IndexDiagnostic:
    message: str
    line: int
    col: int
    severity: str  # "warning" | "error"


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    diagnostics: List[IndexDiagnostic] = field(default_factory=list)
    paren_balance: int = 0


def _is_keyword(tok: Token, word: str) -> bool:
    return tok.kind is TokenKind.KEYWORD and tok.value == word


def _scan_definitions(tokens: List[Token]) -> Dict[str, SymbolDef]:
    symbols: Dict[str, SymbolDef] = {}
    for i in range(len(tokens) - 2):
        opener, head, name = tokens[i], tokens[i + 1], tokens[i + 2]
        if opener.kind is not TokenKind.LPAREN or not _is_keyword(head, "define"):
            continue
        if name.kind is not TokenKind.IDENTIFIER:
            continue
        following = tokens[i + 3:i + 5]
        is_function = (
            len(following) == 2
            and following[0].kind is TokenKind.LPAREN
            and _is_keyword(following[1], "lambda")
        )
        # first definition wins; a redefinition is a runtime error anyway
        symbols.setdefault(
            name.value,
            SymbolDef(name.value, "function" if is_function else "var", name.line - 1, name.column),
        )
    return symbols


def build_index(text: str) -> DocumentIndex:
    lexer = make_lexer()
    tokens = lexer.lex(text)
    idx = DocumentIndex()

    for diag in lexer.diagnostics:
        idx.diagnostics.append(IndexDiagnostic(diag.message, diag.line - 1, diag.column, "warning"))

    for tok in tokens:
        if tok.kind is TokenKind.LPAREN:
            idx.paren_balance += 1
        elif tok.kind is TokenKind.RPAREN:
            idx.paren_balance -= 1

    try:
        parse(Environment(), tokens)
    except DriftError as e:
        line = getattr(e, "line", None)
        col = getattr(e, "column", None)
        idx.diagnostics.append(
            IndexDiagnostic(str(e), (line or 1) - 1, col or 0, "error")
        )

    idx.symbols = _scan_definitions(tokens)
    return idx
