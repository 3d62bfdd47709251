from __future__ import annotations

import logging
import os
from typing import Iterable, TextIO

from drift import LispValue
from drift.config import resolve_source
from drift.evaluation.compiler import Program, parse
from drift.reader.lexer import make_lexer
from drift.reader.tokens import LISP_KEYWORDS
from drift.builtins import standard_environment
from drift.types.environment import Environment
from drift.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Hosts the language: registers keywords with the lexer, owns the base
    environment, and compiles and runs source units against it. Definitions
    made by one unit are visible to the units loaded after it.

    Only the most recently run Program is kept, as `last_program`.
    """

    def __init__(self, env: Environment | None = None, keywords: Iterable[str] = LISP_KEYWORDS):
        self.lexer = make_lexer(keywords)
        self.env: Environment = env if env is not None else standard_environment()
        self.last_program: Program | None = None

    def compile(self, source: str | TextIO) -> Program:
        """Lex and compile `source` against the base environment without running it."""
        tokens = self.lexer.lex(source)
        return parse(self.env, tokens)

    def load_file(self, name: str | os.PathLike) -> Program:
        """Load a named source unit: lex, compile, then run every expression in order."""
        path = resolve_source(name)
        logger.debug("Loading %s", path)
        tokens = self.lexer.lex_file(path)
        program = parse(self.env, tokens)
        self.last_program = program
        program.run()
        return program

    def eval_all(self, code: str | TextIO) -> list[LispValue]:
        """Compile and run `code`, returning the value of each top-level expression."""
        program = self.compile(code)
        self.last_program = program
        return program.run()

    def eval(self, code: str | TextIO) -> LispValue:
        """Compile and run `code`, returning the value of its last expression."""
        results = self.eval_all(code)
        if not results:
            return Nil
        return results[-1]
