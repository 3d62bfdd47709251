"""Single-pass compiler from tokens to thunks.

There is no syntax tree: each parenthesised expression is compiled straight
into a Thunk as it is parsed, and nested expressions become thunks captured
by their parent. Nothing runs until a thunk is invoked with an environment.

    program := expr*
    expr    := '(' form ')'
    form    := arith-form | keyword-form | call-form | <empty>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from drift import Element, LispValue
from drift.errors import DriftSyntaxError
from drift.reader.tokens import Token, TokenKind
from drift.evaluation.special_forms import ARITH_FORMS, SPECIAL_FORMS
from drift.types.environment import Environment
from drift.types.nil import Nil
from drift.types.value import Thunk, constant, deferred_lookup, invoke, is_function, resolve

logger = logging.getLogger(__name__)


class _ExpressionOver(Exception):
    """A ')' was reached where an element was expected."""


@dataclass
class Program:
    """The compiled top-level expressions of one source unit."""

    env: Environment
    expressions: list[Thunk] = field(default_factory=list)

    def run(self) -> list[LispValue]:
        """Invoke each expression in order against `env`."""
        return [expression(self.env) for expression in self.expressions]


class TokenStream:
    """Cursor over a token list."""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Token | None:
        return None if self.at_end() else self.tokens[self.pos]

    def at(self, kind: TokenKind) -> bool:
        tok = self.peek()
        return tok is not None and tok.kind is kind

    def advance(self, context: str = "") -> Token:
        if self.at_end():
            raise DriftSyntaxError(f"Unexpected end of input{context}", *self.last_position())
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def expect(self, kind: TokenKind, context: str) -> Token:
        if self.at_end():
            raise DriftSyntaxError(
                f"Unexpected token: expected: {kind.description} but reached end of input {context}",
                *self.last_position(),
            )
        tok = self.tokens[self.pos]
        if tok.kind is not kind:
            raise DriftSyntaxError(
                f"Unexpected token: expected: {kind.description} but got: {tok.kind.description} {context}",
                tok.line,
                tok.column,
            )
        self.pos += 1
        return tok

    def optional(self, kind: TokenKind) -> bool:
        """Consume the next token if it is of `kind`."""
        if self.at(kind):
            self.pos += 1
            return True
        return False

    def last_position(self) -> tuple[int | None, int | None]:
        if not self.tokens:
            return None, None
        last = self.tokens[-1]
        return last.line, last.column


class Compiler:
    def __init__(self, tokens: Sequence[Token]):
        self.stream = TokenStream(tokens)

    def compile_all(self) -> list[Thunk]:
        expressions = []
        while not self.stream.at_end():
            expressions.append(self.parse_expr())
        return expressions

    def parse_expr(self) -> Thunk:
        self.stream.expect(TokenKind.LPAREN, "when starting to parse an expression")
        head = self.stream.peek()
        if head is None:
            raise DriftSyntaxError("Unexpected end of input when parsing an expression",
                                   *self.stream.last_position())

        match head.kind:
            case TokenKind.ARITH:
                self.stream.advance()
                result = self.parse_arith_form(head)
            case TokenKind.KEYWORD:
                self.stream.advance()
                result = self.parse_keyword_form(head)
            case TokenKind.IDENTIFIER:
                self.stream.advance()
                result = self.parse_call_form(head)
            case TokenKind.RPAREN:
                result = constant(Nil, "()")
            case _:
                raise DriftSyntaxError(
                    f"An expression cannot start with {head.kind.description}: {head.value!r}",
                    head.line,
                    head.column,
                )

        self.stream.expect(TokenKind.RPAREN, "when trying to finish parsing an expression")
        return result

    def parse_element(self, lookup: bool = True) -> Element:
        """Compile one sub-element.

        In lookup mode an identifier becomes a deferred read of that name;
        otherwise (binding positions) its raw name is returned.
        """
        while self.stream.at(TokenKind.QUOTE):
            self.stream.advance()
        tok = self.stream.peek()
        if tok is None:
            raise DriftSyntaxError("Unexpected end of input while reading an element",
                                   *self.stream.last_position())

        match tok.kind:
            case TokenKind.INT | TokenKind.FLOAT | TokenKind.NUM | TokenKind.STR:
                self.stream.advance()
                return tok.value
            case TokenKind.IDENTIFIER:
                self.stream.advance()
                return deferred_lookup(tok.value) if lookup else tok.value
            case TokenKind.LPAREN:
                return self.parse_expr()
            case TokenKind.RPAREN:
                raise _ExpressionOver()
            case _:
                logger.debug("Skipping %s token %r at line %d", tok.kind.name, tok.value, tok.line)
                self.stream.advance()
                return self.parse_element(lookup)

    def parse_elements(self, binding_positions: int = 0) -> list[Element]:
        """Collect elements up to the closing ')', which is left unconsumed."""
        elements: list[Element] = []
        while not self.stream.at(TokenKind.RPAREN):
            try:
                elements.append(self.parse_element(lookup=len(elements) >= binding_positions))
            except _ExpressionOver:
                break
        return elements

    def parse_parameters(self) -> list[str]:
        self.stream.expect(TokenKind.LPAREN, "while seeking arguments for a lambda")
        parameters: list[str] = []
        while not self.stream.at(TokenKind.RPAREN):
            tok = self.stream.advance(" while reading lambda parameters")
            if tok.kind is not TokenKind.IDENTIFIER:
                raise DriftSyntaxError(
                    f"lambda parameters must be identifiers, got {tok.kind.description}: {tok.value!r}",
                    tok.line,
                    tok.column,
                )
            parameters.append(tok.value)
        self.stream.expect(TokenKind.RPAREN, "while seeking to end the arguments for a lambda")
        return parameters

    def parse_arith_form(self, head: Token) -> Thunk:
        elements = self.parse_elements()
        return ARITH_FORMS[head.value](elements)

    def parse_keyword_form(self, head: Token) -> Thunk:
        form = SPECIAL_FORMS.get(head.value)
        if form is None:
            raise DriftSyntaxError(f"{head.value} is reserved but has no form", head.line, head.column)
        if form.optional_prefix is not None:
            self.stream.optional(form.optional_prefix)
        parameters = self.parse_parameters() if form.takes_parameters else []
        elements = self.parse_elements(form.binding_positions)
        return form.build(elements, parameters)

    def parse_call_form(self, head: Token) -> Thunk:
        name: str = head.value
        elements = self.parse_elements()

        def call(env: Environment) -> LispValue:
            # the callee is looked up when the call runs, not when it is compiled
            callee = env.lookup(name)
            if not is_function(callee):
                return callee
            return invoke(callee, env, [resolve(element, env) for element in elements])

        return Thunk(call, f"call {name}")


def parse(env: Environment, tokens: Sequence[Token]) -> Program:
    """Compile every top-level expression of `tokens` into a Program bound to `env`.

    Nothing is evaluated.
    """
    return Program(env, Compiler(tokens).compile_all())
