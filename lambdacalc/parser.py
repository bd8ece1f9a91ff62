"""A parser for lambda expressions in classic or De Bruijn notation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence as SequenceType
from typing import Union

from lambdacalc.term import Notation, Term, Var, abs_n, app

_HEX_DIGITS = "0123456789abcdefABCDEF"
_LAMBDAS = ("\\", "λ")
_NAME_TAIL = re.compile(r"[^\s()]*")


class ParseError(Exception):
    """Raised when a lambda expression cannot be parsed."""


class InvalidCharacterError(ParseError):
    """A lexical error: the input holds a character that does not belong."""

    def __init__(self, index: int, char: str) -> None:
        super().__init__(f"invalid character {char!r} at index {index}")
        self.index = index
        self.char = char


class InvalidExpressionError(ParseError):
    """A syntax error: the expression is invalid."""

    def __init__(self) -> None:
        super().__init__("invalid expression")


class EmptyExpressionError(ParseError):
    """A syntax error: the expression (or a part of it) is empty."""

    def __init__(self) -> None:
        super().__init__("empty expression")


class TokenKind(Enum):
    """Kinds of tokens in De Bruijn notation."""

    LAMBDA = "lambda"
    LPAREN = "("
    RPAREN = ")"
    NUMBER = "number"


@dataclass(frozen=True)
class Token:
    """A De Bruijn token; ``value`` holds the index of a NUMBER token."""

    kind: TokenKind
    value: int | None = None


class ClassicKind(Enum):
    """Kinds of tokens in classic notation."""

    LAMBDA = "lambda"
    LPAREN = "("
    RPAREN = ")"
    NAME = "name"


@dataclass(frozen=True)
class ClassicToken:
    """A classic-notation token; ``name`` holds a bound or used identifier."""

    kind: ClassicKind
    name: str = ""


@dataclass(frozen=True)
class Abstraction:
    """An abstraction marker in the syntax tree."""


@dataclass(frozen=True)
class Variable:
    """A variable with a De Bruijn index in the syntax tree."""

    index: int


@dataclass(frozen=True)
class Sequence:
    """A sequence of expressions in the syntax tree."""

    items: tuple[Expression, ...]


Expression = Union[Abstraction, Sequence, Variable]


def tokenize_dbr(text: str) -> list[Token]:
    """Split De Bruijn notation into tokens; whitespace is ignored."""
    tokens: list[Token] = []
    for index, char in enumerate(text):
        if char in _LAMBDAS:
            tokens.append(Token(TokenKind.LAMBDA))
        elif char == "(":
            tokens.append(Token(TokenKind.LPAREN))
        elif char == ")":
            tokens.append(Token(TokenKind.RPAREN))
        elif char in _HEX_DIGITS:
            tokens.append(Token(TokenKind.NUMBER, int(char, 16)))
        elif not char.isspace():
            raise InvalidCharacterError(index, char)
    return tokens


def tokenize_cla(text: str) -> list[ClassicToken]:
    """Split classic notation into tokens."""
    tokens: list[ClassicToken] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        pos += 1
        if char in _LAMBDAS:
            name_chars: list[str] = []
            while pos < len(text):
                c = text[pos]
                pos += 1
                if c == ".":
                    break
                if not c.isalpha():
                    raise InvalidCharacterError(pos - 1, c)
                name_chars.append(c)
            tokens.append(ClassicToken(ClassicKind.LAMBDA, "".join(name_chars)))
        elif char == "(":
            tokens.append(ClassicToken(ClassicKind.LPAREN))
        elif char == ")":
            tokens.append(ClassicToken(ClassicKind.RPAREN))
        elif char.isspace():
            continue
        elif char.isalpha():
            tail = _NAME_TAIL.match(text, pos)
            assert tail is not None
            pos = tail.end()
            tokens.append(ClassicToken(ClassicKind.NAME, char + tail.group()))
        else:
            raise InvalidCharacterError(pos - 1, char)
    return tokens


def convert_classic_tokens(tokens: SequenceType[ClassicToken]) -> list[Token]:
    """Turn classic tokens into De Bruijn tokens by resolving names."""
    stack: list[str] = []
    pos = 0

    def convert() -> list[Token]:
        nonlocal pos
        output: list[Token] = []
        bound_here = 0
        while pos < len(tokens):
            token = tokens[pos]
            if token.kind is ClassicKind.LAMBDA:
                output.append(Token(TokenKind.LAMBDA))
                stack.append(token.name)
                bound_here += 1
            elif token.kind is ClassicKind.LPAREN:
                output.append(Token(TokenKind.LPAREN))
                pos += 1
                output.extend(convert())
            elif token.kind is ClassicKind.RPAREN:
                output.append(Token(TokenKind.RPAREN))
                del stack[len(stack) - bound_here:]
                return output
            else:
                index = next(
                    (n for n, bound in enumerate(reversed(stack), 1) if bound == token.name),
                    len(stack) + 1,
                )
                output.append(Token(TokenKind.NUMBER, index))
            pos += 1
        return output

    return convert()


def get_ast(tokens: SequenceType[Token]) -> Expression:
    """Build a syntax tree from De Bruijn tokens."""
    if not tokens:
        raise EmptyExpressionError()
    pos = 0

    def build() -> Sequence:
        nonlocal pos
        items: list[Expression] = []
        while pos < len(tokens):
            token = tokens[pos]
            if token.kind is TokenKind.LAMBDA:
                items.append(Abstraction())
            elif token.kind is TokenKind.NUMBER:
                items.append(Variable(token.value or 0))
            elif token.kind is TokenKind.LPAREN:
                pos += 1
                items.append(build())
            else:
                return Sequence(tuple(items))
            pos += 1
        return Sequence(tuple(items))

    return build()


def fold_exprs(exprs: SequenceType[Expression]) -> Term:
    """Fold a sequence of syntax tree nodes into a term."""
    depth = 0
    terms: list[Term] = []
    for expr in exprs:
        if isinstance(expr, Abstraction):
            depth += 1
        elif isinstance(expr, Variable):
            terms.append(Var(expr.index))
        else:
            terms.append(fold_exprs(expr.items))
    return abs_n(depth, _fold_terms(terms))


def _fold_terms(terms: list[Term]) -> Term:
    if not terms:
        raise EmptyExpressionError()
    first, *rest = terms
    for term in rest:
        first = app(first, term)
    return first


def parse(text: str, notation: Notation) -> Term:
    """Parse text as a lambda term written in the given notation.

    Lambdas may be written as 'λ' or a backslash. Classic identifiers are
    alphabetic; De Bruijn indices are single hexadecimal digits starting at 1.
    """
    if notation is Notation.DE_BRUIJN:
        tokens = tokenize_dbr(text)
    else:
        tokens = convert_classic_tokens(tokenize_cla(text))
    ast = get_ast(tokens)
    if not isinstance(ast, Sequence):
        raise InvalidExpressionError()
    return fold_exprs(ast.items)