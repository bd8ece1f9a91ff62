"""Lambda terms using De Bruijn indices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

LAMBDA = "λ"


class Notation(Enum):
    """The notation used for parsing and displaying terms."""

    CLASSIC = "classic"
    DE_BRUIJN = "debruijn"


class TermError(Exception):
    """Raised when an operation does not fit the kind of term it is given."""


class Term:
    """A lambda term: a variable, an abstraction or an application."""

    __slots__ = ()

    def unvar(self) -> int:
        """Return a variable's De Bruijn index."""
        if isinstance(self, Var):
            return self.index
        raise TermError("the term is not a variable")

    def unabs(self) -> Term:
        """Return the body of an abstraction."""
        if isinstance(self, Abs):
            return self.body
        raise TermError("the term is not an abstraction")

    def unapp(self) -> tuple[Term, Term]:
        """Return both sides of an application."""
        if isinstance(self, App):
            return self.left, self.right
        raise TermError("the term is not an application")

    def lhs(self) -> Term:
        """Return the left-hand side of an application."""
        return self.unapp()[0]

    def rhs(self) -> Term:
        """Return the right-hand side of an application."""
        return self.unapp()[1]

    def is_supercombinator(self) -> bool:
        """Return True if the term has no free variables."""
        stack: list[tuple[int, Term]] = [(0, self)]
        while stack:
            depth, term = stack.pop()
            if isinstance(term, Var):
                if term.index > depth:
                    return False
            elif isinstance(term, Abs):
                stack.append((depth + 1, term.body))
            elif isinstance(term, App):
                stack.append((depth, term.left))
                stack.append((depth, term.right))
        return True

    def show(self, notation: Notation = Notation.CLASSIC) -> str:
        """Render the term in the given notation."""
        if notation is Notation.DE_BRUIJN:
            return _show_dbr(self, 0)
        return _show_cla(self, 0, 0)

    def __str__(self) -> str:
        return self.show(Notation.CLASSIC)


@dataclass(frozen=True, slots=True)
class Var(Term):
    """A variable with a De Bruijn index (0 stands for an undefined term)."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("a De Bruijn index cannot be negative")


@dataclass(frozen=True, slots=True)
class Abs(Term):
    """An abstraction over a term."""

    body: Term


@dataclass(frozen=True, slots=True)
class App(Term):
    """An application of one term to another."""

    left: Term
    right: Term


UD = Var(0)


def lam(term: Term) -> Term:
    """Wrap a term in an abstraction."""
    return Abs(term)


def app(lhs: Term, rhs: Term) -> Term:
    """Apply one term to another without reducing."""
    return App(lhs, rhs)


def app_all(first: Term, *args: Term) -> Term:
    """Apply a term to several arguments, left to right."""
    if not args:
        raise TypeError("app_all needs at least one argument to apply")
    term = first
    for arg in args:
        term = App(term, arg)
    return term


def abs_n(n: int, term: Term) -> Term:
    """Wrap a term in n abstractions."""
    for _ in range(n):
        term = Abs(term)
    return term


def _parenthesize_if(text: str, condition: bool) -> str:
    return f"({text})" if condition else text


def _show_cla(term: Term, context: int, depth: int) -> str:
    if isinstance(term, Var):
        i = term.index
        if i == 0:
            return "undefined"
        if depth >= i:
            return chr(depth + 97 - i)
        return chr(96 + i)
    if isinstance(term, Abs):
        text = f"{LAMBDA}{chr(depth + 97)}.{_show_cla(term.body, 0, depth + 1)}"
        return _parenthesize_if(text, context > 1)
    if isinstance(term, App):
        text = f"{_show_cla(term.left, 2, depth)} {_show_cla(term.right, 3, depth)}"
        return _parenthesize_if(text, context == 3)
    raise TypeError(f"not a lambda term: {term!r}")


def _show_dbr(term: Term, context: int) -> str:
    if isinstance(term, Var):
        if term.index == 0:
            return "undefined"
        return format(term.index, "X")
    if isinstance(term, Abs):
        text = f"{LAMBDA}{_show_dbr(term.body, 0)}"
        return _parenthesize_if(text, context > 1)
    if isinstance(term, App):
        text = f"{_show_dbr(term.left, 2)}{_show_dbr(term.right, 3)}"
        return _parenthesize_if(text, context == 3)
    raise TypeError(f"not a lambda term: {term!r}")