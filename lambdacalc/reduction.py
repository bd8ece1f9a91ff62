"""Beta reduction of lambda terms under several evaluation orders."""

from __future__ import annotations

from enum import Enum

from lambdacalc.term import Abs, App, Term, TermError, Var


class Order(Enum):
    """The evaluation order of beta reductions.

    NOR, HNO, APP and HAP reduce to normal form (APP diverges on terms such
    as the Y combinator); CBN reduces to weak head normal form, CBV to weak
    normal form and HSP to head normal form.
    """

    NOR = "normal"
    CBN = "call-by-name"
    HSP = "head spine"
    HNO = "hybrid normal"
    APP = "applicative"
    CBV = "call-by-value"
    HAP = "hybrid applicative"

    def __str__(self) -> str:
        return self.value


def _shift_free(term: Term, added: int, own_depth: int) -> Term:
    if isinstance(term, Var):
        return Var(term.index + added) if term.index > own_depth else term
    if isinstance(term, Abs):
        return Abs(_shift_free(term.body, added, own_depth + 1))
    if isinstance(term, App):
        return App(
            _shift_free(term.left, added, own_depth),
            _shift_free(term.right, added, own_depth),
        )
    raise TypeError(f"not a lambda term: {term!r}")


def _substitute(term: Term, rhs: Term, depth: int) -> Term:
    if isinstance(term, Var):
        if term.index == depth:
            return _shift_free(rhs, depth - 1, 0)
        if term.index > depth:
            return Var(term.index - 1)
        return term
    if isinstance(term, Abs):
        return Abs(_substitute(term.body, rhs, depth + 1))
    if isinstance(term, App):
        return App(_substitute(term.left, rhs, depth), _substitute(term.right, rhs, depth))
    raise TypeError(f"not a lambda term: {term!r}")


def apply(term: Term, rhs: Term) -> Term:
    """Apply rhs to the abstraction term by substitution.

    Raises TermError if term is not an abstraction.
    """
    if not isinstance(term, Abs):
        raise TermError("the term is not an abstraction")
    return _substitute(term, rhs, 0).unabs()


class _Reducer:
    """Carries the reduction limit and the running count of reductions."""

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("the reduction limit cannot be negative")
        self.limit = limit
        self.count = 0

    def exhausted(self) -> bool:
        return self.limit != 0 and self.count == self.limit

    def reducible(self, term: App) -> bool:
        return isinstance(term.left, Abs) and (self.limit == 0 or self.count < self.limit)

    def eval(self, term: App) -> Term:
        self.count += 1
        return apply(term.left, term.right)

    def cbn(self, term: Term) -> Term:
        while True:
            if self.exhausted() or not isinstance(term, App):
                return term
            term = App(self.cbn(term.left), term.right)
            if not self.reducible(term):
                return term
            term = self.eval(term)

    def nor(self, term: Term) -> Term:
        while True:
            if self.exhausted():
                return term
            if isinstance(term, Abs):
                return Abs(self.nor(term.body))
            if not isinstance(term, App):
                return term
            term = App(self.cbn(term.left), term.right)
            if self.reducible(term):
                term = self.eval(term)
                continue
            left = self.nor(term.left)
            return App(left, self.nor(term.right))

    def cbv(self, term: Term) -> Term:
        while True:
            if self.exhausted() or not isinstance(term, App):
                return term
            left = self.cbv(term.left)
            term = App(left, self.cbv(term.right))
            if not self.reducible(term):
                return term
            term = self.eval(term)

    def app(self, term: Term) -> Term:
        while True:
            if self.exhausted():
                return term
            if isinstance(term, Abs):
                return Abs(self.app(term.body))
            if not isinstance(term, App):
                return term
            left = self.app(term.left)
            term = App(left, self.app(term.right))
            if not self.reducible(term):
                return term
            term = self.eval(term)

    def hap(self, term: Term) -> Term:
        while True:
            if self.exhausted():
                return term
            if isinstance(term, Abs):
                return Abs(self.hap(term.body))
            if not isinstance(term, App):
                return term
            left = self.cbv(term.left)
            term = App(left, self.hap(term.right))
            if self.reducible(term):
                term = self.eval(term)
                continue
            return App(self.hap(term.left), term.right)

    def hsp(self, term: Term) -> Term:
        while True:
            if self.exhausted():
                return term
            if isinstance(term, Abs):
                return Abs(self.hsp(term.body))
            if not isinstance(term, App):
                return term
            term = App(self.hsp(term.left), term.right)
            if not self.reducible(term):
                return term
            term = self.eval(term)

    def hno(self, term: Term) -> Term:
        while True:
            if self.exhausted():
                return term
            if isinstance(term, Abs):
                return Abs(self.hno(term.body))
            if not isinstance(term, App):
                return term
            term = App(self.hsp(term.left), term.right)
            if self.reducible(term):
                term = self.eval(term)
                continue
            left = self.hno(term.left)
            return App(left, self.hno(term.right))


_STRATEGIES = {
    Order.NOR: _Reducer.nor,
    Order.CBN: _Reducer.cbn,
    Order.HSP: _Reducer.hsp,
    Order.HNO: _Reducer.hno,
    Order.APP: _Reducer.app,
    Order.CBV: _Reducer.cbv,
    Order.HAP: _Reducer.hap,
}


def reduce(term: Term, order: Order, limit: int = 0) -> tuple[Term, int]:
    """Beta-reduce term in the given order, at most limit times (0: no limit).

    Returns the reduced term and the number of reductions performed.
    """
    reducer = _Reducer(limit)
    result = _STRATEGIES[order](reducer, term)
    return result, reducer.count


def beta(term: Term, order: Order, limit: int = 0) -> Term:
    """Beta-reduce term in the given order, at most limit times (0: no limit)."""
    return reduce(term, order, limit)[0]