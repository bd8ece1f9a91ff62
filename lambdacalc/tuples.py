"""Lambda-encoded n-tuples and their projections."""

from __future__ import annotations

from lambdacalc.term import Term, Var, abs_n, app, app_all, lam


def make_tuple(first: Term, *args: Term) -> Term:
    """Build a lambda-encoded tuple of two or more terms."""
    if not args:
        raise TypeError("a tuple needs at least two elements")
    return lam(app_all(Var(1), first, *args))


def pi(i: int, n: int) -> Term:
    """Projection yielding the i-th (one-indexed) element of an n-tuple."""
    if not 1 <= i <= n:
        raise ValueError(f"projection index {i} is outside 1..{n}")
    return lam(app(Var(1), abs_n(n, Var(n + 1 - i))))