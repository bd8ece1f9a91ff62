# lambdacalc

A small, dependency-free implementation of the pure untyped lambda calculus.
Terms use De Bruijn indices starting at 1. You can build them directly, parse
them from classic notation (`λx.x`) or De Bruijn notation (`λ1`), print them in
either notation, and beta-reduce them with any of seven evaluation orders.

## Installation

From a checkout of the project:

```
pip install .
```

Python 3.10 or later is required.

## Building terms (`lambdacalc.term`)

```python
from lambdacalc.term import Var, lam, app, app_all, abs_n, Notation

zero = abs_n(2, Var(1))
succ = abs_n(3, app(Var(2), app_all(Var(3), Var(2), Var(1))))

print(succ.show(Notation.CLASSIC))    # λa.λb.λc.b (a b c)
print(succ.show(Notation.DE_BRUIJN))  # λλλ2(321)
print(zero)                           # λa.λb.b
```

- `Var`, `Abs` and `App` are the three kinds of `Term`. They are frozen
  dataclasses, so terms compare by structure and can be hashed.
- `Var(index)` raises `ValueError` for a negative index. `Var(0)`, also
  available as `UD`, stands for an undefined term and is shown as `undefined`.
- `lam(term)` wraps a term in one abstraction, `abs_n(n, term)` in `n` of them.
- `app(lhs, rhs)` builds an application; `app_all(first, *args)` applies a term
  to several arguments from left to right and raises `TypeError` when given no
  arguments.
- `Term.unvar()`, `unabs()`, `unapp()`, `lhs()` and `rhs()` take a term apart
  and raise `TermError` when the term is of the wrong kind.
- `Term.is_supercombinator()` tells whether a term has no free variables.
- `Term.show(notation)` renders a term in `Notation.CLASSIC` (the default, also
  used by `str()`) or `Notation.DE_BRUIJN`. Classic names are letters chosen by
  binding depth: `a`, `b`, `c`, ...

## Parsing (`lambdacalc.parser`)

```python
from lambdacalc.parser import parse
from lambdacalc.term import Notation

y = parse("λf.(λx.f (x x)) (λx.f (x x))", Notation.CLASSIC)
s = parse(r"\\\3 1 (2 1)", Notation.DE_BRUIJN)
```

- Lambdas may be written as `λ` or `\`.
- In classic notation a binder is a lambda, alphabetic characters and a dot
  (`λx.`); identifiers are alphabetic. A name not bound by any enclosing lambda
  becomes a free variable.
- In De Bruijn notation every index is a single hexadecimal digit and all
  whitespace is ignored.
- Malformed input raises a subclass of `ParseError`:
  `InvalidCharacterError` (with `index` and `char` attributes),
  `InvalidExpressionError`, or `EmptyExpressionError` (for empty input or an
  empty pair of parentheses).

The intermediate steps are public too: `tokenize_dbr` and `tokenize_cla`
produce `Token` and `ClassicToken` lists, `convert_classic_tokens` turns
classic tokens into De Bruijn tokens, `get_ast` builds a tree of
`Abstraction`, `Variable` and `Sequence` nodes, and `fold_exprs` folds such
nodes into a `Term`.

## Reduction (`lambdacalc.reduction`)

```python
from lambdacalc.parser import parse
from lambdacalc.reduction import Order, beta, reduce
from lambdacalc.term import Notation

expr = parse("(λa.λb.λc.b (a b c)) (λa.λb.b)", Notation.CLASSIC)
print(beta(expr, Order.NOR, 0))        # λa.λb.a b

term, steps = reduce(expr, Order.HAP, 0)
```

`beta(term, order, limit=0)` returns the reduced term; `reduce(term, order,
limit=0)` returns the reduced term together with the number of reductions
performed. A `limit` of `0` means no limit; a negative limit raises
`ValueError`. Terms are immutable, so the input term is never changed.

Orders (`str(order)` gives the name in brackets):

- `NOR` (normal): leftmost outermost
- `CBN` (call-by-name): leftmost outermost, to weak head normal form
- `HSP` (head spine): to head normal form
- `HNO` (hybrid normal): a mix of head spine and normal order
- `APP` (applicative): leftmost innermost; does not terminate on terms such as the Y combinator
- `CBV` (call-by-value): leftmost innermost, to weak normal form
- `HAP` (hybrid applicative): a mix of call-by-value and applicative order, usually the fastest normalising one

`apply(term, rhs)` substitutes `rhs` for the outermost bound variable of an
abstraction and returns its body; it raises `TermError` when `term` is not an
abstraction.

Reduction is recursive, so very deep terms or very long reductions can exceed
Python's recursion limit.

## Tuples (`lambdacalc.tuples`)

```python
from lambdacalc.reduction import Order, beta
from lambdacalc.term import Var, app
from lambdacalc.tuples import make_tuple, pi

t = make_tuple(Var(1), Var(2), Var(3))
second = beta(app(pi(2, 3), t), Order.NOR, 0)
```

`make_tuple(first, *args)` builds an n-tuple of two or more terms and raises
`TypeError` when given only one. `pi(i, n)` is the projection of the
one-indexed `i`-th element of an n-tuple and raises `ValueError` unless
`1 <= i <= n`.

## What the package does not do

It provides terms, parsing, printing, reduction and tuples only. There is no
ready-made library of encoded data (numerals, booleans, pairs, lists, options)
or of named combinators, and no command-line program or interactive
evaluator; such terms have to be built or parsed by hand.

## Running the tests

```
pip install ".[test]"
pytest
```