"""Pure untyped lambda calculus: terms, parsing, beta reduction and tuples."""

__version__ = "3.1.0"

__all__ = ["term", "tuples", "parser", "reduction"]