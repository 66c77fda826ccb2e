# srch/__init__.py
"""srch - Readable text expressions for filtering lines and words."""

from srch.expression import (
    And,
    Attribute,
    Expression,
    ExpressionError,
    LexError,
    Or,
    ParseError,
    Predicate,
    alpha,
    alphanumeric,
    contains,
    ends,
    equals,
    evaluate,
    length,
    numeric,
    parse,
    special,
    starts,
)
from srch.models import FilterResult, Match, Mode, ReplaceResult, Selection
from srch.select import filter_units, ignore_units, replace_units, select, split_units

__all__ = [
    # Expressions
    "Expression",
    "Predicate",
    "And",
    "Or",
    "Attribute",
    "starts",
    "ends",
    "contains",
    "equals",
    "length",
    "numeric",
    "alpha",
    "alphanumeric",
    "special",
    "parse",
    "evaluate",
    # Errors
    "ExpressionError",
    "LexError",
    "ParseError",
    # Models
    "Mode",
    "Selection",
    "Match",
    "FilterResult",
    "ReplaceResult",
    # Selection
    "select",
    "split_units",
    "filter_units",
    "ignore_units",
    "replace_units",
]
