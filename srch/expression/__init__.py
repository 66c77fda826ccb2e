from .ast import (
    And,
    Attribute,
    Expression,
    Or,
    Predicate,
    alpha,
    alphanumeric,
    contains,
    ends,
    equals,
    length,
    numeric,
    render_tree,
    special,
    starts,
)
from .errors import (
    ExpressionError,
    LexError,
    LexErrorKind,
    ParseError,
    ParseErrorKind,
)
from .evaluator import evaluate
from .lexer import tokenize
from .parser import parse
from .tokens import Operator, Token, TokenKind

__all__ = [
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
    "render_tree",
    "ExpressionError",
    "LexError",
    "LexErrorKind",
    "ParseError",
    "ParseErrorKind",
    "Token",
    "TokenKind",
    "Operator",
    "tokenize",
    "parse",
    "evaluate",
]
