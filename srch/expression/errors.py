"""Errors raised while compiling a text expression.

Every error is detected before evaluation starts; evaluating a parsed
expression never raises.
"""

from enum import Enum

from srch.expression.tokens import Token


class ExpressionError(ValueError):
    """Base class for invalid text expressions.

    Attributes:
        message: Description of the problem, without location.
        position: Character offset into the expression source.
    """

    def __init__(self, message: str, position: int) -> None:
        self.message = message
        self.position = position
        super().__init__(f"{message} at position {position}")


class LexErrorKind(Enum):
    UNKNOWN_KEYWORD = "unknown keyword"
    UNTERMINATED_STRING = "unterminated string"
    INVALID_INTEGER = "invalid integer"
    UNEXPECTED_CHARACTER = "unexpected character"


class LexError(ExpressionError):
    """The expression source could not be split into tokens."""

    def __init__(self, kind: LexErrorKind, text: str, position: int) -> None:
        self.kind = kind
        self.text = text
        super().__init__(f"{kind.value} {text!r}", position)


class ParseErrorKind(Enum):
    MISSING_ARGUMENT = "missing argument"
    TYPE_MISMATCH = "type mismatch"
    UNEXPECTED_END = "unexpected end"
    TRAILING_TOKENS = "trailing tokens"
    UNEXPECTED_TOKEN = "unexpected token"


class ParseError(ExpressionError):
    """The token sequence does not form a valid expression."""

    def __init__(self, kind: ParseErrorKind, detail: str, token: Token) -> None:
        self.kind = kind
        self.token = token
        super().__init__(f"{kind.value}: {detail}", token.position)
