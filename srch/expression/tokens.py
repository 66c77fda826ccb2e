# srch/expression/tokens.py
from dataclasses import dataclass
from enum import Enum

from srch.expression.ast import Attribute, format_integer


class Operator(Enum):
    """Logical operators, with their binding strength."""

    AND = "and"
    OR = "or"

    @property
    def precedence(self) -> int:
        return 2 if self is Operator.AND else 1


class TokenKind(Enum):
    KEYWORD = "keyword"
    OPERATOR = "operator"
    STRING = "string"
    INTEGER = "integer"
    LPAREN = "("
    RPAREN = ")"
    END = "end"


@dataclass(frozen=True)
class Token:
    """A lexical token and the character offset where it starts."""

    kind: TokenKind
    value: Attribute | Operator | str | int | None = None
    position: int = 0

    def describe(self) -> str:
        """Short human-readable form used in error messages."""
        match self.kind:
            case TokenKind.KEYWORD | TokenKind.OPERATOR:
                return f"'{self.value.value}'"  # type: ignore[union-attr]
            case TokenKind.STRING:
                return f"string literal {self.value!r}"
            case TokenKind.INTEGER:
                return f"integer literal {format_integer(self.value)}"  # type: ignore[arg-type]
            case TokenKind.END:
                return "end of expression"
            case _:
                return f"'{self.kind.value}'"
