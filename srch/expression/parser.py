"""Precedence-climbing parser for text expressions.

Grammar::

    expr     := or_expr
    or_expr  := and_expr ( "or" or_expr )?
    and_expr := atom ( "and" and_expr )?
    atom     := KEYWORD [ STRING | INTEGER ]

``and`` binds tighter than ``or`` and both are right-associative, so
``a and b or c`` is ``(a and b) or c`` and ``a or b or c`` is
``a or (b or c)``.
"""

import logging
from collections.abc import Sequence

from srch.expression.ast import And, Attribute, Expression, Or, Predicate
from srch.expression.errors import ParseError, ParseErrorKind
from srch.expression.lexer import tokenize
from srch.expression.tokens import Operator, Token, TokenKind

logger = logging.getLogger(__name__)

_NODES: dict[Operator, type[And] | type[Or]] = {
    Operator.AND: And,
    Operator.OR: Or,
}

_LOWEST = min(op.precedence for op in Operator)
_HIGHEST = max(op.precedence for op in Operator)

_LITERALS: dict[TokenKind, type] = {
    TokenKind.STRING: str,
    TokenKind.INTEGER: int,
}

_TYPE_NAMES: dict[type, str] = {str: "string", int: "integer"}


class Parser:
    """Builds an expression tree from a token sequence ending in END."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        if not tokens or tokens[-1].kind is not TokenKind.END:
            raise ValueError("Token sequence must end with an END token")
        self._tokens = tokens
        self._index = 0

    def parse(self) -> Expression:
        expression = self._parse_binary(_LOWEST)
        token = self._peek()
        if token.kind is not TokenKind.END:
            raise ParseError(
                ParseErrorKind.TRAILING_TOKENS,
                f"unexpected {token.describe()} after complete expression",
                token,
            )
        return expression

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind is not TokenKind.END:
            self._index += 1
        return token

    def _parse_binary(self, precedence: int) -> Expression:
        if precedence > _HIGHEST:
            return self._parse_atom()

        left = self._parse_binary(precedence + 1)
        token = self._peek()
        if token.kind is TokenKind.OPERATOR and token.value.precedence == precedence:  # type: ignore[union-attr]
            self._advance()
            # recursing at the same level makes the operator right-associative
            right = self._parse_binary(precedence)
            return _NODES[token.value](left, right)  # type: ignore[index]
        return left

    def _parse_atom(self) -> Predicate:
        token = self._advance()
        match token.kind:
            case TokenKind.KEYWORD:
                attribute: Attribute = token.value  # type: ignore[assignment]
            case TokenKind.END:
                raise ParseError(
                    ParseErrorKind.UNEXPECTED_END, "expected an attribute keyword", token
                )
            case _:
                raise ParseError(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    f"expected an attribute keyword, found {token.describe()}",
                    token,
                )

        expected = attribute.argument_type
        if expected is None:
            return Predicate(attribute)

        argument = self._peek()
        actual = _LITERALS.get(argument.kind)
        if actual is None:
            raise ParseError(
                ParseErrorKind.MISSING_ARGUMENT,
                f"'{attribute.value}' requires a {_TYPE_NAMES[expected]} argument, "
                f"found {argument.describe()}",
                argument,
            )
        if actual is not expected:
            raise ParseError(
                ParseErrorKind.TYPE_MISMATCH,
                f"'{attribute.value}' requires a {_TYPE_NAMES[expected]} argument, "
                f"found {argument.describe()}",
                argument,
            )
        self._advance()
        return Predicate(attribute, argument.value)


def parse(source: str) -> Expression:
    """Parse a text expression.

    Args:
        source: Expression text, e.g. ``'starts "foo" and length 5'``.

    Returns:
        The root of the expression tree.

    Raises:
        LexError: If the source cannot be tokenized.
        ParseError: If the tokens do not form a valid expression.
    """
    logger.debug("Parsing expression: %s", source)
    expression = Parser(tokenize(source)).parse()
    logger.debug("Parsed: %s", expression)
    return expression
