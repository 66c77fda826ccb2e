# srch/expression/lexer.py
import logging
from collections.abc import Iterator

from srch.expression.ast import Attribute
from srch.expression.errors import LexError, LexErrorKind
from srch.expression.tokens import Operator, Token, TokenKind

logger = logging.getLogger(__name__)

WHITESPACE = " \t\r\n"

KEYWORDS: dict[str, Attribute | Operator] = {
    **{attribute.value: attribute for attribute in Attribute},
    **{operator.value: operator for operator in Operator},
}


class Lexer:
    """Splits expression source into tokens, ending with an END token.

    A Lexer instance is single-use; create a new one for every source string.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        while True:
            self._skip_whitespace()
            if self._pos >= len(self.source):
                yield Token(TokenKind.END, position=self._pos)
                return
            yield self._next_token()

    def _skip_whitespace(self) -> None:
        while self._pos < len(self.source) and self.source[self._pos] in WHITESPACE:
            self._pos += 1

    def _next_token(self) -> Token:
        char = self.source[self._pos]
        if char.isalpha():
            return self._read_keyword()
        if char == '"':
            return self._read_string()
        if "0" <= char <= "9":
            return self._read_integer()
        if char in "()":
            self._pos += 1
            kind = TokenKind.LPAREN if char == "(" else TokenKind.RPAREN
            return Token(kind, position=self._pos - 1)
        raise LexError(LexErrorKind.UNEXPECTED_CHARACTER, char, self._pos)

    def _read_keyword(self) -> Token:
        start = self._pos
        while self._pos < len(self.source) and self.source[self._pos].isalpha():
            self._pos += 1
        word = self.source[start : self._pos]

        match KEYWORDS.get(word):
            case Attribute() as attribute:
                return Token(TokenKind.KEYWORD, attribute, start)
            case Operator() as operator:
                return Token(TokenKind.OPERATOR, operator, start)
            case _:
                raise LexError(LexErrorKind.UNKNOWN_KEYWORD, word, start)

    def _read_string(self) -> Token:
        start = self._pos
        self._pos += 1  # opening quote
        chars: list[str] = []
        while self._pos < len(self.source):
            char = self.source[self._pos]
            if char == '"':
                self._pos += 1
                return Token(TokenKind.STRING, "".join(chars), start)
            if char == "\\" and self._pos + 1 < len(self.source):
                escaped = self.source[self._pos + 1]
                # \" is the only escape; any other pair is kept verbatim
                chars.append('"' if escaped == '"' else char + escaped)
                self._pos += 2
                continue
            chars.append(char)
            self._pos += 1
        raise LexError(LexErrorKind.UNTERMINATED_STRING, self.source[start:], start)

    def _read_integer(self) -> Token:
        start = self._pos
        while self._pos < len(self.source) and "0" <= self.source[self._pos] <= "9":
            self._pos += 1
        digits = self.source[start : self._pos]
        if len(digits) > 1 and digits[0] == "0":
            raise LexError(LexErrorKind.INVALID_INTEGER, digits, start)
        return Token(TokenKind.INTEGER, _to_int(digits), start)


def _to_int(digits: str) -> int:
    try:
        return int(digits)
    except ValueError:
        # int() caps the digit count of str conversions
        value = 0
        for digit in digits:
            value = value * 10 + int(digit)
        return value


def tokenize(source: str) -> list[Token]:
    """Tokenize expression source.

    Raises:
        LexError: On unknown keywords, unterminated strings, integers with a
            leading zero, or characters outside the expression alphabet.
    """
    tokens = list(Lexer(source))
    logger.debug("Lexed %s tokens from %r", len(tokens), source)
    return tokens
