import pytest

from srch.expression.ast import And, Or, alpha, length, numeric, special, starts
from srch.expression.errors import LexError, ParseError, ParseErrorKind
from srch.expression.parser import Parser, parse
from srch.expression.tokens import Token, TokenKind


def test_parse_single_predicate():
    q = parse("numeric")
    assert q == numeric()


def test_parse_string_argument():
    q = parse('starts "foo"')
    assert q == starts("foo")


def test_parse_integer_argument():
    q = parse("length 10")
    assert q == length(10)


def test_parse_and():
    q = parse('starts "FOO" and length 5')
    assert isinstance(q, And)
    assert q.left == starts("FOO")
    assert q.right == length(5)


def test_parse_or():
    q = parse("numeric or alpha")
    assert q == Or(numeric(), alpha())


# Placeholder atoms: 1..5 stand for length 1..length 5
@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("length 1 or length 2", Or(length(1), length(2))),
        (
            "length 1 and length 2 or length 3",
            Or(And(length(1), length(2)), length(3)),
        ),
        (
            "length 1 or length 2 and length 3",
            Or(length(1), And(length(2), length(3))),
        ),
        (
            "length 1 and length 2 and length 3",
            And(length(1), And(length(2), length(3))),
        ),
        (
            "length 1 or length 2 or length 3",
            Or(length(1), Or(length(2), length(3))),
        ),
        (
            "length 1 or length 2 or length 3 and length 4 or length 5",
            Or(length(1), Or(length(2), Or(And(length(3), length(4)), length(5)))),
        ),
    ],
)
def test_precedence_and_associativity(source, expected):
    assert parse(source) == expected


def test_parse_ignores_surrounding_whitespace():
    assert parse("   numeric \t or   alpha   ") == Or(numeric(), alpha())


def test_parse_escaped_quote():
    q = parse(r'equals "\"Quoted Text\""')
    assert q.argument == '"Quoted Text"'


class TestParseErrors:
    def test_missing_string_argument(self):
        with pytest.raises(ParseError) as exc:
            parse("starts")
        assert exc.value.kind is ParseErrorKind.MISSING_ARGUMENT
        assert exc.value.position == 6

    def test_missing_argument_before_operator(self):
        with pytest.raises(ParseError) as exc:
            parse("starts and numeric")
        assert exc.value.kind is ParseErrorKind.MISSING_ARGUMENT
        assert exc.value.token.kind is TokenKind.OPERATOR

    def test_string_where_integer_expected(self):
        with pytest.raises(ParseError) as exc:
            parse('length "5"')
        assert exc.value.kind is ParseErrorKind.TYPE_MISMATCH
        assert exc.value.position == 7

    def test_integer_where_string_expected(self):
        with pytest.raises(ParseError) as exc:
            parse("contains 5")
        assert exc.value.kind is ParseErrorKind.TYPE_MISMATCH

    def test_long_integer_where_string_expected(self):
        with pytest.raises(ParseError) as exc:
            parse("starts " + "9" * 5000)
        assert exc.value.kind is ParseErrorKind.TYPE_MISMATCH
        assert exc.value.position == 7

    def test_empty_expression(self):
        with pytest.raises(ParseError) as exc:
            parse("")
        assert exc.value.kind is ParseErrorKind.UNEXPECTED_END

    def test_dangling_operator(self):
        with pytest.raises(ParseError) as exc:
            parse("numeric and")
        assert exc.value.kind is ParseErrorKind.UNEXPECTED_END
        assert exc.value.position == 11

    def test_literal_after_argumentless_keyword(self):
        with pytest.raises(ParseError) as exc:
            parse("numeric 5")
        assert exc.value.kind is ParseErrorKind.TRAILING_TOKENS

    def test_missing_operator(self):
        with pytest.raises(ParseError) as exc:
            parse("numeric alpha")
        assert exc.value.kind is ParseErrorKind.TRAILING_TOKENS
        assert exc.value.position == 8

    def test_leading_operator(self):
        with pytest.raises(ParseError) as exc:
            parse("or numeric")
        assert exc.value.kind is ParseErrorKind.UNEXPECTED_TOKEN

    def test_double_operator(self):
        with pytest.raises(ParseError) as exc:
            parse("numeric and or alpha")
        assert exc.value.kind is ParseErrorKind.UNEXPECTED_TOKEN

    def test_parentheses_are_reserved(self):
        with pytest.raises(ParseError) as exc:
            parse("(numeric or alpha) and length 3")
        assert exc.value.kind is ParseErrorKind.UNEXPECTED_TOKEN
        assert exc.value.token.kind is TokenKind.LPAREN

    def test_lex_errors_propagate(self):
        with pytest.raises(LexError):
            parse("numeric xor alpha")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError, match="position"):
            parse("length")


def test_parser_requires_end_token():
    with pytest.raises(ValueError):
        Parser([Token(TokenKind.KEYWORD, special().attribute)])
