# srch/expression/evaluator.py
from collections.abc import Callable

from srch.expression.ast import And, Attribute, Expression, Or, Predicate


def _every(test: Callable[[str], bool], candidate: str) -> bool:
    # an empty candidate never satisfies a character class
    return bool(candidate) and all(test(char) for char in candidate)


def _is_alphanumeric(char: str) -> bool:
    return char.isalpha() or char.isdecimal()


_TESTS: dict[Attribute, Callable[[str, str | int | None], bool]] = {
    Attribute.STARTS: lambda c, arg: c.startswith(arg),  # type: ignore[arg-type]
    Attribute.ENDS: lambda c, arg: c.endswith(arg),  # type: ignore[arg-type]
    Attribute.CONTAINS: lambda c, arg: arg in c,  # type: ignore[operator]
    Attribute.EQUALS: lambda c, arg: c == arg,
    Attribute.LENGTH: lambda c, arg: len(c) == arg,
    Attribute.NUMERIC: lambda c, _: _every(str.isdecimal, c),
    Attribute.ALPHA: lambda c, _: _every(str.isalpha, c),
    Attribute.ALPHANUMERIC: lambda c, _: _every(_is_alphanumeric, c),
    Attribute.SPECIAL: lambda c, _: _every(lambda char: not _is_alphanumeric(char), c),
}


def evaluate(expression: Expression, candidate: str) -> bool:
    """Test a candidate line or word against a parsed expression.

    Evaluation is pure and total: any string, including the empty string,
    yields True or False. Operands are evaluated left to right.
    """
    match expression:
        case Predicate(attribute=attribute, argument=argument):
            return _TESTS[attribute](candidate, argument)
        case And(left=l, right=r):
            return evaluate(l, candidate) and evaluate(r, candidate)
        case Or(left=l, right=r):
            return evaluate(l, candidate) or evaluate(r, candidate)
        case _:
            raise TypeError(f"Unsupported expression node: {expression!r}")
