# srch/expression/ast.py
from dataclasses import dataclass
from enum import Enum


class Attribute(Enum):
    """The built-in string-shape tests."""

    STARTS = "starts"
    ENDS = "ends"
    CONTAINS = "contains"
    EQUALS = "equals"
    LENGTH = "length"
    NUMERIC = "numeric"
    ALPHA = "alpha"
    ALPHANUMERIC = "alphanumeric"
    SPECIAL = "special"

    @property
    def argument_type(self) -> type | None:
        """Python type of the required argument, or None for character classes."""
        return _ARGUMENT_TYPES.get(self)


_ARGUMENT_TYPES: dict[Attribute, type] = {
    Attribute.STARTS: str,
    Attribute.ENDS: str,
    Attribute.CONTAINS: str,
    Attribute.EQUALS: str,
    Attribute.LENGTH: int,
}


@dataclass(frozen=True)
class Expression:
    """Base AST node for text expressions."""

    def __and__(self, other: "Expression") -> "And":
        return And(self, other)

    def __or__(self, other: "Expression") -> "Or":
        return Or(self, other)

    def matches(self, candidate: str) -> bool:
        """Evaluate this expression against a single line or word."""
        from srch.expression.evaluator import evaluate

        return evaluate(self, candidate)


@dataclass(frozen=True)
class Predicate(Expression):
    """Attribute test: keyword with an optional literal argument."""

    attribute: Attribute
    argument: str | int | None = None

    def __post_init__(self) -> None:
        expected = self.attribute.argument_type
        if expected is None:
            if self.argument is not None:
                raise TypeError(f"'{self.attribute.value}' takes no argument")
            return
        # bool is an int subclass but never a valid length
        if type(self.argument) is not expected:
            raise TypeError(
                f"'{self.attribute.value}' requires a {expected.__name__} argument, "
                f"got {self.argument!r}"
            )
        if expected is int and self.argument < 0:  # type: ignore[operator]
            raise ValueError(f"'{self.attribute.value}' requires a non-negative integer")

    def __str__(self) -> str:
        match self.argument:
            case None:
                return self.attribute.value
            case str(text):
                return f"{self.attribute.value} {quote(text)}"
            case value:
                return f"{self.attribute.value} {format_integer(value)}"


@dataclass(frozen=True)
class And(Expression):
    """Logical AND of two expressions."""

    left: Expression
    right: Expression

    def __str__(self) -> str:
        left = str(self.left) if isinstance(self.left, Predicate) else f"({self.left})"
        right = f"({self.right})" if isinstance(self.right, Or) else str(self.right)
        return f"{left} and {right}"


@dataclass(frozen=True)
class Or(Expression):
    """Logical OR of two expressions."""

    left: Expression
    right: Expression

    def __str__(self) -> str:
        left = f"({self.left})" if isinstance(self.left, Or) else str(self.left)
        return f"{left} or {self.right}"


def format_integer(value: int) -> str:
    """Render a non-negative integer of any length as decimal digits."""
    try:
        return str(value)
    except ValueError:
        # str() caps the digit count of int conversions
        chunks: list[str] = []
        while value:
            value, chunk = divmod(value, 10**18)
            chunks.append(f"{chunk:018d}")
        return "".join(reversed(chunks)).lstrip("0") or "0"


def quote(text: str) -> str:
    """Render text as a string literal, escaping embedded quotes."""
    return '"' + text.replace('"', '\\"') + '"'


def render_tree(expression: Expression, indent: str = "  ") -> str:
    """Render an expression as an indented tree, one node per line.

    Example:
        >>> print(render_tree(starts("a") & ends("b") | length(3)))
        or
          and
            starts "a"
            ends "b"
          length 3
    """
    lines: list[str] = []

    def walk(node: Expression, depth: int) -> None:
        match node:
            case And(left=l, right=r):
                lines.append(f"{indent * depth}and")
                walk(l, depth + 1)
                walk(r, depth + 1)
            case Or(left=l, right=r):
                lines.append(f"{indent * depth}or")
                walk(l, depth + 1)
                walk(r, depth + 1)
            case _:
                lines.append(f"{indent * depth}{node}")

    walk(expression, 0)
    return "\n".join(lines)


# Factory functions (public API)
def starts(value: str) -> Predicate:
    return Predicate(Attribute.STARTS, value)


def ends(value: str) -> Predicate:
    return Predicate(Attribute.ENDS, value)


def contains(value: str) -> Predicate:
    return Predicate(Attribute.CONTAINS, value)


def equals(value: str) -> Predicate:
    return Predicate(Attribute.EQUALS, value)


def length(value: int) -> Predicate:
    return Predicate(Attribute.LENGTH, value)


def numeric() -> Predicate:
    return Predicate(Attribute.NUMERIC)


def alpha() -> Predicate:
    return Predicate(Attribute.ALPHA)


def alphanumeric() -> Predicate:
    return Predicate(Attribute.ALPHANUMERIC)


def special() -> Predicate:
    return Predicate(Attribute.SPECIAL)
