# srch/models.py
from dataclasses import dataclass, field
from typing import Literal

Mode = Literal["line", "word"]
MODES: tuple[Mode, ...] = ("line", "word")


@dataclass(frozen=True)
class Selection:
    """Ordinal filters applied to the sequence of hits, not to the input.

    Filters compose in a fixed order: skip, odd/even, nth, first/last, limit.
    Ordinals (nth, odd, even) are 1-based.
    """

    first: bool = False
    last: bool = False
    skip: int = 0
    limit: int | None = None
    nth: int | None = None
    odd: bool = False
    even: bool = False

    def __post_init__(self) -> None:
        if self.first and self.last:
            raise ValueError("--first and --last cannot be combined")
        if self.odd and self.even:
            raise ValueError("--odd and --even cannot be combined")
        if self.skip < 0:
            raise ValueError(f"--skip must be non-negative, got {self.skip}")
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"--limit must be non-negative, got {self.limit}")
        if self.nth is not None and self.nth < 1:
            raise ValueError(f"--nth must be at least 1, got {self.nth}")


@dataclass(frozen=True)
class Match:
    """A selected unit and its position in the input."""

    index: int
    value: str


@dataclass
class FilterResult:
    """Units selected by a filter or ignore run."""

    mode: Mode
    expression: str
    matches: list[Match] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.matches)


@dataclass
class ReplaceResult:
    """Reconstructed text of a replace run."""

    mode: Mode
    expression: str
    replacement: str
    output: str
    replaced: list[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.replaced)
