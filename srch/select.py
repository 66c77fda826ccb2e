# srch/select.py
import logging
import re
from collections import deque
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TypeVar

from srch.expression import Expression
from srch.models import Match, Mode, Selection

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Capturing groups keep the separators in re.split output.
_SEPARATORS: dict[Mode, re.Pattern[str]] = {
    "line": re.compile(r"(\r\n|\r|\n)"),
    "word": re.compile(r"(\s+)"),
}


def select(hits: Iterable[T], selection: Selection) -> Iterator[T]:
    """Apply ordinal filters to a sequence of hits.

    The result is lazy: unless ``selection.last`` is set, the input stops
    being consumed as soon as the selection is satisfied.
    """
    it: Iterator[T] = iter(hits)
    if selection.skip:
        it = islice(it, selection.skip, None)
    if selection.odd:
        it = islice(it, 0, None, 2)
    elif selection.even:
        it = islice(it, 1, None, 2)
    if selection.nth is not None:
        it = islice(it, selection.nth - 1, selection.nth)
    if selection.first:
        it = islice(it, 1)
    elif selection.last:
        it = iter(deque(it, maxlen=1))
    if selection.limit is not None:
        it = islice(it, selection.limit)
    return it


def iter_units(lines: Iterable[str], mode: Mode) -> Iterator[str]:
    """Yield candidate units from an iterable of text lines.

    Lines may keep their terminators (as from a file opened with
    ``newline=""``); terminators are never part of a unit.
    """
    for line in lines:
        if mode == "word":
            yield from line.split()
        else:
            yield line.removesuffix("\n").removesuffix("\r")


def _unit_positions(segments: list[str], mode: Mode) -> list[int]:
    """Indices into ``segments`` (from a separator split) that hold units."""
    positions = list(range(0, len(segments), 2))
    if mode == "word":
        # leading and trailing whitespace leave empty edge segments
        return [pos for pos in positions if segments[pos]]
    if segments[-1] == "":
        # text ending with a newline (or empty text) has no final line
        positions.pop()
    return positions


def split_units(text: str, mode: Mode) -> list[str]:
    """Split text into candidate units: lines or whitespace-separated words."""
    segments = _SEPARATORS[mode].split(text)
    return [segments[pos] for pos in _unit_positions(segments, mode)]


def filter_units(
    units: Iterable[str],
    expression: Expression,
    selection: Selection | None = None,
    invert: bool = False,
) -> Iterator[Match]:
    """Yield the selected units that match (or, inverted, do not match)."""
    hits = (
        Match(index, unit)
        for index, unit in enumerate(units)
        if expression.matches(unit) != invert
    )
    return select(hits, selection or Selection())


def ignore_units(
    units: Iterable[str],
    expression: Expression,
    selection: Selection | None = None,
) -> Iterator[Match]:
    """Yield the selected units that do not match."""
    return filter_units(units, expression, selection, invert=True)


def replace_units(
    text: str,
    expression: Expression,
    replacement: str,
    mode: Mode = "line",
    selection: Selection | None = None,
) -> tuple[str, list[int]]:
    """Substitute every selected matching unit with ``replacement``.

    Separators (line terminators in line mode, whitespace runs in word
    mode) are preserved exactly.

    Returns:
        The reconstructed text and the indices of the replaced units.
    """
    segments = _SEPARATORS[mode].split(text)
    positions = _unit_positions(segments, mode)
    hits = (index for index, pos in enumerate(positions) if expression.matches(segments[pos]))
    replaced = list(select(hits, selection or Selection()))

    for index in replaced:
        segments[positions[index]] = replacement

    logger.info("Replaced %s of %s units", len(replaced), len(positions))
    return "".join(segments), replaced
