from itertools import count

import pytest

from srch.expression.parser import parse
from srch.models import Selection
from srch.select import (
    filter_units,
    ignore_units,
    iter_units,
    replace_units,
    select,
    split_units,
)


def indices(matches) -> list[int]:
    return [m.index for m in matches]


class TestSelection:
    def test_defaults_keep_everything(self):
        assert list(select(range(5), Selection())) == [0, 1, 2, 3, 4]

    @pytest.mark.parametrize(
        ("selection", "expected"),
        [
            (Selection(first=True), [10]),
            (Selection(last=True), [15]),
            (Selection(skip=2), [12, 13, 14, 15]),
            (Selection(limit=2), [10, 11]),
            (Selection(limit=0), []),
            (Selection(nth=3), [12]),
            (Selection(nth=9), []),
            (Selection(odd=True), [10, 12, 14]),
            (Selection(even=True), [11, 13, 15]),
            (Selection(skip=1, odd=True), [11, 13, 15]),
            (Selection(skip=1, last=True), [15]),
            (Selection(even=True, limit=2), [11, 13]),
            (Selection(odd=True, nth=2), [12]),
        ],
    )
    def test_ordinal_filters(self, selection, expected):
        assert list(select(range(10, 16), selection)) == expected

    def test_first_stops_consuming(self):
        # an infinite hit stream still terminates
        assert list(select(count(), Selection(first=True))) == [0]
        assert list(select(count(), Selection(skip=3, limit=2))) == [3, 4]

    @pytest.mark.parametrize(
        "options",
        [
            {"first": True, "last": True},
            {"odd": True, "even": True},
            {"skip": -1},
            {"limit": -1},
            {"nth": 0},
        ],
    )
    def test_invalid_combinations(self, options):
        with pytest.raises(ValueError):
            Selection(**options)


class TestSplitUnits:
    def test_lines(self):
        assert split_units("a\nb\r\nc", "line") == ["a", "b", "c"]

    def test_trailing_newline_has_no_extra_line(self):
        assert split_units("a\nb\n", "line") == ["a", "b"]

    def test_blank_lines_are_units(self):
        assert split_units("a\n\nb", "line") == ["a", "", "b"]

    def test_empty_text(self):
        assert split_units("", "line") == []
        assert split_units("", "word") == []

    def test_words(self):
        assert split_units("  id 00001\tdone \n", "word") == ["id", "00001", "done"]

    def test_iter_units_agrees_with_split(self):
        lines = ["a b\n", "\r\n", "c\r\n", "d"]
        text = "".join(lines)
        for mode in ("line", "word"):
            assert list(iter_units(lines, mode)) == split_units(text, mode)


class TestFilter:
    def test_starts_and_ends(self):
        q = parse('starts "FOO" and ends "BAR"')
        assert indices(filter_units(["FOOxBAR", "FOOx", "xBAR"], q)) == [0]

    def test_length_or_length(self):
        q = parse("length 5 or length 10")
        matches = list(filter_units(["abcde", "abcdefghij", "ab"], q))
        assert indices(matches) == [0, 1]
        assert [m.value for m in matches] == ["abcde", "abcdefghij"]

    def test_selection_applies_to_matches_only(self):
        q = parse("numeric")
        units = ["a", "1", "b", "2", "c", "3"]
        assert indices(filter_units(units, q, Selection(last=True))) == [5]
        assert indices(filter_units(units, q, Selection(nth=2))) == [3]
        assert indices(filter_units(units, q, Selection(even=True))) == [3]

    def test_ignore_partitions_with_filter(self):
        q = parse('starts "a" or numeric')
        units = ["abc", "123", "", "xyz", "a", "!!"]
        kept = indices(filter_units(units, q))
        dropped = indices(ignore_units(units, q))
        assert sorted(kept + dropped) == list(range(len(units)))
        assert not set(kept) & set(dropped)

    def test_ignore_with_selection(self):
        q = parse("numeric")
        units = ["a", "1", "b", "2", "c"]
        assert indices(ignore_units(units, q, Selection(first=True))) == [0]


class TestReplace:
    def test_words_keep_whitespace(self):
        q = parse("numeric and length 5")
        output, replaced = replace_units("id 00001 done", q, "12345", mode="word")
        assert output == "id 12345 done"
        assert replaced == [1]

    def test_word_mode_preserves_irregular_whitespace(self):
        q = parse("numeric")
        text = "  1\t\tfoo  22 \n3\n"
        output, replaced = replace_units(text, q, "N", mode="word")
        assert output == "  N\t\tfoo  N \nN\n"
        assert replaced == [0, 2, 3]

    def test_lines_keep_terminators(self):
        q = parse('starts "#"')
        text = "# a\r\ncode\n# b\n"
        output, replaced = replace_units(text, q, "//", mode="line")
        assert output == "//\r\ncode\n//\n"
        assert replaced == [0, 2]

    def test_blank_lines_can_be_replaced(self):
        q = parse("length 0")
        output, _ = replace_units("a\n\nb\n", q, "-", mode="line")
        assert output == "a\n-\nb\n"

    def test_selection(self):
        q = parse("numeric")
        output, replaced = replace_units("1 2 3 4", q, "x", mode="word", selection=Selection(skip=1, limit=2))
        assert output == "1 x x 4"
        assert replaced == [1, 2]

    def test_no_matches_is_identity(self):
        text = "nothing\nto see here\n"
        output, replaced = replace_units(text, parse("numeric"), "x")
        assert output == text
        assert replaced == []
