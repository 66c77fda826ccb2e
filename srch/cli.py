# srch/cli.py
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, NoReturn, TextIO

import cyclopts

from srch.config import SrchConfig
from srch.export import get_exporter
from srch.export.text import TextExporter
from srch.expression import Expression, parse, render_tree
from srch.models import FilterResult, Mode, ReplaceResult, Selection
from srch.select import filter_units, iter_units, replace_units

logger = logging.getLogger(__name__)

app = cyclopts.App(
    name="srch",
    help="Filter, ignore or replace lines and words using readable text expressions.",
)

ExpressionArg = Annotated[
    str, cyclopts.Parameter(help='Text expression, e.g. \'starts "foo" and length 5\'')
]
FileArg = Annotated[
    Path | None, cyclopts.Parameter(help="Input file (default: stdin)")
]
ModeOpt = Annotated[
    Mode | None,
    cyclopts.Parameter(name=["--mode", "-m"], help="Operation mode: line or word"),
]
FirstOpt = Annotated[
    bool, cyclopts.Parameter(name=["--first", "-f"], help="Only use the first match")
]
LastOpt = Annotated[
    bool, cyclopts.Parameter(name=["--last", "-l"], help="Only use the last match")
]
SkipOpt = Annotated[
    int, cyclopts.Parameter(name="--skip", help="Skip the first n matches")
]
LimitOpt = Annotated[
    int | None, cyclopts.Parameter(name="--limit", help="Use at most n matches")
]
NthOpt = Annotated[
    int | None, cyclopts.Parameter(name="--nth", help="Only use the k-th match (1-based)")
]
OddOpt = Annotated[
    bool, cyclopts.Parameter(name="--odd", help="Only use the 1st, 3rd, 5th, ... match")
]
EvenOpt = Annotated[
    bool, cyclopts.Parameter(name="--even", help="Only use the 2nd, 4th, 6th, ... match")
]
JsonOpt = Annotated[
    bool, cyclopts.Parameter(name="--json", help="Print results as JSON")
]


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _compile(source: str) -> Expression:
    """Parse an expression, exiting with a diagnostic if it is invalid."""
    try:
        return parse(source)
    except ValueError as e:
        _fail(f"Invalid text expression: {e}")


@contextmanager
def _handle_io_errors() -> Iterator[None]:
    """Report unreadable input and closed output without a traceback."""
    try:
        yield
    except BrokenPipeError:
        # the reader went away (e.g. `srch ... | head`); silence the final flush too
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)
    except UnicodeDecodeError as e:
        _fail(f"Input is not valid UTF-8: {e.reason} at byte {e.start}")
    except OSError as e:
        _fail(f"Cannot read input: {e}")


@contextmanager
def _open_input(path: Path | None) -> Iterator[TextIO]:
    """Open the input file, or stdin, without translating line terminators."""
    if path is None:
        sys.stdin.reconfigure(encoding="utf-8", newline="")  # type: ignore[attr-defined]
        yield sys.stdin
        return
    if not path.exists():
        _fail(f"File not found: {path}")
    with path.open(encoding="utf-8", newline="") as f:
        yield f


def _selection(**options: object) -> Selection:
    try:
        return Selection(**options)  # type: ignore[arg-type]
    except ValueError as e:
        _fail(str(e))


def _run_filter(
    expression: str,
    file: Path | None,
    mode: Mode | None,
    selection: Selection,
    json: bool,
    invert: bool,
) -> None:
    config = SrchConfig()
    mode = mode or config.mode
    compiled = _compile(expression)

    with _handle_io_errors(), _open_input(file) as f:
        matches = filter_units(iter_units(f, mode), compiled, selection, invert=invert)

        if json or config.json:
            result = FilterResult(mode=mode, expression=str(compiled), matches=list(matches))
            print(get_exporter("json").to_string(result), end="")
            logger.info("Selected %s units", result.total)
            return

        # Stream plain output as units are read
        exporter = TextExporter()
        count = 0
        for match in matches:
            print(exporter.format_match(match.value), end="")
            count += 1
        logger.info("Selected %s units", count)


@app.command(name=["filter", "for"])
def filter_command(
    expression: ExpressionArg,
    file: FileArg = None,
    *,
    mode: ModeOpt = None,
    first: FirstOpt = False,
    last: LastOpt = False,
    skip: SkipOpt = 0,
    limit: LimitOpt = None,
    nth: NthOpt = None,
    odd: OddOpt = False,
    even: EvenOpt = False,
    json: JsonOpt = False,
) -> None:
    """Print the lines or words matching an expression."""
    selection = _selection(
        first=first, last=last, skip=skip, limit=limit, nth=nth, odd=odd, even=even
    )
    _run_filter(expression, file, mode, selection, json, invert=False)


@app.command(name=["ignore", "not"])
def ignore_command(
    expression: ExpressionArg,
    file: FileArg = None,
    *,
    mode: ModeOpt = None,
    first: FirstOpt = False,
    last: LastOpt = False,
    skip: SkipOpt = 0,
    limit: LimitOpt = None,
    nth: NthOpt = None,
    odd: OddOpt = False,
    even: EvenOpt = False,
    json: JsonOpt = False,
) -> None:
    """Print the lines or words that do not match an expression."""
    selection = _selection(
        first=first, last=last, skip=skip, limit=limit, nth=nth, odd=odd, even=even
    )
    _run_filter(expression, file, mode, selection, json, invert=True)


@app.command(name="replace")
def replace_command(
    expression: ExpressionArg,
    replacement: Annotated[str, cyclopts.Parameter(help="Text substituted for each match")],
    file: FileArg = None,
    *,
    mode: ModeOpt = None,
    first: FirstOpt = False,
    last: LastOpt = False,
    skip: SkipOpt = 0,
    limit: LimitOpt = None,
    nth: NthOpt = None,
    odd: OddOpt = False,
    even: EvenOpt = False,
    json: JsonOpt = False,
) -> None:
    """Replace matching lines or words, keeping everything else unchanged."""
    config = SrchConfig()
    mode = mode or config.mode
    selection = _selection(
        first=first, last=last, skip=skip, limit=limit, nth=nth, odd=odd, even=even
    )
    compiled = _compile(expression)

    with _handle_io_errors():
        with _open_input(file) as f:
            text = f.read()

        output, replaced = replace_units(text, compiled, replacement, mode, selection)
        result = ReplaceResult(
            mode=mode,
            expression=str(compiled),
            replacement=replacement,
            output=output,
            replaced=replaced,
        )
        exporter = get_exporter("json" if json or config.json else "text")
        print(exporter.to_string(result), end="")


@app.command(name="check")
def check_command(
    expression: ExpressionArg,
    *texts: Annotated[str, cyclopts.Parameter(help="Strings to test")],
) -> None:
    """Test strings against an expression; exit status 0 only if all match."""
    compiled = _compile(expression)
    results = [compiled.matches(text) for text in texts]
    for text, matched in zip(texts, results):
        print(f"{'true' if matched else 'false'}\t{text}")
    sys.exit(0 if all(results) else 1)


@app.command(name="explain")
def explain_command(expression: ExpressionArg) -> None:
    """Show how an expression is grouped by operator precedence."""
    compiled = _compile(expression)
    print(render_tree(compiled))


def main() -> None:
    try:
        config = SrchConfig()
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    app()


if __name__ == "__main__":
    main()
