# srch/export/text.py
from srch.models import FilterResult, ReplaceResult

from .base import Exporter, Result


class TextExporter(Exporter):
    """Plain output: one selected unit per line, or the replaced text."""

    name = "text"

    def format_match(self, value: str) -> str:
        return f"{value}\n"

    def to_string(self, result: Result) -> str:
        match result:
            case FilterResult(matches=matches):
                return "".join(self.format_match(m.value) for m in matches)
            case ReplaceResult(output=output):
                return output
            case _:
                raise TypeError(f"Unsupported result: {result!r}")
