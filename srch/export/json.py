# srch/export/json.py
import json
from dataclasses import asdict

from srch.models import FilterResult, ReplaceResult

from .base import Exporter, Result


class JsonExporter(Exporter):
    """Export results to JSON format."""

    name = "json"

    def __init__(self, indent: int = 2):
        self.indent = indent

    def to_string(self, result: Result) -> str:
        match result:
            case FilterResult():
                data = {
                    "mode": result.mode,
                    "expression": result.expression,
                    "matches": [asdict(m) for m in result.matches],
                    "total": result.total,
                }
            case ReplaceResult():
                data = {
                    "mode": result.mode,
                    "expression": result.expression,
                    "replacement": result.replacement,
                    "replaced": result.replaced,
                    "total": result.total,
                    "output": result.output,
                }
            case _:
                raise TypeError(f"Unsupported result: {result!r}")
        return json.dumps(data, indent=self.indent, ensure_ascii=False) + "\n"
