"""Base class for result exporters."""

from abc import ABC, abstractmethod
from pathlib import Path

from srch.models import FilterResult, ReplaceResult

Result = FilterResult | ReplaceResult


class Exporter(ABC):
    """Base class for result exporters."""

    name: str

    @abstractmethod
    def to_string(self, result: Result) -> str:
        """Render a result as text."""
        ...

    def export(self, result: Result, output: Path) -> None:
        """Write a rendered result to a file."""
        output.write_text(self.to_string(result), encoding="utf-8")
