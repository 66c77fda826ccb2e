from .base import Exporter
from .json import JsonExporter
from .text import TextExporter

EXPORTERS: dict[str, type[Exporter]] = {
    "text": TextExporter,
    "json": JsonExporter,
}


def get_exporter(name: str) -> Exporter:
    """Return an exporter instance by format name."""
    try:
        return EXPORTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown format: {name!r}. Available: {list(EXPORTERS)}") from None


__all__ = ["Exporter", "TextExporter", "JsonExporter", "EXPORTERS", "get_exporter"]
