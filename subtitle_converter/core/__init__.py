"""Core reflow logic: line classification, paragraph reflow, export."""

from subtitle_converter.core.export import compose_export
from subtitle_converter.core.lines import LineKind, classify_line
from subtitle_converter.core.reflow import reflow, reflow_paragraphs

__all__ = [
    "LineKind",
    "classify_line",
    "compose_export",
    "reflow",
    "reflow_paragraphs",
]
