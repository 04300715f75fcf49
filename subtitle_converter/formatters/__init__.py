"""Output formatter registry: one formatter per output style.

WHY: The state layer and the GUI need a single lookup to find the right
formatter for the selected style. A central dict makes adding a style a
one-line change.

HOW: FORMATTERS maps OutputStyle members to formatter *classes* (not
instances). get_formatter() accepts a style or its label and returns an
instance.

RULES:
- Every OutputStyle member has exactly one registered formatter
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from subtitle_converter.formatters.base import OutputStyle
from subtitle_converter.formatters.indented import IndentedFormatter
from subtitle_converter.formatters.markdown import MarkdownFormatter

if TYPE_CHECKING:
    from subtitle_converter.formatters.base import BaseFormatter

FORMATTERS: dict[OutputStyle, type[BaseFormatter]] = {
    OutputStyle.MARKDOWN: MarkdownFormatter,
    OutputStyle.INDENTED: IndentedFormatter,
}


def get_formatter(style: OutputStyle | str) -> BaseFormatter:
    """Instantiate the formatter for a style.

    Raises:
        ValueError: If the style name is not recognized.
    """
    return FORMATTERS[OutputStyle.parse(style)]()


__all__ = [
    "FORMATTERS",
    "OutputStyle",
    "IndentedFormatter",
    "MarkdownFormatter",
    "get_formatter",
]
