"""Markdown formatter: flush-left paragraphs separated by blank lines.

WHY: Markdown treats a blank line as a paragraph break, so unprefixed
paragraphs paste straight into notes apps and READMEs.

RULES:
- No leading indentation
- Blank line between paragraphs (inherited from BaseFormatter.render)
"""

from __future__ import annotations

from subtitle_converter.formatters.base import BaseFormatter, OutputStyle


class MarkdownFormatter(BaseFormatter):
    """Formatter that leaves paragraphs unindented."""

    style = OutputStyle.MARKDOWN

    @property
    def name(self) -> str:
        return "Markdown"

    @property
    def prefix(self) -> str:
        return ""
