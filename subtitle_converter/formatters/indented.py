"""Indented text formatter: every paragraph starts with four spaces."""

from __future__ import annotations

from subtitle_converter.formatters.base import BaseFormatter, OutputStyle

INDENT = "    "


class IndentedFormatter(BaseFormatter):
    """Formatter that prefixes each paragraph with a four-space indent."""

    style = OutputStyle.INDENTED

    @property
    def name(self) -> str:
        return "Indented Text"

    @property
    def prefix(self) -> str:
        return INDENT
