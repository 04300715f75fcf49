"""Output styles and the abstract paragraph formatter.

WHY: The reflow core produces plain paragraphs; how they look in the
finished document depends on the chosen style. This base class gives the
GUI and the state layer one interface for any style.

HOW: OutputStyle enumerates the styles. BaseFormatter is an ABC with a
``name`` property and a ``prefix``; ``render()`` joins the prefixed
paragraphs with blank lines and trims trailing whitespace.

RULES:
- Styles differ ONLY in per-paragraph leading whitespace
- render() never drops or reorders paragraphs
- Only trailing whitespace of the whole document is trimmed, so the first
  paragraph keeps its indentation
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Iterable

PARAGRAPH_SEPARATOR = "\n\n"


class OutputStyle(str, enum.Enum):
    """Document layout for reflowed captions.

    HOW: Inherits from str so values compare equal to their labels and
    round-trip through tkinter StringVars and environment variables.
    """

    MARKDOWN = "Markdown"
    INDENTED = "Indented"

    @classmethod
    def parse(cls, value: str | OutputStyle) -> OutputStyle:
        """Look up a style by value, case-insensitively.

        The GUI label "Indented Text" is accepted as an alias for Indented.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key == "indented text":
            key = cls.INDENTED.value.lower()
        for style in cls:
            if style.value.lower() == key:
                return style
        raise ValueError(
            "Unknown output style '{}'. Available: {}".format(
                value, ", ".join(s.value for s in cls)
            )
        )


class BaseFormatter(ABC):
    """Abstract base for all output style formatters.

    To add a new output style:
    1. Add a member to OutputStyle
    2. Subclass BaseFormatter in formatters/
    3. Register it in FORMATTERS in formatters/__init__.py
    """

    style: OutputStyle

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable style name, e.g. 'Indented Text'."""

    @property
    @abstractmethod
    def prefix(self) -> str:
        """Leading whitespace placed before every paragraph."""

    def format_paragraph(self, text: str) -> str:
        """Apply the style to a single finished paragraph."""
        return self.prefix + text

    def render(self, paragraphs: Iterable[str]) -> str:
        """Build the formatted document from finished paragraphs.

        Args:
            paragraphs: Paragraph texts in source order, already stripped.

        Returns:
            Every paragraph followed by a blank line, with trailing
            whitespace removed from the result.
        """
        parts = []
        for paragraph in paragraphs:
            parts.append(self.format_paragraph(paragraph))
            parts.append(PARAGRAPH_SEPARATOR)
        return "".join(parts).rstrip()
