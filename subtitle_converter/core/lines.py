"""Caption line classification.

WHY: Subtitle files mix three kinds of structural lines (sequence numbers,
timestamp ranges, blank separators) with the text people actually want.
The reflow loop only needs to know which kind each line is.

HOW: classify_line() trims the raw line and checks, in order: blank,
all-digit index, "-->" timing marker. Everything else is caption text.

RULES:
- Classification always uses the trimmed line
- Index lines are ASCII digits only ("12", not "12a" or "١٢")
- Any line containing "-->" is timing, wherever the marker appears
- No grammar validation: a malformed timestamp is still a timing line
"""

from __future__ import annotations

import enum
import re

TIMING_MARKER = "-->"

_INDEX_RE = re.compile(r"[0-9]+")


class LineKind(enum.Enum):
    """The role of one line inside a caption source."""

    INDEX = "index"
    TIMING = "timing"
    BLANK = "blank"
    TEXT = "text"


def classify_line(line: str) -> LineKind:
    """Classify a raw caption line by its trimmed content."""
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if _INDEX_RE.fullmatch(stripped):
        return LineKind.INDEX
    if TIMING_MARKER in stripped:
        return LineKind.TIMING
    return LineKind.TEXT


def ends_paragraph(next_line: str | None) -> bool:
    """Return True if the line after a text line closes the paragraph.

    A paragraph closes at end of input, at a blank line, or at a timing
    line. Index lines do NOT close it.
    """
    if next_line is None:
        return True
    return classify_line(next_line) in (LineKind.BLANK, LineKind.TIMING)
