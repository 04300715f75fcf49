"""Caption reflow engine: subtitle lines in, prose paragraphs out.

WHY: Caption tracks split speech into short timed fragments. Reading them
as notes requires dropping the numbering and timestamps and re-joining the
fragments of each caption block into one paragraph.

HOW: A single forward pass over the lines. Text lines are appended (trimmed,
plus one space) to an accumulator. After each text line the next line is
peeked at; if it is missing, blank, or a timing line, the accumulator is
flushed as a finished paragraph. The formatter for the requested style
then renders the paragraphs into the final document.

RULES:
- Pure: no I/O, no shared state between calls
- Index, timing and blank lines never reach the output
- Every text line ends up in exactly one paragraph, in source order
- Empty input raises NoContentError; input with no text lines returns ""
- A text line followed directly by an index line keeps accumulating
- Whatever is still accumulated at end of input is flushed, never dropped
"""

from __future__ import annotations

from typing import List

from subtitle_converter.core.lines import LineKind, classify_line, ends_paragraph
from subtitle_converter.errors import NoContentError
from subtitle_converter.formatters import get_formatter
from subtitle_converter.formatters.base import OutputStyle


def reflow_paragraphs(raw_text: str) -> List[str]:
    """Split caption text into prose paragraphs.

    Args:
        raw_text: Decoded subtitle text, newline-delimited.

    Returns:
        Paragraph texts in source order, each the space-joined trimmed
        text lines of one caption run.
    """
    lines = raw_text.split("\n")
    paragraphs: List[str] = []
    current = ""

    for i, line in enumerate(lines):
        if classify_line(line) is not LineKind.TEXT:
            continue

        current += line.strip() + " "

        next_line = lines[i + 1] if i + 1 < len(lines) else None
        if ends_paragraph(next_line):
            paragraphs.append(current.rstrip())
            current = ""

    # Text followed only by index lines up to end of input
    if current:
        paragraphs.append(current.rstrip())

    return paragraphs


def reflow(raw_text: str, style: OutputStyle | str = OutputStyle.MARKDOWN) -> str:
    """Convert raw subtitle text into a formatted prose document.

    Args:
        raw_text: Decoded subtitle text. May be any text; it is not
                  validated as SRT or VTT.
        style: Output style, an OutputStyle or its label.

    Returns:
        The formatted document with trailing whitespace trimmed. Inputs
        made only of index, timing and blank lines give "".

    Raises:
        NoContentError: If raw_text is empty or None.
        ValueError: If style is not a known output style.
    """
    formatter = get_formatter(style)
    if not raw_text:
        raise NoContentError()
    return formatter.render(reflow_paragraphs(raw_text))
