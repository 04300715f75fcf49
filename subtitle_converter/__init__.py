"""Subtitle Converter: turn caption tracks into readable prose.

WHY: Subtitle files (.srt, .vtt) are line-numbered caption blocks with
timestamps. People who want notes from a video need the spoken text as
paragraphs, not as a stream of tiny timed fragments.

HOW: Two layers: a pure reflow core (classify lines, accumulate text,
flush paragraphs) and pluggable formatters that render the paragraphs as
Markdown or indented text. A Tkinter window supplies raw text and consumes
the formatted result.

RULES:
- The core never performs I/O; it receives already-decoded text
- Adding a new output style = one new formatter class + one registry entry
- Interactive state lives in an immutable record owned by the GUI
"""

__version__ = "0.1.0"
