"""Export helpers: combine the converted document with the AI prompt."""

from __future__ import annotations

from subtitle_converter.formatters.base import PARAGRAPH_SEPARATOR


def compose_export(document: str, ai_prompt: str | None = None) -> str:
    """Append the AI prompt to the document, separated by a blank line.

    The prompt is opaque text; it is passed through untouched. Without a
    prompt the document is returned as-is.
    """
    if not ai_prompt:
        return document
    return document + PARAGRAPH_SEPARATOR + ai_prompt
