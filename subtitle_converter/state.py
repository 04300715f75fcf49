"""Immutable interactive state and the actions that update it.

WHY: The window shows a handful of values that change together (input
text, chosen style, prompt, last result, summary, transient notification).
Keeping them in one frozen record with pure transition functions makes
every user action testable without a display, and leaves the reflow core
free of any shared state.

HOW: ConverterState is a frozen dataclass. Each action takes a state and
returns a new one via dataclasses.replace(). The GUI holds the current
record and re-renders from it after every action.

RULES:
- Actions never mutate their input state
- convert() turns NoContentError into the "No content provided" result
- The summarizer is only consulted when the prompt is non-empty
- copy_text_with_prompt() uses whatever prompt is in the state verbatim
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional

from subtitle_converter.config import DEFAULT_AI_PROMPT, NO_CONTENT_MESSAGE
from subtitle_converter.core.export import compose_export
from subtitle_converter.core.reflow import reflow
from subtitle_converter.core.summary import BaseSummarizer, PlaceholderSummarizer
from subtitle_converter.errors import NoContentError
from subtitle_converter.formatters.base import OutputStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConverterState:
    """Snapshot of everything the converter window displays.

    Attributes:
        subtitle_text: Raw caption text, pasted or loaded from a file.
        style: Selected output style.
        ai_prompt: Free-form instruction exported with "Copy with Prompt".
        converted_text: Last conversion result ("" before the first run).
        ai_summary: Summary text from the summarizer, or "".
        notification: Transient message shown to the user, or None.
    """

    subtitle_text: str = ""
    style: OutputStyle = OutputStyle.MARKDOWN
    ai_prompt: str = DEFAULT_AI_PROMPT
    converted_text: str = ""
    ai_summary: str = ""
    notification: Optional[str] = None

    @property
    def has_output(self) -> bool:
        return bool(self.converted_text)

    @property
    def show_summary(self) -> bool:
        return bool(self.ai_summary)


def with_subtitle_text(state: ConverterState, text: str) -> ConverterState:
    return dataclasses.replace(state, subtitle_text=text)


def with_style(state: ConverterState, style: OutputStyle | str) -> ConverterState:
    """Select an output style. Raises ValueError for unknown labels."""
    return dataclasses.replace(state, style=OutputStyle.parse(style))


def with_ai_prompt(state: ConverterState, prompt: str) -> ConverterState:
    return dataclasses.replace(state, ai_prompt=prompt)


def convert(
    state: ConverterState,
    summarizer: Optional[BaseSummarizer] = None,
) -> ConverterState:
    """Run the reflow engine on the current input.

    Args:
        state: Current state.
        summarizer: Summary provider; PlaceholderSummarizer when omitted.

    Returns:
        New state with converted_text (and possibly ai_summary) updated.
        Empty input yields NO_CONTENT_MESSAGE as the result and leaves the
        previous summary untouched.
    """
    try:
        document = reflow(state.subtitle_text, state.style)
    except NoContentError:
        logger.info("Conversion requested with no input")
        return dataclasses.replace(state, converted_text=NO_CONTENT_MESSAGE)

    logger.info(
        "Converted %d characters to %s (%d characters)",
        len(state.subtitle_text),
        state.style.value,
        len(document),
    )

    ai_summary = state.ai_summary
    if state.ai_prompt:
        summarizer = summarizer or PlaceholderSummarizer()
        ai_summary = summarizer.summarize(document, state.ai_prompt)

    return dataclasses.replace(
        state, converted_text=document, ai_summary=ai_summary
    )


def copy_text(state: ConverterState) -> str:
    """Text placed on the clipboard by the plain Copy action."""
    return state.converted_text


def copy_text_with_prompt(state: ConverterState) -> str:
    """Text placed on the clipboard by Copy with Prompt."""
    return compose_export(state.converted_text, state.ai_prompt)


def with_notification(state: ConverterState, message: str) -> ConverterState:
    return dataclasses.replace(state, notification=message)


def clear_notification(state: ConverterState) -> ConverterState:
    return dataclasses.replace(state, notification=None)
