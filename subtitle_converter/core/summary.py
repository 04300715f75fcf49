"""Summarizer seam for the optional AI prompt.

WHY: The converter lets users attach an "AI prompt" to their document, but
it does not run any model itself. Whatever produces a summary is an
external capability, so it sits behind a small interface that the GUI and
tests can swap out.

HOW: BaseSummarizer is an ABC with one method, summarize(document, prompt).
PlaceholderSummarizer is the default: it returns a static line that echoes
the prompt and never looks at the document.

RULES:
- Summarizers must not modify the document
- summarize() is only called when the prompt is non-empty
- The placeholder output is not a summary; it only acknowledges the prompt
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseSummarizer(ABC):
    """Abstract base for summary providers."""

    @abstractmethod
    def summarize(self, document: str, prompt: str) -> str:
        """Produce summary text for a converted document.

        Args:
            document: The formatted prose document.
            prompt: The user's free-form instruction, never validated.

        Returns:
            Summary text to show next to the document.
        """


class PlaceholderSummarizer(BaseSummarizer):
    """Static stand-in that echoes the prompt."""

    def summarize(self, document: str, prompt: str) -> str:
        return 'Summary based on prompt: "{}"'.format(prompt)
