"""Configuration constants, user-facing strings, and .env loading.

WHY: Centralizes the few configurable values (default output style,
notification delay, the pre-filled AI prompt) and the fixed user-facing
messages so they are easy to find and override without touching logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values with environment overrides. load_default_style()
turns the configured style name into an OutputStyle with a clear error.

RULES:
- SUPPORTED_SUBTITLE_FORMATS is advisory; content is never validated
- All defaults can be overridden via SUBCONV_* environment variables
- Invalid overrides fail loudly at the point they are used
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from subtitle_converter.formatters.base import OutputStyle

# Load .env from the project root (where the app is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Supported subtitle file extensions
# ---------------------------------------------------------------------------

SUPPORTED_SUBTITLE_FORMATS: set[str] = {".srt", ".vtt"}
"""Subtitle file extensions offered by the file picker (lowercase, with dot)."""

# ---------------------------------------------------------------------------
# User-facing messages
# ---------------------------------------------------------------------------

NO_CONTENT_MESSAGE = "No content provided"
COPIED_MESSAGE = "Content copied to clipboard"
COPIED_WITH_PROMPT_MESSAGE = "Content copied with prompt"

PLACEHOLDER_AI_PROMPT = "// summarise this, highlight keypoints, use tables if appropriate"

# ---------------------------------------------------------------------------
# Defaults (overridable via environment)
# ---------------------------------------------------------------------------

DEFAULT_STYLE = os.getenv("SUBCONV_DEFAULT_STYLE", OutputStyle.MARKDOWN.value)
DEFAULT_AI_PROMPT = os.getenv("SUBCONV_AI_PROMPT", PLACEHOLDER_AI_PROMPT)
NOTIFICATION_DELAY_MS = int(os.getenv("SUBCONV_NOTIFICATION_MS", "3000"))


def load_default_style() -> OutputStyle:
    """Resolve the configured default output style.

    RULES:
    - Accepts "Markdown" or "Indented" in any letter case
    - Raises ValueError naming the environment variable on anything else
    """
    try:
        return OutputStyle.parse(DEFAULT_STYLE)
    except ValueError as exc:
        raise ValueError(
            "SUBCONV_DEFAULT_STYLE is invalid: {}".format(exc)
        ) from exc
