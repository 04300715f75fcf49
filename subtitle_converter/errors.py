"""Typed exceptions for the subtitle converter.

WHY: The GUI has to tell "the user gave us nothing" apart from "the file
could not be read". Both are recoverable, but they are shown differently:
the first becomes a placeholder result, the second an error dialog.

RULES:
- Every converter exception derives from ConverterError
- FileReadError is never raised for a file that decoded successfully,
  even if that file turned out to be empty
"""

from __future__ import annotations

from pathlib import Path


class ConverterError(Exception):
    """Base class for all subtitle converter errors."""


class NoContentError(ConverterError, ValueError):
    """Raised when a conversion is requested with no input text.

    HOW: Raised by reflow() before any parsing happens. The state layer
    catches it and shows NO_CONTENT_MESSAGE instead of a document.
    """

    def __init__(self, message: str = "No content provided") -> None:
        super().__init__(message)


class FileReadError(ConverterError):
    """Raised when a subtitle file cannot be read or decoded.

    WHY: A failed read must never be mistaken for empty input, otherwise
    the user would see "No content provided" for a file that does exist.

    RULES:
    - path is the file the loader tried to read
    - reason is a short human-readable cause (shown in the error dialog)
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read {self.path.name}: {reason}")
