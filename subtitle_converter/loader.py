"""Loading subtitle text from user-selected files.

WHY: The reflow core only accepts decoded text. Reading the file, dealing
with encodings, and reporting failures all happen here, at the edge, so
the core stays pure.

HOW: load_subtitle_file() reads the whole file as UTF-8 (a leading BOM is
dropped) and returns the text. Any OS or decode error is re-raised as a
FileReadError carrying the path.

RULES:
- File extension is advisory only; any readable text file is accepted
- A file that decodes to "" is returned as "" (NOT a read failure)
- Never returns partial text on failure
"""

from __future__ import annotations

import logging
from pathlib import Path

from subtitle_converter.config import SUPPORTED_SUBTITLE_FORMATS
from subtitle_converter.errors import FileReadError

logger = logging.getLogger(__name__)


def is_supported_subtitle(path: str | Path) -> bool:
    """Return True if the file has a .srt or .vtt extension (any case)."""
    return Path(path).suffix.lower() in SUPPORTED_SUBTITLE_FORMATS


def load_subtitle_file(path: str | Path) -> str:
    """Read a subtitle file and return its decoded text.

    Args:
        path: Path to the subtitle file.

    Returns:
        The file content as a string, UTF-8 decoded.

    Raises:
        FileReadError: If the file is missing, unreadable, or not UTF-8.
    """
    p = Path(path)
    if not is_supported_subtitle(p):
        logger.warning("Loading %s with unexpected extension %r", p.name, p.suffix)

    try:
        text = p.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise FileReadError(p, "file not found") from exc
    except UnicodeDecodeError as exc:
        raise FileReadError(p, "file is not valid UTF-8 text") from exc
    except OSError as exc:
        raise FileReadError(p, exc.strerror or str(exc)) from exc

    logger.info("Loaded %s (%d characters)", p.name, len(text))
    return text
