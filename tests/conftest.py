"""Shared test fixtures for the subtitle_converter test suite.

WHY: Several test modules reflow the same caption sources (a two-block
SRT file, a WebVTT file with a header, a multi-line caption). Keeping them
here means every module checks behavior against the same inputs.

HOW: Module-level constants hold the raw text; pytest fixtures hand out
the strings and a FakeScheduler that records tkinter-style timers.

RULES:
- Caption text uses "\\n" line endings unless a test says otherwise
- FakeScheduler never fires a timer on its own; tests call fire()
"""

from typing import Any, Callable, Dict, List

import pytest


# ---------------------------------------------------------------------------
# Sample caption sources
# ---------------------------------------------------------------------------

TWO_BLOCK_SRT = (
    "1\n"
    "00:00:01 --> 00:00:02\n"
    "Hello world\n"
    "\n"
    "2\n"
    "00:00:03 --> 00:00:04\n"
    "Second line\n"
)

MULTILINE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:03,500\n"
    "This caption spans\n"
    "two lines on screen.\n"
    "\n"
    "2\n"
    "00:00:04,000 --> 00:00:06,000\n"
    "And this one does not.\n"
)

SAMPLE_VTT = (
    "WEBVTT\n"
    "\n"
    "00:00:00.000 --> 00:00:02.000\n"
    "Welcome back to the show.\n"
    "\n"
    "00:00:02.500 --> 00:00:05.000\n"
    "Today we talk about\n"
    "reading subtitles as prose.\n"
)


@pytest.fixture
def two_block_srt():
    return TWO_BLOCK_SRT


@pytest.fixture
def multiline_srt():
    return MULTILINE_SRT


@pytest.fixture
def sample_vtt():
    return SAMPLE_VTT


# ---------------------------------------------------------------------------
# Timer fake
# ---------------------------------------------------------------------------

class FakeScheduler:
    """Records after()/after_cancel() calls like a tkinter widget."""

    def __init__(self) -> None:
        self.timers: Dict[int, Callable[[], Any]] = {}
        self.delays: List[int] = []
        self.cancelled: List[int] = []
        self._next_id = 1

    def after(self, ms: int, func: Callable[[], Any]) -> int:
        timer_id = self._next_id
        self._next_id += 1
        self.timers[timer_id] = func
        self.delays.append(ms)
        return timer_id

    def after_cancel(self, id: int) -> None:
        self.cancelled.append(id)
        self.timers.pop(id, None)

    def fire(self, timer_id: int) -> None:
        self.timers.pop(timer_id)()


@pytest.fixture
def scheduler():
    return FakeScheduler()
