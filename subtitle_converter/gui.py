"""Tkinter desktop GUI for the Subtitle Converter.

WHY: The people turning caption tracks into notes want to paste text or
pick a file, press one button, and copy the result. The GUI wraps the
reflow core, the file loader, and the clipboard behind a single window.

HOW: A single SubtitleConverterApp class builds the UI: an input text area
with an Upload File button, an output style picker, an AI prompt field,
Convert / Copy / Copy with Prompt buttons, the converted output, and a
notification bar. All values live in an immutable ConverterState; each
handler reads the widgets into a new state, applies an action from
subtitle_converter.state, and re-renders. Notifications auto-dismiss via
a Notifier driven by the root window's .after() timer.

RULES:
- Everything runs on the Tk main thread; conversion is fast enough
- Widgets are written ONLY by _render() (plus the initial build)
- File read failures show an error dialog and leave the input untouched
- Empty input shows "No content provided" as the result, never a dialog
"""

from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox, ttk
from typing import List, Optional, Tuple

from subtitle_converter.config import (
    COPIED_MESSAGE,
    COPIED_WITH_PROMPT_MESSAGE,
    SUPPORTED_SUBTITLE_FORMATS,
    load_default_style,
)
from subtitle_converter.core.summary import BaseSummarizer, PlaceholderSummarizer
from subtitle_converter.errors import FileReadError
from subtitle_converter.formatters import get_formatter
from subtitle_converter.formatters.base import OutputStyle
from subtitle_converter.loader import load_subtitle_file
from subtitle_converter.notifications import Notifier
from subtitle_converter.state import (
    ConverterState,
    clear_notification,
    convert,
    copy_text,
    copy_text_with_prompt,
    with_ai_prompt,
    with_notification,
    with_style,
    with_subtitle_text,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_WINDOW_TITLE = "Subtitle Converter"
_WINDOW_MIN_WIDTH = 640
_WINDOW_MIN_HEIGHT = 620
_PAD = 8

# (style, display label) in dropdown order
_STYLE_CHOICES: List[Tuple[OutputStyle, str]] = [
    (style, get_formatter(style).name) for style in OutputStyle
]


def _style_for_label(label: str) -> OutputStyle:
    for style, name in _STYLE_CHOICES:
        if name == label:
            return style
    return OutputStyle.parse(label)


def _label_for_style(style: OutputStyle) -> str:
    for choice, name in _STYLE_CHOICES:
        if choice is style:
            return name
    return style.value


# ---------------------------------------------------------------------------
# Main GUI Application
# ---------------------------------------------------------------------------

class SubtitleConverterApp:
    """Main tkinter application for the Subtitle Converter.

    HOW: Holds the current ConverterState in self._state. Button handlers
    call _sync_from_widgets(), apply a state action, then _render().

    RULES:
    - self._state is replaced, never mutated
    - The summarizer is injected so tests and future backends can swap it
    """

    def __init__(
        self,
        root: tk.Tk,
        summarizer: Optional[BaseSummarizer] = None,
        initial_state: Optional[ConverterState] = None,
    ) -> None:
        self._root = root
        self._root.title(_WINDOW_TITLE)
        self._root.minsize(_WINDOW_MIN_WIDTH, _WINDOW_MIN_HEIGHT)

        self._summarizer = summarizer or PlaceholderSummarizer()
        self._state = initial_state or ConverterState(style=load_default_style())
        self._notifier = Notifier(
            self._root,
            on_show=self._show_notification,
            on_hide=self._hide_notification,
        )

        self._build_ui()
        self._render()

    # ------------------------------------------------------------------
    # UI Construction
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        """Build the main window layout."""
        main = ttk.Frame(self._root, padding=_PAD)
        main.pack(fill=tk.BOTH, expand=True)

        ttk.Label(
            main, text=_WINDOW_TITLE, font=("TkDefaultFont", 18, "bold")
        ).pack()
        ttk.Label(
            main,
            text="Transform your subtitle files into well-structured documents",
            foreground="gray",
        ).pack(pady=(0, _PAD))

        # --- Input ---
        input_frame = ttk.LabelFrame(main, text="Subtitles", padding=_PAD)
        input_frame.pack(fill=tk.BOTH, expand=True, pady=(0, _PAD))

        self._input_text = tk.Text(input_frame, height=10, wrap=tk.WORD, undo=False)
        self._input_text.pack(fill=tk.BOTH, expand=True)
        self._input_text.insert("1.0", self._state.subtitle_text)

        upload_row = ttk.Frame(input_frame)
        upload_row.pack(fill=tk.X, pady=(_PAD, 0))
        ttk.Button(
            upload_row, text="Upload File...", command=self._browse_file
        ).pack(side=tk.LEFT)
        formats = ", ".join(sorted(SUPPORTED_SUBTITLE_FORMATS))
        ttk.Label(
            upload_row,
            text="Supported formats: {}".format(formats),
            foreground="gray",
        ).pack(side=tk.LEFT, padx=(_PAD, 0))

        # --- Settings ---
        settings_frame = ttk.LabelFrame(main, text="Settings", padding=_PAD)
        settings_frame.pack(fill=tk.X, pady=(0, _PAD))

        ttk.Label(settings_frame, text="Output format:").grid(
            row=0, column=0, sticky=tk.W
        )
        self._style_var = tk.StringVar(value=_label_for_style(self._state.style))
        self._style_combo = ttk.Combobox(
            settings_frame,
            textvariable=self._style_var,
            values=[name for _, name in _STYLE_CHOICES],
            state="readonly",
            width=16,
        )
        self._style_combo.grid(row=0, column=1, sticky=tk.W, padx=(4, 16))

        ttk.Label(settings_frame, text="AI prompt (optional):").grid(
            row=1, column=0, sticky=tk.W, pady=(4, 0)
        )
        self._prompt_var = tk.StringVar(value=self._state.ai_prompt)
        ttk.Entry(settings_frame, textvariable=self._prompt_var).grid(
            row=1, column=1, columnspan=2, sticky=tk.EW, padx=(4, 0), pady=(4, 0)
        )
        settings_frame.columnconfigure(2, weight=1)

        # --- Actions ---
        btn_row = ttk.Frame(main)
        btn_row.pack(fill=tk.X, pady=(0, _PAD))
        ttk.Button(btn_row, text="Convert", command=self._convert).pack(side=tk.LEFT)
        self._copy_btn = ttk.Button(btn_row, text="Copy", command=self._copy)
        self._copy_btn.pack(side=tk.LEFT, padx=(_PAD, 0))
        self._copy_prompt_btn = ttk.Button(
            btn_row, text="Copy with Prompt", command=self._copy_with_prompt
        )
        self._copy_prompt_btn.pack(side=tk.LEFT, padx=(_PAD, 0))

        # --- Output ---
        self._output_frame = ttk.LabelFrame(main, text="Converted Output", padding=_PAD)
        self._output_frame.pack(fill=tk.BOTH, expand=True, pady=(0, _PAD))

        self._output_text = tk.Text(
            self._output_frame, height=10, wrap=tk.WORD, state=tk.DISABLED
        )
        self._output_text.pack(fill=tk.BOTH, expand=True)

        self._summary_label = ttk.Label(
            self._output_frame, text="", foreground="gray", wraplength=560
        )
        self._summary_label.pack(fill=tk.X, pady=(4, 0))

        # --- Notification bar ---
        self._notification_label = ttk.Label(
            main, text="", foreground="green", anchor=tk.E
        )
        self._notification_label.pack(fill=tk.X)

    # ------------------------------------------------------------------
    # State <-> widgets
    # ------------------------------------------------------------------

    def _sync_from_widgets(self) -> None:
        """Copy the editable widget values into a new state record."""
        # Text widgets always end with an implicit newline
        text = self._input_text.get("1.0", "end-1c")
        state = with_subtitle_text(self._state, text)
        state = with_style(state, _style_for_label(self._style_var.get()))
        state = with_ai_prompt(state, self._prompt_var.get())
        self._state = state

    def _render(self) -> None:
        """Update read-only widgets from self._state."""
        state = self._state

        self._output_text.configure(state=tk.NORMAL)
        self._output_text.delete("1.0", tk.END)
        self._output_text.insert("1.0", state.converted_text)
        self._output_text.configure(state=tk.DISABLED)

        self._summary_label.configure(
            text=state.ai_summary if state.show_summary else ""
        )

        copy_state = tk.NORMAL if state.has_output else tk.DISABLED
        self._copy_btn.configure(state=copy_state)
        self._copy_prompt_btn.configure(state=copy_state)

        self._notification_label.configure(text=state.notification or "")

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _browse_file(self) -> None:
        """Open a file dialog and load the chosen subtitle file."""
        ext_pattern = " ".join(
            "*{}".format(e) for e in sorted(SUPPORTED_SUBTITLE_FORMATS)
        )
        path = filedialog.askopenfilename(
            title="Select Subtitle File",
            filetypes=[
                ("Subtitle files", ext_pattern),
                ("All files", "*.*"),
            ],
        )
        if path:
            self._load_file(Path(path))

    def _load_file(self, path: Path) -> None:
        try:
            text = load_subtitle_file(path)
        except FileReadError as exc:
            logger.warning("File read failed: %s", exc)
            messagebox.showerror("Could Not Read File", str(exc))
            return

        self._input_text.delete("1.0", tk.END)
        self._input_text.insert("1.0", text)
        self._state = with_subtitle_text(self._state, text)

    def _convert(self) -> None:
        self._sync_from_widgets()
        self._state = convert(self._state, self._summarizer)
        self._render()

    def _copy(self) -> None:
        self._sync_from_widgets()
        self._write_clipboard(copy_text(self._state))
        self._notifier.notify(COPIED_MESSAGE)

    def _copy_with_prompt(self) -> None:
        self._sync_from_widgets()
        self._write_clipboard(copy_text_with_prompt(self._state))
        self._notifier.notify(COPIED_WITH_PROMPT_MESSAGE)

    def _write_clipboard(self, text: str) -> None:
        self._root.clipboard_clear()
        self._root.clipboard_append(text)
        # Keep the clipboard contents after the window closes on X11
        self._root.update()

    # ------------------------------------------------------------------
    # Notification callbacks (called by Notifier)
    # ------------------------------------------------------------------

    def _show_notification(self, message: str) -> None:
        self._state = with_notification(self._state, message)
        self._render()

    def _hide_notification(self) -> None:
        self._state = clear_notification(self._state)
        self._render()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Launch the Tkinter GUI application.

    RULES:
    - Blocks until the window is closed
    - Must be called from the main thread
    - Raises ValueError if SUBCONV_DEFAULT_STYLE is set to an unknown style
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    root = tk.Tk()
    SubtitleConverterApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
