"""Executable Textual app hosting the note session."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Button, Footer, Header, TextArea
    from textual.widgets.text_area import Selection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use quicknote.adapters.textual.app"
    ) from exc

from quicknote.actions import Notice
from quicknote.buffer import BufferMirror, location_for_offset, offset_for_location
from quicknote.runtime import Settings, telemetry
from quicknote.runtime.session import NoteSession

from .controller import TextualNoteAdapter, TextualUIHooks

TOOLBAR = (
    ("save", "Save"),
    ("copy", "Copy"),
    ("paste", "Paste"),
    ("cut", "Cut"),
    ("new_note", "New"),
)


def create_session(settings: Settings) -> NoteSession:
    """Build a NoteSession wired to the ports the settings select."""

    return NoteSession(
        settings.build_store(),
        settings.build_clipboard(),
        save_on_end=settings.save_on_exit,
    )


class NotepadApp(App[None]):
    """Single-screen note editor with a clipboard/persistence toolbar."""

    TITLE = "My Compose Notepad"

    CSS = """
	Screen {
		layout: vertical;
	}

	#note-editor {
		height: 1fr;
		border: round $accent;
	}

	#toolbar {
		height: auto;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#toolbar Button {
		margin: 0 1 0 0;
	}
	"""

    BINDINGS = [
        ("ctrl+s", "note('save')", "Save"),
        ("ctrl+n", "note('new_note')", "New note"),
        ("f5", "note('copy')", "Copy"),
        ("f6", "note('cut')", "Cut"),
        ("f7", "note('paste')", "Paste"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: NoteSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualNoteAdapter | None = None
        self._editor: TextArea | None = None
        self._note_logger = telemetry.get_logger("quicknote.app")

    def compose(self) -> ComposeResult:
        yield Header()
        self._editor = TextArea(id="note-editor")
        self._editor.border_title = "Start typing your note here..."
        yield self._editor
        with Horizontal(id="toolbar"):
            for action, label in TOOLBAR:
                yield Button(label, id=f"toolbar-{action}")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_editor=self._update_editor,
            notify=self._show_notice,
            log=self._log_line,
        )
        self.adapter = TextualNoteAdapter(self.session, hooks)
        self.adapter.start()
        self._update_editor(self.adapter.pull_buffer())
        if self._editor:
            self._editor.focus()

    def on_unmount(self) -> None:
        if self.adapter:
            self.adapter.shutdown()

    async def action_quit(self) -> None:
        if self.adapter:
            self.adapter.shutdown()
        self.exit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("toolbar-"):
            self.action_note(button_id.removeprefix("toolbar-"))
            event.stop()

    def action_note(self, name: str) -> None:
        if self.adapter:
            self.adapter.handle_action(name)
        if self._editor:
            self._editor.focus()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._push_host_state()

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        self._push_host_state()

    def _push_host_state(self) -> None:
        if not (self.adapter and self._editor):
            return
        document = self._editor.document
        lines = document.lines
        newline = document.newline
        selection = self._editor.selection
        self.adapter.handle_host_edit(
            self._editor.text,
            offset_for_location(lines, selection.start, newline),
            offset_for_location(lines, selection.end, newline),
        )

    def _update_editor(self, mirror: BufferMirror) -> None:
        if not self._editor:
            return
        if self._editor.text != mirror.text:
            self._editor.load_text(mirror.text)
        lines = self._editor.document.lines
        newline = self._editor.document.newline
        self._editor.selection = Selection(
            location_for_offset(lines, mirror.selection.start, newline),
            location_for_offset(lines, mirror.selection.end, newline),
        )

    def _show_notice(self, notice: Notice) -> None:
        self.notify(notice.message, severity=notice.severity)

    def _log_line(self, line: str) -> None:
        self._note_logger.debug(line)


def _parse_args(
    argv: Optional[Sequence[str]], defaults: Settings
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the quicknote editor.")
    parser.add_argument(
        "--store-dir",
        default=str(defaults.store_dir),
        help=f"Directory holding the note store (default: {defaults.store_dir})",
    )
    parser.add_argument(
        "--store",
        choices=("file", "memory"),
        default=defaults.store,
        help="Persistence backend (default: %(default)s)",
    )
    parser.add_argument(
        "--clipboard",
        choices=("system", "memory"),
        default=defaults.clipboard,
        help="Clipboard backend (default: %(default)s)",
    )
    parser.add_argument(
        "--no-save-on-exit",
        action="store_true",
        help="Do not flush the note to the store when the app closes",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=None,
        help="Telemetry preset; QUICKNOTE_* variables apply when omitted",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    defaults = Settings.from_env()
    args = _parse_args(argv, defaults)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    settings = Settings(
        store_dir=args.store_dir,
        store_name=defaults.store_name,
        store=args.store,
        clipboard=args.clipboard,
        save_on_exit=defaults.save_on_exit and not args.no_save_on_exit,
    )
    NotepadApp(create_session(settings)).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
