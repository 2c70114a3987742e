from __future__ import annotations

import pytest

from quicknote.actions import (
    copy_text,
    cut_text,
    load_note,
    new_note,
    paste_text,
    save_note,
)
from quicknote.buffer import EditorState, SelectionRange
from quicknote.ports import (
    NOTE_KEY,
    ClipboardUnavailableError,
    MemoryClipboard,
    MemoryStore,
    PersistenceUnavailableError,
)


class BrokenClipboard:
    def write(self, text: str) -> None:
        raise ClipboardUnavailableError("no clipboard")

    def read(self) -> str:
        raise ClipboardUnavailableError("no clipboard")


class BrokenStore:
    def save(self, key: str, text: str) -> None:
        raise PersistenceUnavailableError("disk full", key=key)

    def load(self, key: str) -> str:
        raise PersistenceUnavailableError("unreadable", key=key)


def make_state(text: str, start: int, end: int | None = None) -> EditorState:
    selection = SelectionRange(start, start if end is None else end)
    return EditorState(text=text, selection=selection)


def test_copy_selection_writes_clipboard_and_keeps_state() -> None:
    clipboard = MemoryClipboard()
    state = make_state("Hello World", 0, 5)

    result = copy_text(state, clipboard)

    assert clipboard.read() == "Hello"
    assert result.state == state
    assert result.status == "copied"
    assert result.notice is not None and result.notice.message == "Text Copied! 📋"
    assert result.changed is False


def test_copy_without_selection_copies_everything() -> None:
    clipboard = MemoryClipboard()

    copy_text(make_state("all of it", 3), clipboard)

    assert clipboard.read() == "all of it"


def test_copy_empty_note_warns() -> None:
    clipboard = MemoryClipboard("previous")

    result = copy_text(EditorState(), clipboard)

    assert result.status == "copy_empty"
    assert result.notice is not None
    assert result.notice.message == "Nothing to copy."
    assert result.notice.severity == "warning"
    assert clipboard.read() == "previous"


def test_copy_with_unavailable_clipboard_reports_error() -> None:
    state = make_state("text", 0, 2)

    result = copy_text(state, BrokenClipboard())

    assert result.state == state
    assert result.status == "clipboard_unavailable"
    assert result.failed is True


def test_cut_selection_moves_text_to_clipboard() -> None:
    clipboard = MemoryClipboard()

    result = cut_text(make_state("Hello World", 0, 5), clipboard)

    assert clipboard.read() == "Hello"
    assert result.state == make_state(" World", 0)
    assert result.changed is True
    assert result.notice is not None and result.notice.message == "Text Cut! ✂️"


def test_cut_without_selection_takes_whole_note() -> None:
    clipboard = MemoryClipboard()

    result = cut_text(make_state("entire note", 4), clipboard)

    assert clipboard.read() == "entire note"
    assert result.state == EditorState(text="", selection=SelectionRange(0, 0))


def test_cut_empty_note_warns() -> None:
    result = cut_text(EditorState(), MemoryClipboard())

    assert result.status == "cut_empty"
    assert result.notice is not None and result.notice.message == "Nothing to cut."


def test_cut_keeps_text_when_clipboard_write_fails() -> None:
    state = make_state("keep me", 0, 4)

    result = cut_text(state, BrokenClipboard())

    assert result.state == state
    assert result.changed is False
    assert result.failed is True


def test_paste_inserts_at_cursor() -> None:
    result = paste_text(make_state("abc", 3), MemoryClipboard("def"))

    assert result.state == make_state("abcdef", 6)
    assert result.notice is not None and result.notice.message == "Text Pasted! 📌"


def test_paste_replaces_selection() -> None:
    result = paste_text(make_state("Hello World", 6, 11), MemoryClipboard("there"))

    assert result.state.text == "Hello there"
    assert result.state.selection == SelectionRange.at(11)


def test_paste_empty_clipboard_warns_and_keeps_state() -> None:
    state = make_state("abc", 1)

    result = paste_text(state, MemoryClipboard())

    assert result.state == state
    assert result.status == "paste_empty"
    assert result.notice is not None and result.notice.message == "Clipboard is empty."


def test_paste_with_unavailable_clipboard() -> None:
    state = make_state("abc", 1)

    result = paste_text(state, BrokenClipboard())

    assert result.state == state
    assert result.failed is True


def test_save_then_load_round_trip() -> None:
    store = MemoryStore()

    saved = save_note(make_state("persist me", 2), store)
    loaded = load_note(store)

    assert saved.notice is not None
    assert saved.notice.message == "Note Saved to disk! ✅"
    assert store.load(NOTE_KEY) == "persist me"
    assert loaded.state == EditorState.from_text("persist me")
    assert loaded.notice is not None
    assert loaded.notice.message == "Loaded last saved note."


def test_load_of_empty_store_has_no_notice() -> None:
    result = load_note(MemoryStore())

    assert result.state == EditorState()
    assert result.notice is None


def test_save_failure_keeps_edits() -> None:
    state = make_state("unsaved edits", 3)

    result = save_note(state, BrokenStore())

    assert result.state == state
    assert result.status == "save_failed"
    assert result.failed is True


def test_load_failure_starts_empty() -> None:
    result = load_note(BrokenStore())

    assert result.state == EditorState()
    assert result.status == "load_failed"
    assert result.failed is True


@pytest.mark.parametrize(
    "state", [EditorState(), make_state("old", 1), make_state("old", 0, 3)]
)
def test_new_note_always_resets(state: EditorState) -> None:
    result = new_note(state)

    assert result.state == EditorState(text="", selection=SelectionRange(0, 0))
    assert result.notice is not None and result.notice.message == "New Note started."
    assert result.changed is (state.text != "" or state.selection != SelectionRange())
