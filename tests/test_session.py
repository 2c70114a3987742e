from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

from quicknote.actions import ActionResult
from quicknote.buffer import EditorState, InvalidRangeError, SelectionRange
from quicknote.ports import (
    NOTE_KEY,
    JsonFileStore,
    MemoryClipboard,
    MemoryStore,
    PersistenceUnavailableError,
)
from quicknote.runtime.session import EventBus, NoteSession


class FlakyStore(MemoryStore):
    def __init__(self) -> None:
        super().__init__()
        self.fail = True

    def save(self, key: str, text: str) -> None:
        if self.fail:
            raise PersistenceUnavailableError("store offline", key=key)
        super().save(key, text)


def make_session(
    saved: str = "", clipboard: str = ""
) -> Tuple[NoteSession, MemoryStore, MemoryClipboard, List[Tuple[str, object]]]:
    store = MemoryStore({NOTE_KEY: saved} if saved else None)
    board = MemoryClipboard(clipboard)
    session = NoteSession(store, board)
    events: List[Tuple[str, object]] = []
    for name in ("note.loaded", "note.edited", "note.saved", "note.cut", "note.closed"):
        session.bus.subscribe(
            name, lambda payload, name=name: events.append((name, payload))
        )
    return session, store, board, events


def test_event_bus_delivers_to_subscribers() -> None:
    bus = EventBus()
    seen: List[object] = []
    bus.subscribe("ping", seen.append)

    bus.emit("ping", 1)
    bus.emit("other", 2)

    assert seen == [1]


def test_start_loads_saved_note() -> None:
    session, _store, _board, events = make_session(saved="from last time")

    result = session.start()

    assert session.state == EditorState.from_text("from last time")
    assert result.notice is not None
    assert events[0][0] == "note.loaded"


def test_session_starts_empty() -> None:
    session, _store, _board, _events = make_session()

    session.start()

    assert session.state == EditorState()


def test_edit_replaces_state_and_emits_once() -> None:
    session, _store, _board, events = make_session()

    session.edit("typed", SelectionRange.at(5))
    session.edit("typed", SelectionRange.at(5))

    assert session.state.text == "typed"
    assert [name for name, _ in events] == ["note.edited"]


def test_edit_with_invalid_range_keeps_previous_state() -> None:
    session, _store, _board, _events = make_session()
    session.edit("abc", SelectionRange.at(3))

    with pytest.raises(InvalidRangeError):
        session.edit("abcd", SelectionRange(0, 9))

    assert session.state.text == "abc"


def test_cut_then_paste_through_clipboard() -> None:
    session, _store, board, events = make_session()
    session.edit("Hello World", SelectionRange(0, 5))

    session.cut()
    assert session.state == EditorState(text=" World", selection=SelectionRange.at(0))
    assert board.read() == "Hello"

    session.edit(" World", SelectionRange.at(6))
    pasted = session.paste()

    assert pasted.state.text == " WorldHello"
    assert session.state.selection == SelectionRange.at(11)
    assert "note.cut" in [name for name, _ in events]


def test_run_dispatches_by_name() -> None:
    session, store, _board, _events = make_session()
    session.edit("note body", SelectionRange.at(0))

    result = session.run("save")

    assert result.status == "saved"
    assert store.load(NOTE_KEY) == "note body"
    assert set(session.action_names) == {"save", "copy", "paste", "cut", "new_note"}


def test_run_unknown_action_raises() -> None:
    session, _store, _board, _events = make_session()

    with pytest.raises(KeyError):
        session.run("format_disk")


def test_new_note_clears_state() -> None:
    session, _store, _board, _events = make_session(saved="old note")
    session.start()

    session.new_note()

    assert session.state == EditorState()


def test_end_saves_once() -> None:
    session, store, _board, events = make_session()
    session.edit("final words", SelectionRange.at(11))

    first = session.end()
    second = session.end()

    assert isinstance(first, ActionResult)
    assert second is None
    assert store.load(NOTE_KEY) == "final words"
    assert [name for name, _ in events].count("note.closed") == 1


def test_end_without_save_on_end_leaves_store_alone() -> None:
    store = MemoryStore()
    session = NoteSession(store, MemoryClipboard(), save_on_end=False)
    session.edit("draft", SelectionRange.at(0))

    assert session.end() is None
    assert store.load(NOTE_KEY) == ""


def test_failed_save_keeps_edits_for_retry() -> None:
    store = FlakyStore()
    session = NoteSession(store, MemoryClipboard())
    session.edit("precious", SelectionRange.at(8))

    failed = session.save()
    assert failed.status == "save_failed"
    assert session.state.text == "precious"

    store.fail = False
    retried = session.save()

    assert retried.status == "saved"
    assert store.load(NOTE_KEY) == "precious"


def test_session_saves_over_damaged_store_file(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path)
    store.path.write_text("{not json", encoding="utf-8")
    session = NoteSession(store, MemoryClipboard())

    assert session.start().status == "load_failed"
    session.edit("precious", SelectionRange.at(8))

    assert session.save().status == "saved"
    assert store.load(NOTE_KEY) == "precious"


def test_session_end_saves_text_with_lone_surrogate(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path)
    session = NoteSession(store, MemoryClipboard())
    session.edit("bad \ud800", SelectionRange.at(0))

    result = session.end()

    assert result is not None and result.status == "saved"
    assert store.load(NOTE_KEY) == "bad \ud800"
