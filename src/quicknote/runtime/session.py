"""The note session: owner of the single mutable editor state slot."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from quicknote.actions import (
    ActionResult,
    copy_text,
    cut_text,
    load_note,
    new_note,
    paste_text,
    save_note,
)
from quicknote.buffer import EditorState, SelectionRange, replace_state, reset
from quicknote.ports import NOTE_KEY, ClipboardPort, PersistenceStore

from . import telemetry


class EventBus:
    """Minimal publish/subscribe channel keyed by event name."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class NoteSession:
    """Holds the current :class:`EditorState` and runs actions against it.

    Buffer operations stay pure; this class is the one place the state is
    replaced. Every replacement is announced on :attr:`bus`:

    ``note.loaded`` / ``note.load_failed`` -- after :meth:`start`
    ``note.edited`` -- after a host edit changed the state
    ``note.<status>`` -- after a toolbar action (``note.saved``, ``note.cut``...)
    ``note.closed`` -- after :meth:`end` flushed the note
    """

    def __init__(
        self,
        store: PersistenceStore,
        clipboard: ClipboardPort,
        *,
        key: str = NOTE_KEY,
        bus: Optional[EventBus] = None,
        save_on_end: bool = True,
    ) -> None:
        self.store = store
        self.clipboard = clipboard
        self.key = key
        self.bus = bus or EventBus()
        self.save_on_end = save_on_end
        self._state = reset()
        self._closed = False
        self._actions: Dict[str, Callable[[], ActionResult]] = {
            "save": self.save,
            "copy": self.copy,
            "paste": self.paste,
            "cut": self.cut,
            "new_note": self.new_note,
        }

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def action_names(self) -> tuple[str, ...]:
        return tuple(self._actions)

    def start(self) -> ActionResult:
        return self._apply("load", lambda: load_note(self.store, key=self.key))

    def end(self) -> Optional[ActionResult]:
        if self._closed:
            return None
        self._closed = True
        result = None
        if self.save_on_end:
            result = self._apply("close", self._save)
        self.bus.emit("note.closed", self._state)
        return result

    def edit(self, text: str, selection: SelectionRange) -> EditorState:
        updated = replace_state(text, selection)
        if updated != self._state:
            self._state = updated
            self.bus.emit("note.edited", updated)
        return updated

    def save(self) -> ActionResult:
        return self._apply("save", self._save)

    def copy(self) -> ActionResult:
        return self._apply("copy", lambda: copy_text(self._state, self.clipboard))

    def paste(self) -> ActionResult:
        return self._apply("paste", lambda: paste_text(self._state, self.clipboard))

    def cut(self) -> ActionResult:
        return self._apply("cut", lambda: cut_text(self._state, self.clipboard))

    def new_note(self) -> ActionResult:
        return self._apply("new_note", lambda: new_note(self._state))

    def run(self, name: str) -> ActionResult:
        try:
            action = self._actions[name]
        except KeyError:
            raise KeyError(f"Unknown note action '{name}'") from None
        return action()

    def _save(self) -> ActionResult:
        return save_note(self._state, self.store, key=self.key)

    def _apply(self, label: str, action: Callable[[], ActionResult]) -> ActionResult:
        with telemetry.span(
            f"session::{label}",
            component=True,
            metadata={"key": self.key, "length": self._state.length},
        ) as handle:
            result = action()
            handle.add_metadata("status", result.status)
        self._state = result.state
        self.bus.emit(f"note.{result.status}", result)
        return result


__all__ = ["EventBus", "NoteSession"]
