"""Adapter that wires NoteSession events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from quicknote.actions import ActionResult, Notice
from quicknote.buffer import BufferMirror, InvalidRangeError, SelectionRange
from quicknote.runtime.session import NoteSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_editor: Callable[[BufferMirror], None]
    notify: Callable[[Notice], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualNoteAdapter:
    """Bridges NoteSession + bus events to a Textual-friendly surface.

    Implements :class:`~quicknote.buffer.BufferSync` for the host widget.
    """

    EVENTS = (
        "note.loaded",
        "note.load_failed",
        "note.saved",
        "note.save_failed",
        "note.copied",
        "note.copy_empty",
        "note.cut",
        "note.cut_empty",
        "note.pasted",
        "note.paste_empty",
        "note.new_note",
        "note.clipboard_unavailable",
        "note.closed",
    )

    def __init__(self, session: NoteSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()

    def start(self) -> ActionResult:
        result = self.session.start()
        self._log_state("start <-", status=result.status)
        return result

    def shutdown(self) -> Optional[ActionResult]:
        result = self.session.end()
        self._log_state("shutdown <-", status=result.status if result else None)
        return result

    def handle_host_edit(self, text: str, anchor: int, cursor: int) -> bool:
        """Adopt the text and the anchor/cursor offsets the widget now shows."""

        return self.push_host_edit(
            BufferMirror(text=text, selection=SelectionRange.between(anchor, cursor))
        )

    def push_host_edit(self, mirror: BufferMirror) -> bool:
        """Adopt a host snapshot as the session state.

        Returns ``False`` when the host reported a selection outside its own
        text; the session keeps its previous state and the host is re-synced.
        """

        try:
            self.session.edit(mirror.text, mirror.selection)
        except InvalidRangeError as exc:
            self._log_state("edit !!", error=str(exc), text_length=exc.length)
            self.hooks.notify(Notice(f"Invalid selection: {exc}", severity="error"))
            self._refresh_editor()
            return False
        return True

    def handle_action(self, name: str) -> ActionResult:
        """Run a toolbar action by name and surface its outcome."""

        self._log_state("action ->", action=name)
        result = self.session.run(name)
        self._log_state(
            "result <-",
            status=result.status,
            changed=result.changed,
            message=result.notice.message if result.notice else None,
        )
        return result

    def pull_buffer(self) -> BufferMirror:
        state = self.session.state
        return BufferMirror(
            text=state.text,
            selection=state.selection,
            attributes={"key": self.session.key},
        )

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in self.EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)
        if isinstance(payload, ActionResult):
            if payload.changed:
                self._refresh_editor()
            if payload.notice is not None:
                self.hooks.notify(payload.notice)

    def _refresh_editor(self) -> None:
        self.hooks.update_editor(self.pull_buffer())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.session.state
        return {
            "length": state.length,
            "selection": (state.selection.start, state.selection.end),
            "key": self.session.key,
        }


__all__ = ["TextualNoteAdapter", "TextualUIHooks"]
