"""Load, save, and new-note actions against the persistence store."""

from __future__ import annotations

from quicknote.buffer import EditorState, reset
from quicknote.ports import NOTE_KEY, PersistenceStore, PersistenceUnavailableError
from quicknote.runtime import telemetry

from .core import ActionResult, error, info


def save_note(
    state: EditorState, store: PersistenceStore, *, key: str = NOTE_KEY
) -> ActionResult:
    # The returned state is always the input state, saved or not.
    try:
        store.save(key, state.text)
    except PersistenceUnavailableError as exc:
        telemetry.record_event(
            "store.save_failed", level="error", data={"key": key, "reason": exc}
        )
        return ActionResult(
            state=state,
            status="save_failed",
            notice=error(f"Could not save note: {exc}"),
        )
    return ActionResult(
        state=state, status="saved", notice=info("Note Saved to disk! ✅")
    )


def load_note(store: PersistenceStore, *, key: str = NOTE_KEY) -> ActionResult:
    try:
        text = store.load(key)
    except PersistenceUnavailableError as exc:
        telemetry.record_event(
            "store.load_failed", level="error", data={"key": key, "reason": exc}
        )
        return ActionResult(
            state=reset(),
            status="load_failed",
            notice=error(f"Could not load note: {exc}"),
        )
    state = EditorState.from_text(text)
    if not text:
        return ActionResult(state=state, status="loaded")
    return ActionResult(
        state=state,
        status="loaded",
        notice=info("Loaded last saved note."),
        changed=True,
    )


def new_note(state: EditorState) -> ActionResult:
    fresh = reset()
    return ActionResult(
        state=fresh,
        status="new_note",
        notice=info("New Note started."),
        changed=fresh != state,
    )


__all__ = ["save_note", "load_note", "new_note"]
