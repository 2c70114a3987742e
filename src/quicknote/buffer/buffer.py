"""Selection-aware operations over :class:`EditorState` values.

All functions here are pure: they validate the incoming state, never mutate
it, and return a fresh state whose selection is valid for its text.
"""

from __future__ import annotations

from .state import EditorState, SelectionRange
from .validation import ensure_range, ensure_state


def effective_text(state: EditorState) -> str:
    """Return the selected text, or the whole text when nothing is selected."""

    selection = ensure_state(state).selection
    if selection.collapsed:
        return state.text
    return state.text[selection.start : selection.end]


def delete_effective(state: EditorState) -> EditorState:
    """Remove the selection, or clear the whole text when nothing is selected."""

    selection = ensure_state(state).selection
    if selection.collapsed:
        return reset()
    text = state.text[: selection.start] + state.text[selection.end :]
    return EditorState(text=text, selection=SelectionRange.at(selection.start))


def insert_at(state: EditorState, inserted: str) -> EditorState:
    """Replace the selection (or insert at the cursor) with ``inserted``."""

    selection = ensure_state(state).selection
    text = state.text[: selection.start] + inserted + state.text[selection.end :]
    cursor = selection.start + len(inserted)
    return EditorState(text=text, selection=SelectionRange.at(cursor))


def reset() -> EditorState:
    return EditorState(text="", selection=SelectionRange.at(0))


def replace_state(text: str, selection: SelectionRange) -> EditorState:
    """Adopt a whole ``(text, selection)`` pair reported by the UI shell."""

    return EditorState(text=text, selection=ensure_range(text, selection))


__all__ = [
    "effective_text",
    "delete_effective",
    "insert_at",
    "reset",
    "replace_state",
]
