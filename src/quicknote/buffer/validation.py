"""Validation helpers shared across buffer operations."""

from __future__ import annotations

from .state import EditorState, SelectionRange


class InvalidRangeError(ValueError):
    """Raised when a caller supplies a selection outside the text bounds."""

    def __init__(
        self,
        message: str,
        *,
        selection: SelectionRange | None = None,
        length: int | None = None,
    ) -> None:
        super().__init__(message)
        self.selection = selection
        self.length = length


def ensure_range(text: str, selection: SelectionRange) -> SelectionRange:
    length = len(text)
    if selection.start < 0:
        raise InvalidRangeError(
            "Selection starts before the text", selection=selection, length=length
        )
    if selection.end > length:
        raise InvalidRangeError(
            "Selection ends past the text", selection=selection, length=length
        )
    if selection.start > selection.end:
        raise InvalidRangeError(
            "Selection start is after its end", selection=selection, length=length
        )
    return selection


def ensure_state(state: EditorState) -> EditorState:
    ensure_range(state.text, state.selection)
    return state
