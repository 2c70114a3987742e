"""Editor state and selection-aware text operations."""

from .buffer import (
    delete_effective,
    effective_text,
    insert_at,
    replace_state,
    reset,
)
from .state import EditorState, SelectionRange
from .sync import BufferMirror, BufferSync, location_for_offset, offset_for_location
from .validation import InvalidRangeError, ensure_range

__all__ = [
    "EditorState",
    "SelectionRange",
    "effective_text",
    "delete_effective",
    "insert_at",
    "replace_state",
    "reset",
    "BufferMirror",
    "BufferSync",
    "offset_for_location",
    "location_for_offset",
    "InvalidRangeError",
    "ensure_range",
]
