"""Toolbar actions composed from buffer operations and the ports."""

from .clipboard import copy_text, cut_text, paste_text
from .core import ActionResult, Notice
from .note import load_note, new_note, save_note

__all__ = [
    "ActionResult",
    "Notice",
    "copy_text",
    "cut_text",
    "paste_text",
    "load_note",
    "new_note",
    "save_note",
]
