"""Textual host for the note session."""

from .controller import TextualNoteAdapter, TextualUIHooks

__all__ = ["TextualNoteAdapter", "TextualUIHooks"]
