"""Text content and cursor/selection state for the note buffer."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Half-open ``[start, end)`` offsets into the note text."""

    start: int = 0
    end: int = 0

    @classmethod
    def at(cls, offset: int) -> "SelectionRange":
        return cls(offset, offset)

    @classmethod
    def between(cls, anchor: int, cursor: int) -> "SelectionRange":
        """Build a range from an anchor/cursor pair given in either order."""

        if anchor > cursor:
            anchor, cursor = cursor, anchor
        return cls(anchor, cursor)

    @property
    def collapsed(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start

    def clamp(self, length: int) -> "SelectionRange":
        start = max(0, min(self.start, length))
        end = max(start, min(self.end, length))
        return SelectionRange(start, end)


@dataclass(frozen=True, slots=True)
class EditorState:
    """Immutable pairing of the note text with its active selection.

    The constructor stores whatever range it is given; buffer operations
    validate it with :func:`~quicknote.buffer.validation.ensure_state`.
    :meth:`with_text` and :meth:`with_selection` clamp the range to the text.
    """

    text: str = ""
    selection: SelectionRange = SelectionRange()

    @classmethod
    def from_text(cls, text: str) -> "EditorState":
        return cls(text=text, selection=SelectionRange.at(0))

    @property
    def length(self) -> int:
        return len(self.text)

    def with_text(self, text: str) -> "EditorState":
        return EditorState(text=text, selection=self.selection.clamp(len(text)))

    def with_selection(self, selection: SelectionRange) -> "EditorState":
        return replace(self, selection=selection.clamp(len(self.text)))
