"""Adapter boundary types for syncing the buffer with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence, Tuple

from .state import SelectionRange

Location = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    text: str
    selection: SelectionRange
    attributes: dict[str, str] = field(default_factory=dict)


class BufferSync(Protocol):
    """Protocol describing how adapters exchange data with the buffer layer."""

    def pull_buffer(self) -> BufferMirror:
        """Return the latest buffer snapshot that the host should render."""
        ...

    def push_host_edit(self, mirror: BufferMirror) -> bool:
        """Submit an edit made in the host widget (typing, selection change).

        Returns ``False`` when the mirror was rejected and the host must
        re-render from :meth:`pull_buffer`.
        """
        ...


def offset_for_location(
    lines: Sequence[str], location: Location, newline: str = "\n"
) -> int:
    """Translate a ``(row, column)`` widget location into a text offset."""

    row, col = location
    offset = 0
    for i in range(row):
        offset += len(lines[i]) + len(newline)
    return offset + col


def location_for_offset(
    lines: Sequence[str], offset: int, newline: str = "\n"
) -> Location:
    """Translate a text offset back into a ``(row, column)`` widget location."""

    if not lines:
        return (0, 0)
    running = 0
    for row, line in enumerate(lines):
        line_len = len(line)
        if offset <= running + line_len:
            return (row, max(0, offset - running))
        running += line_len + len(newline)
    return (len(lines) - 1, len(lines[-1]))


__all__ = [
    "BufferMirror",
    "BufferSync",
    "Location",
    "offset_for_location",
    "location_for_offset",
]
