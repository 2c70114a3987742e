"""Clipboard ports: the system clipboard and a process-local register."""

from __future__ import annotations

from typing import Protocol

import pyperclip


class ClipboardUnavailableError(RuntimeError):
    """Raised when the platform clipboard cannot be read or written."""


class ClipboardPort(Protocol):
    def write(self, text: str) -> None:
        ...

    def read(self) -> str:
        """Return the clipboard text, or ``""`` when nothing is available."""
        ...


class SystemClipboard:
    """Clipboard backed by :mod:`pyperclip` (xclip/xsel/wl-copy/pbcopy/win32)."""

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardUnavailableError(str(exc)) from exc

    def read(self) -> str:
        try:
            value = pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardUnavailableError(str(exc)) from exc
        return value or ""


class MemoryClipboard:
    """Single-register clipboard living only as long as the process."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    def write(self, text: str) -> None:
        self._text = text

    def read(self) -> str:
        return self._text


__all__ = [
    "ClipboardUnavailableError",
    "ClipboardPort",
    "SystemClipboard",
    "MemoryClipboard",
]
