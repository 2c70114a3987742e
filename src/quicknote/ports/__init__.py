"""Persistence and clipboard ports consumed by the note actions."""

from .clipboard import (
    ClipboardPort,
    ClipboardUnavailableError,
    MemoryClipboard,
    SystemClipboard,
)
from .store import (
    NOTE_KEY,
    STORE_NAME,
    JsonFileStore,
    MemoryStore,
    PersistenceStore,
    PersistenceUnavailableError,
)

__all__ = [
    "ClipboardPort",
    "ClipboardUnavailableError",
    "MemoryClipboard",
    "SystemClipboard",
    "NOTE_KEY",
    "STORE_NAME",
    "JsonFileStore",
    "MemoryStore",
    "PersistenceStore",
    "PersistenceUnavailableError",
]
