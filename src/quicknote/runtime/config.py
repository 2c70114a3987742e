"""Runtime settings resolved from ``QUICKNOTE_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from quicknote.ports import (
    STORE_NAME,
    ClipboardPort,
    JsonFileStore,
    MemoryClipboard,
    MemoryStore,
    PersistenceStore,
    SystemClipboard,
)

from .telemetry import ENV_PREFIX, parse_flag

STORE_BACKENDS = ("file", "memory")
CLIPBOARD_BACKENDS = ("system", "memory")
DEFAULT_STORE_DIR = Path("~/.quicknote")


def _choice(value: str, allowed: tuple[str, ...], what: str) -> str:
    normalized = value.strip().lower()
    if normalized not in allowed:
        raise ValueError(
            f"Unknown {what} backend '{value}' (expected one of {', '.join(allowed)})"
        )
    return normalized


@dataclass(slots=True)
class Settings:
    store_dir: Path = field(default_factory=lambda: DEFAULT_STORE_DIR)
    store_name: str = STORE_NAME
    store: str = "file"
    clipboard: str = "system"
    save_on_exit: bool = True

    def __post_init__(self) -> None:
        self.store_dir = Path(self.store_dir).expanduser()
        self.store = _choice(self.store, STORE_BACKENDS, "store")
        self.clipboard = _choice(self.clipboard, CLIPBOARD_BACKENDS, "clipboard")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{name}")

        return cls(
            store_dir=Path(get("STORE_DIR") or DEFAULT_STORE_DIR),
            store_name=get("STORE_NAME") or STORE_NAME,
            store=get("STORE") or "file",
            clipboard=get("CLIPBOARD") or "system",
            save_on_exit=parse_flag(get("SAVE_ON_EXIT"), True),
        )

    def build_store(self) -> PersistenceStore:
        if self.store == "memory":
            return MemoryStore()
        return JsonFileStore(self.store_dir, name=self.store_name)

    def build_clipboard(self) -> ClipboardPort:
        if self.clipboard == "memory":
            return MemoryClipboard()
        return SystemClipboard()


__all__ = ["Settings", "STORE_BACKENDS", "CLIPBOARD_BACKENDS", "DEFAULT_STORE_DIR"]
