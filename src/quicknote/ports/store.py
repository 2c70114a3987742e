"""Key-value persistence for the current note."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Dict, Mapping, Protocol

STORE_NAME = "NotepadPrefs"
NOTE_KEY = "noteText"


class PersistenceUnavailableError(RuntimeError):
    """Raised when the backing store cannot be read or written."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class PersistenceStore(Protocol):
    """Single-value-per-key string store."""

    def save(self, key: str, text: str) -> None:
        ...

    def load(self, key: str) -> str:
        """Return the stored text, or ``""`` when the key is absent."""
        ...


class MemoryStore:
    """Dict-backed store used by tests and ``--store memory``."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def save(self, key: str, text: str) -> None:
        self._values[key] = text

    def load(self, key: str) -> str:
        return self._values.get(key, "")

    def serialize(self) -> Mapping[str, str]:
        return dict(self._values)


class JsonFileStore:
    """Stores every key of one namespace in ``<directory>/<name>.json``.

    The file is rewritten whole on each save through a temporary sibling file
    and :func:`os.replace`, so a crash mid-write leaves the previous contents
    intact. Only :meth:`load` reports a damaged file; :meth:`save` moves it to
    ``<name>.json.bak`` and starts over.
    """

    def __init__(self, directory: Path | str, *, name: str = STORE_NAME) -> None:
        self.directory = Path(directory).expanduser()
        self.name = name

    @property
    def path(self) -> Path:
        return self.directory / f"{self.name}.json"

    @property
    def backup_path(self) -> Path:
        return self.directory / f"{self.name}.json.bak"

    def save(self, key: str, text: str) -> None:
        try:
            values = self._read(key)
        except PersistenceUnavailableError:
            # Damaged contents move to the backup file; the note is written fresh.
            self._set_aside(key)
            values = {}
        values[key] = text
        self._write(values, key)

    def load(self, key: str) -> str:
        value = self._read(key).get(key, "")
        return value if isinstance(value, str) else ""

    def _read(self, key: str) -> Dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError as exc:
            raise PersistenceUnavailableError(
                f"Corrupt store {self.path}: {exc}", key=key
            ) from exc
        except OSError as exc:
            raise PersistenceUnavailableError(
                f"Cannot read {self.path}: {exc}", key=key
            ) from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise PersistenceUnavailableError(
                f"Corrupt store {self.path}: {exc}", key=key
            ) from exc
        if not isinstance(data, dict):
            raise PersistenceUnavailableError(
                f"Corrupt store {self.path}: expected an object", key=key
            )
        return data

    def _set_aside(self, key: str) -> None:
        if not self.path.is_file():
            return
        try:
            os.replace(self.path, self.backup_path)
        except OSError as exc:
            raise PersistenceUnavailableError(
                f"Cannot move damaged store {self.path} aside: {exc}", key=key
            ) from exc

    def _write(self, values: Mapping[str, object], key: str) -> None:
        tmp_name: str | None = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.name}-", suffix=".tmp", dir=self.directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                # ASCII escapes keep lone surrogates representable on disk.
                json.dump(values, handle, ensure_ascii=True, indent=2)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, UnicodeError, ValueError) as exc:
            raise PersistenceUnavailableError(
                f"Cannot write {self.path}: {exc}", key=key
            ) from exc
        finally:
            if tmp_name is not None:
                with suppress(FileNotFoundError):
                    os.unlink(tmp_name)


__all__ = [
    "STORE_NAME",
    "NOTE_KEY",
    "PersistenceUnavailableError",
    "PersistenceStore",
    "MemoryStore",
    "JsonFileStore",
]
