"""Result types shared by every note action."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from quicknote.buffer import EditorState

Severity = Literal["information", "warning", "error"]


@dataclass(frozen=True, slots=True)
class Notice:
    """User-facing feedback the UI shell renders as a toast."""

    message: str
    severity: Severity = "information"


@dataclass(frozen=True, slots=True)
class ActionResult:
    """State produced by an action plus the feedback to show for it."""

    state: EditorState
    status: str
    notice: Optional[Notice] = None
    changed: bool = False

    @property
    def failed(self) -> bool:
        return self.notice is not None and self.notice.severity == "error"


def info(message: str) -> Notice:
    return Notice(message)


def warn(message: str) -> Notice:
    return Notice(message, severity="warning")


def error(message: str) -> Notice:
    return Notice(message, severity="error")


__all__ = ["Severity", "Notice", "ActionResult", "info", "warn", "error"]
