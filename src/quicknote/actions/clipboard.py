"""Copy, cut, and paste against an injected clipboard port."""

from __future__ import annotations

from quicknote.buffer import EditorState, delete_effective, effective_text, insert_at
from quicknote.ports import ClipboardPort, ClipboardUnavailableError
from quicknote.runtime import telemetry

from .core import ActionResult, error, info, warn


def _unavailable(state: EditorState, action: str, exc: Exception) -> ActionResult:
    telemetry.record_event(
        "clipboard.unavailable", level="error", data={"action": action, "reason": exc}
    )
    return ActionResult(
        state=state,
        status="clipboard_unavailable",
        notice=error(f"Clipboard unavailable: {exc}"),
    )


def copy_text(state: EditorState, clipboard: ClipboardPort) -> ActionResult:
    text = effective_text(state)
    if not text:
        return ActionResult(
            state=state, status="copy_empty", notice=warn("Nothing to copy.")
        )
    try:
        clipboard.write(text)
    except ClipboardUnavailableError as exc:
        return _unavailable(state, "copy", exc)
    return ActionResult(state=state, status="copied", notice=info("Text Copied! 📋"))


def cut_text(state: EditorState, clipboard: ClipboardPort) -> ActionResult:
    text = effective_text(state)
    if not text:
        return ActionResult(
            state=state, status="cut_empty", notice=warn("Nothing to cut.")
        )
    try:
        clipboard.write(text)
    except ClipboardUnavailableError as exc:
        return _unavailable(state, "cut", exc)
    return ActionResult(
        state=delete_effective(state),
        status="cut",
        notice=info("Text Cut! ✂️"),
        changed=True,
    )


def paste_text(state: EditorState, clipboard: ClipboardPort) -> ActionResult:
    try:
        pasted = clipboard.read()
    except ClipboardUnavailableError as exc:
        return _unavailable(state, "paste", exc)
    if not pasted:
        return ActionResult(
            state=state, status="paste_empty", notice=warn("Clipboard is empty.")
        )
    return ActionResult(
        state=insert_at(state, pasted),
        status="pasted",
        notice=info("Text Pasted! 📌"),
        changed=True,
    )


__all__ = ["copy_text", "cut_text", "paste_text"]
