"""Logging, configuration, and the note session that owns editor state."""

from . import telemetry
from .config import Settings

__all__ = ["telemetry", "Settings"]
