"""Single-note editor with selection-aware editing, storage, and clipboard."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "ports",
    "runtime",
]

__version__ = "0.1.0"
