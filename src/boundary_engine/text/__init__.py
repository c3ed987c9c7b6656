"""Text buffer abstraction and offset validation."""

from .buffer import TextBuffer
from .validation import ensure_index, ensure_offset

__all__ = [
    "TextBuffer",
    "ensure_index",
    "ensure_offset",
]
