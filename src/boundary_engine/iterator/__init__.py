"""Boundary iterator engine and per-kind factories."""

from .engine import DONE, BoundaryIterator
from .factory import (
    character_iterator,
    create_iterator,
    default_resolver,
    line_iterator,
    sentence_iterator,
    set_default_resolver,
    word_iterator,
)
from .scanner import floor_boundary, following_boundary, preceding_boundary

__all__ = [
    "BoundaryIterator",
    "DONE",
    "character_iterator",
    "create_iterator",
    "default_resolver",
    "floor_boundary",
    "following_boundary",
    "line_iterator",
    "preceding_boundary",
    "sentence_iterator",
    "set_default_resolver",
    "word_iterator",
]
