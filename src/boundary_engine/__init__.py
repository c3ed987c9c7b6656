"""Locale-aware text boundary analysis engine."""

from .errors import (
    BoundaryError,
    NoTextAttachedError,
    OutOfRangeError,
    UnsupportedLocaleError,
)
from .iterator import (
    DONE,
    BoundaryIterator,
    character_iterator,
    create_iterator,
    line_iterator,
    sentence_iterator,
    word_iterator,
)
from .rules import LocaleResolver, RuleRegistry, RuleTable
from .text import TextBuffer

__all__ = [
    "BoundaryError",
    "BoundaryIterator",
    "DONE",
    "LocaleResolver",
    "NoTextAttachedError",
    "OutOfRangeError",
    "RuleRegistry",
    "RuleTable",
    "TextBuffer",
    "UnsupportedLocaleError",
    "character_iterator",
    "create_iterator",
    "line_iterator",
    "sentence_iterator",
    "word_iterator",
]

__version__ = "0.1.0"
