"""Rule tables, built-in rule data, and locale resolution."""

from .builder import TableBuilder
from .classes import build_classifier
from .defaults import DEFAULT_RULES, load_default_rules
from .grapheme import build_grapheme_table
from .line import build_line_table
from .locale import fallback_chain, normalize_locale
from .models import (
    BREAK,
    BREAK_KINDS,
    CONTINUE,
    MARK,
    BreakKind,
    RuleTable,
    Transition,
)
from .registry import RegistryStats, RuleConflictError, RuleEntry, RuleRegistry
from .resolver import LocaleResolver
from .sentence import build_sentence_table
from .word import build_word_table

__all__ = [
    "BREAK",
    "BREAK_KINDS",
    "BreakKind",
    "CONTINUE",
    "DEFAULT_RULES",
    "LocaleResolver",
    "MARK",
    "RegistryStats",
    "RuleConflictError",
    "RuleEntry",
    "RuleRegistry",
    "RuleTable",
    "TableBuilder",
    "Transition",
    "build_classifier",
    "build_grapheme_table",
    "build_line_table",
    "build_sentence_table",
    "build_word_table",
    "fallback_chain",
    "load_default_rules",
    "normalize_locale",
]
