"""Factory surface: one constructor per break kind."""

from __future__ import annotations

import threading
from typing import Optional

from boundary_engine.rules import LocaleResolver
from boundary_engine.rules.models import ensure_kind

from .engine import BoundaryIterator

_DEFAULT_RESOLVER: Optional[LocaleResolver] = None
_RESOLVER_LOCK = threading.Lock()


def default_resolver() -> LocaleResolver:
    """Process-wide resolver with the built-in rules, created on first use."""

    global _DEFAULT_RESOLVER
    with _RESOLVER_LOCK:
        if _DEFAULT_RESOLVER is None:
            _DEFAULT_RESOLVER = LocaleResolver(logger_name="boundary_engine.rules")
        return _DEFAULT_RESOLVER


def set_default_resolver(resolver: Optional[LocaleResolver]) -> None:
    global _DEFAULT_RESOLVER
    with _RESOLVER_LOCK:
        _DEFAULT_RESOLVER = resolver


def create_iterator(
    kind: str,
    locale: Optional[str] = None,
    *,
    resolver: Optional[LocaleResolver] = None,
) -> BoundaryIterator:
    ensure_kind(kind)
    table = (resolver or default_resolver()).resolve(kind, locale)
    return BoundaryIterator(table)


def character_iterator(
    locale: Optional[str] = None, *, resolver: Optional[LocaleResolver] = None
) -> BoundaryIterator:
    return create_iterator("character", locale, resolver=resolver)


def word_iterator(
    locale: Optional[str] = None, *, resolver: Optional[LocaleResolver] = None
) -> BoundaryIterator:
    return create_iterator("word", locale, resolver=resolver)


def line_iterator(
    locale: Optional[str] = None, *, resolver: Optional[LocaleResolver] = None
) -> BoundaryIterator:
    return create_iterator("line", locale, resolver=resolver)


def sentence_iterator(
    locale: Optional[str] = None, *, resolver: Optional[LocaleResolver] = None
) -> BoundaryIterator:
    return create_iterator("sentence", locale, resolver=resolver)


__all__ = [
    "character_iterator",
    "create_iterator",
    "default_resolver",
    "line_iterator",
    "sentence_iterator",
    "set_default_resolver",
    "word_iterator",
]
