"""Locale-to-table resolution with a build-once cache."""

from __future__ import annotations

import threading
from typing import Dict, Optional

from boundary_engine.errors import UnsupportedLocaleError
from boundary_engine.runtime import telemetry
from boundary_engine.runtime.settings import get_settings
from boundary_engine.runtime.telemetry import rule_span

from .defaults import load_default_rules
from .locale import fallback_chain, normalize_locale
from .models import RuleTable, ensure_kind
from .registry import RuleRegistry

MAX_CACHED_LOCALES = 256


class LocaleResolver:
    """Maps ``(kind, locale)`` to a shared, immutable :class:`RuleTable`.

    Lookup tries the exact tag, then each shorter tag, then ``root``. Tables
    are built once per ``(kind, tag)`` even under concurrent first use and
    are reused by every locale that falls back to the same tag. Registry
    changes invalidate the cache on the next lookup.

    Locks exist only per registered ``(kind, tag)``; the locale-to-table
    shortcut holds at most ``max_cached_locales`` entries and is emptied
    when full.
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        *,
        logger_name: str | None = None,
        load_defaults: bool = True,
        max_cached_locales: int = MAX_CACHED_LOCALES,
    ) -> None:
        self._registry = registry or RuleRegistry(logger_name=logger_name)
        if load_defaults and registry is None:
            load_default_rules(self._registry)
        self._logger_name = logger_name
        self._max_cached_locales = max(1, max_cached_locales)
        self._resolved: Dict[tuple[str, str], tuple[int, RuleTable]] = {}
        self._built: Dict[tuple[str, str], tuple[int, RuleTable]] = {}
        self._locks: Dict[tuple[str, str], threading.Lock] = {}
        self._guard = threading.Lock()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def candidates(self, locale: Optional[str]) -> tuple[str, ...]:
        return fallback_chain(self._effective_locale(locale))

    def cached_locales(self) -> int:
        return len(self._resolved)

    def resolve(self, kind: str, locale: Optional[str] = None) -> RuleTable:
        ensure_kind(kind)
        normalized = normalize_locale(self._effective_locale(locale))
        key = (kind, normalized)
        revision = self._registry.revision()
        cached = self._resolved.get(key)
        if cached is not None and cached[0] == revision:
            return cached[1]

        with rule_span(
            "resolve", kind=kind, logger_name=self._logger_name
        ) as handle:
            if cached is not None:
                handle.note("stale", cached_revision=cached[0], revision=revision)
            tag = self._select_tag(kind, normalized)
            handle.select(tag)
            table = self._table_for(kind, tag, revision)

        if tag != normalized:
            telemetry.record_event(
                "rules.locale_fallback",
                level="debug",
                data={"kind": kind, "locale": normalized, "tag": tag},
                logger_name=self._logger_name,
            )
        with self._guard:
            if len(self._resolved) >= self._max_cached_locales:
                self._resolved.clear()
            self._resolved[key] = (revision, table)
        return table

    def reset(self, kind: Optional[str] = None) -> None:
        with self._guard:
            for cache in (self._resolved, self._built, self._locks):
                for key in list(cache):
                    if kind is None or key[0] == kind:
                        cache.pop(key, None)

    def _effective_locale(self, locale: Optional[str]) -> str:
        if locale is None or not locale.strip():
            return get_settings().default_locale
        return locale

    def _select_tag(self, kind: str, locale: str) -> str:
        chain = fallback_chain(locale)
        for tag in chain:
            if self._registry.has(kind, tag):
                return tag
        telemetry.record_event(
            "rules.unsupported_locale",
            level="error",
            data={"kind": kind, "locale": locale, "tried": ",".join(chain)},
            logger_name=self._logger_name,
        )
        raise UnsupportedLocaleError(kind, locale, tried=chain)

    def _table_for(self, kind: str, tag: str, revision: int) -> RuleTable:
        key = (kind, tag)
        with self._build_lock(key):
            cached = self._built.get(key)
            if cached is not None and cached[0] == revision:
                return cached[1]
            entry = self._registry.get(kind, tag)
            with rule_span(
                "build_table", kind=kind, tag=tag, logger_name=self._logger_name
            ) as handle:
                table = entry.build(tag)
                if table.kind != kind:
                    raise ValueError(
                        f"Builder for ({kind!r}, {tag!r}) produced a "
                        f"'{table.kind}' table"
                    )
                handle.describe(table)
                handle.note("built")
            self._built[key] = (revision, table)
            return table

    def _build_lock(self, key: tuple[str, str]) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock


__all__ = ["LocaleResolver", "MAX_CACHED_LOCALES"]
