"""Registry of rule-table builders keyed by break kind and locale tag."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional

from boundary_engine.runtime.telemetry import rule_span

from .models import RuleTable, ensure_kind

TableFactory = Callable[[str], RuleTable]


@dataclass(frozen=True, slots=True)
class RuleEntry:
    """A registered builder; ``build(tag)`` produces the table."""

    kind: str
    tag: str
    build: TableFactory
    description: str = ""

    def __post_init__(self) -> None:
        ensure_kind(self.kind)
        if not self.tag:
            raise ValueError("rule entry tag cannot be empty")
        if not callable(self.build):
            raise TypeError("build must be callable")

    @property
    def key(self) -> tuple[str, str]:
        return (self.kind, self.tag)


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    entry_count: int
    kinds: tuple[str, ...]
    tags: tuple[str, ...]


class RuleConflictError(RuntimeError):
    """Raised when a builder is already registered for a kind and tag."""

    def __init__(self, entry: RuleEntry, existing: RuleEntry) -> None:
        super().__init__(
            f"A '{entry.kind}' rule table is already registered for '{entry.tag}'"
        )
        self.entry = entry
        self.existing = existing


class RuleRegistry:
    """Owns rule-table builders; the data provider behind the resolver."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._entries: Dict[tuple[str, str], RuleEntry] = {}
        self._logger_name = logger_name
        self._revision = 0
        self._lock = threading.RLock()

    def revision(self) -> int:
        return self._revision

    def register(
        self,
        kind: str,
        tag: str,
        build: TableFactory,
        *,
        description: str = "",
        replace: bool = False,
    ) -> RuleEntry:
        entry = RuleEntry(kind=kind, tag=tag, build=build, description=description)
        with rule_span(
            "register", kind=kind, tag=tag, logger_name=self._logger_name
        ) as handle:
            with self._lock:
                existing = self._entries.get(entry.key)
                if existing is not None and not replace:
                    raise RuleConflictError(entry, existing)
                if existing is not None:
                    handle.note("replaced")
                self._entries[entry.key] = entry
                self._touch()
            return entry

    def unregister(self, kind: str, tag: str) -> Optional[RuleEntry]:
        with rule_span(
            "unregister", kind=kind, tag=tag, logger_name=self._logger_name
        ):
            with self._lock:
                entry = self._entries.pop((ensure_kind(kind), tag), None)
                if entry is not None:
                    self._touch()
            return entry

    def get(self, kind: str, tag: str) -> RuleEntry:
        try:
            return self._entries[(ensure_kind(kind), tag)]
        except KeyError as exc:
            raise KeyError(f"No '{kind}' rule table registered for '{tag}'") from exc

    def has(self, kind: str, tag: str) -> bool:
        return (ensure_kind(kind), tag) in self._entries

    def iter_entries(self, kind: Optional[str] = None) -> Iterator[RuleEntry]:
        with self._lock:
            entries = list(self._entries.values())
        for entry in entries:
            if kind is None or entry.kind == kind:
                yield entry

    def stats(self) -> RegistryStats:
        with self._lock:
            keys = list(self._entries)
        return RegistryStats(
            entry_count=len(keys),
            kinds=tuple(sorted({kind for kind, _ in keys})),
            tags=tuple(sorted({tag for _, tag in keys})),
        )

    def _touch(self) -> None:
        self._revision += 1


__all__ = [
    "RegistryStats",
    "RuleConflictError",
    "RuleEntry",
    "RuleRegistry",
    "TableFactory",
]
