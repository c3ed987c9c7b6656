"""Incremental construction of :class:`RuleTable` instances."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from .classes import Classifier
from .models import BREAK, CONTINUE, MARK, RuleTable, Transition


def _as_tuple(values: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(values, str):
        return (values,)
    return tuple(values)


class TableBuilder:
    """Collects entry states and explicit transitions for one table.

    Pairs that are never declared break into the entry state of the class,
    so builders only spell out where segments continue.
    """

    def __init__(self, kind: str, *, description: str = "") -> None:
        self.kind = kind
        self.description = description
        self._entry: Dict[str, str] = {}
        self._transitions: Dict[tuple[str, str], Transition] = {}

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._entry)

    def entry_state(self, cls: str) -> str:
        try:
            return self._entry[cls]
        except KeyError as exc:
            raise KeyError(f"Class '{cls}' has no entry state") from exc

    def enter(self, classes: str | Iterable[str], state: str) -> "TableBuilder":
        for cls in _as_tuple(classes):
            self._entry[cls] = state
        return self

    def join(
        self,
        states: str | Iterable[str],
        classes: str | Iterable[str],
        target: Optional[str] = None,
    ) -> "TableBuilder":
        """No boundary between ``states`` and ``classes``.

        ``target`` defaults to the class entry state; the special value
        ``"="`` keeps the current state (used for ignorable marks).
        """

        for state in _as_tuple(states):
            for cls in _as_tuple(classes):
                next_state = self._target(state, cls, target)
                self._transitions[(state, cls)] = Transition(next_state, CONTINUE)
        return self

    def mark(
        self,
        states: str | Iterable[str],
        classes: str | Iterable[str],
        target: str,
    ) -> "TableBuilder":
        """Provisional boundary, settled by what follows ``classes``."""

        for state in _as_tuple(states):
            for cls in _as_tuple(classes):
                self._transitions[(state, cls)] = Transition(target, MARK)
        return self

    def split(
        self, states: str | Iterable[str], classes: str | Iterable[str]
    ) -> "TableBuilder":
        """Explicit boundary, overriding an earlier ``join``."""

        for state in _as_tuple(states):
            for cls in _as_tuple(classes):
                self._transitions[(state, cls)] = Transition(
                    self.entry_state(cls), BREAK
                )
        return self

    def build(self, locale: str, classifier: Classifier) -> RuleTable:
        return RuleTable(
            kind=self.kind,
            locale=locale,
            entry=dict(self._entry),
            transitions=dict(self._transitions),
            classifier=classifier,
            description=self.description,
        )

    def _target(self, state: str, cls: str, target: Optional[str]) -> str:
        if target is None:
            return self.entry_state(cls)
        if target == "=":
            return state
        return target


__all__ = ["TableBuilder"]
