"""Dataclasses describing boundary rule tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Literal, Mapping

BreakKind = Literal["character", "word", "line", "sentence"]
BREAK_KINDS: tuple[str, ...] = ("character", "word", "line", "sentence")

START_STATE = "sot"

Action = Literal["continue", "break", "mark"]
CONTINUE: Action = "continue"
BREAK: Action = "break"
# Provisional boundary before the current code point. A later CONTINUE into a
# non-lookahead state cancels it; anything else (end of text included)
# confirms it.
MARK: Action = "mark"
_ACTIONS = frozenset((CONTINUE, BREAK, MARK))


def ensure_kind(kind: str) -> str:
    if kind not in BREAK_KINDS:
        raise ValueError(f"Unknown break kind '{kind}'; expected one of {BREAK_KINDS}")
    return kind


@dataclass(frozen=True, slots=True)
class Transition:
    """Result of feeding one character class to a state."""

    next_state: str
    action: Action = CONTINUE

    def __post_init__(self) -> None:
        if not self.next_state:
            raise ValueError("next_state cannot be empty")
        if self.action not in _ACTIONS:
            raise ValueError(f"Unknown transition action '{self.action}'")

    @property
    def is_break(self) -> bool:
        return self.action == BREAK


@dataclass(frozen=True, eq=False)
class RuleTable:
    """Finite-state machine deciding where boundaries fall.

    ``entry`` names the state a class enters when it starts a new segment;
    any ``(state, class)`` pair missing from ``transitions`` breaks into that
    entry state. Because every break must land on ``entry[class]``, the
    machine state after a boundary depends only on the code point after it,
    which is what lets iterators resume scanning from any known boundary.

    Tables are immutable once built and safe to share between threads.
    """

    kind: str
    locale: str
    entry: Mapping[str, str]
    transitions: Mapping[tuple[str, str], Transition]
    classifier: Callable[[int], str]
    description: str = ""
    states: frozenset[str] = field(init=False)
    lookahead_states: frozenset[str] = field(init=False)
    reachable_states: frozenset[str] = field(init=False)
    hard_breaks: frozenset[tuple[str, str]] = field(init=False)

    def __post_init__(self) -> None:
        ensure_kind(self.kind)
        if not self.locale:
            raise ValueError("RuleTable locale cannot be empty")
        if not self.entry:
            raise ValueError("RuleTable requires at least one character class")
        object.__setattr__(self, "entry", MappingProxyType(dict(self.entry)))
        object.__setattr__(
            self, "transitions", MappingProxyType(dict(self.transitions))
        )
        self._validate()

        states = set(self.entry.values())
        for (state, _cls), transition in self.transitions.items():
            states.add(state)
            states.add(transition.next_state)
        object.__setattr__(self, "states", frozenset(states))
        object.__setattr__(
            self,
            "lookahead_states",
            frozenset(
                t.next_state for t in self.transitions.values() if t.action == MARK
            ),
        )
        object.__setattr__(self, "reachable_states", self._collect_reachable())
        object.__setattr__(self, "hard_breaks", self._collect_hard_breaks())

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self.entry)

    def classify(self, code_point: int) -> str:
        cls = self.classifier(code_point)
        if cls not in self.entry:
            raise ValueError(
                f"Classifier returned unknown class '{cls}' for U+{code_point:04X}"
            )
        return cls

    def step(self, state: str, cls: str) -> Transition:
        if state == START_STATE:
            return Transition(self.entry[cls], CONTINUE)
        transition = self.transitions.get((state, cls))
        if transition is not None:
            return transition
        return Transition(self.entry[cls], BREAK)

    def is_hard_break(self, before: str, after: str) -> bool:
        return (before, after) in self.hard_breaks

    def _validate(self) -> None:
        for (state, cls), transition in self.transitions.items():
            if cls not in self.entry:
                raise ValueError(
                    f"Transition ({state!r}, {cls!r}) uses an unknown class"
                )
            if transition.is_break and transition.next_state != self.entry[cls]:
                raise ValueError(
                    f"Break transition ({state!r}, {cls!r}) must enter "
                    f"{self.entry[cls]!r}, not {transition.next_state!r}"
                )

    def _collect_reachable(self) -> frozenset[str]:
        seen = set(self.entry.values())
        stack = list(seen)
        while stack:
            state = stack.pop()
            for cls in self.entry:
                target = self.step(state, cls).next_state
                if target not in seen:
                    seen.add(target)
                    stack.append(target)
        return frozenset(seen)

    def _collect_hard_breaks(self) -> frozenset[tuple[str, str]]:
        # (a, b) is hard when, from every reachable state, consuming ``a``
        # leaves no pending mark and ``b`` then breaks.
        hard: set[tuple[str, str]] = set()
        for before in self.entry:
            landing = {self.step(state, before) for state in self.reachable_states}
            landing.add(Transition(self.entry[before], CONTINUE))
            if any(t.next_state in self.lookahead_states for t in landing):
                continue
            for after in self.entry:
                if all(self.step(t.next_state, after).is_break for t in landing):
                    hard.add((before, after))
        return frozenset(hard)


__all__ = [
    "Action",
    "BREAK",
    "BREAK_KINDS",
    "BreakKind",
    "CONTINUE",
    "MARK",
    "RuleTable",
    "START_STATE",
    "Transition",
    "ensure_kind",
]
