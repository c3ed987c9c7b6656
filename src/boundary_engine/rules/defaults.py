"""Built-in rule data that seeds every registry with usable tables."""

from __future__ import annotations

from functools import partial
from typing import Iterable, Sequence

from .grapheme import build_grapheme_table
from .line import build_line_table
from .models import BREAK_KINDS
from .registry import RuleEntry, RuleRegistry
from .sentence import build_sentence_table
from .word import build_word_table

ROOT = "root"

DEFAULT_RULES: tuple[RuleEntry, ...] = (
    RuleEntry(
        kind="character",
        tag=ROOT,
        build=build_grapheme_table,
        description="Extended grapheme clusters",
    ),
    RuleEntry(
        kind="word",
        tag=ROOT,
        build=build_word_table,
        description="Words; colon is punctuation",
    ),
    RuleEntry(
        kind="line",
        tag=ROOT,
        build=build_line_table,
        description="Line-break opportunities",
    ),
    RuleEntry(
        kind="sentence",
        tag=ROOT,
        build=build_sentence_table,
        description="Sentences",
    ),
    RuleEntry(
        kind="word",
        tag="fi",
        build=partial(build_word_table, colon_joins_letters=True),
        description="Finnish words; colon joins letters (EU:n)",
    ),
    RuleEntry(
        kind="word",
        tag="sv",
        build=partial(build_word_table, colon_joins_letters=True),
        description="Swedish words; colon joins letters (S:t)",
    ),
)


def load_default_rules(
    registry: RuleRegistry,
    *,
    replace: bool = False,
    include_kinds: Sequence[str] | None = None,
    exclude_kinds: Sequence[str] | None = None,
    extra_rules: Iterable[RuleEntry] | None = None,
) -> None:
    """Register the built-in root tables and locale tailorings."""

    include = set(include_kinds) if include_kinds else None
    exclude = set(exclude_kinds or ())
    for kind in (include or set()) | exclude:
        if kind not in BREAK_KINDS:
            raise ValueError(f"Unknown break kind '{kind}'")

    for entry in DEFAULT_RULES:
        if include is not None and entry.kind not in include:
            continue
        if entry.kind in exclude:
            continue
        registry.register(
            entry.kind,
            entry.tag,
            entry.build,
            description=entry.description,
            replace=replace,
        )

    if extra_rules:
        for entry in extra_rules:
            registry.register(
                entry.kind,
                entry.tag,
                entry.build,
                description=entry.description,
                replace=replace,
            )


__all__ = ["DEFAULT_RULES", "ROOT", "load_default_rules"]
