"""Code point classification backed by ``regex`` Unicode break properties."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Mapping, Optional, Sequence

import regex

from boundary_engine.runtime.settings import get_settings

Classifier = Callable[[int], str]

GRAPHEME_PROPERTIES: tuple[tuple[str, str], ...] = (
    ("CR", r"\p{Grapheme_Cluster_Break=CR}"),
    ("LF", r"\p{Grapheme_Cluster_Break=LF}"),
    ("Control", r"\p{Grapheme_Cluster_Break=Control}"),
    ("Extend", r"\p{Grapheme_Cluster_Break=Extend}"),
    ("ZWJ", r"\p{Grapheme_Cluster_Break=ZWJ}"),
    ("RI", r"\p{Grapheme_Cluster_Break=Regional_Indicator}"),
    ("Prepend", r"\p{Grapheme_Cluster_Break=Prepend}"),
    ("SpacingMark", r"\p{Grapheme_Cluster_Break=SpacingMark}"),
    ("L", r"\p{Grapheme_Cluster_Break=L}"),
    ("V", r"\p{Grapheme_Cluster_Break=V}"),
    ("T", r"\p{Grapheme_Cluster_Break=T}"),
    ("LV", r"\p{Grapheme_Cluster_Break=LV}"),
    ("LVT", r"\p{Grapheme_Cluster_Break=LVT}"),
    ("ExtPict", r"\p{Extended_Pictographic}"),
)

WORD_PROPERTIES: tuple[tuple[str, str], ...] = (
    ("CR", r"\p{Word_Break=CR}"),
    ("LF", r"\p{Word_Break=LF}"),
    ("Newline", r"\p{Word_Break=Newline}"),
    ("ZWJ", r"\p{Word_Break=ZWJ}"),
    ("Extend", r"[\p{Word_Break=Extend}\p{Word_Break=Format}]"),
    ("RI", r"\p{Word_Break=Regional_Indicator}"),
    ("Katakana", r"\p{Word_Break=Katakana}"),
    ("ALetter", r"[\p{Word_Break=ALetter}\p{Word_Break=Hebrew_Letter}]"),
    ("MidLetter", r"\p{Word_Break=MidLetter}"),
    ("MidNumLet", r"[\p{Word_Break=MidNumLet}\p{Word_Break=Single_Quote}]"),
    ("MidNum", r"\p{Word_Break=MidNum}"),
    ("Numeric", r"\p{Word_Break=Numeric}"),
    ("ExtendNumLet", r"\p{Word_Break=ExtendNumLet}"),
    ("WSegSpace", r"\p{Word_Break=WSegSpace}"),
    ("ExtPict", r"\p{Extended_Pictographic}"),
)

SENTENCE_PROPERTIES: tuple[tuple[str, str], ...] = (
    ("CR", r"\p{Sentence_Break=CR}"),
    ("LF", r"\p{Sentence_Break=LF}"),
    ("Sep", r"\p{Sentence_Break=Sep}"),
    ("Extend", r"[\p{Sentence_Break=Extend}\p{Sentence_Break=Format}]"),
    ("Sp", r"\p{Sentence_Break=Sp}"),
    ("Lower", r"\p{Sentence_Break=Lower}"),
    ("Upper", r"\p{Sentence_Break=Upper}"),
    ("OLetter", r"\p{Sentence_Break=OLetter}"),
    ("Numeric", r"\p{Sentence_Break=Numeric}"),
    ("ATerm", r"\p{Sentence_Break=ATerm}"),
    ("STerm", r"\p{Sentence_Break=STerm}"),
    ("Close", r"\p{Sentence_Break=Close}"),
    ("SContinue", r"\p{Sentence_Break=SContinue}"),
)

# Line_Break values folded onto the classes the line table distinguishes.
LINE_PROPERTIES: tuple[tuple[str, str], ...] = (
    ("BK", r"\p{Line_Break=BK}"),
    ("CR", r"\p{Line_Break=CR}"),
    ("LF", r"\p{Line_Break=LF}"),
    ("NL", r"\p{Line_Break=NL}"),
    ("SP", r"\p{Line_Break=SP}"),
    ("ZW", r"\p{Line_Break=ZW}"),
    ("WJ", r"\p{Line_Break=WJ}"),
    ("GL", r"\p{Line_Break=GL}"),
    ("CM", r"[\p{Line_Break=CM}\p{Line_Break=ZWJ}]"),
    ("BA", r"[\p{Line_Break=BA}\p{Line_Break=B2}]"),
    ("HY", r"\p{Line_Break=HY}"),
    ("BB", r"\p{Line_Break=BB}"),
    ("CL", r"\p{Line_Break=CL}"),
    ("CP", r"\p{Line_Break=CP}"),
    ("EX", r"\p{Line_Break=EX}"),
    ("IN", r"\p{Line_Break=IN}"),
    ("IS", r"\p{Line_Break=IS}"),
    ("NS", r"[\p{Line_Break=NS}\p{Line_Break=CJ}]"),
    ("OP", r"\p{Line_Break=OP}"),
    ("QU", r"\p{Line_Break=QU}"),
    ("NU", r"\p{Line_Break=NU}"),
    ("PR", r"\p{Line_Break=PR}"),
    ("PO", r"\p{Line_Break=PO}"),
    ("SY", r"\p{Line_Break=SY}"),
    (
        "ID",
        r"[\p{Line_Break=ID}\p{Line_Break=EB}\p{Line_Break=EM}"
        r"\p{Line_Break=H2}\p{Line_Break=H3}"
        r"\p{Line_Break=JL}\p{Line_Break=JV}\p{Line_Break=JT}]",
    ),
)


def build_classifier(
    properties: Sequence[tuple[str, str]],
    *,
    default: str,
    overrides: Optional[Mapping[int, str]] = None,
    cache_size: Optional[int] = None,
) -> Classifier:
    """Return a memoized ``code point -> class`` function.

    ``properties`` are tried in order and the first matching pattern wins;
    ``overrides`` pin individual code points before any pattern runs.
    """

    compiled = tuple((name, regex.compile(pattern)) for name, pattern in properties)
    pinned = dict(overrides or {})
    size = get_settings().classifier_cache_size if cache_size is None else cache_size

    @lru_cache(maxsize=size)
    def classify(code_point: int) -> str:
        cls = pinned.get(code_point)
        if cls is not None:
            return cls
        char = chr(code_point)
        for name, pattern in compiled:
            if pattern.match(char):
                return name
        return default

    return classify


__all__ = [
    "Classifier",
    "GRAPHEME_PROPERTIES",
    "LINE_PROPERTIES",
    "SENTENCE_PROPERTIES",
    "WORD_PROPERTIES",
    "build_classifier",
]
