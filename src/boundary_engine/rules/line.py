"""Line-break opportunity rules (UAX #14, simplified pair rules).

A boundary at ``i`` means a line may end before code point ``i``. The table
is generated from :func:`_decide`, which walks the rules in priority order
for every ``(state, class)`` pair.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .builder import TableBuilder
from .classes import LINE_PROPERTIES, build_classifier
from .models import RuleTable

LINE_CLASSES: tuple[str, ...] = (
    "BK", "CR", "LF", "NL", "SP", "ZW", "WJ", "GL", "CM", "BA", "HY", "BB",
    "CL", "CP", "EX", "IN", "IS", "NS", "OP", "QU", "NU", "PR", "PO", "SY",
    "ID", "AL",
)  # fmt: skip

_HARD = frozenset(("BK", "CR", "LF", "NL"))
_MANDATORY_STATES = frozenset(("bk", "lf", "nl"))
_SPACE_STATES = frozenset(("sp", "op_sp", "qu_sp", "clcp_sp", "zw_sp"))
# NU followed by IS or SY, still inside a number (LB25).
_NUMBER_PUNCT = "nu_is"

_SPACE_AFTER = {
    "op": "op_sp",
    "op_sp": "op_sp",
    "qu": "qu_sp",
    "qu_sp": "qu_sp",
    "cl": "clcp_sp",
    "cp": "clcp_sp",
    "clcp_sp": "clcp_sp",
    "zw": "zw_sp",
    "zw_sp": "zw_sp",
}

# LB23-LB30 as (state, following class) pairs that never break.
_PAIRS = frozenset(
    (
        ("al", "NU"), ("nu", "AL"),
        ("pr", "ID"), ("id", "PO"),
        ("pr", "AL"), ("po", "AL"), ("al", "PR"), ("al", "PO"),
        ("pr", "NU"), ("po", "NU"), ("nu", "PO"), ("nu", "PR"),
        ("hy", "NU"), ("nu", "NU"), (_NUMBER_PUNCT, "NU"),
        ("cl", "PO"), ("cp", "PO"), ("cl", "PR"), ("cp", "PR"),
        ("al", "AL"),
        ("is", "AL"),
        ("al", "OP"), ("nu", "OP"), ("cp", "AL"), ("cp", "NU"),
    )
)  # fmt: skip


def _entry(cls: str) -> str:
    if cls == "SP":
        return "sp"
    if cls == "CM":
        # LB10: an unattached combining mark behaves as AL.
        return "al"
    return cls.lower()


def _decide(state: str, cls: str) -> bool:
    """Return ``True`` when a break is allowed between ``state`` and ``cls``."""

    if state in _MANDATORY_STATES:
        return True  # LB4, LB5
    if state == "cr":
        return cls != "LF"  # LB5
    if cls in _HARD or cls in ("SP", "ZW"):
        return False  # LB6, LB7
    if state in ("zw", "zw_sp"):
        return True  # LB8
    if state == "op_sp":
        return False  # LB14 over LB10
    if cls == "CM":
        return state in _SPACE_STATES  # LB9, LB10
    if cls == "WJ" or state in ("wj", "gl"):
        return False  # LB11, LB12
    if cls == "GL" and state not in _SPACE_STATES and state not in ("ba", "hy"):
        return False  # LB12a
    if cls in ("CL", "CP", "EX", "IS", "SY"):
        return False  # LB13
    if state in ("op", "op_sp"):
        return False  # LB14
    if state in ("qu", "qu_sp") and cls == "OP":
        return False  # LB15
    if state in ("cl", "cp", "clcp_sp") and cls == "NS":
        return False  # LB16
    if state in _SPACE_STATES:
        return True  # LB18
    if cls == "QU" or state == "qu":
        return False  # LB19
    if cls in ("BA", "HY", "NS") or state == "bb":
        return False  # LB21
    if cls == "IN":
        return False  # LB22
    if (state, cls) in _PAIRS:
        return False
    if state == _NUMBER_PUNCT:
        return _decide("is", cls)
    return True  # LB31


def _builder() -> TableBuilder:
    b = TableBuilder("line", description="line-break opportunities")
    for cls in LINE_CLASSES:
        b.enter(cls, _entry(cls))

    states = sorted(
        {_entry(cls) for cls in LINE_CLASSES} | _SPACE_STATES | {_NUMBER_PUNCT}
    )
    for state in states:
        for cls in LINE_CLASSES:
            if _decide(state, cls):
                b.split(state, cls)
            elif cls == "SP":
                b.join(state, cls, _SPACE_AFTER.get(state, "sp"))
            elif cls == "CM":
                b.join(state, cls, "al" if state in _SPACE_STATES else "=")
            elif cls in ("IS", "SY") and state in ("nu", _NUMBER_PUNCT):
                b.join(state, cls, _NUMBER_PUNCT)
            else:
                b.join(state, cls)
    return b


def build_line_table(
    locale: str = "root",
    *,
    overrides: Optional[Mapping[int, str]] = None,
    cache_size: Optional[int] = None,
) -> RuleTable:
    classifier = build_classifier(
        LINE_PROPERTIES, default="AL", overrides=overrides, cache_size=cache_size
    )
    return _builder().build(locale, classifier)


__all__ = ["LINE_CLASSES", "build_line_table"]
