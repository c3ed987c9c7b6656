import pytest

from boundary_engine.rules import (
    BREAK,
    CONTINUE,
    MARK,
    RuleTable,
    TableBuilder,
    Transition,
    build_grapheme_table,
    build_line_table,
    build_sentence_table,
    build_word_table,
)


def letter_digit_classifier(code_point: int) -> str:
    char = chr(code_point)
    if char.isalpha():
        return "letter"
    if char.isdigit():
        return "digit"
    return "other"


def make_builder() -> TableBuilder:
    builder = TableBuilder("word")
    builder.enter("letter", "in_word")
    builder.enter("digit", "in_number")
    builder.enter("other", "punct")
    builder.join("in_word", "letter")
    builder.join("in_number", "digit")
    return builder


def test_missing_pairs_break_into_entry_state() -> None:
    table = make_builder().build("root", letter_digit_classifier)

    assert table.step("in_word", "letter") == Transition("in_word", CONTINUE)
    assert table.step("in_word", "digit") == Transition("in_number", BREAK)


def test_start_state_never_breaks() -> None:
    table = make_builder().build("root", letter_digit_classifier)

    transition = table.step("sot", "other")

    assert transition.action == CONTINUE
    assert transition.next_state == "punct"


def test_break_transition_must_enter_class_state() -> None:
    with pytest.raises(ValueError, match="must enter"):
        RuleTable(
            kind="word",
            locale="root",
            entry={"letter": "in_word", "other": "punct"},
            transitions={("in_word", "other"): Transition("in_word", BREAK)},
            classifier=letter_digit_classifier,
        )


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        TableBuilder("paragraph").enter("x", "y").build("root", lambda cp: "x")


def test_classify_rejects_classes_without_entry_state() -> None:
    table = make_builder().build("root", lambda cp: "emoji")

    with pytest.raises(ValueError, match="unknown class"):
        table.classify(ord("a"))


def test_hard_breaks_exclude_pairs_that_can_join() -> None:
    table = make_builder().build("root", letter_digit_classifier)

    assert table.is_hard_break("letter", "digit")
    assert table.is_hard_break("other", "other")
    assert not table.is_hard_break("letter", "letter")


def test_mark_targets_are_lookahead_states() -> None:
    builder = make_builder()
    builder.mark("in_word", "other", "pending")
    builder.join("pending", "letter", "in_word")
    table = builder.build("root", letter_digit_classifier)

    assert table.lookahead_states == frozenset({"pending"})
    assert table.step("in_word", "other").action == MARK
    # landing in a lookahead state can never anchor a backward scan
    assert not table.is_hard_break("other", "letter")


def test_tables_are_immutable() -> None:
    table = build_word_table()

    with pytest.raises(AttributeError):
        table.locale = "fi"  # type: ignore[misc]
    with pytest.raises(TypeError):
        table.transitions[("letter", "ALetter")] = Transition("other")  # type: ignore[index]


def test_builtin_tables_classify_ascii() -> None:
    word = build_word_table()
    line = build_line_table()
    sentence = build_sentence_table()
    grapheme = build_grapheme_table()

    assert word.classify(ord("a")) == "ALetter"
    assert word.classify(ord("7")) == "Numeric"
    assert word.classify(ord(" ")) == "WSegSpace"
    assert word.classify(ord(":")) == "Other"
    assert line.classify(ord(" ")) == "SP"
    assert line.classify(ord("(")) == "OP"
    assert sentence.classify(ord(".")) == "ATerm"
    assert sentence.classify(ord("?")) == "STerm"
    assert sentence.classify(ord("Q")) == "Upper"
    assert grapheme.classify(0x0301) == "Extend"
    assert grapheme.classify(0x1F1FA) == "RI"


def test_colon_tailoring_changes_word_class() -> None:
    root = build_word_table()
    finnish = build_word_table("fi", colon_joins_letters=True)

    assert root.classify(ord(":")) == "Other"
    assert finnish.classify(ord(":")) == "MidLetter"
    assert finnish.locale == "fi"


def test_builtin_tables_expose_hard_breaks() -> None:
    for table in (
        build_grapheme_table(),
        build_word_table(),
        build_line_table(),
        build_sentence_table(),
    ):
        assert table.hard_breaks
        assert table.reachable_states <= table.states
