from typing import Any

import pytest

from boundary_engine.rules import build_word_table
from boundary_engine.runtime import telemetry


class RecordingLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, Any]] = []

    def error_with(self, message: str, pairs: Any) -> None:
        self.calls.append(("error", message, dict(pairs)))

    def debug(self, message: str) -> None:
        self.calls.append(("debug", message, None))


def make_span(**kwargs: Any) -> tuple[RecordingLogger, telemetry.RuleSpan]:
    log = RecordingLogger()
    return log, telemetry.RuleSpan(logger=log, operation="build_table", **kwargs)


def test_rule_span_failure_carries_kind_tag_and_table_shape() -> None:
    log, handle = make_span(kind="word")
    handle.select("fi")
    handle.describe(build_word_table("fi"))

    handle.fail("boom")

    level, message, payload = log.calls[0]
    assert level == "error"
    assert message == "rules::build_table::failed"
    assert payload["kind"] == "word"
    assert payload["tag"] == "fi"
    assert payload["reason"] == "boom"
    assert int(payload["states"]) > 0
    assert int(payload["hard_breaks"]) > 0


def test_rule_span_note_falls_back_to_plain_method() -> None:
    log, handle = make_span(kind="line", tag="root")

    handle.note("stale", revision=3)

    level, message, _ = log.calls[0]
    assert level == "debug"
    assert message.startswith("rules::build_table::stale ")
    assert "'revision': 3" in message
    assert "'tag': 'root'" in message


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unsupported log level"):
        telemetry.record_event("rules.test", level="loud")


def test_rule_span_reraises_failures() -> None:
    with pytest.raises(KeyError):
        with telemetry.rule_span("resolve", kind="word"):
            raise KeyError("missing")
