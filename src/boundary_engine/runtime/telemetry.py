"""Rule-layer telemetry on top of telelog.

``get_logger(name)`` returns a cached telelog logger configured from the
``BOUNDARY_ENGINE_LOG_*`` variables. ``rule_span`` profiles one registry or
resolver operation and tags it with the break kind and locale tag it touches;
``record_event`` emits one-off structured events such as locale fallback.
"""

from __future__ import annotations

import os
import threading
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

if TYPE_CHECKING:
    from boundary_engine.rules.models import RuleTable

tl = cast(Any, telelog)

ENV_PREFIX = "BOUNDARY_ENGINE_"
DEFAULT_LOGGER_NAME = "boundary_engine"
COMPONENT = "rules"

_LOGGERS: MutableMapping[str, Any] = {}
_LOCK = threading.Lock()
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    return raw.strip() if raw and raw.strip() else None


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), str(value)) for key, value in data.items()]


def _build_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
    config.with_console_output(not _env_flag("LOG_QUIET"))
    config.with_colored_output(not _env_flag("NO_COLOR"))
    config.with_json_format(_env_flag("LOG_JSON"))
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    if _env_flag("PROFILING"):
        config.with_profiling(True)
    return config


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached telelog logger for ``name``."""

    global _CONFIG
    logger_name = name or DEFAULT_LOGGER_NAME
    with _LOCK:
        if _CONFIG is None:
            _CONFIG = _build_config()
        if logger_name not in _LOGGERS:
            _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
        return _LOGGERS[logger_name]


def _emit(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, _pairs(data))
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level.lower(), f"event::{name}", data or {})


@dataclass
class RuleSpan:
    """What one rule operation touched; every message carries these fields."""

    logger: Any
    operation: str
    kind: str
    tag: Optional[str] = None
    fields: Dict[str, str] = field(default_factory=dict)

    def select(self, tag: str) -> None:
        self.tag = tag

    def describe(self, table: "RuleTable") -> None:
        self.fields["states"] = str(len(table.states))
        self.fields["hard_breaks"] = str(len(table.hard_breaks))

    def note(self, message: str, **extra: Any) -> None:
        self._log("debug", f"rules::{self.operation}::{message}", extra)

    def fail(self, reason: str) -> None:
        self._log("error", f"rules::{self.operation}::failed", {"reason": reason})

    def _log(self, level: str, message: str, extra: Dict[str, Any]) -> None:
        payload: Dict[str, Any] = {"kind": self.kind}
        if self.tag is not None:
            payload["tag"] = self.tag
        payload.update(self.fields)
        payload.update(extra)
        _emit(self.logger, level, message, payload)


@contextmanager
def rule_span(
    operation: str,
    *,
    kind: str,
    tag: Optional[str] = None,
    logger_name: Optional[str] = None,
) -> Iterator[RuleSpan]:
    """Profile a registry or resolver operation on ``kind``/``tag``.

    Failures are logged with the span's fields and re-raised.
    """

    log = get_logger(logger_name)
    handle = RuleSpan(logger=log, operation=operation, kind=kind, tag=tag)
    log.add_context("kind", kind)
    with ExitStack() as stack:
        stack.enter_context(log.track_component(COMPONENT))
        stack.enter_context(log.profile(f"rules::{operation}"))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            log.remove_context("kind")


__all__ = [
    "RuleSpan",
    "get_logger",
    "record_event",
    "rule_span",
]
