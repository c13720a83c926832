"""Telemetry for the outer layers of linebuf, built on telelog.

The buffer and editor core never log; document I/O, the CLI and the
Textual viewer report through ``record_event`` and ``span``. Settings come
from a named preset or from ``LINEBUF_*`` environment variables.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "LINEBUF_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "linebuf")

_PRESETS: Dict[str, Dict[str, Any]] = {
    "development": {"min_level": "DEBUG", "console": True, "colored": True},
    "production": {
        "min_level": "INFO",
        "console": False,
        "file": "linebuf.log",
        "buffering": True,
    },
    "performance": {
        "min_level": "DEBUG",
        "console": False,
        "file": "linebuf-performance.log",
        "buffering": True,
        "json": True,
        "profiling": True,
    },
}
PRESETS = tuple(_PRESETS)

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _env_settings() -> Dict[str, Any]:
    console = not _env_flag("DISABLE_CONSOLE")
    settings: Dict[str, Any] = {
        "min_level": (_env("LOG_LEVEL") or "WARNING").upper(),
        "console": console,
        "colored": console and not _env_flag("NO_COLOR"),
        "json": _env_flag("LOG_JSON"),
        "profiling": _env_flag("PROFILING"),
    }
    if _env("LOG_FILE"):
        settings["file"] = _env("LOG_FILE")
    if _env_flag("LOG_BUFFERED"):
        settings["buffering"] = True
        settings["buffer_size"] = int(_env("LOG_BUFFER_SIZE") or "2048")
    return settings


def _build_config(settings: Dict[str, Any]) -> Any:
    config = tl.Config()
    config.with_min_level(settings["min_level"])
    config.with_console_output(settings.get("console", False))
    if settings.get("colored"):
        config.with_colored_output(True)
    if settings.get("json"):
        config.with_json_format(True)
    if settings.get("file"):
        config.with_file_output(_env("LOG_FILE") or settings["file"])
    if settings.get("buffering"):
        config.with_buffering(True)
    if "buffer_size" in settings:
        config.with_buffer_size(settings["buffer_size"])
    if settings.get("profiling"):
        config.with_profiling(True)
    return config


def configure(*, preset: Optional[str] = None) -> None:
    """Rebuild the telelog configuration from ``preset`` or the environment."""

    global _CONFIG
    if preset is None:
        settings = _env_settings()
    elif preset in _PRESETS:
        settings = _PRESETS[preset]
    else:
        raise ValueError(f"Unknown preset '{preset}'.")
    _CONFIG = _build_config(settings)
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _CONFIG
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGERS:
        if _CONFIG is None:
            _CONFIG = _build_config(_env_settings())
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, dict, list, tuple)):
        return repr(value)
    return str(value)


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    pairs = [(str(key), _stringify(value)) for key, value in payload.items()]
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, pairs)
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` record."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level.lower(), f"event::{name}", payload)


@dataclass
class SpanHandle:
    logger: Any
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.name, **self.metadata, "reason": reason}
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, with ``metadata`` attached as logger context.

    An exception leaving the block is logged through ``SpanHandle.fail``
    and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(log, name)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)
    context_keys = list(handle.metadata)
    for key in context_keys:
        log.add_context(key, handle.metadata[key])
    try:
        with log.profile(name):
            yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    finally:
        for key in context_keys:
            log.remove_context(key)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
