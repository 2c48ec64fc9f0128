"""Log levels, sink types and the log event record."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of a log message; higher values are more verbose."""

    OFF = 0
    CRITICAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6


DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_LEVEL_NAME = "llInfo"

_LEVEL_NAMES = ("off", "critical", "error", "warning", "info", "debug", "trace")
_LEVEL_CAPS_NAMES = ("OFF", "CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE")
_LEVEL_SHORT_NAMES = ("O", "C", "E", "W", "I", "D", "T")


def level_to_string(level: LogLevel) -> str:
    """Lower-case name of a level."""
    return _LEVEL_NAMES[LogLevel(level)]


def level_to_caps_string(level: LogLevel) -> str:
    """Upper-case name of a level."""
    return _LEVEL_CAPS_NAMES[LogLevel(level)]


def level_to_short_string(level: LogLevel) -> str:
    """One-letter name of a level."""
    return _LEVEL_SHORT_NAMES[LogLevel(level)]


def level_from_string(name: str) -> LogLevel:
    """Parse a level name case-insensitively; unknown names give the default level."""
    lowered = name.lower()
    if lowered in _LEVEL_NAMES:
        return LogLevel(_LEVEL_NAMES.index(lowered))
    if name == "warn":
        return LogLevel.WARNING
    if name == "err":
        return LogLevel.ERROR
    return DEFAULT_LEVEL


class SinkType(IntEnum):
    """Kind of destination a sink writes to."""

    STDOUT = 0
    STDERR = 1
    FILE = 2
    ROTATING_FILE = 3
    STRING = 4


DEFAULT_SINK_TYPE = SinkType.STDOUT
DEFAULT_SINK_TYPE_NAME = "Stdout"

_SINK_TYPE_NAMES = ("stdout", "stderr", "file", "rotatingfile", "string")


def sink_type_from_string(name: str) -> SinkType:
    """Parse a sink type name case-insensitively; unknown names give stdout."""
    lowered = name.lower()
    if lowered in _SINK_TYPE_NAMES:
        return SinkType(_SINK_TYPE_NAMES.index(lowered))
    return DEFAULT_SINK_TYPE


@dataclass
class LogEvent:
    """One message to be logged.

    ``thread_id`` is the thread that produced the message, which may differ
    from the thread that finally writes it.
    """

    message: str
    level: LogLevel
    thread_id: int
    time: time.struct_time = field(default_factory=time.localtime)