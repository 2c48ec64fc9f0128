"""Line patterns with %MACRO% placeholders and the layout built on them."""

from __future__ import annotations

import platform
import re
import time
from abc import ABC, abstractmethod

from .events import LogEvent, LogLevel, level_to_caps_string

OS_MACRO = "%OS%"
OS_VERSION_MACRO = "%OSVERSION%"
THREAD_MACRO = "%THREAD%"
MESSAGE_MACRO = "%MSG%"
DATETIME_MACRO = "%DATETIME%"
DATE_MACRO = "%DATE%"
TIME_MACRO = "%TIME%"
APP_NAME_MACRO = "%APPNAME%"
APP_VERSION_MACRO = "%APPVERSION%"
LOG_LEVEL_MACRO = "%LOGLEVEL%"

DEFAULT_APP_NAME = "nonameapp"
DEFAULT_APP_VERSION = "0.0.0.0"
DEFAULT_LINE_PATTERN = f" {TIME_MACRO} #{THREAD_MACRO}: {MESSAGE_MACRO}"
DEFAULT_CRIT_PATTERN = "*!*" + DEFAULT_LINE_PATTERN
DEFAULT_ERROR_PATTERN = "E!" + DEFAULT_LINE_PATTERN
DEFAULT_WARNING_PATTERN = "W#" + DEFAULT_LINE_PATTERN
DEFAULT_INFO_PATTERN = "I" + DEFAULT_LINE_PATTERN
DEFAULT_DEBUG_PATTERN = "D" + DEFAULT_LINE_PATTERN
DEFAULT_TRACE_PATTERN = "T" + DEFAULT_LINE_PATTERN
DEFAULT_START_APP_LINE = "\n%APPNAME% %APPVERSION% startup\nLog is started at %DATETIME%."
DEFAULT_STOP_APP_LINE = "%APPNAME% %APPVERSION% normal shutdown \nLog stopped at %DATETIME%.\n"
DEFAULT_SEPARATOR_LINE = "-" * 64


class Holder(ABC):
    """One piece of a pattern that renders itself for an event."""

    @abstractmethod
    def format(self, event: LogEvent) -> str:
        """Text of this piece for ``event``."""


class DateHolder(Holder):
    def format(self, event: LogEvent) -> str:
        return time.strftime("%d-%b-%Y", event.time)


class TimeHolder(Holder):
    def format(self, event: LogEvent) -> str:
        return time.strftime("%X", event.time)


class DateTimeHolder(Holder):
    def format(self, event: LogEvent) -> str:
        return time.strftime("%d-%b-%Y %X", event.time)


class MessageHolder(Holder):
    def format(self, event: LogEvent) -> str:
        return event.message


class ThreadHolder(Holder):
    def format(self, event: LogEvent) -> str:
        return str(event.thread_id)


class AppNameHolder(Holder):
    def __init__(self, name: str) -> None:
        self.app_name = name

    def format(self, event: LogEvent) -> str:
        return self.app_name


class AppVersionHolder(Holder):
    def __init__(self, version: str) -> None:
        self.version = version

    def format(self, event: LogEvent) -> str:
        return self.version


class LiteralHolder(Holder):
    def __init__(self, value: str) -> None:
        self.value = value

    def format(self, event: LogEvent) -> str:
        return self.value


class LogLevelHolder(Holder):
    def format(self, event: LogEvent) -> str:
        return level_to_caps_string(event.level)


class OSHolder(Holder):
    """Operating system description; a fixed marker outside Windows."""

    def format(self, event: LogEvent) -> str:
        if platform.system() == "Windows":
            return f"{platform.system()} {platform.release()}"
        return "OSHolder"


class OSVersionHolder(Holder):
    """Operating system version; a fixed marker outside Windows."""

    def format(self, event: LogEvent) -> str:
        if platform.system() == "Windows":
            return platform.version()
        return "<OSVERSION>"


_HOLDER_FACTORIES = {
    OS_MACRO: OSHolder,
    OS_VERSION_MACRO: OSVersionHolder,
    THREAD_MACRO: ThreadHolder,
    MESSAGE_MACRO: MessageHolder,
    DATETIME_MACRO: DateTimeHolder,
    DATE_MACRO: DateHolder,
    TIME_MACRO: TimeHolder,
    APP_NAME_MACRO: lambda: AppNameHolder(DEFAULT_APP_NAME),
    APP_VERSION_MACRO: lambda: AppVersionHolder(DEFAULT_APP_VERSION),
    LOG_LEVEL_MACRO: LogLevelHolder,
}

_MACRO_RE = re.compile(
    "|".join(re.escape(m) for m in sorted(_HOLDER_FACTORIES, key=len, reverse=True))
)


class Pattern:
    """A line template; known %MACRO% names are replaced per event."""

    def __init__(self, pattern: str) -> None:
        self._pattern = ""
        self._holders: list[Holder] = []
        self.set_pattern(pattern)

    def _parse(self, pattern: str) -> list[Holder]:
        holders: list[Holder] = []
        pos = 0
        for match in _MACRO_RE.finditer(pattern):
            if match.start() > pos:
                holders.append(LiteralHolder(pattern[pos:match.start()]))
            holders.append(_HOLDER_FACTORIES[match.group()]())
            pos = match.end()
        if pos < len(pattern):
            holders.append(LiteralHolder(pattern[pos:]))
        return holders

    def format(self, event: LogEvent) -> str:
        """Render the pattern for ``event``."""
        return "".join(holder.format(event) for holder in self._holders)

    def set_pattern(self, pattern: str) -> None:
        """Replace the template."""
        self._holders = self._parse(pattern)
        self._pattern = pattern

    def get_pattern(self) -> str:
        """The template text."""
        return self._pattern


class PatternLayout:
    """Formats events with a separate pattern for each log level."""

    def __init__(self) -> None:
        self.message_patterns: dict[LogLevel, Pattern] = {
            LogLevel.OFF: Pattern(DEFAULT_LINE_PATTERN),
            LogLevel.CRITICAL: Pattern(DEFAULT_CRIT_PATTERN),
            LogLevel.ERROR: Pattern(DEFAULT_ERROR_PATTERN),
            LogLevel.WARNING: Pattern(DEFAULT_WARNING_PATTERN),
            LogLevel.INFO: Pattern(DEFAULT_INFO_PATTERN),
            LogLevel.DEBUG: Pattern(DEFAULT_DEBUG_PATTERN),
            LogLevel.TRACE: Pattern(DEFAULT_TRACE_PATTERN),
        }
        self.app_name = Pattern(DEFAULT_APP_NAME)
        self.app_version = Pattern(DEFAULT_APP_VERSION)
        self.start_app_line = Pattern(DEFAULT_START_APP_LINE)
        self.stop_app_line = Pattern(DEFAULT_STOP_APP_LINE)

    def format(self, event: LogEvent) -> str:
        """Render ``event`` with the pattern of its level."""
        return self.message_patterns[LogLevel(event.level)].format(event)

    def get_pattern(self, level: LogLevel) -> str:
        return self.message_patterns[LogLevel(level)].get_pattern()

    def get_all_patterns(self) -> str:
        """The common pattern, kept under the OFF level."""
        return self.message_patterns[LogLevel.OFF].get_pattern()

    def set_pattern(self, pattern: str, level: LogLevel) -> None:
        self.message_patterns[LogLevel(level)].set_pattern(pattern)

    def set_crit_pattern(self, pattern: str) -> None:
        self.set_pattern(pattern, LogLevel.CRITICAL)

    def set_error_pattern(self, pattern: str) -> None:
        self.set_pattern(pattern, LogLevel.ERROR)

    def set_warn_pattern(self, pattern: str) -> None:
        self.set_pattern(pattern, LogLevel.WARNING)

    def set_info_pattern(self, pattern: str) -> None:
        self.set_pattern(pattern, LogLevel.INFO)

    def set_debug_pattern(self, pattern: str) -> None:
        self.set_pattern(pattern, LogLevel.DEBUG)

    def set_trace_pattern(self, pattern: str) -> None:
        self.set_pattern(pattern, LogLevel.TRACE)

    def set_start_app_line_pattern(self, pattern: str) -> None:
        self.start_app_line.set_pattern(pattern)

    def set_stop_app_line_pattern(self, pattern: str) -> None:
        self.stop_app_line.set_pattern(pattern)

    def set_app_name(self, name: str) -> None:
        self.app_name.set_pattern(name)

    def set_all_patterns(self, pattern: str) -> None:
        """Use the same pattern for every level."""
        for item in self.message_patterns.values():
            item.set_pattern(pattern)