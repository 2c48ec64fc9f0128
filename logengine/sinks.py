"""Destinations that log events are written to."""

from __future__ import annotations

import io
import sys
from abc import ABC, abstractmethod
from pathlib import Path

from .errors import LogException
from .events import DEFAULT_LEVEL, LogEvent, LogLevel
from .pattern import PatternLayout


class Sink(ABC):
    """Base of all sinks: level filtering, formatting and statistics."""

    def __init__(self, name: str, level: LogLevel = DEFAULT_LEVEL) -> None:
        self._name = name
        self.log_level = LogLevel(level)
        self._layout: PatternLayout | None = None
        self._message_counts = [0] * len(LogLevel)
        self._bytes_written = 0

    @property
    def name(self) -> str:
        """Name identifying the sink."""
        return self._name

    @property
    def layout(self) -> PatternLayout | None:
        return self._layout

    @layout.setter
    def layout(self, layout: PatternLayout | None) -> None:
        if layout is not None:
            self._layout = layout

    @property
    def bytes_written(self) -> int:
        """Bytes written since the sink was created."""
        return self._bytes_written

    @property
    def message_counts(self) -> tuple[int, ...]:
        """Number of formatted messages per log level."""
        return tuple(self._message_counts)

    def _should_log(self, level: LogLevel) -> bool:
        return self.log_level >= level

    def flush(self) -> None:
        """Push buffered output out; nothing to do by default."""

    @abstractmethod
    def send_msg(self, event: LogEvent) -> None:
        """Write ``event`` to the destination."""

    def pub_send_msg(self, event: LogEvent) -> None:
        """Write ``event`` if its level passes the sink's level."""
        if self._should_log(event.level):
            self.send_msg(event)

    def format_string(self, event: LogEvent) -> str:
        """Format ``event`` with the layout and count it."""
        if self._layout is None:
            raise LogException("Sink '%s' has no layout.", self._name)
        text = self._layout.format(event)
        self._message_counts[LogLevel(event.level)] += 1
        return text


class FileSink(Sink):
    """Appends formatted lines to a file."""

    def __init__(self, name: str, file_name: str | Path) -> None:
        super().__init__(name)
        self._file_name = str(file_name)
        try:
            self._stream = open(file_name, "ab")
        except OSError as exc:
            raise LogException("Cannot open file '%s' for writing.", self._file_name) from exc
        self.layout = PatternLayout()

    @property
    def file_name(self) -> str:
        """Path of the file the sink writes to."""
        return self._file_name

    def send_msg(self, event: LogEvent) -> None:
        data = (self.format_string(event) + "\n").encode("utf-8")
        self._stream.write(data)
        self._bytes_written += len(data)

    def flush(self) -> None:
        if not self._stream.closed:
            self._stream.flush()

    def close(self) -> None:
        """Flush and close the file."""
        if not self._stream.closed:
            self._stream.flush()
            self._stream.close()

    def __enter__(self) -> FileSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class StdoutSink(Sink):
    """Writes formatted lines to standard output."""

    def __init__(self, name: str, level: LogLevel = DEFAULT_LEVEL) -> None:
        super().__init__(name, level)
        self.layout = PatternLayout()

    def send_msg(self, event: LogEvent) -> None:
        print(self.format_string(event), file=sys.stdout)


class StderrSink(Sink):
    """Writes formatted lines to standard error."""

    def __init__(self, name: str, level: LogLevel = DEFAULT_LEVEL) -> None:
        super().__init__(name, level)
        self.layout = PatternLayout()

    def send_msg(self, event: LogEvent) -> None:
        print(self.format_string(event), file=sys.stderr, flush=True)


class StringSink(Sink):
    """Collects formatted lines in memory."""

    def __init__(self, name: str, level: LogLevel = DEFAULT_LEVEL) -> None:
        super().__init__(name, level)
        self._output = io.StringIO()
        self.layout = PatternLayout()

    def send_msg(self, event: LogEvent) -> None:
        self._output.write(self.format_string(event) + "\n")

    def get_output(self) -> str:
        """Everything written so far."""
        return self._output.getvalue()

    def clear(self) -> None:
        """Discard the collected output."""
        self._output = io.StringIO()