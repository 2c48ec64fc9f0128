# logengine

A small logging engine with no dependencies outside the standard library.

## What is in it

- `logengine.events`
  - `LogLevel` (`OFF`, `CRITICAL`, `ERROR`, `WARNING`, `INFO`, `DEBUG`,
    `TRACE`). A higher value means more verbose output.
  - `SinkType` (`STDOUT`, `STDERR`, `FILE`, `ROTATING_FILE`, `STRING`).
  - `LogEvent`, a dataclass with `message`, `level`, `thread_id` and `time`.
    `time` is a `time.struct_time` and defaults to the current local time.
  - `level_to_string`, `level_to_caps_string` and `level_to_short_string`
    turn a level into `"info"`, `"INFO"` or `"I"`.
  - `level_from_string` ignores case and also accepts `"warn"` and `"err"`.
    An unknown name gives `LogLevel.INFO`.
  - `sink_type_from_string` ignores case. An unknown name gives
    `SinkType.STDOUT`.
- `logengine.pattern`
  - `Pattern` is a line template. Each of these macros is replaced for every
    event: `%TIME%`, `%DATE%`, `%DATETIME%`, `%THREAD%`, `%MSG%`,
    `%LOGLEVEL%`, `%APPNAME%`, `%APPVERSION%`, `%OS%` and `%OSVERSION%`.
    Any other text is kept as it is.
  - `PatternLayout` keeps one `Pattern` for each level. Change them with
    `set_pattern(pattern, level)`, with `set_crit_pattern`,
    `set_error_pattern`, `set_warn_pattern`, `set_info_pattern`,
    `set_debug_pattern` and `set_trace_pattern`, or with `set_all_patterns`.
    The default info line looks like `I 12:00:00 #1: message`.
- `logengine.sinks`
  - `FileSink` appends to a file and can be used as a context manager.
  - `StdoutSink` and `StderrSink` print lines.
  - `StringSink` collects lines in memory. Read them with `get_output()` and
    drop them with `clear()`.
  - `pub_send_msg` drops an event whose level is more verbose than the
    sink's `log_level`.
  - `message_counts` holds the number of messages written at each level, and
    `bytes_written` is counted by `FileSink`.
- `logengine.ini_reader`
  - `IniReader` reads INI files and matches section and key names without
    regard to case. Every value of a repeated key is kept.
  - A line starting with `#` or `;` is a comment. A line without `=` is a
    key with an empty value.
  - A file that cannot be opened raises `IniFileError`.
- `logengine.safe_queue`
  - `SafeQueue` is a thread-safe FIFO queue.
  - `push_element` adds an element. `wait_for_element` waits for one to
    arrive and removes it. `wait_empty_queue` waits until the queue is empty.
- `logengine.errors`
  - `LogException` is the error the sinks raise, for example when a log file
    cannot be opened.

## Installing

```
pip install .
```

## Examples

Collecting lines in memory:

```python
import time

from logengine.events import LogEvent, LogLevel
from logengine.sinks import StringSink

sink = StringSink("memory", LogLevel.DEBUG)
sink.layout.set_all_patterns("%LOGLEVEL% %MSG%")

sink.pub_send_msg(LogEvent("started", LogLevel.INFO, 1, time.localtime()))
sink.pub_send_msg(LogEvent("noisy", LogLevel.TRACE, 1, time.localtime()))

assert sink.get_output() == "INFO started\n"
```

Writing to a file:

```python
import time

from logengine.events import LogEvent, LogLevel
from logengine.sinks import FileSink

with FileSink("app", "app.log") as sink:
    sink.pub_send_msg(LogEvent("hello", LogLevel.WARNING, 1, time.localtime()))
```

Reading an INI file:

```python
from logengine.ini_reader import IniReader

ini = IniReader("settings.ini")
level = ini.get_value("logger", "LogLevel", "info")
```

## What it does not do

logengine provides the building blocks only:

- It has no logger object that sends messages to several sinks.
- It does not build sinks from a configuration file.
- It has no background writer thread. `SafeQueue` is there for one, but
  nothing in the package uses it.
- It has no rotating file sink. `SinkType.ROTATING_FILE` can be parsed, but
  no sink class goes with it.
- It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```