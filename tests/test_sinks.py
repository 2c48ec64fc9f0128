import time

import pytest

from logengine.errors import LogException
from logengine.events import LogEvent, LogLevel
from logengine.pattern import PatternLayout
from logengine.sinks import FileSink, Sink, StderrSink, StdoutSink, StringSink

STAMP = time.strptime("05-Mar-2024 10:20:30", "%d-%b-%Y %H:%M:%S")


def make_event(message="hello", level=LogLevel.INFO, thread_id=1):
    return LogEvent(message, level, thread_id, STAMP)


def plain(sink):
    sink.layout.set_all_patterns("%MSG%")
    return sink


class _BareSink(Sink):
    def send_msg(self, event):
        self.format_string(event)


def test_sink_is_abstract():
    with pytest.raises(TypeError):
        Sink("x")


def test_bare_sink_without_layout_raises():
    sink = _BareSink("bare")
    with pytest.raises(LogException):
        sink.pub_send_msg(make_event())


def test_string_sink_writes_lines():
    sink = plain(StringSink("s"))
    sink.pub_send_msg(make_event("one"))
    sink.pub_send_msg(make_event("two", LogLevel.ERROR))
    assert sink.get_output() == "one\ntwo\n"
    assert sink.name == "s"


def test_level_filtering():
    sink = plain(StringSink("s"))
    sink.pub_send_msg(make_event("dbg", LogLevel.DEBUG))
    assert sink.get_output() == ""
    sink.log_level = LogLevel.TRACE
    sink.pub_send_msg(make_event("dbg", LogLevel.DEBUG))
    assert sink.get_output() == "dbg\n"


def test_default_level_is_info():
    assert StringSink("s").log_level == LogLevel.INFO


def test_message_counts():
    sink = plain(StringSink("s"))
    for level in (LogLevel.ERROR, LogLevel.ERROR, LogLevel.INFO, LogLevel.TRACE):
        sink.pub_send_msg(make_event(level=level))
    counts = sink.message_counts
    assert counts[LogLevel.ERROR] == 2
    assert counts[LogLevel.INFO] == 1
    assert counts[LogLevel.TRACE] == 0
    assert sum(counts) == 3


def test_string_sink_clear():
    sink = plain(StringSink("s"))
    sink.pub_send_msg(make_event("a"))
    sink.clear()
    assert sink.get_output() == ""


def test_layout_setter_ignores_none():
    sink = StringSink("s")
    layout = sink.layout
    sink.layout = None
    assert sink.layout is layout
    replacement = PatternLayout()
    sink.layout = replacement
    assert sink.layout is replacement


def test_default_layout_output():
    sink = StringSink("s")
    sink.pub_send_msg(make_event("msg", LogLevel.WARNING, 4))
    assert sink.get_output().startswith("W# ")
    assert sink.get_output().endswith("#4: msg\n")


def test_file_sink_writes_and_counts(tmp_path):
    path = tmp_path / "out.log"
    with plain(FileSink("f", path)) as sink:
        for i in range(3):
            sink.pub_send_msg(make_event(f"line{i}"))
        sink.flush()
        assert sink.file_name == str(path)
        assert sink.bytes_written == path.stat().st_size
    assert path.read_text(encoding="utf-8").splitlines() == ["line0", "line1", "line2"]


def test_file_sink_appends(tmp_path):
    path = tmp_path / "out.log"
    path.write_text("existing\n", encoding="utf-8")
    sink = plain(FileSink("f", path))
    sink.pub_send_msg(make_event("new"))
    sink.close()
    assert path.read_text(encoding="utf-8") == "existing\nnew\n"


def test_file_sink_bad_path(tmp_path):
    with pytest.raises(LogException):
        FileSink("f", tmp_path / "missing" / "x.log")


def test_stdout_sink(capsys):
    sink = plain(StdoutSink("o"))
    sink.pub_send_msg(make_event("to out"))
    assert capsys.readouterr().out == "to out\n"


def test_stderr_sink(capsys):
    sink = plain(StderrSink("e"))
    sink.pub_send_msg(make_event("to err"))
    captured = capsys.readouterr()
    assert captured.err == "to err\n"
    assert captured.out == ""