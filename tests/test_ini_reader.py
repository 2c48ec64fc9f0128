import pytest

from logengine.ini_reader import MISSING_SECTION, IniFileError, IniReader

SAMPLE = """\
# comment line
; another comment
[Logger1]
LogFileName = logs/app.log
LogLevel=debug
Sink=one
Sink=two

[Empty]

[logger2]
Flag
  Pattern = %TIME% : %MSG%

[Last]
"""


@pytest.fixture
def reader(tmp_path):
    path = tmp_path / "sample.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    return IniReader(path)


def test_sections_in_order(reader):
    assert list(reader) == ["Logger1", "Empty", "logger2", "Last"]
    assert reader.sections_count() == 4


def test_values_are_trimmed(reader):
    assert reader.get_value("Logger1", "LogFileName") == "logs/app.log"
    assert reader.get_value("logger2", "Pattern") == "%TIME% : %MSG%"


def test_lookup_ignores_case(reader):
    assert reader.get_value("LOGGER1", "loglevel") == "debug"
    assert reader.has_section("LOGGER2")


def test_repeated_key_keeps_all_values(reader):
    assert reader.get_value("Logger1", "Sink", index=0) == "one"
    assert reader.get_value("Logger1", "Sink", index=1) == "two"
    assert reader.values_count("Logger1") == 4
    with pytest.raises(IndexError):
        reader.get_value("Logger1", "Sink", index=2)


def test_line_without_equals_is_empty_parameter(reader):
    assert reader.get_value("logger2", "Flag") == ""
    assert reader.has_value("logger2", "Flag")


def test_missing_value_gives_default(reader):
    assert reader.get_value("Logger1", "Nope") == "no_value"
    assert reader.get_value("Nowhere", "Nope", "dflt") == "dflt"
    assert not reader.has_value("Logger1", "Nope")


def test_empty_sections(reader):
    assert reader.has_section("Empty")
    assert reader.has_section("Last")
    assert reader.values_count("Empty") == 0
    assert reader.get_section("Empty") == {}
    assert reader.values_count("Nowhere") == 0


def test_get_section(reader):
    section = reader.get_section("logger1")
    assert section["Sink"] == ["one", "two"]
    assert section["LogLevel"] == ["debug"]
    with pytest.raises(KeyError):
        reader.get_section("Nowhere")


def test_parameters_before_first_section(tmp_path):
    path = tmp_path / "nosec.ini"
    path.write_text("key=value\n[A]\nx=1\n", encoding="utf-8")
    reader = IniReader(path)
    assert reader.get_value(MISSING_SECTION, "key") == "value"
    assert reader.has_section("A")


def test_reload_clears_previous(reader, tmp_path):
    path = tmp_path / "other.ini"
    path.write_text("[Only]\na=b\n", encoding="utf-8")
    reader.load_ini_file(path)
    assert list(reader) == ["Only"]
    assert not reader.has_section("Logger1")


def test_missing_file_raises(tmp_path):
    missing = tmp_path / "absent.ini"
    with pytest.raises(IniFileError) as info:
        IniReader(missing)
    assert str(info.value) == f"Ini file exception : Cannot open file '{missing}' for reading."


def test_empty_reader():
    reader = IniReader()
    assert reader.sections_count() == 0
    assert list(reader) == []