"""Reader for INI-style configuration files."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

MISSING_SECTION = "__MISSING_SECTION__"
_ERROR_PREFIX = "Ini file exception : "


class IniFileError(Exception):
    """Raised when an INI file cannot be read."""

    def __init__(self, message: str) -> None:
        self.text = message
        super().__init__(message)

    def __str__(self) -> str:
        return _ERROR_PREFIX + self.text


def _trim(text: str) -> str:
    return text.strip(" \t")


def _trim_sp_crlf(text: str) -> str:
    return text.strip(" \r\n")


@dataclass
class _Section:
    name: str
    # lower-cased key -> (original key, values)
    entries: dict[str, tuple[str, list[str]]] = field(default_factory=dict)


class IniReader:
    """Holds the parameters of an INI file.

    Section and parameter names are matched without regard to case. A
    parameter given several times keeps all its values in order. Lines
    starting with ``#`` or ``;`` are comments; a line without ``=`` is a
    parameter with an empty value. Iterating yields the section names.
    """

    def __init__(self, file_name: str | Path | None = None) -> None:
        self._sections: dict[str, _Section] = {}
        if file_name is not None:
            self.load_ini_file(file_name)

    def __iter__(self) -> Iterator[str]:
        return (section.name for section in self._sections.values())

    def _ensure_section(self, name: str) -> _Section:
        return self._sections.setdefault(name.lower(), _Section(name))

    def _add_value(self, section: str, key: str, value: str) -> None:
        entries = self._ensure_section(section).entries
        entries.setdefault(key.lower(), (key, []))[1].append(value)

    def load_ini_file(self, file_name: str | Path) -> None:
        """Replace the current contents with those of ``file_name``."""
        self._sections.clear()
        try:
            with open(file_name, encoding="utf-8") as fin:
                lines = fin.read().splitlines()
        except OSError as exc:
            raise IniFileError(f"Cannot open file '{file_name}' for reading.") from exc

        section = MISSING_SECTION
        param_count = 0
        for raw in lines:
            line = _trim(raw)
            if not line or line[0] in "#;":
                continue
            if line[0] == "[":
                if param_count == 0 and section != MISSING_SECTION:
                    self._ensure_section(section)
                end = line.find("]")
                section = line[1:end] if end >= 0 else line[1:]
                param_count = 0
                continue
            left, sep, right = line.partition("=")
            if not sep:
                right = ""
            self._add_value(_trim_sp_crlf(section), _trim_sp_crlf(left), _trim_sp_crlf(right))
            param_count += 1

        if param_count == 0 and section != MISSING_SECTION:
            self._ensure_section(section)

    def _values(self, section: str, key: str) -> list[str] | None:
        sec = self._sections.get(section.lower())
        if sec is None:
            return None
        entry = sec.entries.get(key.lower())
        return None if entry is None else entry[1]

    def get_value(
        self,
        section: str,
        key: str,
        default_value: str = "no_value",
        index: int = 0,
    ) -> str:
        """Value number ``index`` of a parameter, or ``default_value`` if absent.

        Raises IndexError when the parameter exists but has no such value.
        """
        values = self._values(section, key)
        if values is None:
            return default_value
        if index < 0 or index >= len(values):
            raise IndexError(f"value index {index} out of range for '{section}/{key}'")
        return values[index]

    def sections_count(self) -> int:
        """Number of sections read."""
        return len(self._sections)

    def get_section(self, section: str) -> dict[str, list[str]]:
        """Parameters of a section, each with its list of values.

        Raises KeyError when the section does not exist.
        """
        sec = self._sections.get(section.lower())
        if sec is None:
            raise KeyError(section)
        return {key: list(values) for key, values in sec.entries.values()}

    def has_section(self, section: str) -> bool:
        """True when the section exists."""
        return section.lower() in self._sections

    def values_count(self, section: str) -> int:
        """Total number of values in a section; zero if it does not exist."""
        sec = self._sections.get(section.lower())
        if sec is None:
            return 0
        return sum(len(values) for _, values in sec.entries.values())

    def has_value(self, section: str, key: str) -> bool:
        """True when the parameter exists with at least one value."""
        values = self._values(section, key)
        return bool(values)