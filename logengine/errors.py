"""Exception type raised by the logging engine."""

from __future__ import annotations


class LogException(Exception):
    """Error raised by the logging engine.

    The message may hold printf-style placeholders that are filled
    from the extra positional arguments.
    """

    def __init__(self, message: str, *args: object) -> None:
        self.text = message % args if args else message
        super().__init__(self.text)

    def __str__(self) -> str:
        return f"[LogException] {self.text}"