"""Logging building blocks: levels and events, pattern layouts, sinks, an INI reader and a thread-safe queue."""

__version__ = "1.3.0"

__all__ = ["compare", "errors", "events", "ini_reader", "pattern", "safe_queue", "sinks"]