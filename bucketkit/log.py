"""Levelled, thread-safe output of structured messages."""

from __future__ import annotations

import sys
import threading
from enum import IntEnum
from typing import Any, Optional, TextIO


class Level(IntEnum):
    """Logging level; messages below the logger's level are dropped."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    ERROR = 3

    @property
    def prefix(self) -> str:
        """Prefix written before a text message of this level."""
        return _PREFIXES[self]

    @classmethod
    def from_string(cls, name: str) -> "Level":
        """Return the level named ``name``, defaulting to INFO."""
        return _BY_NAME.get(name, cls.INFO)


# Trace lines carry their own prefix already, so none is added.
_PREFIXES = {
    Level.TRACE: "",
    Level.DEBUG: "DEBUG ",
    Level.INFO: "",
    Level.ERROR: "ERROR ",
}

_BY_NAME = {
    "trace": Level.TRACE,
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "error": Level.ERROR,
}


class Logger:
    """Writes messages as text or JSON, one line each, without interleaving."""

    def __init__(
        self,
        level: "str | Level" = "info",
        json_output: bool = False,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.level = level if isinstance(level, Level) else Level.from_string(level)
        self.json_output = json_output
        self._stdout = stdout
        self._stderr = stderr
        self._lock = threading.Lock()
        self._closed = False

    def _stream(self, to_stderr: bool) -> TextIO:
        if to_stderr:
            return sys.stderr if self._stderr is None else self._stderr
        return sys.stdout if self._stdout is None else self._stdout

    def _write(self, level: Level, msg: Any, to_stderr: bool) -> None:
        text = msg.to_json() if self.json_output else f"{level.prefix}{msg}"
        with self._lock:
            if self._closed:
                raise RuntimeError("logger is closed")
            print(text, file=self._stream(to_stderr))

    def _log(self, level: Level, msg: Any, to_stderr: bool = False) -> None:
        if level < self.level:
            return
        self._write(level, msg, to_stderr)

    def trace(self, msg: Any) -> None:
        self._log(Level.TRACE, msg)

    def debug(self, msg: Any) -> None:
        self._log(Level.DEBUG, msg)

    def info(self, msg: Any) -> None:
        self._log(Level.INFO, msg)

    def error(self, msg: Any) -> None:
        self._log(Level.ERROR, msg, to_stderr=True)

    def stat(self, msg: Any) -> None:
        """Write ``msg`` with info formatting regardless of the level."""
        self._write(Level.INFO, msg, to_stderr=False)

    def close(self) -> None:
        """Flush the streams and refuse further messages."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            for stream in (self._stream(False), self._stream(True)):
                stream.flush()


_global: Optional[Logger] = None
_global_lock = threading.Lock()


def _current() -> Logger:
    global _global
    with _global_lock:
        if _global is None:
            _global = Logger()
        return _global


def init(level: str, json_output: bool) -> None:
    """Replace the global logger."""
    global _global
    with _global_lock:
        _global = Logger(level, json_output)


def trace(msg: Any) -> None:
    _current().trace(msg)


def debug(msg: Any) -> None:
    _current().debug(msg)


def info(msg: Any) -> None:
    _current().info(msg)


def error(msg: Any) -> None:
    _current().error(msg)


def stat(msg: Any) -> None:
    _current().stat(msg)


def close() -> None:
    _current().close()