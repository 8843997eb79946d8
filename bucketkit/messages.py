"""Structured messages that can be rendered as text or JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(text: str) -> str:
    """Return ``text`` as a double-quoted literal with escapes."""
    parts = ['"']
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            code = ord(ch)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _jsonable(value: Any) -> Any:
    if value is None:
        return None
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return json.loads(to_json())
    return str(value)


def _fmt(value: Any) -> str:
    return "<nil>" if value is None else str(value)


@dataclass
class InfoMessage:
    """Report of a successful operation."""

    operation: str
    source: Any = None
    destination: Any = None
    obj: Any = None

    def __str__(self) -> str:
        if self.destination is not None:
            return f"{self.operation} {_fmt(self.source)} {self.destination}"
        return f"{self.operation} {_fmt(self.source)}"

    def to_json(self) -> str:
        data: dict[str, Any] = {
            "operation": self.operation,
            "success": True,
            "source": _jsonable(self.source),
        }
        if self.destination is not None:
            data["destination"] = _jsonable(self.destination)
        if self.obj is not None:
            data["object"] = _jsonable(self.obj)
        return _dumps(data)


@dataclass
class ErrorMessage:
    """Report of a failed operation."""

    err: str
    operation: str = ""
    command: str = ""

    def __str__(self) -> str:
        if not self.command:
            return self.err
        return f"{_quote(self.command)}: {self.err}"

    def to_json(self) -> str:
        data: dict[str, Any] = {}
        if self.operation:
            data["operation"] = self.operation
        if self.command:
            data["command"] = self.command
        data["error"] = self.err
        return _dumps(data)


@dataclass
class DebugMessage:
    """Diagnostic report about a skipped or failed job."""

    err: str
    operation: str = ""
    command: str = ""

    def __str__(self) -> str:
        if not self.command:
            return self.err
        return f"{_quote(self.command)}: {self.err}"

    def to_json(self) -> str:
        data: dict[str, Any] = {}
        if self.operation:
            data["operation"] = self.operation
        if self.command:
            data["job"] = self.command
        data["error"] = self.err
        return _dumps(data)


@dataclass
class TraceMessage:
    """A free-form trace line."""

    message: str

    def __str__(self) -> str:
        return self.message

    def to_json(self) -> str:
        return _dumps({"message": self.message})


Message = Optional[Any]