"""Guessing of the content type of a file from its name or its first bytes."""

from __future__ import annotations

import contextlib
import mimetypes
import os
from typing import IO, Any, Callable

_SNIFF_LEN = 512
_WHITESPACE = b"\t\n\x0c\r "
_TAG_TERMINATORS = b" >"
_HTML = "text/html; charset=utf-8"
_TEXT = "text/plain; charset=utf-8"
_OCTET_STREAM = "application/octet-stream"

_BUILTIN_TYPES = {
    ".avif": "image/avif",
    ".css": "text/css; charset=utf-8",
    ".gif": "image/gif",
    ".htm": "text/html; charset=utf-8",
    ".html": "text/html; charset=utf-8",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".js": "text/javascript; charset=utf-8",
    ".json": "application/json",
    ".mjs": "text/javascript; charset=utf-8",
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".wasm": "application/wasm",
    ".webp": "image/webp",
    ".xml": "text/xml; charset=utf-8",
}

_SEPARATORS = tuple({"/", os.sep, os.altsep or os.sep})


def _extension(name: str) -> str:
    """Return the extension of the last path element, dot included."""
    last_sep = max(name.rfind(sep) for sep in _SEPARATORS)
    dot = name.rfind(".")
    return name[dot:] if dot > last_sep else ""


def _system_type(ext: str) -> str:
    if not mimetypes.inited:
        mimetypes.init()
    found = mimetypes.types_map.get(ext, "")
    if found.startswith("text/") and "charset" not in found:
        found += "; charset=utf-8"
    return found


def _type_by_extension(ext: str) -> str:
    if not ext:
        return ""
    for candidate in (ext, ext.lower()):
        found = _BUILTIN_TYPES.get(candidate) or _system_type(candidate)
        if found:
            return found
    return ""


_Matcher = Callable[[bytes, int], str]


def _exact(signature: bytes, content_type: str) -> _Matcher:
    def match(data: bytes, first_non_ws: int) -> str:
        return content_type if data.startswith(signature) else ""

    return match


def _masked(mask: bytes, pattern: bytes, content_type: str, skip_ws: bool = False) -> _Matcher:
    def match(data: bytes, first_non_ws: int) -> str:
        if skip_ws:
            data = data[first_non_ws:]
        if len(pattern) != len(mask) or len(data) < len(pattern):
            return ""
        if all(d & m == p for d, m, p in zip(data, mask, pattern)):
            return content_type
        return ""

    return match


def _html(tag: bytes) -> _Matcher:
    def match(data: bytes, first_non_ws: int) -> str:
        data = data[first_non_ws:]
        if len(data) < len(tag) + 1:
            return ""
        for expected, actual in zip(tag, data):
            if 0x41 <= expected <= 0x5A:
                actual &= 0xDF
            if expected != actual:
                return ""
        return _HTML if data[len(tag)] in _TAG_TERMINATORS else ""

    return match


def _mp4(data: bytes, first_non_ws: int) -> str:
    if len(data) < 12:
        return ""
    box_size = int.from_bytes(data[:4], "big")
    if len(data) < box_size or box_size % 4 != 0:
        return ""
    if data[4:8] != b"ftyp":
        return ""
    for start in range(8, box_size, 4):
        if start == 12:
            continue
        if data[start : start + 3] == b"mp4":
            return "video/mp4"
    return ""


def _text(data: bytes, first_non_ws: int) -> str:
    for byte in data[first_non_ws:]:
        if byte <= 0x08 or byte == 0x0B or 0x0E <= byte <= 0x1A or 0x1C <= byte <= 0x1F:
            return ""
    return _TEXT


_HTML_TAGS = (
    b"<!DOCTYPE HTML", b"<HTML", b"<HEAD", b"<SCRIPT", b"<IFRAME", b"<H1", b"<DIV",
    b"<FONT", b"<TABLE", b"<A", b"<STYLE", b"<TITLE", b"<B", b"<BODY", b"<BR", b"<P",
    b"<!--",
)

_SIGNATURES: tuple[_Matcher, ...] = (
    *(_html(tag) for tag in _HTML_TAGS),
    _masked(b"\xff\xff\xff\xff\xff", b"<?xml", "text/xml; charset=utf-8", skip_ws=True),
    _exact(b"%PDF-", "application/pdf"),
    _exact(b"%!PS-Adobe-", "application/postscript"),
    _masked(b"\xff\xff\x00\x00", b"\xfe\xff\x00\x00", "text/plain; charset=utf-16be"),
    _masked(b"\xff\xff\x00\x00", b"\xff\xfe\x00\x00", "text/plain; charset=utf-16le"),
    _masked(b"\xff\xff\xff\x00", b"\xef\xbb\xbf\x00", "text/plain; charset=utf-8"),
    _exact(b"\x00\x00\x01\x00", "image/x-icon"),
    _exact(b"\x00\x00\x02\x00", "image/x-icon"),
    _exact(b"BM", "image/bmp"),
    _exact(b"GIF87a", "image/gif"),
    _exact(b"GIF89a", "image/gif"),
    _masked(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff\xff\xff",
        b"RIFF\x00\x00\x00\x00WEBPVP",
        "image/webp",
    ),
    _exact(b"\x89PNG\x0d\x0a\x1a\x0a", "image/png"),
    _exact(b"\xff\xd8\xff", "image/jpeg"),
    _masked(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        b"FORM\x00\x00\x00\x00AIFF",
        "audio/aiff",
    ),
    _masked(b"\xff\xff\xff", b"ID3", "audio/mpeg"),
    _masked(b"\xff\xff\xff\xff\xff", b"OggS\x00", "application/ogg"),
    _masked(b"\xff" * 8, b"MThd\x00\x00\x00\x06", "audio/midi"),
    _masked(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        b"RIFF\x00\x00\x00\x00AVI ",
        "video/avi",
    ),
    _masked(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        b"RIFF\x00\x00\x00\x00WAVE",
        "audio/wave",
    ),
    _mp4,
    _exact(b"\x1a\x45\xdf\xa3", "video/webm"),
    _masked(b"\x00" * 34 + b"\xff\xff", b"\x00" * 34 + b"LP", "application/vnd.ms-fontobject"),
    _exact(b"\x00\x01\x00\x00", "font/ttf"),
    _exact(b"OTTO", "font/otf"),
    _exact(b"ttcf", "font/collection"),
    _exact(b"wOFF", "font/woff"),
    _exact(b"wOF2", "font/woff2"),
    _exact(b"\x1f\x8b\x08", "application/x-gzip"),
    _exact(b"PK\x03\x04", "application/zip"),
    _exact(b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    _exact(b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    _exact(b"\x00\x61\x73\x6d", "application/wasm"),
    _text,
)


def detect_content_type(data: bytes) -> str:
    """Sniff the content type of ``data`` from at most its first 512 bytes."""
    data = bytes(data[:_SNIFF_LEN])
    first_non_ws = len(data) - len(data.lstrip(_WHITESPACE))
    for matcher in _SIGNATURES:
        content_type = matcher(data, first_non_ws)
        if content_type:
            return content_type
    return _OCTET_STREAM


def guess_content_type(file: IO[Any]) -> str:
    """Guess the type of ``file`` by extension, else by sniffing its content.

    When the content is sniffed the file is rewound to its start afterwards.
    """
    name = getattr(file, "name", "")
    if isinstance(name, bytes):
        name = os.fsdecode(name)
    elif not isinstance(name, str):
        name = ""

    content_type = _type_by_extension(_extension(name))
    if content_type:
        return content_type

    try:
        head = file.read(_SNIFF_LEN)
    except OSError:
        return ""
    finally:
        with contextlib.suppress(OSError, ValueError):
            file.seek(0)

    if isinstance(head, str):
        head = head.encode("utf-8")
    return detect_content_type(head)