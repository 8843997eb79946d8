"""Exclusion of object paths by wildcard patterns."""

from __future__ import annotations

import os
import re
from typing import Iterable, Sequence

_REGEX_META = frozenset("\\.+*?()|[]{}^$")


def _quote_meta(text: str) -> str:
    return "".join(f"\\{ch}" if ch in _REGEX_META else ch for ch in text)


def _to_slash(path: str) -> str:
    return path if os.sep == "/" else path.replace(os.sep, "/")


def wildcard_to_regexp(pattern: str) -> str:
    """Translate a wildcard pattern (``*`` and ``?``) into an anchored regex."""
    quoted = _quote_meta(pattern).replace("\\?", ".").replace("\\*", ".*")
    return f"^{quoted}$"


def create_excludes_from_wildcard(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile the non-empty wildcard ``patterns`` into regular expressions."""
    return [re.compile(wildcard_to_regexp(pattern)) for pattern in patterns if pattern]


def is_url_excluded(
    patterns: Sequence[re.Pattern[str]], url_path: str, source_prefix: str
) -> bool:
    """Report whether ``url_path``, relative to ``source_prefix``, matches a pattern."""
    if not patterns:
        return False
    if not source_prefix.endswith("/"):
        source_prefix += "/"
    source_prefix = _to_slash(source_prefix)
    relative = url_path.removeprefix(source_prefix)
    return any(pattern.fullmatch(relative) for pattern in patterns)