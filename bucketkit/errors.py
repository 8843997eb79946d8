"""Error types shared by the command implementations."""

from __future__ import annotations

import asyncio
from typing import Any, Iterator, Optional


def _fmt(value: Any) -> str:
    return "<nil>" if value is None else str(value)


class OperationError(Exception):
    """An error raised while performing an operation on a source/destination pair."""

    def __init__(self, op: str, src: Any = None, dst: Any = None, err: Optional[BaseException] = None) -> None:
        super().__init__()
        self.op = op
        self.src = src
        self.dst = dst
        self.err = err
        if err is not None:
            self.__cause__ = err

    def full_command(self) -> str:
        """Return the command string the error occurred at."""
        return f"{_fmt(self.op)} {_fmt(self.src)} {_fmt(self.dst)}"

    def __str__(self) -> str:
        return _fmt(self.err)


class MultiError(Exception):
    """An aggregate of several errors."""

    def __init__(self, *errors: Optional[BaseException]) -> None:
        super().__init__()
        self.errors: list[BaseException] = []
        for err in errors:
            self.append(err)

    def append(self, err: Optional[BaseException]) -> "MultiError":
        """Add ``err``, flattening nested aggregates; ``None`` is ignored."""
        if err is None:
            return self
        if isinstance(err, MultiError):
            self.errors.extend(err.errors)
        else:
            self.errors.append(err)
        return self

    def error_or_none(self) -> Optional["MultiError"]:
        """Return this aggregate if it holds any error, else ``None``."""
        return self if self.errors else None

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        if len(self.errors) == 1:
            return f"1 error occurred:\n\t* {self.errors[0]}\n\n"
        points = "\n\t".join(f"* {err}" for err in self.errors)
        return f"{len(self.errors)} errors occurred:\n\t{points}\n\n"


class CancellationError(Exception):
    """Raised when an operation is cancelled."""


class ObjectWarning(Exception):
    """A condition that skips an operation without failing it."""


ERR_OBJECT_EXISTS = ObjectWarning("object already exists")
ERR_OBJECT_IS_NEWER = ObjectWarning("object is newer or same age")
ERR_OBJECT_SIZES_MATCH = ObjectWarning("object size matches")
ERR_OBJECT_IS_NEWER_AND_SIZES_MATCH = ObjectWarning(
    f"{ERR_OBJECT_IS_NEWER} and {ERR_OBJECT_SIZES_MATCH}"
)

_WARNINGS = (
    ERR_OBJECT_EXISTS,
    ERR_OBJECT_IS_NEWER,
    ERR_OBJECT_SIZES_MATCH,
    ERR_OBJECT_IS_NEWER_AND_SIZES_MATCH,
)


def is_cancelation(err: Optional[BaseException]) -> bool:
    """Report whether ``err`` is, wraps or aggregates a cancellation."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, (CancellationError, asyncio.CancelledError)):
            return True
        if isinstance(current, MultiError):
            return any(is_cancelation(inner) for inner in current.errors)
        if isinstance(current, OperationError):
            current = current.err
        else:
            current = current.__cause__
    return False


def is_warning(err: Optional[BaseException]) -> bool:
    """Report whether ``err`` is one of the known object warnings."""
    return any(err is warning for warning in _WARNINGS)