"""Collection and display of per-operation success and error counts."""

from __future__ import annotations

import json
import threading
from collections import Counter
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Iterator, Sequence

_TAB_WIDTH = 8
_PADDING = 1


@dataclass(frozen=True)
class Stat:
    """Counts for one operation."""

    operation: str
    success: int
    error: int

    @property
    def total(self) -> int:
        return self.success + self.error


def _align_right(rows: Sequence[Sequence[str]]) -> str:
    """Lay out cells right-aligned in tab-padded columns."""
    if not rows:
        return ""
    columns = len(rows[0])
    widths = []
    for column in range(columns):
        width = max(len(row[column]) for row in rows) + _PADDING
        widths.append(-(-width // _TAB_WIDTH) * _TAB_WIDTH)
    lines = []
    for row in rows:
        cells = []
        for text, width in zip(row, widths):
            tabs = -(-(width - len(text)) // _TAB_WIDTH)
            cells.append("\t" * tabs + text)
        lines.append("".join(cells) + "\n")
    return "".join(lines)


class Stats(list):
    """A list of :class:`Stat` renderable as a table or JSON lines."""

    def __str__(self) -> str:
        rows = [("Operation", "Total", "Error", "Success")]
        rows.extend(
            (stat.operation, str(stat.total), str(stat.error), str(stat.success)) for stat in self
        )
        return "\n" + _align_right(rows)

    def to_json(self) -> str:
        return "".join(
            json.dumps(asdict(stat), separators=(",", ":"), ensure_ascii=False) + "\n" for stat in self
        )


class StatCollector:
    """Thread-safe counter of operation outcomes; inactive until enabled."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._enabled = False
        self._total: Counter[str] = Counter()
        self._success: Counter[str] = Counter()

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        """Start collecting, discarding anything counted before."""
        with self._lock:
            self._enabled = True
            self._total.clear()
            self._success.clear()

    def _record(self, op: str, succeeded: bool) -> None:
        with self._lock:
            if not self._enabled:
                return
            self._total[op] += 1
            if succeeded:
                self._success[op] += 1

    @contextmanager
    def collect(self, op: str) -> Iterator[None]:
        """Count the enclosed block as a success, or as an error if it raises."""
        try:
            yield
        except BaseException:
            self._record(op, False)
            raise
        else:
            self._record(op, True)

    def statistics(self) -> Stats:
        """Return the counts gathered so far."""
        with self._lock:
            if not self._enabled:
                return Stats()
            return Stats(
                Stat(operation=op, success=self._success[op], error=total - self._success[op])
                for op, total in self._total.items()
            )


_collector = StatCollector()


def init_stat() -> None:
    """Enable the global collector."""
    _collector.enable()


def collect(op: str):
    """Context manager counting the outcome of ``op`` in the global collector."""
    return _collector.collect(op)


def statistics() -> Stats:
    """Return the global collector's counts."""
    return _collector.statistics()