"""Decisions on which objects a sync copies, and matching of source and destination listings."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .errors import ERR_OBJECT_IS_NEWER_AND_SIZES_MATCH, ERR_OBJECT_SIZES_MATCH


class SyncStrategy(ABC):
    """Decides whether a source object should be synced over a destination object.

    Objects are expected to expose ``size`` and ``mod_time`` attributes.
    """

    @abstractmethod
    def should_sync(self, src: Any, dst: Any) -> None:
        """Return if ``src`` should be synced; raise an ObjectWarning if not."""


class SizeOnlyStrategy(SyncStrategy):
    """Syncs only when the sizes of the objects differ."""

    def should_sync(self, src: Any, dst: Any) -> None:
        if src.size == dst.size:
            raise ERR_OBJECT_SIZES_MATCH


class SizeAndModificationStrategy(SyncStrategy):
    """Syncs when the source is newer or the sizes differ.

    The source is the source of truth:

    * source newer, any size: sync
    * source not newer, sizes differ: sync
    * source not newer, sizes match: skip
    """

    def should_sync(self, src: Any, dst: Any) -> None:
        if src.mod_time > dst.mod_time:
            return
        if src.size != dst.size:
            return
        raise ERR_OBJECT_IS_NEWER_AND_SIZES_MATCH


def new_strategy(size_only: bool) -> SyncStrategy:
    """Return the comparison strategy selected by ``size_only``."""
    return SizeOnlyStrategy() if size_only else SizeAndModificationStrategy()


@dataclass(frozen=True)
class ObjectPair:
    """A source object and the destination object with the same relative name."""

    src: Any
    dst: Any


def _to_slash(path: str) -> str:
    return path if os.sep == "/" else path.replace(os.sep, "/")


def compare_objects(
    source_objects: Iterable[Any],
    dest_objects: Iterable[Any],
    key: Callable[[Any], str],
) -> tuple[list[Any], list[Any], list[ObjectPair]]:
    """Split two listings by relative name given by ``key``.

    Returns the objects found only in the source, those found only in the
    destination, and the pairs found in both, each in name order.
    """
    sources = sorted(source_objects, key=key)
    dests = sorted(dest_objects, key=key)
    src_names = [_to_slash(key(obj)) for obj in sources]
    dst_names = [_to_slash(key(obj)) for obj in dests]

    src_only: list[Any] = []
    dst_only: list[Any] = []
    common: list[ObjectPair] = []

    i = j = 0
    while i < len(sources) and j < len(dests):
        src_name, dst_name = src_names[i], dst_names[j]
        if src_name == dst_name:
            common.append(ObjectPair(src=sources[i], dst=dests[j]))
            i += 1
            j += 1
        elif src_name < dst_name:
            src_only.append(sources[i])
            i += 1
        else:
            dst_only.append(dests[j])
            j += 1

    src_only.extend(sources[i:])
    dst_only.extend(dests[j:])
    return src_only, dst_only, common