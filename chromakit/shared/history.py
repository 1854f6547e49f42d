#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/shared/history.py

import time
from typing import Dict, List, NamedTuple, Optional, Sequence

from chromakit.core import config as c
from chromakit.core.conversions import hex_to_rgb


class HistoryEntry(NamedTuple):
    hex: str
    timestamp: int


def _now_ms() -> int:
    return int(time.time() * 1000)


class ColorHistory:
    """
    Most-recent-first list of picked colors.

    Entries are stored as canonical uppercase ``#RRGGBB``. Re-adding a
    color moves it to the front instead of duplicating it, and the list
    never grows past ``limit``. Persisting the list is left to the caller
    via ``to_list`` / ``from_list``.
    """

    def __init__(self, limit: int = c.DEFAULT_HISTORY_LIMIT, clock=_now_ms):
        if not isinstance(limit, int) or isinstance(limit, bool):
            limit = c.DEFAULT_HISTORY_LIMIT
        self.limit = max(1, min(c.MAX_HISTORY_LIMIT, limit))
        self._clock = clock
        self._entries: List[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def add(self, hex_code: str) -> Optional[str]:
        """Add a color to the front. Returns its canonical hex, or None if invalid."""
        color = hex_to_rgb(hex_code)
        if color is None:
            return None
        self._drop(color.hex)
        self._entries.insert(0, HistoryEntry(color.hex, self._clock()))
        del self._entries[self.limit:]
        return color.hex

    def remove(self, hex_code: str) -> bool:
        color = hex_to_rgb(hex_code)
        if color is None:
            return False
        return self._drop(color.hex)

    def clear(self) -> None:
        self._entries.clear()

    def _drop(self, canonical: str) -> bool:
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.hex != canonical]
        return len(self._entries) != before

    def to_list(self) -> List[Dict[str, object]]:
        return [{"hex": e.hex, "timestamp": e.timestamp} for e in self._entries]

    @classmethod
    def from_list(cls, entries: Sequence, limit: int = c.DEFAULT_HISTORY_LIMIT, clock=_now_ms) -> "ColorHistory":
        """
        Rebuild a history from stored entries, newest first.

        Stored data is untrusted. Anything other than a list or tuple gives
        an empty history. Entries that are not mappings with a valid hex are
        skipped, later duplicates are dropped and a missing or malformed
        timestamp is replaced by the current time.
        """
        history = cls(limit=limit, clock=clock)
        if not isinstance(entries, (list, tuple)):
            return history
        seen = set()
        for raw in entries:
            if not isinstance(raw, dict):
                continue
            color = hex_to_rgb(raw.get("hex"))
            if color is None or color.hex in seen:
                continue
            ts = raw.get("timestamp")
            if not isinstance(ts, int) or isinstance(ts, bool):
                ts = history._clock()
            seen.add(color.hex)
            history._entries.append(HistoryEntry(color.hex, ts))
            if len(history._entries) >= history.limit:
                break
        return history
