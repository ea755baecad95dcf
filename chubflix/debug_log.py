"""Bounded in-memory event log for diagnostics.

Keeps the most recent DEBUG_LOG_CAPACITY entries; older ones are evicted.
Every entry is also emitted through the module logger at DEBUG level, and an
optional on_update callback lets a viewer refresh when something is recorded.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from chubflix.models import DebugLogEntry

logger = logging.getLogger(__name__)

DEBUG_LOG_CAPACITY = 50


def now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


class DebugLog:
    def __init__(
        self,
        capacity: int = DEBUG_LOG_CAPACITY,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._entries: deque[DebugLogEntry] = deque(maxlen=capacity)
        self._clock = clock
        self.on_update: Callable[[DebugLogEntry], None] | None = None

    def add(self, event: str, data: Any = None) -> DebugLogEntry:
        entry = DebugLogEntry(timestamp=self._clock(), event=event, data=data)
        self._entries.append(entry)
        logger.debug("stage event=%s data=%r", event, data)
        if self.on_update is not None:
            self.on_update(entry)
        return entry

    def entries(self) -> list[DebugLogEntry]:
        """Oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
