"""In-process cache of the most recently fetched roster."""

from __future__ import annotations

import itertools
import logging
import threading
from datetime import datetime
from typing import NamedTuple, Optional, Tuple

from ..schemas.leaderboard import RosterEntry
from ..utils.datetime import utc_now

logger = logging.getLogger(__name__)


class CachedRoster(NamedTuple):
    entries: Tuple[RosterEntry, ...]
    generation: int
    refreshed_at: datetime


class RosterCache:
    """Holds the latest roster; older generations never replace newer ones."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._generations = itertools.count(1)
        self._current: Optional[CachedRoster] = None

    def next_generation(self) -> int:
        """Reserve a generation number before fetching a roster."""

        with self._lock:
            return next(self._generations)

    def publish(self, entries: Tuple[RosterEntry, ...], *, generation: int) -> bool:
        """Store ``entries`` unless a newer generation is already cached."""

        with self._lock:
            if self._current is not None and self._current.generation > generation:
                logger.info(
                    "discarding stale roster generation %d (cached %d)",
                    generation,
                    self._current.generation,
                )
                return False
            self._current = CachedRoster(tuple(entries), generation, utc_now())
            return True

    def latest(self) -> Optional[CachedRoster]:
        with self._lock:
            return self._current

    def clear(self) -> None:
        with self._lock:
            self._current = None


roster_cache = RosterCache()
