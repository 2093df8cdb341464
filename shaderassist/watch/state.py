"""Watch state and the flags shared between the scheduler and the prompt."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class WatchEntry:
    """Last modification time recorded for a watched shader."""

    last_write_time: float


class WatchState:
    """Known shader files keyed by path.

    Only the scheduler thread mutates this, so it carries no lock.
    """

    def __init__(self) -> None:
        self._entries: dict[Path, WatchEntry] = {}

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._entries)

    def get(self, path: Path) -> WatchEntry | None:
        return self._entries.get(path)

    def record(self, path: Path, mtime: float) -> WatchEntry:
        """Insert or overwrite the entry for ``path``."""
        entry = self._entries.get(path)
        if entry is None:
            entry = self._entries[path] = WatchEntry(last_write_time=mtime)
        else:
            entry.last_write_time = mtime
        return entry

    def evict_missing(self, observed: Iterable[Path]) -> list[Path]:
        """Drop entries for files that were not seen in the latest scan."""
        seen = set(observed)
        gone = [path for path in self._entries if path not in seen]
        for path in gone:
            del self._entries[path]
            logger.debug("No longer watching %s", path)
        return gone


class WatchContext:
    """Owns the watch state plus the stop and force-recompile flags.

    The prompt thread sets the flags; the scheduler thread reads and clears
    them. ``threading.Event`` makes each flag safe to share on its own.
    """

    def __init__(self, state: WatchState | None = None) -> None:
        self.state = state if state is not None else WatchState()
        self.stop_requested = threading.Event()
        self.recompile_requested = threading.Event()

    def request_stop(self) -> None:
        self.stop_requested.set()

    def request_recompile(self) -> None:
        self.recompile_requested.set()

    def take_recompile(self) -> bool:
        """Consume a pending force-recompile request."""
        if not self.recompile_requested.is_set():
            return False
        self.recompile_requested.clear()
        return True
