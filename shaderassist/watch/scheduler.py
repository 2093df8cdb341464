"""Drives scan cycles at a fixed interval on a background thread."""

from __future__ import annotations

import logging
import threading

from shaderassist.watch.scan import CycleReport, ScanCycle
from shaderassist.watch.state import WatchContext

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 1.0


class Scheduler:
    """Runs a :class:`ScanCycle` every ``interval`` seconds until stopped.

    A stop request is checked at the top of each tick, so the loop exits
    without a final scan. A compile already running is allowed to finish.
    """

    def __init__(
        self,
        context: WatchContext,
        cycle: ScanCycle,
        interval: float = POLL_INTERVAL_SECONDS,
    ) -> None:
        self.context = context
        self.cycle = cycle
        self.interval = interval
        self._thread: threading.Thread | None = None

    def request_recompile(self) -> None:
        """Recompile every tracked shader on the next tick."""
        self.context.request_recompile()

    def tick(self) -> CycleReport | None:
        """Run one scan cycle, returning None if the scan was abandoned.

        An abandoned forced cycle re-arms the recompile request. Files the
        cycle had already compiled are compiled again on the next tick.
        """
        force = self.context.take_recompile()
        try:
            return self.cycle.run(force=force)
        except OSError as e:
            logger.warning(
                "Scan of %s failed (%s), retrying in %.1fs",
                self.cycle.watch_path,
                e,
                self.interval,
            )
            if force:
                self.context.request_recompile()
            return None

    def run(self) -> None:
        """Block, scanning until the stop flag is set."""
        stop = self.context.stop_requested
        while not stop.is_set():
            self.tick()
            stop.wait(self.interval)

    def start(self) -> None:
        """Start scanning on a background thread."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self.run, name="shaderassist-scheduler", daemon=True
        )
        self._thread.start()
        logger.info("Watching %s for changes", self.cycle.watch_path)

    def join(self, timeout: float | None = None) -> None:
        if self._thread is None:
            return
        self._thread.join(timeout)
        if not self._thread.is_alive():
            self._thread = None

    def stop(self, timeout: float | None = None) -> None:
        """Ask the loop to exit and wait for the thread."""
        self.context.request_stop()
        self.join(timeout)
        if self._thread is None:
            logger.info("Stopped watching %s", self.cycle.watch_path)
        else:
            logger.warning(
                "Scheduler for %s still running after %ss", self.cycle.watch_path, timeout
            )
