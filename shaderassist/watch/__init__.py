"""Watch loop: directory polling and change detection, plus the control prompt."""

from shaderassist.watch.commands import CommandChannel
from shaderassist.watch.scan import (
    DEBOUNCE_SECONDS,
    CycleReport,
    Decision,
    ScanCycle,
    decide,
)
from shaderassist.watch.scheduler import POLL_INTERVAL_SECONDS, Scheduler
from shaderassist.watch.state import WatchContext, WatchEntry, WatchState

__all__ = [
    "CommandChannel",
    "CycleReport",
    "DEBOUNCE_SECONDS",
    "Decision",
    "POLL_INTERVAL_SECONDS",
    "ScanCycle",
    "Scheduler",
    "WatchContext",
    "WatchEntry",
    "WatchState",
    "decide",
]
