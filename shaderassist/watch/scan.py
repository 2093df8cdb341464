"""One polling pass over the shader directory."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from shaderassist.compiler.invoker import CompilerInvoker
from shaderassist.compiler.models import CompileResult
from shaderassist.config.models import ShaderAssistConfig
from shaderassist.watch.state import WatchState

logger = logging.getLogger(__name__)

# Seconds a tracked file's mtime must move before it is recompiled
DEBOUNCE_SECONDS = 1.0


class Decision(str, Enum):
    """What a scan does with one shader file."""

    skip = "skip"
    compile_new = "compile_new"
    compile_changed = "compile_changed"


def decide(
    stored_mtime: float | None,
    current_mtime: float,
    *,
    force: bool = False,
    first_cycle: bool = False,
    compile_on_startup: bool = False,
    debounce: float = DEBOUNCE_SECONDS,
) -> Decision:
    """Choose between skipping and compiling a shader.

    ``stored_mtime`` is None for a file the state has not seen yet. Every
    file is new on the first cycle, so ``compile_on_startup`` decides whether
    that cycle builds everything or only records a baseline.
    """
    if stored_mtime is None:
        if first_cycle and not compile_on_startup:
            return Decision.skip
        return Decision.compile_new
    if force or current_mtime - stored_mtime > debounce:
        return Decision.compile_changed
    return Decision.skip


class CycleReport(BaseModel):
    """Outcome of a single scan cycle."""

    first_cycle: bool = False
    forced: bool = False
    compiled: list[str] = Field(default_factory=list)
    registered: list[str] = Field(default_factory=list)
    evicted: list[str] = Field(default_factory=list)
    results: list[CompileResult] = Field(default_factory=list)


def iter_shader_files(watch_path: Path, extensions: frozenset[str]) -> list[Path]:
    """Regular files directly under ``watch_path`` with a recognized suffix."""
    return [
        p for p in sorted(watch_path.iterdir())
        if p.suffix in extensions and p.is_file()
    ]


class ScanCycle:
    """Compares the shader directory against the watch state and compiles.

    A compile failure neither stops the pass nor keeps the timestamp from
    being updated; the next edit or a forced recompile is the only retry.
    """

    def __init__(
        self,
        config: ShaderAssistConfig,
        state: WatchState,
        invoker: CompilerInvoker,
        on_result: Callable[[CompileResult], None] | None = None,
        watch_path: Path | None = None,
        debounce: float = DEBOUNCE_SECONDS,
    ) -> None:
        self.config = config
        self.state = state
        self.invoker = invoker
        self.on_result = on_result
        self.watch_path = watch_path if watch_path is not None else config.watch_path
        self.debounce = debounce
        self._first_cycle = True

    @property
    def first_cycle(self) -> bool:
        """True until a cycle has run to completion."""
        return self._first_cycle

    def run(self, force: bool = False) -> CycleReport:
        first = self._first_cycle
        report = CycleReport(first_cycle=first, forced=force)
        observed: list[Path] = []

        for path in iter_shader_files(self.watch_path, self.config.recognized_extensions):
            observed.append(path)
            mtime = path.stat().st_mtime
            entry = self.state.get(path)
            decision = decide(
                entry.last_write_time if entry is not None else None,
                mtime,
                force=force,
                first_cycle=first,
                compile_on_startup=self.config.compile_on_startup,
                debounce=self.debounce,
            )

            if entry is None:
                self.state.record(path, mtime)
            if decision is Decision.skip:
                if entry is None:
                    logger.debug("Registered %s without compiling", path.name)
                    report.registered.append(path.name)
                continue

            if decision is Decision.compile_changed:
                logger.info("- File %s is modified, recompiling...", path.name)
                self.state.record(path, mtime)
            else:
                logger.info("- Newly recognized file: %s, compiling...", path.name)
            report.compiled.append(path.name)
            self._compile(path, report)

        report.evicted = [p.name for p in self.state.evict_missing(observed)]
        self._first_cycle = False
        return report

    def _compile(self, path: Path, report: CycleReport) -> None:
        result = self.invoker.compile(path.stem, path.suffix)
        report.results.append(result)
        if self.on_result is None:
            return
        try:
            self.on_result(result)
        except Exception:
            logger.exception("Compile result callback failed for %s", path.name)
