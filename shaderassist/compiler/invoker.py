"""Runs the external SPIR-V compiler for a single shader."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from shaderassist.compiler.models import CompileResult, CompileStatus
from shaderassist.config.models import ShaderAssistConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class CompilerInvoker(Protocol):
    """Anything that can compile ``<name><ext>`` and report the outcome."""

    def compile(self, name: str, ext: str) -> CompileResult: ...


def artifact_path(config: ShaderAssistConfig, name: str, ext: str) -> str:
    """``<output>/<name><ext><spirv_ext>``, joined with a forward slash."""
    return f"{config.output_path.as_posix()}/{name}{ext}{config.spirv_ext}"


def build_command(config: ShaderAssistConfig, name: str, ext: str) -> list[str]:
    """Return the compiler argv for one shader under the configured compiler."""
    return config.compiler.command(
        config.compiler_path,
        f"{name}{ext}",
        artifact_path(config, name, ext),
    )


class SubprocessInvoker:
    """Compiles shaders by running glslangValidator or glslc as a child process.

    The process runs inside the watched directory so the bare ``<name><ext>``
    argument resolves, and its output is discarded. Failures are reported
    through the returned :class:`CompileResult`, never raised.
    """

    def __init__(
        self,
        config: ShaderAssistConfig,
        working_dir: Path | None = None,
        timeout: float | None = None,
    ) -> None:
        self.config = config
        self.working_dir = working_dir if working_dir is not None else config.watch_path
        self.timeout = timeout if timeout is not None else config.compile_timeout

    def compile(self, name: str, ext: str) -> CompileResult:
        command = build_command(self.config, name, ext)
        source = f"{name}{ext}"
        artifact = artifact_path(self.config, name, ext)
        logger.debug("Running %s", " ".join(command))

        try:
            proc = subprocess.run(
                command,
                cwd=self.working_dir,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            return CompileResult(
                source=source,
                artifact=artifact,
                command=command,
                status=CompileStatus.timed_out,
                error=f"compiler exceeded {self.timeout}s",
            )
        except OSError as e:
            return CompileResult(
                source=source,
                artifact=artifact,
                command=command,
                status=CompileStatus.failed,
                error=str(e),
            )

        status = CompileStatus.succeeded if proc.returncode == 0 else CompileStatus.failed
        return CompileResult(
            source=source,
            artifact=artifact,
            command=command,
            status=status,
            returncode=proc.returncode,
        )
