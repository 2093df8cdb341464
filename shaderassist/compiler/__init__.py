"""Compiler invocation: command templates and the subprocess runner."""

from shaderassist.compiler.invoker import (
    CompilerInvoker,
    SubprocessInvoker,
    artifact_path,
    build_command,
)
from shaderassist.compiler.models import CompileResult, CompileStatus

__all__ = [
    "CompileResult",
    "CompileStatus",
    "CompilerInvoker",
    "SubprocessInvoker",
    "artifact_path",
    "build_command",
]
