from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ConfigError(ValueError):
    """Raised when a configuration file is unreadable or holds invalid values."""


class ConfigNotFoundError(FileNotFoundError, ConfigError):
    """Raised when the configuration file cannot be opened."""


class CompilerChoice(str, Enum):
    """Which external SPIR-V compiler builds the command line."""

    glslang_validator = "glslang_validator"
    glslc = "glslc"

    def command(self, executable: str, source: str, artifact: str) -> list[str]:
        """Return the argv that compiles ``source`` into ``artifact``."""
        if self is CompilerChoice.glslc:
            return [executable, source, "-o", artifact]
        return [executable, "-V", source, "-o", artifact]


def _is_absolute(raw: str) -> bool:
    """Leading slash or backslash, or a drive letter such as ``C:``."""
    if not raw:
        return False
    return raw[0] in ("/", "\\") or (len(raw) > 1 and raw[1] == ":")


def resolve_path(raw: str, cwd: Path | None = None) -> Path:
    """Resolve a configured directory, treating relative paths as cwd-relative."""
    if _is_absolute(raw):
        return Path(raw)
    base = cwd if cwd is not None else Path.cwd()
    return base / raw if raw else base


def resolve_executable(raw: str, cwd: Path | None = None) -> str:
    """Anchor a relative executable path to the cwd; bare names stay for PATH lookup.

    The compiler runs inside the shader directory, where a relative path such
    as ``tools/glslc`` would otherwise no longer resolve.
    """
    if "/" not in raw and "\\" not in raw:
        return raw
    return str(resolve_path(raw, cwd))


class ShaderAssistConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    compile_on_startup: bool = False
    compiler: CompilerChoice = CompilerChoice.glslang_validator
    glslang_validator_path: str = ""
    glslc_path: str = ""
    shader_source_path: str = ""
    spirv_output_path: str = ""
    spirv_ext: str = ""
    vs_ext: str = ""
    fs_ext: str = ""
    gs_ext: str = ""
    cs_ext: str = ""
    compile_timeout: float | None = Field(default=None, gt=0)
    log_level: Literal["debug", "info", "warn", "error"] = "info"

    @property
    def recognized_extensions(self) -> frozenset[str]:
        """Shader-stage extensions that qualify a file for compilation.

        Empty values are left out so an unset stage never matches files
        without an extension.
        """
        return frozenset(
            ext for ext in (self.vs_ext, self.fs_ext, self.gs_ext, self.cs_ext) if ext
        )

    @property
    def compiler_paths(self) -> dict[CompilerChoice, str]:
        return {
            CompilerChoice.glslang_validator: self.glslang_validator_path,
            CompilerChoice.glslc: self.glslc_path,
        }

    @property
    def compiler_path(self) -> str:
        """Selected compiler executable, resolved if it names a path."""
        return resolve_executable(self.compiler_paths[self.compiler])

    @property
    def watch_path(self) -> Path:
        return resolve_path(self.shader_source_path)

    @property
    def output_path(self) -> Path:
        return resolve_path(self.spirv_output_path)
