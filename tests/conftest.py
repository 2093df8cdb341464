"""Shared test fixtures for ShaderAssist."""

import pytest

from shaderassist.compiler.models import CompileResult, CompileStatus
from shaderassist.config.models import ShaderAssistConfig


class RecordingInvoker:
    """Fake compiler that records every (name, ext) it is asked to build."""

    def __init__(self, status: CompileStatus = CompileStatus.succeeded) -> None:
        self.status = status
        self.calls: list[tuple[str, str]] = []

    def compile(self, name: str, ext: str) -> CompileResult:
        self.calls.append((name, ext))
        return CompileResult(
            source=f"{name}{ext}",
            artifact=f"spirv/{name}{ext}.spv",
            status=self.status,
            returncode=0 if self.status is CompileStatus.succeeded else 1,
        )

    @property
    def sources(self) -> list[str]:
        return sorted(f"{name}{ext}" for name, ext in self.calls)


@pytest.fixture
def shader_dir(tmp_path):
    directory = tmp_path / "shaders"
    directory.mkdir()
    return directory


@pytest.fixture
def sample_config(tmp_path, shader_dir):
    return ShaderAssistConfig(
        shader_source_path=str(shader_dir),
        spirv_output_path=str(tmp_path / "spirv"),
        glslang_validator_path="glslangValidator",
        glslc_path="glslc",
        spirv_ext=".spv",
        vs_ext=".vert",
        fs_ext=".frag",
        gs_ext=".geom",
        cs_ext=".comp",
    )


@pytest.fixture
def invoker():
    return RecordingInvoker()


@pytest.fixture
def failing_invoker():
    return RecordingInvoker(status=CompileStatus.failed)
