"""Pydantic models for compiler invocations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class CompileStatus(str, Enum):
    """Outcome of one compiler process."""

    succeeded = "succeeded"
    failed = "failed"
    timed_out = "timed_out"


class CompileResult(BaseModel):
    """What happened when a single shader was handed to the compiler."""

    source: str
    artifact: str
    command: list[str] = Field(default_factory=list)
    status: CompileStatus
    returncode: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is CompileStatus.succeeded
