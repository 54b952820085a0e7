from typing import Any

from pydantic import BaseModel, Field


class TraceStep(BaseModel):
    """One decision made while producing a ticket."""

    step: str = Field(description="Decision name, e.g. 'sample_length'")
    choice: str = Field(description="Readable summary of the decision")
    value: Any = Field(description="Chosen value, JSON-serializable")


class GenerationTrace(BaseModel):
    """Decisions behind a single generated ticket."""

    strategy: str = Field(description="Generator used (library, secure, ...)")
    steps: list[TraceStep] = Field(default_factory=list)


def trace_step(
    trace: list[TraceStep] | None, step: str, choice: str, value: Any
) -> None:
    if trace is None:
        return
    trace.append(TraceStep(step=step, choice=choice, value=value))
