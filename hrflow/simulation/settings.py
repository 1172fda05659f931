"""Tunable parameters for simulated runs."""

from pydantic import BaseModel, Field, model_validator


class DurationRange(BaseModel):
    """Inclusive range of synthetic step durations in milliseconds."""

    min_ms: int = Field(gt=0)
    max_ms: int = Field(gt=0)

    @model_validator(mode="after")
    def check_order(self) -> "DurationRange":
        if self.max_ms < self.min_ms:
            raise ValueError(
                f"max_ms ({self.max_ms}) must not be less than min_ms ({self.min_ms})"
            )
        return self


class SimulationSettings(BaseModel):
    """Settings for the workflow simulator."""

    # Seconds awaited before a run, standing in for the network round trip
    latency: float = Field(default=0.5, ge=0)
    # Duration of start and end steps
    fixed_step_ms: int = Field(default=100, gt=0)
    default_range: DurationRange = Field(
        default_factory=lambda: DurationRange(min_ms=500, max_ms=3499)
    )
    approval_range: DurationRange = Field(
        default_factory=lambda: DurationRange(min_ms=1000, max_ms=2999)
    )
