from math import isfinite

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .app.config import DEFAULT_INPUTS


class ImmutableModel(BaseModel):
    """Base class for immutable Pydantic models."""
    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
    )


class DemoSettings(ImmutableModel):
    """
    Settings for a run of the demo pipeline.
    """
    inputs: list[float] = Field(
        default_factory=lambda: list(DEFAULT_INPUTS),
        min_length=1,
        description="Values fed to the invert pipeline, one line of output each",
    )
    verbose: bool = False

    @field_validator("inputs")
    @classmethod
    def _inputs_are_finite(cls, values: list[float]) -> list[float]:
        for value in values:
            if not isfinite(value):
                raise ValueError(f"input must be a finite number, got {value}")
        return values
