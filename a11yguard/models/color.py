"""Color value model."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, field_validator


class Color(BaseModel):
    """An sRGB color with an optional alpha channel.

    Channels are rounded half-up and clamped to ``[0, 255]`` on construction,
    so any color derived by arithmetic stays in range.
    """

    model_config = ConfigDict(frozen=True)

    r: int
    g: int
    b: int
    a: float | None = None

    @field_validator("r", "g", "b", mode="before")
    @classmethod
    def _clamp_channel(cls, value: float) -> int:
        return max(0, min(255, math.floor(float(value) + 0.5)))

    @field_validator("a", mode="before")
    @classmethod
    def _clamp_alpha(cls, value: float | None) -> float | None:
        if value is None:
            return None
        return max(0.0, min(1.0, float(value)))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)
