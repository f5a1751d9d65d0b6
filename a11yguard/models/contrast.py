"""Contrast analysis models: requirement checks, findings, suggestions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from a11yguard.models.rules import WCAGLevel


class ContrastRequirement(BaseModel):
    """Whether a foreground/background pair meets a level's threshold."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    passes: bool
    ratio: float  # rounded to 2 decimals for display
    required_ratio: float
    level: WCAGLevel


class ContrastFinding(BaseModel):
    """A declared color pair found in style source that fails its threshold."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    foreground: str
    background: str
    ratio: float
    required_ratio: float
    level: WCAGLevel
    passes: bool = False
    large_text: bool = False
    location: str = ""  # selector, or element snippet for inline styles


class ContrastSuggestion(BaseModel):
    """A corrected foreground color, or the reason none could be computed."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    original_foreground: str
    original_background: str
    required_ratio: float
    suggested_foreground: str | None = None
    new_ratio: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
