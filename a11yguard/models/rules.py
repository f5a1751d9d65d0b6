"""Rule metadata models: conformance levels, severities, catalog listings."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WCAGLevel(str, Enum):
    """Cumulative WCAG conformance tiers (AA includes A, AAA includes AA)."""

    A = "A"
    AA = "AA"
    AAA = "AAA"

    @classmethod
    def coerce(cls, value: str | WCAGLevel | None) -> WCAGLevel:
        """Resolve *value* to a level, falling back to AA when unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.AA


class RuleSeverity(str, Enum):
    """How serious a reported defect is."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


# Levels in ascending strictness, used for cumulative filtering.
LEVEL_ORDER: tuple[WCAGLevel, ...] = (WCAGLevel.A, WCAGLevel.AA, WCAGLevel.AAA)


class RuleInfo(BaseModel):
    """Static description of a catalog rule, without its check logic."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    id: str
    name: str
    description: str
    wcag_level: WCAGLevel
    wcag_criteria: str  # e.g. "1.1.1"
    severity: RuleSeverity
