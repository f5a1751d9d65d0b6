"""Fix pipeline output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Change(BaseModel):
    """One attributable rewrite made by a fix pass."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    type: str  # fix-kind tag, e.g. "add-alt"
    description: str
    original: str
    replacement: str


class FixResult(BaseModel):
    """Output of a single fix pass."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    fixed: str
    changes: list[Change] = Field(default_factory=list)


class FixSummary(BaseModel):
    """Change counts grouped by fix kind."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    total_changes: int = 0
    by_type: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_changes(cls, changes: list[Change]) -> FixSummary:
        by_type: dict[str, int] = {}
        for change in changes:
            by_type[change.type] = by_type.get(change.type, 0) + 1
        return cls(total_changes=len(changes), by_type=by_type)


class FixAllResult(BaseModel):
    """Output of the composite pipeline run."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    fixed: str
    changes: list[Change] = Field(default_factory=list)
    summary: FixSummary = FixSummary()
