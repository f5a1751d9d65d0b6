"""Audit output models: issues and their per-severity summary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from a11yguard.models.rules import RuleSeverity, WCAGLevel


class Issue(BaseModel):
    """One defect reported by a single rule against one matched element."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    rule_id: str
    severity: RuleSeverity
    element: str  # markup snippet or a synthetic placeholder such as "<body>"
    message: str
    suggestion: str | None = None


class AuditSummary(BaseModel):
    """Counts folded over an issue list."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    total: int = 0
    errors: int = 0
    warnings: int = 0
    info: int = 0
    level: WCAGLevel = WCAGLevel.AA

    @classmethod
    def from_issues(cls, issues: list[Issue], level: WCAGLevel) -> AuditSummary:
        counts = {severity: 0 for severity in RuleSeverity}
        for issue in issues:
            counts[issue.severity] += 1
        return cls(
            total=len(issues),
            errors=counts[RuleSeverity.ERROR],
            warnings=counts[RuleSeverity.WARNING],
            info=counts[RuleSeverity.INFO],
            level=level,
        )


class AuditResult(BaseModel):
    """Output of one audit call.  Recomputed on every call, never cached."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    issues: list[Issue] = Field(default_factory=list)
    summary: AuditSummary = AuditSummary()

    def issues_for(self, rule_id: str) -> list[Issue]:
        """Return the issues reported by *rule_id*, in report order."""
        return [issue for issue in self.issues if issue.rule_id == rule_id]


class FileAuditResult(AuditResult):
    """An ``AuditResult`` tagged with the file it was produced from."""

    file: str
