"""Unit tests for the frozen Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from a11yguard.models import (
    AuditResult,
    AuditSummary,
    Change,
    Color,
    ContrastSuggestion,
    FileAuditResult,
    FixSummary,
    Issue,
    RuleSeverity,
    WCAGLevel,
)


def _issue(rule_id: str = "img-alt", severity: RuleSeverity = RuleSeverity.ERROR) -> Issue:
    return Issue(rule_id=rule_id, severity=severity, element="<img>", message="m")


class TestColorModel:
    """Channels are rounded half-up and clamped on construction."""

    def test_clamps_channels(self):
        color = Color(r=300, g=-5, b=12.6)
        assert color.as_tuple() == (255, 0, 13)

    def test_rounds_half_up(self):
        assert Color(r=127.5, g=0.5, b=0.49).as_tuple() == (128, 1, 0)

    def test_clamps_alpha(self):
        assert Color(r=0, g=0, b=0, a=1.5).a == 1.0
        assert Color(r=0, g=0, b=0, a=-1).a == 0.0

    def test_frozen(self):
        color = Color(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 9


class TestWCAGLevel:
    def test_coerce_known(self):
        assert WCAGLevel.coerce("aaa") is WCAGLevel.AAA
        assert WCAGLevel.coerce(WCAGLevel.A) is WCAGLevel.A

    @pytest.mark.parametrize("value", ["B", "", None, "AAAA"])
    def test_coerce_unknown_falls_back_to_aa(self, value):
        assert WCAGLevel.coerce(value) is WCAGLevel.AA


class TestIssueModels:
    """Issues and summaries are immutable and serialise with camelCase keys."""

    def test_issue_is_frozen(self):
        issue = _issue()
        with pytest.raises(ValidationError):
            issue.message = "changed"

    def test_issue_json_aliases(self):
        data = _issue().model_dump(by_alias=True)
        assert data["ruleId"] == "img-alt"
        assert data["suggestion"] is None

    def test_issue_accepts_field_names(self):
        assert Issue(rule_id="x", severity="info", element="e", message="m").severity is RuleSeverity.INFO

    def test_summary_folds_by_severity(self):
        issues = [
            _issue(),
            _issue(severity=RuleSeverity.WARNING),
            _issue(severity=RuleSeverity.INFO),
            _issue(severity=RuleSeverity.INFO),
        ]
        summary = AuditSummary.from_issues(issues, WCAGLevel.AA)
        assert (summary.total, summary.errors, summary.warnings, summary.info) == (4, 1, 1, 2)
        assert summary.level is WCAGLevel.AA

    def test_issues_for(self):
        result = AuditResult(
            issues=[_issue("img-alt"), _issue("html-lang"), _issue("img-alt")],
            summary=AuditSummary(total=3, errors=3),
        )
        assert len(result.issues_for("img-alt")) == 2
        assert result.issues_for("missing") == []

    def test_file_result_carries_file(self):
        result = FileAuditResult(file="page.html")
        assert result.file == "page.html"
        assert result.issues == []


class TestFixModels:
    def test_fix_summary_groups_by_type(self):
        changes = [
            Change(type="add-alt", description="d", original="o", replacement="r"),
            Change(type="add-alt", description="d", original="o", replacement="r"),
            Change(type="add-lang", description="d", original="o", replacement="r"),
        ]
        summary = FixSummary.from_changes(changes)
        assert summary.total_changes == 3
        assert summary.by_type == {"add-alt": 2, "add-lang": 1}
        assert summary.model_dump(by_alias=True) == {
            "totalChanges": 3,
            "byType": {"add-alt": 2, "add-lang": 1},
        }


class TestContrastSuggestion:
    def test_ok_reflects_error(self):
        good = ContrastSuggestion(
            original_foreground="#ccc",
            original_background="#fff",
            required_ratio=4.5,
            suggested_foreground="#767676",
            new_ratio=4.54,
        )
        bad = ContrastSuggestion(
            original_foreground="x",
            original_background="#fff",
            required_ratio=4.5,
            error="Could not parse colors",
        )
        assert good.ok is True
        assert bad.ok is False
