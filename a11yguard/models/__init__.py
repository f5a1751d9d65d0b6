"""a11yguard data models: all Pydantic v2, all frozen (immutable)."""

from a11yguard.models.color import Color
from a11yguard.models.contrast import (
    ContrastFinding,
    ContrastRequirement,
    ContrastSuggestion,
)
from a11yguard.models.fixes import Change, FixAllResult, FixResult, FixSummary
from a11yguard.models.issues import AuditResult, AuditSummary, FileAuditResult, Issue
from a11yguard.models.rules import LEVEL_ORDER, RuleInfo, RuleSeverity, WCAGLevel

__all__ = [
    # rules
    "WCAGLevel",
    "RuleSeverity",
    "RuleInfo",
    "LEVEL_ORDER",
    # issues
    "Issue",
    "AuditSummary",
    "AuditResult",
    "FileAuditResult",
    # color / contrast
    "Color",
    "ContrastRequirement",
    "ContrastFinding",
    "ContrastSuggestion",
    # fixes
    "Change",
    "FixResult",
    "FixSummary",
    "FixAllResult",
]
