"""Visual presentation rules: text resizing and color contrast."""

from __future__ import annotations

import re

from a11yguard.contrast.analyzer import meets_requirement, scan_markup, suggest_fix
from a11yguard.markup.document import MarkupDocument
from a11yguard.models.contrast import ContrastFinding
from a11yguard.models.issues import Issue
from a11yguard.models.rules import RuleSeverity, WCAGLevel
from a11yguard.rules.base import BaseRule

_USER_SCALABLE_OFF_RE = re.compile(r"user-scalable\s*=\s*(?:no|0)\b", re.IGNORECASE)
_MAXIMUM_SCALE_RE = re.compile(r"maximum-scale\s*=\s*([\d.]+)", re.IGNORECASE)
_MINIMUM_ZOOM = 2.0


class TextSizingRule(BaseRule):
    """1.4.4: the viewport must allow zooming to at least 200%."""

    rule_id = "text-sizing"
    name = "Text Sizing"
    description = "Text should be resizable up to 200% without loss of content"
    wcag_level = WCAGLevel.AA
    wcag_criteria = "1.4.4"
    severity = RuleSeverity.WARNING

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        issues: list[Issue] = []
        for node in document.elements("meta"):
            if (node.get("name") or "").strip().lower() != "viewport":
                continue
            content = node.get("content") or ""

            if _USER_SCALABLE_OFF_RE.search(content):
                issues.append(
                    self.issue(
                        node,
                        "Viewport meta prevents text scaling (user-scalable=no)",
                        "Remove user-scalable=no to allow users to zoom",
                        document=document,
                    )
                )

            match = _MAXIMUM_SCALE_RE.search(content)
            if match and _scale_below_minimum(match.group(1)):
                issues.append(
                    self.issue(
                        node,
                        f"Viewport maximum-scale ({match.group(1)}) is too restrictive",
                        "Set maximum-scale to at least 2.0 or remove the restriction",
                        document=document,
                    )
                )
        return issues


def _scale_below_minimum(value: str) -> bool:
    try:
        return float(value) < _MINIMUM_ZOOM
    except ValueError:
        return False


class ColorContrastRule(BaseRule):
    """1.4.3: declared text/background pairs meet the AA contrast minimum."""

    rule_id = "color-contrast"
    name = "Color Contrast (Minimum)"
    description = "Text must have a contrast ratio of at least 4.5:1 (3:1 for large text)"
    wcag_level = WCAGLevel.AA
    wcag_criteria = "1.4.3"
    severity = RuleSeverity.ERROR

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        return [
            self._to_issue(finding)
            for finding in scan_markup(document, self.wcag_level)
            if self._reportable(finding)
        ]

    def _reportable(self, finding: ContrastFinding) -> bool:
        return True

    def _to_issue(self, finding: ContrastFinding) -> Issue:
        suggestion = suggest_fix(
            finding.foreground, finding.background, self.wcag_level, finding.large_text
        )
        if suggestion.ok:
            advice = (
                f"Change the text color to {suggestion.suggested_foreground} "
                f"({suggestion.new_ratio}:1)"
            )
        else:
            advice = "Adjust the text or background color to increase contrast"
        return self.issue(
            finding.location or "<style>",
            f"Insufficient color contrast {finding.ratio}:1 between "
            f"{finding.foreground} and {finding.background} "
            f"(requires {finding.required_ratio}:1)",
            advice,
        )


class ColorContrastEnhancedRule(ColorContrastRule):
    """1.4.6: the AAA contrast tier.

    Pairs that already fail the AA minimum are left to ``color-contrast`` so
    an AAA audit does not report the same pair twice.
    """

    rule_id = "color-contrast-enhanced"
    name = "Color Contrast (Enhanced)"
    description = "Text should have a contrast ratio of at least 7:1 (4.5:1 for large text)"
    wcag_level = WCAGLevel.AAA
    wcag_criteria = "1.4.6"
    severity = RuleSeverity.WARNING

    def _reportable(self, finding: ContrastFinding) -> bool:
        return meets_requirement(
            finding.foreground, finding.background, WCAGLevel.AA, finding.large_text
        ).passes
