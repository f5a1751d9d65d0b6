"""Landmark region presence rule."""

from __future__ import annotations

from a11yguard.markup.document import MarkupDocument
from a11yguard.models.issues import Issue
from a11yguard.models.rules import RuleSeverity, WCAGLevel
from a11yguard.rules.base import BaseRule

# (element, equivalent role, message, suggestion); one check per region.
_LANDMARKS: tuple[tuple[str, str, str, str], ...] = (
    (
        "main",
        "main",
        "Page is missing a main landmark region",
        'Add a <main> element or role="main" to identify the main content',
    ),
    (
        "header",
        "banner",
        "Page is missing a header/banner landmark region",
        'Add a <header> element or role="banner" for the site header',
    ),
    (
        "nav",
        "navigation",
        "Page is missing a navigation landmark region",
        'Add a <nav> element or role="navigation" for navigation links',
    ),
    (
        "footer",
        "contentinfo",
        "Page is missing a footer/contentinfo landmark region",
        'Add a <footer> element or role="contentinfo" for the site footer',
    ),
)


class LandmarkRegionsRule(BaseRule):
    """1.3.1: pages expose main, banner, navigation and contentinfo regions."""

    rule_id = "landmark-regions"
    name = "Landmark Regions"
    description = "Page should have proper landmark regions"
    wcag_level = WCAGLevel.A
    wcag_criteria = "1.3.1"
    severity = RuleSeverity.INFO

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        issues: list[Issue] = []
        for tag, role, message, suggestion in _LANDMARKS:
            present = any(
                node.tag == tag or node.get("role") == role for node in document.nodes
            )
            if not present:
                issues.append(self.issue("<body>", message, suggestion))
        return issues
