"""Accessible name rules for buttons and links."""

from __future__ import annotations

from a11yguard.markup.document import MarkupDocument
from a11yguard.models.issues import Issue
from a11yguard.models.rules import RuleSeverity, WCAGLevel
from a11yguard.rules.base import BaseRule
from a11yguard.rules.predicates import has_accessible_name, is_button

# Link text that says nothing about the destination.
GENERIC_LINK_TEXT: frozenset[str] = frozenset({
    "click here", "here", "read more", "more", "link", "learn more", "click",
    "this", "go", "see more", "continue", "details",
})


class ButtonNameRule(BaseRule):
    """4.1.2: buttons must expose an accessible name."""

    rule_id = "button-name"
    name = "Button Accessible Name"
    description = "Buttons must have an accessible name"
    wcag_level = WCAGLevel.A
    wcag_criteria = "4.1.2"
    severity = RuleSeverity.ERROR

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        return [
            self.issue(
                node,
                "Button has no accessible name",
                "Add text content, aria-label, or aria-labelledby to the button",
                document=document,
            )
            for node in document.nodes
            if is_button(node) and not has_accessible_name(node)
        ]


class LinkNameRule(BaseRule):
    """2.4.4: links need a name, and the name should describe the target.

    A missing name is an error; a generic phrase such as "read more" is
    reported with warning severity.
    """

    rule_id = "link-name"
    name = "Link Purpose"
    description = "Links must have an accessible and descriptive name"
    wcag_level = WCAGLevel.A
    wcag_criteria = "2.4.4"
    severity = RuleSeverity.ERROR

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        issues: list[Issue] = []
        for node in document.elements("a"):
            if not node.has("href"):
                continue
            if not has_accessible_name(node):
                issues.append(
                    self.issue(
                        node,
                        "Link has no accessible name",
                        "Add text content, aria-label, or a descriptive title",
                        document=document,
                    )
                )
                continue
            label = (
                (node.get("aria-label") or "").strip()
                or node.text.strip()
                or (node.get("title") or "").strip()
            )
            accessible_name = " ".join(label.lower().split())
            if accessible_name in GENERIC_LINK_TEXT:
                issues.append(
                    self.issue(
                        node,
                        f'Link text "{accessible_name}" is not descriptive',
                        "Use descriptive link text that explains the destination "
                        "or purpose",
                        document=document,
                        severity=RuleSeverity.WARNING,
                    )
                )
        return issues
