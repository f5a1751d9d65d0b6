"""Keyboard operability rules."""

from __future__ import annotations

from a11yguard.markup.document import MarkupDocument
from a11yguard.models.issues import Issue
from a11yguard.models.rules import RuleSeverity, WCAGLevel
from a11yguard.rules.base import BaseRule
from a11yguard.rules.predicates import parse_tabindex

_CLICKABLE_CONTAINERS: tuple[str, ...] = ("div", "span")
_HANDLER_ATTRIBUTES: tuple[str, ...] = ("onclick", "onkeypress")


class TabindexPositiveRule(BaseRule):
    """2.4.7: positive tabindex values override the natural focus order."""

    rule_id = "tabindex-positive"
    name = "Positive Tabindex"
    description = "Avoid positive tabindex values"
    wcag_level = WCAGLevel.A
    wcag_criteria = "2.4.7"
    severity = RuleSeverity.WARNING

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        issues: list[Issue] = []
        for node in document.with_attribute("tabindex"):
            tabindex = parse_tabindex(node.get("tabindex"))
            if tabindex is not None and tabindex > 0:
                issues.append(
                    self.issue(
                        node,
                        f"Positive tabindex value ({tabindex}) disrupts natural "
                        "focus order",
                        'Use tabindex="0" or tabindex="-1" instead, and manage '
                        "focus order with DOM structure",
                        document=document,
                    )
                )
        return issues


class SemanticButtonRule(BaseRule):
    """4.1.2: click handlers belong on real buttons."""

    rule_id = "semantic-button"
    name = "Semantic Button"
    description = "Use semantic button elements instead of clickable divs"
    wcag_level = WCAGLevel.A
    wcag_criteria = "4.1.2"
    severity = RuleSeverity.WARNING

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        return [
            self.issue(
                node,
                "Clickable element should use semantic button",
                "Use a <button> element instead of a clickable div/span for "
                "better accessibility",
                document=document,
            )
            for node in document.elements(*_CLICKABLE_CONTAINERS)
            if any(node.has(attr) for attr in _HANDLER_ATTRIBUTES)
            and node.get("role") != "button"
        ]
