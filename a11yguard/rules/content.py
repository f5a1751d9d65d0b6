"""Content structure rules: text alternatives, headings, page language."""

from __future__ import annotations

from a11yguard.markup.document import HEADING_TAGS, MarkupDocument
from a11yguard.models.issues import Issue
from a11yguard.models.rules import RuleSeverity, WCAGLevel
from a11yguard.rules.base import BaseRule
from a11yguard.rules.predicates import is_presentational


class ImageAltRule(BaseRule):
    """1.1.1: images need an alt attribute unless marked presentational."""

    rule_id = "img-alt"
    name = "Image Alternative Text"
    description = "Images must have alternative text"
    wcag_level = WCAGLevel.A
    wcag_criteria = "1.1.1"
    severity = RuleSeverity.ERROR

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        issues: list[Issue] = []
        for node in document.elements("img"):
            if is_presentational(node):
                continue
            # alt="" is a valid marker for decorative images.
            if not node.has("alt") and not node.get("aria-label"):
                issues.append(
                    self.issue(
                        node,
                        "Image is missing alt attribute",
                        'Add an alt attribute describing the image, or alt="" '
                        "for decorative images",
                        document=document,
                    )
                )
        return issues


class HeadingOrderRule(BaseRule):
    """1.3.1: heading depth must not jump by more than one level."""

    rule_id = "heading-order"
    name = "Heading Hierarchy"
    description = "Heading levels should not skip levels"
    wcag_level = WCAGLevel.A
    wcag_criteria = "1.3.1"
    severity = RuleSeverity.WARNING

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        issues: list[Issue] = []
        last_depth = 0
        for node in document.elements(*HEADING_TAGS):
            depth = node.heading_depth
            # Going back up to any shallower depth is fine.
            if last_depth > 0 and depth > last_depth + 1:
                issues.append(
                    self.issue(
                        node,
                        f"Heading level h{depth} skipped from h{last_depth}",
                        f"Use h{last_depth + 1} instead, or add intermediate "
                        "heading levels",
                        document=document,
                    )
                )
            last_depth = depth
        return issues


class HtmlLangRule(BaseRule):
    """3.1.1: the document element declares its language."""

    rule_id = "html-lang"
    name = "Page Language"
    description = "HTML element must have a lang attribute"
    wcag_level = WCAGLevel.A
    wcag_criteria = "3.1.1"
    severity = RuleSeverity.ERROR

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        root = document.root
        if root is None:
            return []
        if (root.get("lang") or "").strip():
            return []
        return [
            self.issue(
                "<html>",
                "HTML element is missing a valid lang attribute",
                'Add a lang attribute to the html element, e.g., lang="en"',
            )
        ]


class HeadingContentRule(BaseRule):
    """2.4.6: headings must not be empty."""

    rule_id = "heading-content"
    name = "Heading Content"
    description = "Headings should have meaningful content"
    wcag_level = WCAGLevel.AA
    wcag_criteria = "2.4.6"
    severity = RuleSeverity.WARNING

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        return [
            self.issue(
                node,
                "Heading is empty",
                "Add descriptive text content to the heading",
                document=document,
            )
            for node in document.elements(*HEADING_TAGS)
            if not node.text.strip()
        ]
