"""Form control labelling rule."""

from __future__ import annotations

from a11yguard.markup.document import MarkupDocument
from a11yguard.models.issues import Issue
from a11yguard.models.rules import RuleSeverity, WCAGLevel
from a11yguard.rules.base import BaseRule
from a11yguard.rules.predicates import FORM_CONTROL_TAGS, is_labelled, needs_label


class FormLabelRule(BaseRule):
    """1.3.1: form controls need a programmatic label."""

    rule_id = "form-label"
    name = "Form Input Labels"
    description = "Form inputs must have associated labels"
    wcag_level = WCAGLevel.A
    wcag_criteria = "1.3.1"
    severity = RuleSeverity.ERROR

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        issues: list[Issue] = []
        for node in document.elements(*FORM_CONTROL_TAGS):
            if not needs_label(node) or is_labelled(document, node):
                continue
            issues.append(
                self.issue(
                    node,
                    "Form input is missing an associated label",
                    "Add a <label> element with for attribute, or use "
                    "aria-label/aria-labelledby",
                    document=document,
                )
            )
        return issues
