"""WAI-ARIA usage rules."""

from __future__ import annotations

from a11yguard.markup.document import MarkupDocument
from a11yguard.models.issues import Issue
from a11yguard.models.rules import RuleSeverity, WCAGLevel
from a11yguard.rules.base import BaseRule
from a11yguard.rules.predicates import is_focusable

VALID_ARIA_ROLES: frozenset[str] = frozenset({
    "alert", "alertdialog", "application", "article", "banner", "button", "cell",
    "checkbox", "columnheader", "combobox", "complementary", "contentinfo",
    "definition", "dialog", "directory", "document", "feed", "figure", "form",
    "grid", "gridcell", "group", "heading", "img", "link", "list", "listbox",
    "listitem", "log", "main", "marquee", "math", "menu", "menubar", "menuitem",
    "menuitemcheckbox", "menuitemradio", "navigation", "none", "note", "option",
    "presentation", "progressbar", "radio", "radiogroup", "region", "row",
    "rowgroup", "rowheader", "scrollbar", "search", "searchbox", "separator",
    "slider", "spinbutton", "status", "switch", "tab", "table", "tablist",
    "tabpanel", "term", "textbox", "timer", "toolbar", "tooltip", "tree",
    "treegrid", "treeitem",
})


class AriaValidRoleRule(BaseRule):
    """4.1.2: the role attribute must name a single WAI-ARIA role.

    The whole value is matched, so a space-separated fallback list such as
    ``role="switch checkbox"`` is reported.
    """

    rule_id = "aria-valid-role"
    name = "Valid ARIA Roles"
    description = "ARIA roles must be valid"
    wcag_level = WCAGLevel.A
    wcag_criteria = "4.1.2"
    severity = RuleSeverity.ERROR

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        issues: list[Issue] = []
        for node in document.with_attribute("role"):
            role = node.get("role") or ""
            if role.strip() in VALID_ARIA_ROLES:
                continue
            issues.append(
                self.issue(
                    node,
                    f'Invalid ARIA role: "{role}"',
                    "Use a valid ARIA role from the WAI-ARIA specification",
                    document=document,
                )
            )
        return issues


class AriaHiddenFocusRule(BaseRule):
    """4.1.2: content hidden from assistive technology must not take focus.

    The hidden element itself is flagged when it is natively focusable or
    carries any tabindex, ``-1`` included.  Descendants count only when they
    are natively focusable or have a non-negative tabindex.
    """

    rule_id = "aria-hidden-focus"
    name = "ARIA Hidden Focusable"
    description = "aria-hidden elements should not contain focusable elements"
    wcag_level = WCAGLevel.A
    wcag_criteria = "4.1.2"
    severity = RuleSeverity.ERROR

    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        issues: list[Issue] = []
        for node in document.nodes:
            if node.get("aria-hidden") != "true":
                continue
            if is_focusable(node) or node.has("tabindex"):
                issues.append(
                    self.issue(
                        node,
                        'Focusable element has aria-hidden="true"',
                        "Remove aria-hidden or make the element non-focusable",
                        document=document,
                    )
                )
            elif any(is_focusable(child) for child in document.descendants(node)):
                issues.append(
                    self.issue(
                        node,
                        'aria-hidden="true" contains focusable elements',
                        "Remove focusable elements from aria-hidden container "
                        "or restructure",
                        document=document,
                    )
                )
        return issues
