"""Element predicates shared by the rules and the fix passes.

A rule and the fix pass that repairs it must agree on what "labelled" or
"named" means, otherwise a fixed document would still be flagged (or a
compliant one rewritten).
"""

from __future__ import annotations

import re

from a11yguard.markup.document import MarkupDocument, MarkupNode

# Input types that carry their own label or are never presented.
EXEMPT_INPUT_TYPES: frozenset[str] = frozenset(
    {"hidden", "submit", "button", "reset", "image"}
)

FORM_CONTROL_TAGS: tuple[str, ...] = ("input", "select", "textarea")

# Natively focusable tags (tab-reachable without a tabindex).
FOCUSABLE_TAGS: frozenset[str] = frozenset(
    {"a", "button", "input", "select", "textarea"}
)

PRESENTATIONAL_ROLES: frozenset[str] = frozenset({"presentation", "none"})

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_tabindex(value: str | None) -> int | None:
    """Integer prefix of a tabindex value (``"3px"`` -> 3), or ``None``."""
    if value is None:
        return None
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else None


def is_presentational(node: MarkupNode) -> bool:
    return (node.get("role") or "").strip().lower() in PRESENTATIONAL_ROLES


def control_type(node: MarkupNode) -> str:
    return (node.get("type") or "text").strip().lower() or "text"


def needs_label(node: MarkupNode) -> bool:
    """Whether *node* is a form control that must carry a label."""
    return node.tag in FORM_CONTROL_TAGS and control_type(node) not in EXEMPT_INPUT_TYPES


def is_labelled(document: MarkupDocument, node: MarkupNode) -> bool:
    """aria-label/aria-labelledby, ``<label for>``, a wrapping label, or title."""
    if node.get("aria-label") or node.get("aria-labelledby"):
        return True
    control_id = node.get("id")
    if control_id and control_id in document.attribute_values("label", "for"):
        return True
    if document.within(node, "label"):
        return True
    return bool(node.get("title"))


def is_button(node: MarkupNode) -> bool:
    return node.tag == "button" or node.get("role") == "button"


def has_accessible_name(node: MarkupNode) -> bool:
    """Text content, aria-label, aria-labelledby, or title."""
    return bool(
        node.text.strip()
        or node.get("aria-label")
        or node.get("aria-labelledby")
        or node.get("title")
    )


def is_focusable(node: MarkupNode) -> bool:
    """A native interactive tag, or an explicit non-negative tabindex."""
    if node.tag in FOCUSABLE_TAGS:
        return True
    if not node.has("tabindex"):
        return False
    tabindex = parse_tabindex(node.get("tabindex"))
    return tabindex is None or tabindex >= 0
