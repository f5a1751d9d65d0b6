"""Form-label pass: give unlabelled controls a synthesized aria-label."""

from __future__ import annotations

import re

from a11yguard.fixers.base import BaseFixPass, PlannedFix
from a11yguard.markup.document import MarkupDocument, MarkupNode
from a11yguard.rules.predicates import (
    FORM_CONTROL_TAGS,
    control_type,
    is_labelled,
    needs_label,
)

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_SEPARATOR_RE = re.compile(r"[-_]")


def to_readable_text(value: str | None) -> str:
    """``"firstName"`` / ``"first_name"`` / ``"first-name"`` -> ``"First Name"``."""
    if not value:
        return ""
    spaced = _SEPARATOR_RE.sub(" ", _CAMEL_BOUNDARY_RE.sub(r"\1 \2", value))
    return " ".join(word[:1].upper() + word[1:].lower() for word in spaced.split())


def label_text_for(node: MarkupNode) -> str:
    """Placeholder, then readable name, then readable id, then "<Type> field".

    The fallback type is the input type, or the tag name for select and
    textarea.
    """
    candidates = (
        (node.get("placeholder") or "").strip(),
        to_readable_text(node.get("name")),
        to_readable_text(node.get("id")),
    )
    for candidate in candidates:
        if candidate:
            return candidate
    kind = control_type(node) if node.tag == "input" else node.tag
    return f"{to_readable_text(kind)} field"


class FormLabelPass(BaseFixPass):
    """Never touches a control that already has any form of label."""

    name = "form-labels"
    fix_type = "add-aria-label"
    display_name = "Form Labels"

    def plan(self, document: MarkupDocument) -> list[PlannedFix]:
        fixes: list[PlannedFix] = []
        for node in document.elements(*FORM_CONTROL_TAGS):
            if not needs_label(node) or is_labelled(document, node):
                continue
            label = label_text_for(node)
            fixes.append(
                self.set_attribute_fix(
                    document,
                    node,
                    "aria-label",
                    label,
                    f'Added aria-label="{label}" to form input',
                )
            )
        return fixes
