"""Button-naming pass: give nameless buttons an aria-label."""

from __future__ import annotations

from a11yguard.fixers.base import BaseFixPass, PlannedFix
from a11yguard.markup.document import MarkupDocument, MarkupNode
from a11yguard.rules.predicates import has_accessible_name, is_button

# Checked in order against the button's class attribute.
CLASS_KEYWORD_LABELS: tuple[tuple[str, str], ...] = (
    ("close", "Close"),
    ("menu", "Menu"),
    ("search", "Search"),
    ("delete", "Delete"),
    ("edit", "Edit"),
    ("add", "Add"),
    ("remove", "Remove"),
    ("submit", "Submit"),
    ("cancel", "Cancel"),
)

GENERIC_BUTTON_LABEL = "Button"
UNDESCRIBED_ICON_LABEL = "Button (needs description)"


def _is_icon(node: MarkupNode) -> bool:
    if node.tag in ("svg", "i"):
        return True
    return node.tag == "span" and "icon" in (node.get("class") or "")


def infer_button_label(document: MarkupDocument, node: MarkupNode) -> str:
    if not any(_is_icon(child) for child in document.descendants(node)):
        return GENERIC_BUTTON_LABEL
    class_name = (node.get("class") or "").lower()
    for keyword, label in CLASS_KEYWORD_LABELS:
        if keyword in class_name:
            return label
    return UNDESCRIBED_ICON_LABEL


class ButtonNamingPass(BaseFixPass):
    name = "button-naming"
    fix_type = "add-button-label"
    display_name = "Button Naming"

    def plan(self, document: MarkupDocument) -> list[PlannedFix]:
        fixes: list[PlannedFix] = []
        for node in document.nodes:
            if not is_button(node) or has_accessible_name(node):
                continue
            label = infer_button_label(document, node)
            fixes.append(
                self.set_attribute_fix(
                    document,
                    node,
                    "aria-label",
                    label,
                    f'Added aria-label="{label}" to button',
                )
            )
        return fixes
