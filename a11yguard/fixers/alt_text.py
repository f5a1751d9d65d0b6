"""Alt-text pass: mark images without alt as decorative (``alt=""``)."""

from __future__ import annotations

from a11yguard.fixers.base import BaseFixPass, PlannedFix
from a11yguard.markup.document import MarkupDocument
from a11yguard.rules.predicates import is_presentational


class AltTextPass(BaseFixPass):
    """Adds an empty alt attribute; an existing alt, even empty, is kept."""

    name = "alt-text"
    fix_type = "add-alt"
    display_name = "Alt Text"

    def plan(self, document: MarkupDocument) -> list[PlannedFix]:
        return [
            self.set_attribute_fix(
                document,
                node,
                "alt",
                "",
                "Added empty alt attribute for image (mark as decorative or add description)",
            )
            for node in document.elements("img")
            if not node.has("alt") and not is_presentational(node)
        ]
