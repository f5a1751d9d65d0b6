"""Heading-hierarchy pass: pull skipped heading levels back into sequence."""

from __future__ import annotations

from a11yguard.fixers.base import BaseFixPass, PlannedFix
from a11yguard.markup.document import (
    HEADING_TAGS,
    MarkupDocument,
    SourceEdit,
    rename_tag,
)


class HeadingHierarchyPass(BaseFixPass):
    """Renames a heading that jumps more than one level to ``last + 1``.

    Attributes and content are kept verbatim.  The running depth follows the
    corrected level, so later headings are checked against the fixed chain.
    """

    name = "heading-hierarchy"
    fix_type = "fix-heading-level"
    display_name = "Heading Hierarchy"

    def plan(self, document: MarkupDocument) -> list[PlannedFix]:
        fixes: list[PlannedFix] = []
        last_depth = 0
        for node in document.elements(*HEADING_TAGS):
            depth = node.heading_depth
            if not (last_depth > 0 and depth > last_depth + 1) or not node.has_span:
                last_depth = depth
                continue

            corrected = last_depth + 1
            new_tag = f"h{corrected}"
            edits = [
                SourceEdit(
                    node.start,
                    node.start_end,
                    rename_tag(document.start_tag(node), new_tag),
                )
            ]
            if node.close_start >= 0:
                closing = document.source[node.close_start:node.end]
                edits.append(SourceEdit(node.close_start, node.end, rename_tag(closing, new_tag)))

            fixes.append(
                PlannedFix(
                    node=node,
                    edits=tuple(edits),
                    description=f"Changed h{depth} to {new_tag} to fix hierarchy",
                )
            )
            last_depth = corrected
        return fixes
