"""Abstract base fix pass with an enforced apply lifecycle.

Every concrete pass implements only ``plan()``, which inspects a parsed
document and returns the substitutions it wants.  The ``apply()`` wrapper
is **not overridable**; it owns the lifecycle:

    parse -> plan -> record changes -> splice edits into the source

Passes never mutate a tree.  They describe span substitutions over the
original text, and everything outside those spans is copied through
verbatim, so a pass with nothing to do returns its input unchanged.  Every
pass must be idempotent: ``apply(apply(m).fixed).changes == []``.
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from typing import ClassVar, final

from a11yguard.markup.document import (
    MarkupDocument,
    MarkupNode,
    MarkupParseError,
    SourceEdit,
    apply_edits,
    parse_markup,
    set_attribute,
)
from a11yguard.models.fixes import Change, FixResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannedFix:
    """The edits a pass wants to make to one element."""

    node: MarkupNode
    edits: tuple[SourceEdit, ...]
    description: str
    start_tag_only: bool = False  # report only the start tag in the Change


class BaseFixPass(abc.ABC):
    """Abstract base for all fix passes.

    Subclasses **must** set ``name`` (registry key, e.g. ``"alt-text"``),
    ``fix_type`` (the ``Change.type`` tag, e.g. ``"add-alt"``) and
    ``display_name``, and implement ``plan(document)``.

    Subclasses **must not** override ``apply()``.
    """

    name: ClassVar[str]
    fix_type: ClassVar[str]
    display_name: ClassVar[str]

    @abc.abstractmethod
    def plan(self, document: MarkupDocument) -> list[PlannedFix]:
        """Return the fixes to make, in document order."""
        ...

    @final
    def apply(self, markup: str) -> FixResult:
        """Run the pass over *markup*.  **Do not override.**

        Markup that cannot be parsed is returned unchanged with no changes.
        """
        try:
            document = parse_markup(markup)
        except MarkupParseError as exc:
            logger.warning("%s [%s] skipped: %s", self.display_name, self.name, exc)
            return FixResult(fixed=markup if isinstance(markup, str) else "", changes=[])

        planned = [fix for fix in self.plan(document) if fix.node.has_span]
        changes = [self._change(document, fix) for fix in planned]
        fixed = apply_edits(document.source, [edit for fix in planned for edit in fix.edits])
        logger.debug("%s [%s] changes=%d", self.display_name, self.name, len(changes))
        return FixResult(fixed=fixed, changes=changes)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @final
    def set_attribute_fix(
        self,
        document: MarkupDocument,
        node: MarkupNode,
        attribute: str,
        value: str,
        description: str,
        *,
        start_tag_only: bool = False,
    ) -> PlannedFix:
        """Plan a start-tag rewrite that sets *attribute* to *value*."""
        raw = document.start_tag(node)
        edit = SourceEdit(node.start, node.start_end, set_attribute(raw, attribute, value))
        return PlannedFix(
            node=node,
            edits=(edit,),
            description=description,
            start_tag_only=start_tag_only,
        )

    def _change(self, document: MarkupDocument, fix: PlannedFix) -> Change:
        node = fix.node
        if fix.start_tag_only:
            original = document.start_tag(node)
            span_end = node.start_end
        else:
            original = document.snippet(node)
            span_end = node.end
        local_edits = [
            SourceEdit(edit.start - node.start, edit.end - node.start, edit.replacement)
            for edit in fix.edits
            if node.start <= edit.start and edit.end <= span_end
        ]
        return Change(
            type=self.fix_type,
            description=fix.description,
            original=original,
            replacement=apply_edits(original, local_edits),
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} fix_type={self.fix_type!r}>"
