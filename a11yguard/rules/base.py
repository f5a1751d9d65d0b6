"""Abstract base rule with an enforced check lifecycle.

Every concrete rule inherits from BaseRule, declares its catalog metadata as
class attributes, and implements only ``evaluate()``.  The ``check()``
wrapper is **not overridable**; it owns the lifecycle:

    as_document -> evaluate -> log

so that every rule accepts either a raw markup string or an already parsed
``MarkupDocument``, and unparseable markup degrades to "no issues" instead of
an exception.  Rules hold no state; the same instance may be called from
any number of audits, in any order.
"""

from __future__ import annotations

import abc
import logging
from typing import ClassVar, final

from a11yguard.markup.document import (
    MarkupDocument,
    MarkupNode,
    MarkupParseError,
    as_document,
)
from a11yguard.models.issues import Issue
from a11yguard.models.rules import RuleInfo, RuleSeverity, WCAGLevel

logger = logging.getLogger(__name__)


class BaseRule(abc.ABC):
    """Abstract base for all catalog rules.

    Subclasses **must** set:
        * ``rule_id``: unique identifier (e.g. ``"img-alt"``).
        * ``name``: human-readable name shown in reports.
        * ``description``: one-line statement of the requirement.
        * ``wcag_level``: the conformance tier the rule belongs to.
        * ``wcag_criteria``: success criterion number (e.g. ``"1.1.1"``).
        * ``severity``: default severity of reported issues.

    and implement ``evaluate(document)``.

    Subclasses **must not** override ``check()``.
    """

    rule_id: ClassVar[str]
    name: ClassVar[str]
    description: ClassVar[str]
    wcag_level: ClassVar[WCAGLevel]
    wcag_criteria: ClassVar[str]
    severity: ClassVar[RuleSeverity]

    # ------------------------------------------------------------------
    # Abstract interface: subclasses implement this
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def evaluate(self, document: MarkupDocument) -> list[Issue]:
        """Return the issues found in *document*, in document order."""
        ...

    # ------------------------------------------------------------------
    # Lifecycle: NOT overridable
    # ------------------------------------------------------------------

    @final
    def check(self, markup: str | MarkupDocument) -> list[Issue]:
        """Run the rule against *markup*.  **Do not override.**"""
        try:
            document = as_document(markup)
        except MarkupParseError as exc:
            logger.warning("%s [%s] skipped: %s", self.name, self.rule_id, exc)
            return []
        issues = self.evaluate(document)
        logger.debug("%s [%s] issues=%d", self.name, self.rule_id, len(issues))
        return issues

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @final
    def issue(
        self,
        element: str | MarkupNode,
        message: str,
        suggestion: str | None = None,
        *,
        document: MarkupDocument | None = None,
        severity: RuleSeverity | None = None,
    ) -> Issue:
        """Build an ``Issue`` attributed to this rule.

        *element* is a snippet or placeholder string, or a node whose source
        snippet is taken from *document*.
        """
        if isinstance(element, MarkupNode):
            if document is None:
                raise ValueError("A document is required to render a node snippet.")
            element = document.snippet(element)
        return Issue(
            rule_id=self.rule_id,
            severity=severity or self.severity,
            element=element,
            message=message,
            suggestion=suggestion,
        )

    @classmethod
    def info(cls) -> RuleInfo:
        return RuleInfo(
            id=cls.rule_id,
            name=cls.name,
            description=cls.description,
            wcag_level=cls.wcag_level,
            wcag_criteria=cls.wcag_criteria,
            severity=cls.severity,
        )

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} rule_id={self.rule_id!r} "
            f"level={self.wcag_level.value}>"
        )
