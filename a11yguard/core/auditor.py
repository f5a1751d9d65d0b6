"""Audit engine: runs the level-filtered catalog over one markup snapshot.

Levels are cumulative: an AA audit runs the A and AA rules, an AAA audit
runs everything.  The markup is parsed once and the parsed document is
handed to every selected rule in catalog declaration order, so issues come
back grouped by rule and, within a rule, in document order.
"""

from __future__ import annotations

import logging

from a11yguard.markup.document import MarkupDocument, MarkupParseError, parse_markup
from a11yguard.markup.extraction import extract_markup
from a11yguard.models.issues import AuditResult, AuditSummary, FileAuditResult, Issue
from a11yguard.models.rules import LEVEL_ORDER, WCAGLevel
from a11yguard.rules import DEFAULT_CATALOG, RuleCatalog

logger = logging.getLogger(__name__)


def levels_to_include(level: str | WCAGLevel | None) -> list[WCAGLevel]:
    """Tiers covered by an audit at *level*; unrecognised levels mean AA."""
    target = WCAGLevel.coerce(level)
    return list(LEVEL_ORDER[: LEVEL_ORDER.index(target) + 1])


class Auditor:
    """Runs a ``RuleCatalog`` against markup.

    Parameters
    ----------
    catalog:
        The rule catalog to draw rules from.  Defaults to the built-in
        catalog constructed at import time.
    """

    def __init__(self, catalog: RuleCatalog = DEFAULT_CATALOG) -> None:
        self.catalog = catalog

    def audit(
        self, markup: str, level: str | WCAGLevel | None = WCAGLevel.AA
    ) -> AuditResult:
        """Audit *markup* at *level*.  Always returns a well-formed result."""
        target = WCAGLevel.coerce(level)
        document = self._parse(markup)
        included = set(levels_to_include(target))

        issues: list[Issue] = []
        for rule in self.catalog.get_all_rules():
            if rule.wcag_level in included:
                issues.extend(rule.check(document))

        summary = AuditSummary.from_issues(issues, target)
        logger.info(
            "Audit (WCAG %s): %d issue(s): %d error(s), %d warning(s), %d info.",
            target.value,
            summary.total,
            summary.errors,
            summary.warnings,
            summary.info,
        )
        return AuditResult(issues=issues, summary=summary)

    def audit_file(
        self,
        content: str,
        filename: str,
        level: str | WCAGLevel | None = WCAGLevel.AA,
    ) -> FileAuditResult:
        """Extract auditable markup from a source file, then audit it."""
        result = self.audit(extract_markup(content, filename), level)
        return FileAuditResult(file=filename, issues=result.issues, summary=result.summary)

    @staticmethod
    def _parse(markup: str) -> MarkupDocument:
        try:
            return parse_markup(markup)
        except MarkupParseError as exc:
            logger.warning("Auditing an empty document: %s", exc)
            return MarkupDocument(source=markup if isinstance(markup, str) else "")


_default_auditor = Auditor()


def audit(markup: str, level: str | WCAGLevel | None = WCAGLevel.AA) -> AuditResult:
    """Audit *markup* with the default catalog."""
    return _default_auditor.audit(markup, level)


def audit_file(
    content: str, filename: str, level: str | WCAGLevel | None = WCAGLevel.AA
) -> FileAuditResult:
    """Audit a source file with the default catalog."""
    return _default_auditor.audit_file(content, filename, level)
