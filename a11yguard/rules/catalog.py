"""The rule catalog: an immutable, ordered collection of rule instances.

A catalog is built once and passed by reference to whoever runs rules; it
is never mutated afterwards.  Declaration order is execution order, and ids
are unique.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from a11yguard.markup.document import MarkupDocument
from a11yguard.models.issues import Issue
from a11yguard.models.rules import LEVEL_ORDER, WCAGLevel
from a11yguard.rules.base import BaseRule

logger = logging.getLogger(__name__)


class RuleNotFoundError(KeyError):
    """Raised when a rule id is not registered in the catalog."""


class RuleCatalog:
    """Ordered, read-only rule lookup surface.

    Parameters
    ----------
    rules:
        Rule instances in declaration order.

    Raises
    ------
    ValueError
        If two rules share an id.
    """

    __slots__ = ("_rules", "_by_id")

    def __init__(self, rules: Iterable[BaseRule]) -> None:
        ordered = tuple(rules)
        by_id: dict[str, BaseRule] = {}
        for rule in ordered:
            if rule.rule_id in by_id:
                raise ValueError(f"Duplicate rule id {rule.rule_id!r} in catalog.")
            by_id[rule.rule_id] = rule
        self._rules = ordered
        self._by_id = MappingProxyType(by_id)

    # -- Lookup -------------------------------------------------------------

    def get_all_rules(self) -> tuple[BaseRule, ...]:
        return self._rules

    def get_rule(self, rule_id: str) -> BaseRule | None:
        """Return the rule registered as *rule_id*, or ``None``."""
        return self._by_id.get(rule_id)

    def get_rules_by_level(self, level: str | WCAGLevel) -> list[BaseRule]:
        """Rules declared at exactly *level*."""
        wcag_level = WCAGLevel.coerce(level)
        return [rule for rule in self._rules if rule.wcag_level == wcag_level]

    def get_rules_up_to(self, level: str | WCAGLevel) -> list[BaseRule]:
        """Rules at *level* and every lower tier, in declaration order."""
        included = set(LEVEL_ORDER[: LEVEL_ORDER.index(WCAGLevel.coerce(level)) + 1])
        return [rule for rule in self._rules if rule.wcag_level in included]

    # -- Execution ----------------------------------------------------------

    def run_rule(self, rule_id: str, markup: str | MarkupDocument) -> list[Issue]:
        """Run a single rule.

        Raises ``RuleNotFoundError`` if *rule_id* is not registered.
        """
        rule = self._by_id.get(rule_id)
        if rule is None:
            raise RuleNotFoundError(
                f"Unknown rule_id {rule_id!r}. "
                f"Registered rules: {sorted(self._by_id.keys())}"
            )
        return rule.check(markup)

    def run_all_rules(self, markup: str | MarkupDocument) -> list[Issue]:
        """Run every rule regardless of level, in declaration order."""
        issues: list[Issue] = []
        for rule in self._rules:
            issues.extend(rule.check(markup))
        return issues

    # -- Dunder -------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def __repr__(self) -> str:
        return f"<RuleCatalog rules={len(self._rules)}>"
