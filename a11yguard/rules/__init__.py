"""a11yguard rule catalog: registry mapping rule_id to rule class.

Usage::

    from a11yguard.rules import DEFAULT_CATALOG, RULE_REGISTRY

    issues = DEFAULT_CATALOG.run_rule("img-alt", '<img src="x.jpg">')

    # Or build a catalog of your own from the registered classes:
    catalog = RuleCatalog(RULE_REGISTRY[rid]() for rid in ("img-alt", "html-lang"))
"""

from __future__ import annotations

from a11yguard.rules.aria import AriaHiddenFocusRule, AriaValidRoleRule
from a11yguard.rules.base import BaseRule
from a11yguard.rules.catalog import RuleCatalog, RuleNotFoundError
from a11yguard.rules.content import (
    HeadingContentRule,
    HeadingOrderRule,
    HtmlLangRule,
    ImageAltRule,
)
from a11yguard.rules.forms import FormLabelRule
from a11yguard.rules.keyboard import SemanticButtonRule, TabindexPositiveRule
from a11yguard.rules.landmarks import LandmarkRegionsRule
from a11yguard.rules.names import ButtonNameRule, LinkNameRule
from a11yguard.rules.presentation import (
    ColorContrastEnhancedRule,
    ColorContrastRule,
    TextSizingRule,
)

# ---------------------------------------------------------------------------
# Rule registry: rule_id -> rule class
# ---------------------------------------------------------------------------

RULE_REGISTRY: dict[str, type[BaseRule]] = {
    cls.rule_id: cls
    for cls in (
        ImageAltRule,
        FormLabelRule,
        HeadingOrderRule,
        HtmlLangRule,
        ButtonNameRule,
        LinkNameRule,
        AriaValidRoleRule,
        AriaHiddenFocusRule,
        TabindexPositiveRule,
        SemanticButtonRule,
        TextSizingRule,
        ColorContrastRule,
        ColorContrastEnhancedRule,
        HeadingContentRule,
        LandmarkRegionsRule,
    )
}

# Declaration order, also the order in which an audit runs the rules.
RULE_ORDER: list[str] = [
    "img-alt",
    "form-label",
    "heading-order",
    "html-lang",
    "button-name",
    "link-name",
    "aria-valid-role",
    "aria-hidden-focus",
    "tabindex-positive",
    "semantic-button",
    "text-sizing",
    "color-contrast",
    "color-contrast-enhanced",
    "heading-content",
    "landmark-regions",
]


def build_default_catalog() -> RuleCatalog:
    """Instantiate every registered rule in declaration order."""
    return RuleCatalog(RULE_REGISTRY[rule_id]() for rule_id in RULE_ORDER)


# Built once at import; never mutated.
DEFAULT_CATALOG: RuleCatalog = build_default_catalog()


__all__ = [
    # Base
    "BaseRule",
    # Catalog
    "RuleCatalog",
    "RuleNotFoundError",
    "RULE_REGISTRY",
    "RULE_ORDER",
    "DEFAULT_CATALOG",
    "build_default_catalog",
    # Concrete rules
    "ImageAltRule",
    "FormLabelRule",
    "HeadingOrderRule",
    "HtmlLangRule",
    "ButtonNameRule",
    "LinkNameRule",
    "AriaValidRoleRule",
    "AriaHiddenFocusRule",
    "TabindexPositiveRule",
    "SemanticButtonRule",
    "TextSizingRule",
    "ColorContrastRule",
    "ColorContrastEnhancedRule",
    "HeadingContentRule",
    "LandmarkRegionsRule",
]
