"""Unit tests for the rule catalog lookup surface and registry."""

from __future__ import annotations

import pytest

from a11yguard.models.rules import RuleSeverity, WCAGLevel
from a11yguard.rules import (
    DEFAULT_CATALOG,
    RULE_ORDER,
    RULE_REGISTRY,
    BaseRule,
    HtmlLangRule,
    ImageAltRule,
    RuleCatalog,
    RuleNotFoundError,
    build_default_catalog,
)


class TestRegistry:
    """Every registered rule has a unique id and closed-enum metadata."""

    def test_order_covers_registry(self):
        assert set(RULE_ORDER) == set(RULE_REGISTRY)
        assert len(RULE_ORDER) == len(set(RULE_ORDER)) == 15

    def test_registry_keys_match_rule_ids(self):
        for rule_id, cls in RULE_REGISTRY.items():
            assert cls.rule_id == rule_id
            assert issubclass(cls, BaseRule)

    def test_metadata_from_closed_enums(self):
        for cls in RULE_REGISTRY.values():
            assert isinstance(cls.wcag_level, WCAGLevel)
            assert isinstance(cls.severity, RuleSeverity)
            assert cls.wcag_criteria


class TestRuleCatalog:
    def test_declaration_order(self, catalog):
        assert [rule.rule_id for rule in catalog.get_all_rules()] == RULE_ORDER

    def test_get_rule(self, catalog):
        assert isinstance(catalog.get_rule("img-alt"), ImageAltRule)
        assert catalog.get_rule("no-such-rule") is None

    def test_get_rules_by_level_is_exact(self, catalog):
        aa = [rule.rule_id for rule in catalog.get_rules_by_level("AA")]
        assert aa == ["text-sizing", "color-contrast", "heading-content"]
        aaa = [rule.rule_id for rule in catalog.get_rules_by_level(WCAGLevel.AAA)]
        assert aaa == ["color-contrast-enhanced"]

    def test_get_rules_up_to_is_cumulative(self, catalog):
        a = {rule.rule_id for rule in catalog.get_rules_up_to("A")}
        aa = {rule.rule_id for rule in catalog.get_rules_up_to("AA")}
        aaa = {rule.rule_id for rule in catalog.get_rules_up_to("AAA")}
        assert a < aa < aaa
        assert len(aaa) == len(catalog)

    def test_run_rule(self, catalog):
        issues = catalog.run_rule("img-alt", '<img src="x.jpg">')
        assert [i.rule_id for i in issues] == ["img-alt"]

    def test_run_unknown_rule_raises(self, catalog):
        with pytest.raises(RuleNotFoundError) as excinfo:
            catalog.run_rule("no-such-rule", "<p>x</p>")
        assert "img-alt" in str(excinfo.value)

    def test_not_found_is_key_error(self):
        assert issubclass(RuleNotFoundError, KeyError)

    def test_run_all_rules_ignores_level(self, catalog):
        issues = catalog.run_all_rules('<p style="color:#666;background:#fff">x</p>')
        assert "color-contrast-enhanced" in {i.rule_id for i in issues}

    def test_dunders(self, catalog):
        assert len(catalog) == 15
        assert "html-lang" in catalog
        assert "nope" not in catalog
        assert [r.rule_id for r in catalog] == RULE_ORDER
        assert "15" in repr(catalog)


class TestCatalogConstruction:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="img-alt"):
            RuleCatalog([ImageAltRule(), ImageAltRule()])

    def test_custom_catalog(self):
        catalog = RuleCatalog([HtmlLangRule(), ImageAltRule()])
        assert [r.rule_id for r in catalog] == ["html-lang", "img-alt"]

    def test_catalog_is_read_only(self):
        with pytest.raises(AttributeError):
            DEFAULT_CATALOG.extra = 1

    def test_build_default_catalog_is_fresh(self):
        rebuilt = build_default_catalog()
        assert rebuilt is not DEFAULT_CATALOG
        assert [r.rule_id for r in rebuilt] == RULE_ORDER
