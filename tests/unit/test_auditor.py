"""Unit tests for the audit engine: level filtering, ordering, summaries."""

from __future__ import annotations

import pytest

from a11yguard.core.auditor import Auditor, audit, audit_file, levels_to_include
from a11yguard.markup.document import MarkupParseError
from a11yguard.models.issues import FileAuditResult
from a11yguard.models.rules import RuleSeverity, WCAGLevel
from a11yguard.rules import RULE_ORDER, ImageAltRule, RuleCatalog

MIXED = """
<html>
<body>
<img src="a.jpg">
<h1>Title</h1><h3>Skip</h3>
<h2></h2>
<p style="color:#666;background:#fff">Middling</p>
<p style="color:#aaa;background:#fff">Faint</p>
<meta name="viewport" content="user-scalable=no">
<div onclick="go()">Go</div>
</body>
</html>
"""


class TestLevelsToInclude:
    def test_cumulative(self):
        assert levels_to_include("A") == [WCAGLevel.A]
        assert levels_to_include("AA") == [WCAGLevel.A, WCAGLevel.AA]
        assert levels_to_include(WCAGLevel.AAA) == [WCAGLevel.A, WCAGLevel.AA, WCAGLevel.AAA]

    def test_unknown_is_aa(self):
        assert levels_to_include("Z") == [WCAGLevel.A, WCAGLevel.AA]


class TestAudit:
    """audit() filters by cumulative level and folds a summary."""

    def test_clean_page_has_no_issues(self, auditor, clean_page):
        result = auditor.audit(clean_page, "AAA")
        assert result.issues == []
        assert result.summary.total == 0

    def test_summary_is_fold_over_issues(self, auditor):
        result = auditor.audit(MIXED, "AAA")
        summary = result.summary
        assert summary.total == len(result.issues)
        assert summary.errors == sum(i.severity is RuleSeverity.ERROR for i in result.issues)
        assert summary.warnings == sum(i.severity is RuleSeverity.WARNING for i in result.issues)
        assert summary.info == sum(i.severity is RuleSeverity.INFO for i in result.issues)
        assert summary.errors + summary.warnings + summary.info == summary.total

    def test_aaa_is_superset_of_a(self, auditor):
        level_a = auditor.audit(MIXED, "A").issues
        level_aaa = auditor.audit(MIXED, "AAA").issues
        assert all(issue in level_aaa for issue in level_a)
        assert len(level_aaa) > len(level_a)

    def test_level_filtering(self, auditor):
        ids_a = {i.rule_id for i in auditor.audit(MIXED, "A").issues}
        ids_aa = {i.rule_id for i in auditor.audit(MIXED, "AA").issues}
        ids_aaa = {i.rule_id for i in auditor.audit(MIXED, "AAA").issues}
        assert "text-sizing" not in ids_a and "text-sizing" in ids_aa
        assert "color-contrast" in ids_aa
        assert "color-contrast-enhanced" not in ids_aa
        assert "color-contrast-enhanced" in ids_aaa

    def test_unknown_level_defaults_to_aa(self, auditor):
        result = auditor.audit(MIXED, "bogus")
        assert result.summary.level is WCAGLevel.AA
        assert result.issues == auditor.audit(MIXED, "AA").issues

    def test_issues_grouped_in_catalog_order(self, auditor):
        rule_ids = [i.rule_id for i in auditor.audit(MIXED, "AAA").issues]
        positions = [RULE_ORDER.index(rule_id) for rule_id in rule_ids]
        assert positions == sorted(positions)

    def test_issue_order_within_rule_follows_document(self, auditor):
        result = auditor.audit('<img src="1.jpg"><img src="2.jpg"><img src="3.jpg">')
        elements = [i.element for i in result.issues_for("img-alt")]
        assert elements == ['<img src="1.jpg">', '<img src="2.jpg">', '<img src="3.jpg">']

    def test_parse_failure_degrades_to_empty_document(self, auditor, monkeypatch):
        def _boom(markup):
            raise MarkupParseError("bad")

        monkeypatch.setattr("a11yguard.core.auditor.parse_markup", _boom)
        result = auditor.audit('<img src="x.jpg">')
        # Only the page-level landmark rule can report against an empty page.
        assert {i.rule_id for i in result.issues} == {"landmark-regions"}
        assert result.summary.total == 4

    def test_unencodable_input_degrades(self, auditor):
        result = auditor.audit("\ud800")
        assert {i.rule_id for i in result.issues} == {"landmark-regions"}

    def test_custom_catalog(self):
        result = Auditor(RuleCatalog([ImageAltRule()])).audit('<img src="x.jpg"><div></div>')
        assert [i.rule_id for i in result.issues] == ["img-alt"]

    def test_results_are_recomputed(self, auditor):
        first = auditor.audit('<img src="x.jpg">')
        second = auditor.audit('<img src="x.jpg">')
        assert first == second
        assert first is not second


class TestModuleLevelAudit:
    def test_missing_alt_scenario(self):
        result = audit('<img src="x.jpg">')
        img = result.issues_for("img-alt")
        assert len(img) == 1
        assert img[0].severity is RuleSeverity.ERROR

    def test_heading_order_scenario(self):
        result = audit("<h1>T</h1><h3>S</h3>")
        assert len(result.issues_for("heading-order")) == 1

    def test_landmark_scenarios(self):
        assert len(audit("<div>Content</div>").issues_for("landmark-regions")) == 4
        markup = "<header><nav>..</nav></header><main>..</main><footer>..</footer>"
        assert audit(markup).issues_for("landmark-regions") == []

    @pytest.mark.parametrize("markup", ["", "<<<>>>", "<div", "</p></p>", "plain text"])
    def test_any_string_yields_well_formed_result(self, markup):
        result = audit(markup)
        assert result.summary.total == len(result.issues)


class TestAuditFile:
    def test_vue_template_extracted(self):
        source = '<template>\n  <img src="a.png">\n</template>\n<script>export default {}</script>'
        result = audit_file(source, "Card.vue")
        assert isinstance(result, FileAuditResult)
        assert result.file == "Card.vue"
        assert len(result.issues_for("img-alt")) == 1

    def test_html_audited_as_is(self, clean_page):
        result = audit_file(clean_page, "index.html", "AAA")
        assert result.issues == []
