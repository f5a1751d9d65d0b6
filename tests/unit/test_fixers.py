"""Unit tests for the individual fix passes and their registry."""

from __future__ import annotations

import pytest

from a11yguard.core.auditor import audit
from a11yguard.fixers import (
    FIX_PASS_ORDER,
    FIX_PASS_REGISTRY,
    AltTextPass,
    ButtonNamingPass,
    DocumentLanguagePass,
    FixPassNotFoundError,
    FormLabelPass,
    HeadingHierarchyPass,
    get_fix_pass,
    to_readable_text,
)
from a11yguard.markup.document import MarkupParseError

IDEMPOTENCE_SAMPLES = [
    "",
    "<p>nothing to do</p>",
    '<img src="a.jpg"><img src="b.jpg" alt="B"><img src="c.jpg" role="none">',
    '<input name="firstName"><input placeholder="Search"><select id="country_code"></select>',
    "<h1>a</h1><h4>b</h4><h6>c</h6><h2>d</h2><h5>e</h5>",
    "<html><head></head><body><p>x</p></body></html>",
    '<html lang=""><body></body></html>',
    '<button class="icon-close"><i class="fa fa-x"></i></button><button></button>',
    '<div role="button"><span class="icon"></span></div>',
]


# ---------------------------------------------------------------------------
# Test: idempotence across every pass
# ---------------------------------------------------------------------------


class TestIdempotence:
    """Applying a pass to its own output changes nothing further."""

    @pytest.mark.parametrize("name", FIX_PASS_ORDER)
    @pytest.mark.parametrize("markup", IDEMPOTENCE_SAMPLES)
    def test_second_application_is_noop(self, name, markup):
        fix_pass = get_fix_pass(name)
        once = fix_pass.apply(markup)
        twice = fix_pass.apply(once.fixed)
        assert twice.changes == []
        assert twice.fixed == once.fixed


class TestApplyLifecycle:
    def test_nothing_to_fix_returns_input_verbatim(self):
        markup = "<div>\n   <P CLASS='x'>untouched &amp; odd</P>\n</div>"
        for name in FIX_PASS_ORDER:
            result = get_fix_pass(name).apply(markup)
            assert result.fixed == markup
            assert result.changes == []

    def test_parse_failure_returns_input(self, monkeypatch):
        def _boom(markup):
            raise MarkupParseError("bad")

        monkeypatch.setattr("a11yguard.fixers.base.parse_markup", _boom)
        result = AltTextPass().apply('<img src="x.jpg">')
        assert result.fixed == '<img src="x.jpg">'
        assert result.changes == []

    def test_repr(self):
        assert "add-alt" in repr(AltTextPass())


# ---------------------------------------------------------------------------
# Test: alt text
# ---------------------------------------------------------------------------


class TestAltTextPass:
    def test_missing_alt_scenario(self):
        result = AltTextPass().apply('<img src="x.jpg">')
        assert result.fixed == '<img src="x.jpg" alt="">'
        assert len(result.changes) == 1
        change = result.changes[0]
        assert change.type == "add-alt"
        assert change.original == '<img src="x.jpg">'
        assert change.replacement == '<img src="x.jpg" alt="">'

    def test_existing_alt_kept(self):
        markup = '<img src="a.jpg" alt=""><img src="b.jpg" alt="Logo">'
        assert AltTextPass().apply(markup).fixed == markup

    def test_presentational_skipped(self):
        markup = '<img src="a.jpg" role="presentation">'
        assert AltTextPass().apply(markup).changes == []

    def test_self_closing(self):
        assert AltTextPass().apply('<img src="a.jpg" />').fixed == '<img src="a.jpg" alt="" />'

    def test_changes_in_document_order(self):
        result = AltTextPass().apply('<img src="1.jpg">\n<p>x</p>\n<img src="2.jpg">')
        assert [c.original for c in result.changes] == ['<img src="1.jpg">', '<img src="2.jpg">']
        assert result.fixed == '<img src="1.jpg" alt="">\n<p>x</p>\n<img src="2.jpg" alt="">'


# ---------------------------------------------------------------------------
# Test: form labels
# ---------------------------------------------------------------------------


class TestReadableText:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("firstName", "First Name"),
            ("first_name", "First Name"),
            ("user-email-address", "User Email Address"),
            ("zip", "Zip"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_transform(self, value, expected):
        assert to_readable_text(value) == expected


class TestFormLabelPass:
    def _label(self, markup: str) -> str:
        result = FormLabelPass().apply(markup)
        assert len(result.changes) == 1
        return result.fixed

    def test_placeholder_first(self):
        fixed = self._label('<input name="q" placeholder="Search products">')
        assert 'aria-label="Search products"' in fixed

    def test_then_name(self):
        assert 'aria-label="User Email"' in self._label('<input type="email" name="userEmail">')

    def test_then_id(self):
        assert 'aria-label="Zip Code"' in self._label('<input id="zip_code">')

    def test_generic_fallback(self):
        assert 'aria-label="Email field"' in self._label('<input type="email">')
        assert 'aria-label="Text field"' in self._label("<input>")
        assert 'aria-label="Select field"' in self._label("<select></select>")

    def test_labelled_controls_untouched(self):
        markup = (
            '<label for="a">A</label><input id="a">'
            "<label>B <input></label>"
            '<input aria-label="C"><input aria-labelledby="d"><input title="E">'
            '<input type="hidden" name="token"><input type="submit">'
        )
        assert FormLabelPass().apply(markup).fixed == markup

    def test_label_value_escaped(self):
        fixed = self._label('<input placeholder="Say &quot;hi&quot;">')
        assert 'aria-label="Say &quot;hi&quot;"' in fixed

    def test_fixed_controls_pass_the_rule(self):
        fixed = FormLabelPass().apply('<input name="a"><textarea></textarea>').fixed
        assert audit(fixed, "A").issues_for("form-label") == []


# ---------------------------------------------------------------------------
# Test: heading hierarchy
# ---------------------------------------------------------------------------


class TestHeadingHierarchyPass:
    def test_heading_order_scenario(self):
        result = HeadingHierarchyPass().apply("<h1>T</h1><h3>S</h3>")
        assert "<h2>S</h2>" in result.fixed
        assert len(result.changes) == 1
        assert result.changes[0].type == "fix-heading-level"
        assert result.changes[0].description == "Changed h3 to h2 to fix hierarchy"

    def test_attributes_and_content_preserved(self):
        result = HeadingHierarchyPass().apply('<h1>T</h1><h4 class="sub" id="s">Sub <em>title</em></h4>')
        assert result.fixed == '<h1>T</h1><h2 class="sub" id="s">Sub <em>title</em></h2>'
        assert result.changes[0].original == '<h4 class="sub" id="s">Sub <em>title</em></h4>'

    def test_running_depth_uses_corrected_level(self):
        result = HeadingHierarchyPass().apply("<h1>a</h1><h4>b</h4><h6>c</h6>")
        assert result.fixed == "<h1>a</h1><h2>b</h2><h3>c</h3>"
        assert [c.description for c in result.changes] == [
            "Changed h4 to h2 to fix hierarchy",
            "Changed h6 to h3 to fix hierarchy",
        ]

    def test_shallower_heading_not_changed(self):
        markup = "<h1>a</h1><h2>b</h2><h3>c</h3><h1>d</h1>"
        assert HeadingHierarchyPass().apply(markup).fixed == markup

    def test_fixed_markup_passes_the_rule(self):
        fixed = HeadingHierarchyPass().apply("<h2>a</h2><h5>b</h5><h3>c</h3><h6>d</h6>").fixed
        assert audit(fixed, "A").issues_for("heading-order") == []


# ---------------------------------------------------------------------------
# Test: document language
# ---------------------------------------------------------------------------


class TestDocumentLanguagePass:
    def test_adds_default_lang(self):
        result = DocumentLanguagePass().apply("<html><body></body></html>")
        assert result.fixed == '<html lang="en"><body></body></html>'
        change = result.changes[0]
        assert change.type == "add-lang"
        assert change.original == "<html>"
        assert change.replacement == '<html lang="en">'

    def test_fills_blank_lang(self):
        result = DocumentLanguagePass("fr").apply('<html lang=""><body></body></html>')
        assert result.fixed == '<html lang="fr"><body></body></html>'

    def test_never_overwrites(self):
        markup = '<html lang="de"><body></body></html>'
        assert DocumentLanguagePass().apply(markup).fixed == markup

    def test_fragment_untouched(self):
        assert DocumentLanguagePass().apply("<p>x</p>").changes == []

    @pytest.mark.parametrize("lang", ["", "   "])
    def test_blank_default_rejected(self, lang):
        with pytest.raises(ValueError):
            DocumentLanguagePass(lang)


# ---------------------------------------------------------------------------
# Test: button naming
# ---------------------------------------------------------------------------


class TestButtonNamingPass:
    @pytest.mark.parametrize(
        "class_name, label",
        [
            ("btn-close", "Close"),
            ("menu-toggle", "Menu"),
            ("search", "Search"),
            ("delete-row", "Delete"),
            ("edit", "Edit"),
            ("add-item", "Add"),
            ("remove", "Remove"),
            ("submit", "Submit"),
            ("cancel", "Cancel"),
        ],
    )
    def test_keyword_labels_for_icon_buttons(self, class_name, label):
        result = ButtonNamingPass().apply(f'<button class="{class_name}"><svg></svg></button>')
        assert f'aria-label="{label}"' in result.fixed
        assert result.changes[0].type == "add-button-label"

    def test_icon_child_kinds(self):
        for child in ("<i></i>", '<span class="icon-x"></span>'):
            fixed = ButtonNamingPass().apply(f'<button class="close">{child}</button>').fixed
            assert 'aria-label="Close"' in fixed

    def test_icon_without_keyword(self):
        fixed = ButtonNamingPass().apply('<button class="fancy"><svg></svg></button>').fixed
        assert 'aria-label="Button (needs description)"' in fixed

    def test_no_icon_gets_generic_label(self):
        fixed = ButtonNamingPass().apply('<button class="close"></button>').fixed
        assert fixed == '<button class="close" aria-label="Button"></button>'

    def test_role_button(self):
        fixed = ButtonNamingPass().apply('<div role="button" class="menu"><i></i></div>').fixed
        assert fixed == '<div role="button" class="menu" aria-label="Menu"><i></i></div>'

    def test_named_buttons_untouched(self):
        markup = '<button>Save</button><button title="Close"><svg></svg></button>'
        assert ButtonNamingPass().apply(markup).fixed == markup

    def test_change_shows_whole_element(self):
        change = ButtonNamingPass().apply('<button class="close"><svg></svg></button>').changes[0]
        assert change.original == '<button class="close"><svg></svg></button>'
        assert change.replacement == '<button class="close" aria-label="Close"><svg></svg></button>'


# ---------------------------------------------------------------------------
# Test: registry
# ---------------------------------------------------------------------------


class TestFixPassRegistry:
    def test_order(self):
        assert FIX_PASS_ORDER == [
            "alt-text",
            "form-labels",
            "heading-hierarchy",
            "document-language",
            "button-naming",
        ]
        assert set(FIX_PASS_ORDER) == set(FIX_PASS_REGISTRY)

    def test_names_match_classes(self):
        for name, cls in FIX_PASS_REGISTRY.items():
            assert cls.name == name

    def test_get_fix_pass_with_options(self):
        fix_pass = get_fix_pass("document-language", default_lang="es")
        assert isinstance(fix_pass, DocumentLanguagePass)
        assert fix_pass.default_lang == "es"

    def test_unknown_pass(self):
        with pytest.raises(FixPassNotFoundError) as excinfo:
            get_fix_pass("nope")
        assert "alt-text" in str(excinfo.value)
        assert issubclass(FixPassNotFoundError, KeyError)
