"""Document-language pass: set a default lang on the root element."""

from __future__ import annotations

from a11yguard.fixers.base import BaseFixPass, PlannedFix
from a11yguard.markup.document import MarkupDocument

DEFAULT_LANG = "en"


class DocumentLanguagePass(BaseFixPass):
    """Only fills an absent or blank lang; a non-empty value is never replaced."""

    name = "document-language"
    fix_type = "add-lang"
    display_name = "Document Language"

    def __init__(self, default_lang: str = DEFAULT_LANG) -> None:
        if not default_lang or not default_lang.strip():
            raise ValueError("default_lang must be a non-empty language code.")
        self.default_lang = default_lang.strip()

    def plan(self, document: MarkupDocument) -> list[PlannedFix]:
        root = document.root
        if root is None or (root.get("lang") or "").strip():
            return []
        return [
            self.set_attribute_fix(
                document,
                root,
                "lang",
                self.default_lang,
                f'Added lang="{self.default_lang}" to html element',
                start_tag_only=True,
            )
        ]
