"""Markup parsing, rewriting, and dialect extraction."""

from a11yguard.markup.document import (
    HEADING_TAGS,
    VOID_ELEMENTS,
    MarkupDocument,
    MarkupNode,
    MarkupParseError,
    SourceEdit,
    apply_edits,
    as_document,
    parse_markup,
    rename_tag,
    set_attribute,
)
from a11yguard.markup.extraction import extract_markup

__all__ = [
    "HEADING_TAGS",
    "VOID_ELEMENTS",
    "MarkupDocument",
    "MarkupNode",
    "MarkupParseError",
    "SourceEdit",
    "apply_edits",
    "as_document",
    "parse_markup",
    "rename_tag",
    "set_attribute",
    "extract_markup",
]
