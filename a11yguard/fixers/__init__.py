"""a11yguard fix passes: registry mapping pass name to pass class.

Usage::

    from a11yguard.fixers import get_fix_pass

    result = get_fix_pass("alt-text").apply('<img src="x.jpg">')
"""

from __future__ import annotations

from typing import Any

from a11yguard.fixers.alt_text import AltTextPass
from a11yguard.fixers.base import BaseFixPass, PlannedFix
from a11yguard.fixers.button_names import ButtonNamingPass
from a11yguard.fixers.document_lang import DocumentLanguagePass
from a11yguard.fixers.form_labels import FormLabelPass, to_readable_text
from a11yguard.fixers.headings import HeadingHierarchyPass


class FixPassNotFoundError(KeyError):
    """Raised when a fix pass name is not registered."""


FIX_PASS_REGISTRY: dict[str, type[BaseFixPass]] = {
    "alt-text": AltTextPass,
    "form-labels": FormLabelPass,
    "heading-hierarchy": HeadingHierarchyPass,
    "document-language": DocumentLanguagePass,
    "button-naming": ButtonNamingPass,
}

# Each pass sees the output of the previous one.
FIX_PASS_ORDER: list[str] = [
    "alt-text",
    "form-labels",
    "heading-hierarchy",
    "document-language",
    "button-naming",
]


def get_fix_pass(name: str, **options: Any) -> BaseFixPass:
    """Instantiate and return a fix pass by its name.

    Raises ``FixPassNotFoundError`` if the name is not registered.
    """
    try:
        cls = FIX_PASS_REGISTRY[name]
    except KeyError:
        raise FixPassNotFoundError(
            f"Unknown fix pass {name!r}. "
            f"Registered passes: {sorted(FIX_PASS_REGISTRY.keys())}"
        ) from None
    return cls(**options)


__all__ = [
    "BaseFixPass",
    "PlannedFix",
    "FixPassNotFoundError",
    "FIX_PASS_REGISTRY",
    "FIX_PASS_ORDER",
    "get_fix_pass",
    "AltTextPass",
    "FormLabelPass",
    "HeadingHierarchyPass",
    "DocumentLanguagePass",
    "ButtonNamingPass",
    "to_readable_text",
]
