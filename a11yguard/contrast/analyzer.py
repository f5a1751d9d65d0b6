"""Contrast analysis over declared color pairs.

Walks style source (style sheets, ``<style>`` blocks, inline ``style``
attributes), pairs each rule-set's ``color`` with its solid background, and
reports the pairs that miss the WCAG threshold for the requested level.
``suggest_fix`` searches for the nearest foreground that would pass.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from a11yguard.contrast.color import (
    contrast_ratio,
    parse_color,
    relative_luminance,
    to_hex,
)
from a11yguard.models.color import Color
from a11yguard.models.contrast import (
    ContrastFinding,
    ContrastRequirement,
    ContrastSuggestion,
)
from a11yguard.models.rules import WCAGLevel

if TYPE_CHECKING:
    from a11yguard.markup.document import MarkupDocument

logger = logging.getLogger(__name__)

# (normal text, large text) thresholds per level.
_THRESHOLDS: dict[WCAGLevel, tuple[float, float]] = {
    WCAGLevel.A: (4.5, 3.0),
    WCAGLevel.AA: (4.5, 3.0),
    WCAGLevel.AAA: (7.0, 4.5),
}

_SEARCH_ITERATIONS = 20

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_RULE_SET_RE = re.compile(r"([^{}]+)\{([^{}]*)\}")
_IMPORTANT_RE = re.compile(r"\s*!important\s*$", re.IGNORECASE)
_FONT_SIZE_RE = re.compile(r"^(\d*\.?\d+)\s*(px|pt)$")
_SNIPPET_LIMIT = 100


def required_ratio(level: str | WCAGLevel, is_large_text: bool = False) -> float:
    """Minimum contrast for *level*; unrecognised levels are treated as AA."""
    normal, large = _THRESHOLDS[WCAGLevel.coerce(level)]
    return large if is_large_text else normal


def meets_requirement(
    foreground: str | Color,
    background: str | Color,
    level: str | WCAGLevel = WCAGLevel.AA,
    is_large_text: bool = False,
) -> ContrastRequirement:
    """Check a pair against the level threshold.

    The decision uses the unrounded ratio; the reported ratio is rounded to
    two decimals.
    """
    wcag_level = WCAGLevel.coerce(level)
    ratio = contrast_ratio(foreground, background)
    required = required_ratio(wcag_level, is_large_text)
    return ContrastRequirement(
        passes=ratio >= required,
        ratio=round(ratio, 2),
        required_ratio=required,
        level=wcag_level,
    )


# ---------------------------------------------------------------------------
# Declaration scanning
# ---------------------------------------------------------------------------


def _parse_declarations(block: str) -> list[tuple[str, str]]:
    declarations: list[tuple[str, str]] = []
    for chunk in block.split(";"):
        prop, sep, value = chunk.partition(":")
        if not sep:
            continue
        value = _IMPORTANT_RE.sub("", value).strip()
        prop = prop.strip().lower()
        if prop and value:
            declarations.append((prop, value))
    return declarations


def _is_large_text(declarations: list[tuple[str, str]]) -> bool:
    """18pt (24px) regular, or 14pt (~18.66px) bold, counts as large text."""
    size_pt: float | None = None
    bold = False
    for prop, value in declarations:
        if prop == "font-size":
            match = _FONT_SIZE_RE.match(value.lower())
            if match:
                number, unit = float(match.group(1)), match.group(2)
                size_pt = number if unit == "pt" else number * 0.75
        elif prop == "font-weight":
            lowered = value.lower()
            bold = lowered in ("bold", "bolder") or (lowered.isdigit() and int(lowered) >= 700)
    if size_pt is None:
        return False
    return size_pt >= 18 or (bold and size_pt >= 14)


def _evaluate_block(
    block: str, level: WCAGLevel, location: str
) -> ContrastFinding | None:
    declarations = _parse_declarations(block)
    foreground: str | None = None
    background: str | None = None
    for prop, value in declarations:
        if prop == "color":
            foreground = value
        elif prop in ("background-color", "background"):
            # Shorthand is only usable when it is a single solid color.
            parsed = parse_color(value)
            if parsed is not None and parsed.a != 0:
                background = value

    if foreground is None or background is None:
        return None
    if parse_color(foreground) is None:
        return None

    large_text = _is_large_text(declarations)
    result = meets_requirement(foreground, background, level, large_text)
    if result.passes:
        return None
    return ContrastFinding(
        foreground=foreground,
        background=background,
        ratio=result.ratio,
        required_ratio=result.required_ratio,
        level=result.level,
        passes=False,
        large_text=large_text,
        location=location,
    )


def scan_declarations(
    source: str,
    level: str | WCAGLevel = WCAGLevel.AA,
    location: str = "",
) -> list[ContrastFinding]:
    """Scan a style sheet or a bare declaration list for failing pairs.

    A declaration list (inline ``style`` value) is one scope reported under
    *location*; in a style sheet each rule-set is its own scope, reported
    under its selector.  At-rule wrappers such as ``@media`` are walked into.
    """
    wcag_level = WCAGLevel.coerce(level)
    text = _COMMENT_RE.sub("", source or "")
    findings: list[ContrastFinding] = []

    if "{" not in text:
        finding = _evaluate_block(text, wcag_level, location)
        return [finding] if finding else []

    for match in _RULE_SET_RE.finditer(text):
        selector = " ".join(match.group(1).split())
        if not selector or selector.startswith("@"):
            continue
        finding = _evaluate_block(match.group(2), wcag_level, selector)
        if finding is not None:
            findings.append(finding)
    return findings


def scan_markup(
    document: MarkupDocument, level: str | WCAGLevel = WCAGLevel.AA
) -> list[ContrastFinding]:
    """Scan inline ``style`` attributes and ``<style>`` blocks in document order."""
    findings: list[ContrastFinding] = []
    for node in document.nodes:
        if node.tag == "style":
            findings.extend(scan_declarations(node.text, level))
            continue
        style = document.attr(node, "style")
        if style:
            findings.extend(
                scan_declarations(
                    style, level, location=document.snippet(node)[:_SNIPPET_LIMIT]
                )
            )
    logger.debug("Contrast scan found %d failing pair(s).", len(findings))
    return findings


# ---------------------------------------------------------------------------
# Fix suggestion
# ---------------------------------------------------------------------------


def _blend(color: Color, factor: float, darken: bool) -> Color:
    if darken:
        return Color(
            r=color.r * (1 - factor), g=color.g * (1 - factor), b=color.b * (1 - factor)
        )
    return Color(
        r=color.r + (255 - color.r) * factor,
        g=color.g + (255 - color.g) * factor,
        b=color.b + (255 - color.b) * factor,
    )


def suggest_fix(
    foreground: str,
    background: str,
    level: str | WCAGLevel = WCAGLevel.AA,
    is_large_text: bool = False,
) -> ContrastSuggestion:
    """Search for the least-changed foreground that meets the requirement.

    Darkens the foreground on light backgrounds (luminance above 0.5) and
    lightens it otherwise, bisecting the blend factor a fixed number of
    times.  The returned color is the smallest blend known to pass; when
    even the extreme (black or white) cannot pass, the extreme is returned.
    """
    required = required_ratio(level, is_large_text)
    fg_color = parse_color(foreground)
    bg_color = parse_color(background)
    if fg_color is None or bg_color is None:
        return ContrastSuggestion(
            original_foreground=foreground,
            original_background=background,
            required_ratio=required,
            error="Could not parse colors",
        )

    darken = relative_luminance(bg_color) > 0.5
    low, high = 0.0, 1.0
    for _ in range(_SEARCH_ITERATIONS):
        mid = (low + high) / 2
        candidate = _blend(fg_color, mid, darken)
        if contrast_ratio(candidate, bg_color) >= required:
            high = mid
        else:
            low = mid

    suggested = _blend(fg_color, high, darken)
    return ContrastSuggestion(
        original_foreground=foreground,
        original_background=background,
        required_ratio=required,
        suggested_foreground=to_hex(suggested),
        new_ratio=round(contrast_ratio(suggested, bg_color), 2),
    )
