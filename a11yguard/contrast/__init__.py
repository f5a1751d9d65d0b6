"""Color model and contrast analysis."""

from a11yguard.contrast.analyzer import (
    meets_requirement,
    required_ratio,
    scan_declarations,
    scan_markup,
    suggest_fix,
)
from a11yguard.contrast.color import (
    NAMED_COLORS,
    contrast_ratio,
    parse_color,
    relative_luminance,
    to_hex,
)

__all__ = [
    "NAMED_COLORS",
    "parse_color",
    "relative_luminance",
    "contrast_ratio",
    "to_hex",
    "required_ratio",
    "meets_requirement",
    "scan_declarations",
    "scan_markup",
    "suggest_fix",
]
