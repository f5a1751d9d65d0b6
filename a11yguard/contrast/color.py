"""Color parsing and WCAG luminance/contrast math.

Everything here is a pure function.  Parsing never raises: malformed input
yields ``None`` and a contrast ratio involving an unparseable color is 1.0,
the worst case, so callers degrade to "nothing to report".
"""

from __future__ import annotations

import re

from a11yguard.models.color import Color

NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "silver": (192, 192, 192),
    "maroon": (128, 0, 0),
    "olive": (128, 128, 0),
    "lime": (0, 255, 0),
    "aqua": (0, 255, 255),
    "teal": (0, 128, 128),
    "navy": (0, 0, 128),
    "fuchsia": (255, 0, 255),
    "purple": (128, 0, 128),
    "orange": (255, 165, 0),
    "pink": (255, 192, 203),
    "brown": (165, 42, 42),
}

_HEX_RE = re.compile(r"#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})")
_RGB_RE = re.compile(
    r"rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*(\d*\.?\d+)\s*)?\)"
)
_HSL_RE = re.compile(
    r"hsla?\s*\(\s*(\d*\.?\d+)\s*,\s*(\d*\.?\d+)%\s*,\s*(\d*\.?\d+)%\s*"
    r"(?:,\s*(\d*\.?\d+)\s*)?\)"
)

# WCAG 2.x relative luminance constants (ITU-R BT.709 coefficients).
_LINEAR_THRESHOLD = 0.03928
_LUMA_COEFFICIENTS = (0.2126, 0.7152, 0.0722)


def parse_color(text: str | None) -> Color | None:
    """Parse a CSS color string, returning ``None`` for anything unsupported."""
    if not text:
        return None
    value = text.strip().lower()

    if value == "transparent":
        return Color(r=0, g=0, b=0, a=0.0)
    if value in NAMED_COLORS:
        r, g, b = NAMED_COLORS[value]
        return Color(r=r, g=g, b=b)
    if value.startswith("#"):
        return _parse_hex(value)
    if value.startswith("rgb"):
        return _parse_rgb(value)
    if value.startswith("hsl"):
        return _parse_hsl(value)
    return None


def _parse_hex(value: str) -> Color | None:
    if not _HEX_RE.fullmatch(value):
        return None
    digits = value[1:]
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else None
    return Color(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
        a=alpha,
    )


def _parse_rgb(value: str) -> Color | None:
    match = _RGB_RE.fullmatch(value)
    if match is None:
        return None
    r, g, b, alpha = match.groups()
    return Color(
        r=int(r), g=int(g), b=int(b), a=float(alpha) if alpha is not None else None
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _parse_hsl(value: str) -> Color | None:
    match = _HSL_RE.fullmatch(value)
    if match is None:
        return None
    hue_deg, sat_pct, light_pct, alpha = match.groups()
    h = (float(hue_deg) % 360) / 360
    s = min(float(sat_pct), 100.0) / 100
    lum = min(float(light_pct), 100.0) / 100

    if s == 0:
        r = g = b = lum
    else:
        q = lum * (1 + s) if lum < 0.5 else lum + s - lum * s
        p = 2 * lum - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    # Color rounds half-up, matching the reference conversion.
    return Color(
        r=r * 255, g=g * 255, b=b * 255, a=float(alpha) if alpha is not None else None
    )


def _linearize(channel: int) -> float:
    normalized = channel / 255
    if normalized <= _LINEAR_THRESHOLD:
        return normalized / 12.92
    return ((normalized + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """WCAG relative luminance in ``[0, 1]``."""
    red, green, blue = (_linearize(c) for c in color.as_tuple())
    kr, kg, kb = _LUMA_COEFFICIENTS
    return kr * red + kg * green + kb * blue


def _coerce(color: str | Color | None) -> Color | None:
    if isinstance(color, Color):
        return color
    return parse_color(color)


def contrast_ratio(first: str | Color | None, second: str | Color | None) -> float:
    """Contrast ratio in ``[1, 21]``; symmetric in its arguments.

    Returns 1.0 when either side cannot be parsed.
    """
    c1 = _coerce(first)
    c2 = _coerce(second)
    if c1 is None or c2 is None:
        return 1.0
    l1 = relative_luminance(c1)
    l2 = relative_luminance(c2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def to_hex(color: Color) -> str:
    """Encode *color* as lowercase ``#rrggbb`` (alpha is dropped)."""
    return "#{:02x}{:02x}{:02x}".format(*color.as_tuple())
