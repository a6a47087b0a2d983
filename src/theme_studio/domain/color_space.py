"""OKLCH color-space math.

OKLCH is the source of truth for every color in a theme. Conversions run
OKLCH -> OKLab -> LMS -> linear sRGB -> gamma-encoded sRGB and are pure
functions of their input. The inverse path (sRGB -> OKLCH) exists for the
import helper only; the engine never back-derives OKLCH from a cache.
"""

import colorsys
import math
import re

from theme_studio.domain.value_objects import Hsv, Oklch, Rgb

_OKLCH_PATTERN = re.compile(r"oklch\(([^)]+)\)", re.IGNORECASE)

# Chroma below this is treated as achromatic when deriving a hue.
ACHROMATIC_CHROMA = 1e-4


def _finite(value: float, default: float = 0.0) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        return default
    return value if math.isfinite(value) else default


def normalize_oklch(oklch: Oklch) -> Oklch:
    """Clamp lightness to [0, 1], floor chroma at 0 and wrap hue into [0, 360)."""
    l = min(1.0, max(0.0, _finite(oklch.l)))
    c = max(0.0, _finite(oklch.c))
    h = _finite(oklch.h) % 360.0
    return Oklch(l, c, h)


def oklch_to_linear_srgb(oklch: Oklch) -> tuple[float, float, float]:
    """Convert to unclipped linear-light sRGB channels."""
    hue = math.radians(oklch.h)
    a = oklch.c * math.cos(hue)
    b = oklch.c * math.sin(hue)

    l_ = oklch.l + 0.3963377774 * a + 0.2158037573 * b
    m_ = oklch.l - 0.1055613458 * a - 0.0638541728 * b
    s_ = oklch.l - 0.0894841775 * a - 1.2914855480 * b

    l, m, s = l_**3, m_**3, s_**3

    return (
        4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def _encode_gamma(channel: float) -> float:
    channel = min(1.0, max(0.0, channel))
    if channel <= 0.0031308:
        return 12.92 * channel
    return 1.055 * channel ** (1 / 2.4) - 0.055


def _decode_gamma(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def oklch_to_rgb(oklch: Oklch) -> Rgb:
    """Convert to 8-bit sRGB, clipping out-of-gamut channels."""
    r, g, b = (
        round(_encode_gamma(channel) * 255)
        for channel in oklch_to_linear_srgb(normalize_oklch(oklch))
    )
    return Rgb(r, g, b)


def oklch_to_hex(oklch: Oklch) -> str:
    return rgb_to_hex(oklch_to_rgb(oklch))


def oklch_to_hsv(oklch: Oklch) -> Hsv:
    return rgb_to_hsv(oklch_to_rgb(oklch))


def rgb_to_hex(rgb: Rgb) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def rgb_to_hsv(rgb: Rgb) -> Hsv:
    hue, saturation, value = colorsys.rgb_to_hsv(*(channel / 255 for channel in rgb))
    return Hsv(round(hue * 360) % 360, round(saturation * 100), round(value * 100))


def rgb_to_oklch(rgb: Rgb) -> Oklch:
    """Inverse transform, used when importing colors from non-OKLCH text."""
    r, g, b = (_decode_gamma(min(255, max(0, channel)) / 255) for channel in rgb)

    l = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    m = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    s = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b

    l_, m_, s_ = (math.copysign(abs(v) ** (1 / 3), v) for v in (l, m, s))

    lightness = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    b_ = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

    chroma = math.hypot(a, b_)
    if chroma < ACHROMATIC_CHROMA:
        return normalize_oklch(Oklch(lightness, 0.0, 0.0))
    return normalize_oklch(Oklch(lightness, chroma, math.degrees(math.atan2(b_, a))))


def stringify_oklch(oklch: Oklch) -> str:
    """Render as ``oklch(l c h)`` with four decimals per component, no alpha."""
    return f"oklch({oklch.l:.4f} {oklch.c:.4f} {oklch.h:.4f})"


def parse_oklch(text: str) -> Oklch | None:
    """Parse ``oklch(l c h)`` text.

    Returns None when the parentheses are missing, fewer than three
    whitespace-separated components are present, or any of the first three
    is not a finite number. Components past the third are ignored.
    """
    if not isinstance(text, str):
        return None
    match = _OKLCH_PATTERN.search(text)
    if match is None:
        return None

    parts = match.group(1).split()
    if len(parts) < 3:
        return None

    try:
        l, c, h = (float(part) for part in parts[:3])
    except ValueError:
        return None

    if not all(math.isfinite(v) for v in (l, c, h)):
        return None
    return Oklch(l, c, h)
