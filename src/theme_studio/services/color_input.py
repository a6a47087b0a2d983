"""Build color tokens from arbitrary color text.

Used at the import boundary, where colors arrive as hex, rgb(), hsl() or
oklch() strings. Parsing never raises: text that cannot be understood
produces the neutral default token and a warning log event.
"""

import colorsys
import math
import re
from typing import Final

from theme_studio.domain.color_space import parse_oklch, rgb_to_oklch
from theme_studio.domain.colors import ColorToken
from theme_studio.domain.value_objects import Oklch, Rgb
from theme_studio.logging_config import get_logger

logger = get_logger(__name__)

NEUTRAL_OKLCH: Final[Oklch] = Oklch(0.5, 0.0, 0.0)

_HEX_PATTERN = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_FUNCTION_PATTERN = re.compile(r"^(rgba?|hsla?)\(([^)]*)\)$", re.IGNORECASE)
_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)"


def _split_arguments(body: str) -> list[str]:
    # rgb(1, 2, 3), rgb(1 2 3) and rgb(1 2 3 / 0.5) are all accepted
    body = body.split("/")[0]
    return [part for part in re.split(r"[\s,]+", body.strip()) if part]


def _channel(part: str) -> float | None:
    match = re.fullmatch(rf"({_NUMBER})(%?)", part)
    if match is None:
        return None
    number = float(match.group(1))
    if match.group(2):
        number = number * 255 / 100
    return min(255.0, max(0.0, number))


def _percent(part: str) -> float | None:
    match = re.fullmatch(rf"({_NUMBER})%?", part)
    if match is None:
        return None
    return min(100.0, max(0.0, float(match.group(1)))) / 100


def _hue(part: str) -> float | None:
    match = re.fullmatch(rf"({_NUMBER})(deg)?", part, re.IGNORECASE)
    if match is None:
        return None
    return float(match.group(1)) % 360


def parse_hex(text: str) -> Rgb | None:
    match = _HEX_PATTERN.match(text.strip())
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return Rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Rgb:
    """Convert HSL (hue in degrees, saturation/lightness 0..1) to 8-bit RGB."""
    r, g, b = colorsys.hls_to_rgb(hue / 360, lightness, saturation)
    return Rgb(round(r * 255), round(g * 255), round(b * 255))


def _parse_function(text: str) -> Rgb | None:
    match = _FUNCTION_PATTERN.match(text.strip())
    if match is None:
        return None

    name = match.group(1).lower()
    parts = _split_arguments(match.group(2))
    if len(parts) < 3:
        return None

    if name.startswith("rgb"):
        channels = [_channel(part) for part in parts[:3]]
        if any(channel is None for channel in channels):
            return None
        r, g, b = (round(channel) for channel in channels)
        return Rgb(r, g, b)

    hue = _hue(parts[0])
    saturation = _percent(parts[1])
    lightness = _percent(parts[2])
    if hue is None or saturation is None or lightness is None:
        return None
    return hsl_to_rgb(hue, saturation, lightness)


def parse_color(text: str) -> Oklch | None:
    """Parse hex, rgb(), hsl() or oklch() text into OKLCH, or None."""
    if not isinstance(text, str) or not text.strip():
        return None

    stripped = text.strip()
    if stripped.lower().startswith("oklch"):
        return parse_oklch(stripped)

    rgb = parse_hex(stripped) or _parse_function(stripped)
    if rgb is None:
        return None
    return rgb_to_oklch(rgb)


def token_from_input(name: str, text: str) -> ColorToken:
    """Build a ColorToken from color text, falling back to a neutral gray.

    The original text is kept as the token's legacy value when it parses.
    """
    oklch = parse_color(text)
    if oklch is None or not all(math.isfinite(v) for v in oklch):
        logger.warning("color_parse_failed", token=name, text=str(text))
        return ColorToken(name, NEUTRAL_OKLCH)
    return ColorToken(name, oklch, value=text.strip())
