from dataclasses import dataclass
from enum import Enum


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class ContrastGrade(str, Enum):
    AAA = "AAA"
    AA = "AA"
    FAIL = "Fail"


class RadiusComponent(str, Enum):
    CARDS = "cards"
    BUTTONS = "buttons"
    CHECKBOX = "checkbox"


class ScrollBehavior(str, Enum):
    AUTO = "auto"
    SMOOTH = "smooth"
    INSTANT = "instant"


@dataclass(frozen=True, slots=True)
class Oklch:
    """Perceptual color triple: lightness 0..1, chroma >= 0, hue in degrees."""

    l: float
    c: float
    h: float

    def __iter__(self):
        return iter((self.l, self.c, self.h))


@dataclass(frozen=True, slots=True)
class Rgb:
    r: int
    g: int
    b: int

    def __iter__(self):
        return iter((self.r, self.g, self.b))


@dataclass(frozen=True, slots=True)
class Hsv:
    """Hue in degrees, saturation and value in percent."""

    h: int
    s: int
    v: int
