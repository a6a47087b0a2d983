"""WCAG contrast ratio and grading for theme color pairs.

Everything here is a pure function of its inputs and never raises: colors
that cannot be parsed are graded as the neutral default gray.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from theme_studio.domain.colors import ColorToken, ThemeColors
from theme_studio.domain.color_space import oklch_to_rgb
from theme_studio.domain.value_objects import ContrastGrade, Oklch, Rgb
from theme_studio.services.color_input import token_from_input

ColorInput = ColorToken | Oklch | str

# Normal text thresholds, then large text thresholds
AAA_NORMAL: Final[float] = 7.0
AA_NORMAL: Final[float] = 4.5
AAA_LARGE: Final[float] = 4.5
AA_LARGE: Final[float] = 3.0

FALLBACK_BACKGROUND: Final[str] = "oklch(1 0 0)"
FALLBACK_FOREGROUND: Final[str] = "oklch(0 0 0)"


class PairCategory(str, Enum):
    CONTENT_CONTAINERS = "content_containers"
    INTERACTIVE_ELEMENTS = "interactive_elements"
    NAVIGATION_FUNCTIONAL = "navigation_functional"


@dataclass(frozen=True, slots=True)
class ContrastGrading:
    grade: ContrastGrade
    large_text_grade: ContrastGrade


@dataclass(frozen=True, slots=True)
class ContrastPair:
    name: str
    background: str
    foreground: str
    category: PairCategory


@dataclass(frozen=True, slots=True)
class ContrastResult:
    name: str
    category: PairCategory
    background: str
    foreground: str
    ratio: float
    grade: ContrastGrade
    large_text_grade: ContrastGrade

    @property
    def passes(self) -> bool:
        return self.grade != ContrastGrade.FAIL


CONTRAST_PAIRS: Final[tuple[ContrastPair, ...]] = (
    ContrastPair("Base", "background", "foreground", PairCategory.CONTENT_CONTAINERS),
    ContrastPair("Card", "card", "card_foreground", PairCategory.CONTENT_CONTAINERS),
    ContrastPair("Popover", "popover", "popover_foreground", PairCategory.CONTENT_CONTAINERS),
    ContrastPair("Muted", "muted", "muted_foreground", PairCategory.CONTENT_CONTAINERS),
    ContrastPair("Primary", "primary", "primary_foreground", PairCategory.INTERACTIVE_ELEMENTS),
    ContrastPair("Secondary", "secondary", "secondary_foreground", PairCategory.INTERACTIVE_ELEMENTS),
    ContrastPair("Accent", "accent", "accent_foreground", PairCategory.INTERACTIVE_ELEMENTS),
    ContrastPair(
        "Destructive",
        "destructive",
        "destructive_foreground",
        PairCategory.NAVIGATION_FUNCTIONAL,
    ),
    ContrastPair("Sidebar Base", "sidebar", "sidebar_foreground", PairCategory.NAVIGATION_FUNCTIONAL),
    ContrastPair(
        "Sidebar Primary",
        "sidebar_primary",
        "sidebar_primary_foreground",
        PairCategory.NAVIGATION_FUNCTIONAL,
    ),
    ContrastPair(
        "Sidebar Accent",
        "sidebar_accent",
        "sidebar_accent_foreground",
        PairCategory.NAVIGATION_FUNCTIONAL,
    ),
)


def _to_rgb(color: ColorInput) -> Rgb:
    if isinstance(color, ColorToken):
        return color.rgb
    if isinstance(color, Oklch):
        return oklch_to_rgb(color)
    return token_from_input("contrast", color).rgb


def _linearize(channel: int) -> float:
    value = channel / 255
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorInput) -> float:
    r, g, b = (_linearize(channel) for channel in _to_rgb(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(background: ColorInput, foreground: ColorInput) -> float:
    """(lighter + 0.05) / (darker + 0.05); symmetric in its arguments."""
    first = relative_luminance(background)
    second = relative_luminance(foreground)
    lighter, darker = max(first, second), min(first, second)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_grade(ratio: float) -> ContrastGrading:
    if ratio >= AAA_NORMAL:
        grade = ContrastGrade.AAA
    elif ratio >= AA_NORMAL:
        grade = ContrastGrade.AA
    else:
        grade = ContrastGrade.FAIL

    if ratio >= AAA_LARGE:
        large_text_grade = ContrastGrade.AAA
    elif ratio >= AA_LARGE:
        large_text_grade = ContrastGrade.AA
    else:
        large_text_grade = ContrastGrade.FAIL

    return ContrastGrading(grade, large_text_grade)


def evaluate_pair(colors: ThemeColors, pair: ContrastPair) -> ContrastResult:
    background = colors.get(pair.background) or FALLBACK_BACKGROUND
    foreground = colors.get(pair.foreground) or FALLBACK_FOREGROUND
    ratio = contrast_ratio(background, foreground)
    grading = contrast_grade(ratio)
    return ContrastResult(
        name=pair.name,
        category=pair.category,
        background=pair.background,
        foreground=pair.foreground,
        ratio=ratio,
        grade=grading.grade,
        large_text_grade=grading.large_text_grade,
    )


def check_contrast(
    colors: ThemeColors,
    pairs: tuple[ContrastPair, ...] = CONTRAST_PAIRS,
) -> list[ContrastResult]:
    return [evaluate_pair(colors, pair) for pair in pairs]


def count_contrast_issues(colors: ThemeColors) -> int:
    return sum(1 for result in check_contrast(colors) if not result.passes)
