from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Final
from uuid import uuid4

from theme_studio.domain.borders import ThemeBorders
from theme_studio.domain.colors import ColorToken, ThemeColors
from theme_studio.domain.value_objects import ScrollBehavior, ThemeMode


def _utc_now() -> datetime:
    return datetime.now(UTC)


TYPOGRAPHY_ELEMENTS: Final[tuple[str, ...]] = (
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "paragraph",
    "quote",
    "emphasis",
)


@dataclass(frozen=True)
class TypographyElement:
    font_family: str = "var(--font-sans)"
    font_size: str = "1rem"
    font_weight: str = "400"
    line_height: str = "1.5"
    letter_spacing: str = "0em"
    word_spacing: str = "0em"
    text_decoration: str = "none"
    font_style: str = "normal"


@dataclass(frozen=True)
class ThemeTypography:
    font_sans: str = "Inter, ui-sans-serif, system-ui, sans-serif"
    font_serif: str = "Georgia, ui-serif, serif"
    font_mono: str = "'JetBrains Mono', ui-monospace, monospace"
    tracking_normal: str = "0em"
    elements: tuple[tuple[str, TypographyElement], ...] = ()

    def __post_init__(self) -> None:
        # Callers may pass a dict; stored as (name, element) pairs
        object.__setattr__(self, "elements", tuple(dict(self.elements).items()))

    def element(self, name: str) -> TypographyElement:
        return dict(self.elements).get(name, TypographyElement())


@dataclass(frozen=True)
class ThemeBrand:
    name: str = ""
    primary_color: ColorToken | None = None
    secondary_color: ColorToken | None = None


@dataclass(frozen=True)
class ThemeSpacing:
    base: str = "0.25rem"
    small: str = "0.5rem"
    medium: str = "1rem"
    large: str = "2rem"


@dataclass(frozen=True)
class ThemeShadows:
    shadow_2xs: str = "0 1px 2px 0 rgb(0 0 0 / 0.05)"
    shadow_xs: str = "0 1px 3px 0 rgb(0 0 0 / 0.1)"
    shadow_sm: str = "0 2px 4px -1px rgb(0 0 0 / 0.1)"
    shadow: str = "0 4px 6px -1px rgb(0 0 0 / 0.1)"
    shadow_md: str = "0 10px 15px -3px rgb(0 0 0 / 0.1)"
    shadow_lg: str = "0 20px 25px -5px rgb(0 0 0 / 0.1)"
    shadow_xl: str = "0 25px 50px -12px rgb(0 0 0 / 0.25)"
    shadow_2xl: str = "0 35px 60px -15px rgb(0 0 0 / 0.3)"


@dataclass(frozen=True)
class ThemeScroll:
    width: str = "12px"
    behavior: ScrollBehavior = ScrollBehavior.SMOOTH
    hide: bool = False
    track_radius: str | None = "6px"
    thumb_radius: str | None = "6px"


@dataclass(frozen=True)
class ThemeData:
    """Aggregate root for a theme: both color modes plus every other token set.

    Edits never mutate a ThemeData; they build a new one with
    dataclasses.replace.
    """

    name: str
    light_colors: ThemeColors
    dark_colors: ThemeColors
    id: str = field(default_factory=lambda: str(uuid4()))
    description: str = ""
    version: str = "1.0.0"
    author: str = ""
    typography: ThemeTypography = field(default_factory=ThemeTypography)
    brand: ThemeBrand = field(default_factory=ThemeBrand)
    spacing: ThemeSpacing = field(default_factory=ThemeSpacing)
    borders: ThemeBorders = field(default_factory=ThemeBorders)
    shadows: ThemeShadows = field(default_factory=ThemeShadows)
    scroll: ThemeScroll = field(default_factory=ThemeScroll)
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)

    def colors_for(self, mode: ThemeMode | str) -> ThemeColors:
        if ThemeMode(mode) == ThemeMode.DARK:
            return self.dark_colors
        return self.light_colors
