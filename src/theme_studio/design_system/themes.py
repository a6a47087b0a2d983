"""The bundled default theme and stylesheet export.

Provides the default light/dark theme built from the design tokens and
renders any theme as a stylesheet with a ``:root`` block for light mode and a
``.dark`` block for the dark color overrides.
"""

from typing import Final

from theme_studio.design_system.tokens import (
    DARK_PALETTE,
    DEFAULT_COLOR_LINKS,
    DEFAULT_RADIUS_PX,
    FONT_FAMILIES,
    LIGHT_PALETTE,
    SHADOWS,
    SPACING,
    TYPOGRAPHY_SCALE,
)
from theme_studio.domain.borders import ThemeBorders
from theme_studio.domain.colors import CSS_VARIABLE_MAP, ColorToken, ThemeColors
from theme_studio.domain.theme import (
    ThemeBrand,
    ThemeData,
    ThemeShadows,
    ThemeSpacing,
    ThemeTypography,
    TypographyElement,
)
from theme_studio.domain.value_objects import Oklch, ThemeMode
from theme_studio.services.token_sync import color_value, theme_properties

DEFAULT_THEME_ID: Final[str] = "default"
DEFAULT_THEME_NAME: Final[str] = "Theme Studio Default"


def build_colors(palette: dict[str, tuple[float, float, float]]) -> ThemeColors:
    """Build a color set from role -> (l, c, h) and apply the default links."""
    colors = ThemeColors(
        **{role: ColorToken(role, Oklch(*lch)) for role, lch in palette.items()}
    )
    for child, parent in DEFAULT_COLOR_LINKS.items():
        colors = colors.link(child, parent)
    return colors


def build_default_typography() -> ThemeTypography:
    return ThemeTypography(
        font_sans=FONT_FAMILIES["sans"],
        font_serif=FONT_FAMILIES["serif"],
        font_mono=FONT_FAMILIES["mono"],
        elements={name: TypographyElement(**values) for name, values in TYPOGRAPHY_SCALE.items()},
    )


def build_default_theme() -> ThemeData:
    light = build_colors(LIGHT_PALETTE)
    return ThemeData(
        id=DEFAULT_THEME_ID,
        name=DEFAULT_THEME_NAME,
        description="Neutral surfaces with a blue primary",
        light_colors=light,
        dark_colors=build_colors(DARK_PALETTE),
        typography=build_default_typography(),
        brand=ThemeBrand(
            name="Theme Studio",
            primary_color=light.primary,
            secondary_color=light.secondary,
        ),
        spacing=ThemeSpacing(**SPACING),
        borders=ThemeBorders(global_radius=DEFAULT_RADIUS_PX),
        shadows=ThemeShadows(**SHADOWS),
    )


DEFAULT_THEME: Final[ThemeData] = build_default_theme()


def get_default_theme() -> ThemeData:
    return DEFAULT_THEME


# =============================================================================
# Stylesheet export
# =============================================================================


def _color_lines(colors: ThemeColors) -> list[str]:
    return [
        f"  {CSS_VARIABLE_MAP[role]}: {color_value(token)}; /* {token.hex} */"
        for role, token in colors.items()
    ]


def generate_theme_css(
    theme: ThemeData,
    include_light: bool = True,
    include_dark: bool = True,
) -> str:
    """Render a theme as CSS.

    Args:
        theme: Theme to export
        include_light: Emit the ``:root`` block (light colors plus every
            non-color property)
        include_dark: Emit the ``.dark`` block with the dark colors

    Returns:
        CSS string, empty when both blocks are excluded
    """
    blocks = []

    if include_light:
        color_names = set(CSS_VARIABLE_MAP.values())
        lines = _color_lines(theme.light_colors)
        lines.extend(
            f"  {name}: {value};"
            for name, value in theme_properties(theme, ThemeMode.LIGHT).items()
            if name not in color_names
        )
        blocks.append("\n".join([":root {", *lines, "}"]))

    if include_dark:
        blocks.append("\n".join([".dark {", *_color_lines(theme.dark_colors), "}"]))

    return "".join(f"{block}\n\n" for block in blocks)
