"""Synchronize a theme's derived tokens into the shared style target.

Every property this module can write is listed in OWNED_PROPERTIES, so a
reset removes exactly what an apply may have left behind. Property maps are
computed in full before anything is written, and each apply is a complete
recomputation from the ThemeData it is given: the last call wins.
"""

import math
from typing import Final, Mapping

from theme_studio.domain.borders import (
    INNER_INSETS,
    RADIUS_SCALE,
    ThemeBorders,
    format_px,
)
from theme_studio.domain.colors import (
    CSS_VARIABLE_MAP,
    SCROLLBAR_ROLES,
    ColorToken,
    ThemeColors,
)
from theme_studio.domain.theme import (
    TYPOGRAPHY_ELEMENTS,
    ThemeData,
    ThemeScroll,
    ThemeShadows,
    ThemeSpacing,
    ThemeTypography,
)
from theme_studio.domain.value_objects import RadiusComponent, ScrollBehavior, ThemeMode
from theme_studio.logging_config import get_logger
from theme_studio.services.style_target import (
    DARK_FLAG,
    StyleTarget,
    get_style_target,
)

logger = get_logger(__name__)

# =============================================================================
# Owned property names
# =============================================================================

COLOR_PROPERTIES: Final[tuple[str, ...]] = tuple(CSS_VARIABLE_MAP.values())

FONT_PROPERTIES: Final[dict[str, str]] = {
    "font_sans": "--font-sans",
    "font_serif": "--font-serif",
    "font_mono": "--font-mono",
    "tracking_normal": "--tracking-normal",
}

TYPOGRAPHY_SUFFIXES: Final[dict[str, str]] = {
    "font_family": "font-family",
    "font_size": "font-size",
    "font_weight": "font-weight",
    "line_height": "line-height",
    "letter_spacing": "letter-spacing",
    "word_spacing": "word-spacing",
    "text_decoration": "text-decoration",
    "font_style": "font-style",
}

TYPOGRAPHY_PROPERTIES: Final[tuple[str, ...]] = tuple(
    f"--typography-{element}-{suffix}"
    for element in TYPOGRAPHY_ELEMENTS
    for suffix in TYPOGRAPHY_SUFFIXES.values()
)

RADIUS_SCALE_PROPERTIES: Final[dict[str, str]] = {
    step: f"--radius-{step}" for step in RADIUS_SCALE
}

# Component -> (outer, inner) property names
RADIUS_PAIR_PROPERTIES: Final[dict[RadiusComponent, tuple[str, str]]] = {
    RadiusComponent.CARDS: ("--radius-card", "--radius-card-inner"),
    RadiusComponent.BUTTONS: ("--radius-button", "--radius-button-inner"),
    RadiusComponent.CHECKBOX: ("--radius-checkbox", "--radius-checkbox-inner"),
}

RADIUS_PROPERTIES: Final[tuple[str, ...]] = (
    "--radius",
    *RADIUS_SCALE_PROPERTIES.values(),
    *(name for pair in RADIUS_PAIR_PROPERTIES.values() for name in pair),
)

SPACING_PROPERTIES: Final[dict[str, str]] = {
    "base": "--theme-spacing-base",
    "small": "--spacing-small",
    "medium": "--spacing-medium",
    "large": "--spacing-large",
}

SHADOW_PROPERTIES: Final[dict[str, str]] = {
    "shadow_2xs": "--shadow-2xs",
    "shadow_xs": "--shadow-xs",
    "shadow_sm": "--shadow-sm",
    "shadow": "--shadow",
    "shadow_md": "--shadow-md",
    "shadow_lg": "--shadow-lg",
    "shadow_xl": "--shadow-xl",
    "shadow_2xl": "--shadow-2xl",
}

SCROLL_PROPERTIES: Final[dict[str, str]] = {
    "behavior": "scroll-behavior",
    "width": "--scrollbar-width",
    "track_radius": "--scrollbar-track-radius",
    "thumb_radius": "--scrollbar-thumb-radius",
    "visibility": "--scrollbar-visibility",
}

OWNED_PROPERTIES: Final[tuple[str, ...]] = (
    *COLOR_PROPERTIES,
    *FONT_PROPERTIES.values(),
    *TYPOGRAPHY_PROPERTIES,
    *RADIUS_PROPERTIES,
    *SPACING_PROPERTIES.values(),
    *SHADOW_PROPERTIES.values(),
    *SCROLL_PROPERTIES.values(),
)

# =============================================================================
# Fallback values for missing or malformed derived properties
# =============================================================================


_TYPOGRAPHY_DEFAULTS: Final[dict[str, str]] = {
    "font-family": "inherit",
    "font-size": "1rem",
    "font-weight": "400",
    "line-height": "1.5",
    "letter-spacing": "normal",
    "word-spacing": "normal",
    "text-decoration": "none",
    "font-style": "normal",
}

PROPERTY_DEFAULTS: Final[dict[str, str]] = {
    "--font-sans": "ui-sans-serif, system-ui, sans-serif",
    "--font-serif": "ui-serif, Georgia, serif",
    "--font-mono": "ui-monospace, monospace",
    "--tracking-normal": "0em",
    **{
        f"--typography-{element}-{suffix}": _TYPOGRAPHY_DEFAULTS[suffix]
        for element in TYPOGRAPHY_ELEMENTS
        for suffix in TYPOGRAPHY_SUFFIXES.values()
    },
    "--radius": "0.625rem",
    "--radius-sm": "calc(var(--radius) - 4px)",
    "--radius-md": "calc(var(--radius) - 2px)",
    "--radius-lg": "var(--radius)",
    "--radius-xl": "calc(var(--radius) + 4px)",
    "--radius-card": "var(--radius)",
    "--radius-card-inner": "calc(var(--radius-card) - 4px)",
    "--radius-button": "var(--radius)",
    "--radius-button-inner": "calc(var(--radius-button) - 2px)",
    "--radius-checkbox": "var(--radius)",
    "--radius-checkbox-inner": "calc(var(--radius-checkbox) - 1px)",
    "--theme-spacing-base": "0.25rem",
    "--spacing-small": "0.5rem",
    "--spacing-medium": "1rem",
    "--spacing-large": "2rem",
    **{name: "none" for name in SHADOW_PROPERTIES.values()},
    "scroll-behavior": "auto",
    "--scrollbar-width": "12px",
    "--scrollbar-track-radius": "0px",
    "--scrollbar-thumb-radius": "4px",
    "--scrollbar-visibility": "visible",
}


def _resolve(name: str, value: object) -> str:
    """Return value when it is a usable string, else the documented default."""
    if isinstance(value, str) and value.strip():
        return value
    logger.debug("property_fallback", property=name, value=repr(value))
    return PROPERTY_DEFAULTS[name]


def _finite_number(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if math.isfinite(value) else None


def _px(name: str, value: float | None) -> str:
    if value is None:
        return _resolve(name, None)
    return format_px(max(0.0, value))


# =============================================================================
# Property map computation
# =============================================================================


def color_value(token: ColorToken) -> str:
    """Canonical OKLCH string; the raw imported value is never written."""
    return token.oklch_string


def color_properties(colors: ThemeColors) -> dict[str, str]:
    return {CSS_VARIABLE_MAP[role]: color_value(token) for role, token in colors.items()}


def scrollbar_color_properties(colors: ThemeColors) -> dict[str, str]:
    properties = {}
    for role in SCROLLBAR_ROLES:
        token = colors.get(role)
        if token is not None:
            properties[CSS_VARIABLE_MAP[role]] = color_value(token)
    return properties


def typography_properties(typography: ThemeTypography) -> dict[str, str]:
    properties = {
        name: _resolve(name, getattr(typography, attribute, None))
        for attribute, name in FONT_PROPERTIES.items()
    }
    # Only the named elements are written; unknown keys would leave residue
    for element_name in TYPOGRAPHY_ELEMENTS:
        element = typography.element(element_name)
        for attribute, suffix in TYPOGRAPHY_SUFFIXES.items():
            name = f"--typography-{element_name}-{suffix}"
            properties[name] = _resolve(name, getattr(element, attribute, None))
    return properties


def border_properties(borders: ThemeBorders) -> dict[str, str]:
    global_radius = _finite_number(borders.global_radius)
    properties = {"--radius": _px("--radius", global_radius)}

    for step, name in RADIUS_SCALE_PROPERTIES.items():
        value = None if global_radius is None else global_radius + RADIUS_SCALE[step]
        properties[name] = _px(name, value)

    for component, (outer_name, inner_name) in RADIUS_PAIR_PROPERTIES.items():
        outer = _finite_number(borders.effective(component))
        inner = None if outer is None else outer - INNER_INSETS[component]
        properties[outer_name] = _px(outer_name, outer)
        properties[inner_name] = _px(inner_name, inner)
    return properties


def spacing_properties(spacing: ThemeSpacing) -> dict[str, str]:
    return {
        name: _resolve(name, getattr(spacing, attribute, None))
        for attribute, name in SPACING_PROPERTIES.items()
    }


def shadow_properties(shadows: ThemeShadows) -> dict[str, str]:
    return {
        name: _resolve(name, getattr(shadows, attribute, None))
        for attribute, name in SHADOW_PROPERTIES.items()
    }


def scroll_properties(scroll: ThemeScroll) -> dict[str, str]:
    try:
        behavior = ScrollBehavior(scroll.behavior).value
    except ValueError:
        behavior = None
    return {
        "scroll-behavior": _resolve("scroll-behavior", behavior),
        "--scrollbar-width": _resolve("--scrollbar-width", scroll.width),
        "--scrollbar-track-radius": _resolve("--scrollbar-track-radius", scroll.track_radius),
        "--scrollbar-thumb-radius": _resolve("--scrollbar-thumb-radius", scroll.thumb_radius),
        "--scrollbar-visibility": "hidden" if scroll.hide else "visible",
    }


def theme_properties(theme: ThemeData, mode: ThemeMode | str = ThemeMode.LIGHT) -> dict[str, str]:
    """The complete property map apply_theme writes for a theme and mode."""
    return {
        **color_properties(theme.colors_for(mode)),
        **typography_properties(theme.typography),
        **border_properties(theme.borders),
        **spacing_properties(theme.spacing),
        **shadow_properties(theme.shadows),
        **scroll_properties(theme.scroll),
    }


# =============================================================================
# Engine
# =============================================================================


class TokenSyncEngine:
    """Writes computed properties to a StyleTarget and removes them on reset.

    Each section owns a disjoint set of property names, so applies from
    different editors (a radius slider and a color picker) never conflict.
    """

    def __init__(self, target: StyleTarget | None = None) -> None:
        self._target = target if target is not None else get_style_target()

    @property
    def target(self) -> StyleTarget:
        return self._target

    def _write(self, properties: Mapping[str, str]) -> int:
        for name, value in properties.items():
            self._target.set_property(name, value)
        return len(properties)

    def apply_colors(self, colors: ThemeColors) -> None:
        count = self._write(color_properties(colors))
        logger.debug("colors_applied", property_count=count)

    def apply_scrollbar_colors(self, colors: ThemeColors) -> None:
        self._write(scrollbar_color_properties(colors))

    def apply_typography(self, typography: ThemeTypography) -> None:
        self._write(typography_properties(typography))

    def apply_borders(self, borders: ThemeBorders) -> None:
        self._write(border_properties(borders))

    def apply_spacing(self, spacing: ThemeSpacing) -> None:
        self._write(spacing_properties(spacing))

    def apply_shadows(self, shadows: ThemeShadows) -> None:
        self._write(shadow_properties(shadows))

    def apply_scroll(self, scroll: ThemeScroll) -> None:
        self._write(scroll_properties(scroll))

    def apply_theme(self, theme: ThemeData, mode: ThemeMode | str = ThemeMode.LIGHT) -> dict[str, str]:
        """Compute and write every property for the theme in the given mode.

        Returns the property map that was written.
        """
        mode = ThemeMode(mode)
        properties = theme_properties(theme, mode)
        self._write(properties)
        logger.info(
            "theme_applied",
            theme=theme.name,
            mode=mode.value,
            property_count=len(properties),
        )
        return properties

    def reset_all(self) -> None:
        for name in OWNED_PROPERTIES:
            self._target.remove_property(name)
        logger.info("theme_reset", property_count=len(OWNED_PROPERTIES))

    def set_mode(self, mode: ThemeMode | str) -> None:
        self._target.set_flag(DARK_FLAG, ThemeMode(mode) == ThemeMode.DARK)
