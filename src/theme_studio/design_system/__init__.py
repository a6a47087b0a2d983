"""Bundled default theme for Theme Studio.

Usage:
    from theme_studio.design_system import get_default_theme, generate_theme_css

    theme = get_default_theme()
    print(generate_theme_css(theme, include_dark=False))
"""

from theme_studio.design_system.themes import (
    DEFAULT_THEME,
    DEFAULT_THEME_ID,
    build_colors,
    build_default_theme,
    generate_theme_css,
    get_default_theme,
)
from theme_studio.design_system.tokens import (
    DARK_PALETTE,
    DEFAULT_COLOR_LINKS,
    LIGHT_PALETTE,
    TYPOGRAPHY_SCALE,
)

__all__ = [
    # Tokens
    "LIGHT_PALETTE",
    "DARK_PALETTE",
    "DEFAULT_COLOR_LINKS",
    "TYPOGRAPHY_SCALE",
    # Themes
    "DEFAULT_THEME",
    "DEFAULT_THEME_ID",
    "build_colors",
    "build_default_theme",
    "get_default_theme",
    "generate_theme_css",
]
