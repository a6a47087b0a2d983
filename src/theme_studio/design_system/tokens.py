"""Default design tokens for the bundled theme.

Colors are OKLCH triples (lightness, chroma, hue) keyed by semantic role.
Foreground roles are chosen so every catalogue contrast pair reaches at
least AA for normal text in both modes.
"""

from typing import Final

# =============================================================================
# Color Palettes
# =============================================================================

LIGHT_PALETTE: Final[dict[str, tuple[float, float, float]]] = {
    # Surfaces
    "background": (1.0, 0.0, 0.0),
    "foreground": (0.145, 0.0, 0.0),
    "card": (1.0, 0.0, 0.0),
    "card_foreground": (0.145, 0.0, 0.0),
    "popover": (1.0, 0.0, 0.0),
    "popover_foreground": (0.145, 0.0, 0.0),
    # Actions
    "primary": (0.45, 0.2, 262.0),
    "primary_foreground": (0.985, 0.0, 0.0),
    "secondary": (0.97, 0.0, 0.0),
    "secondary_foreground": (0.205, 0.0, 0.0),
    "accent": (0.97, 0.0, 0.0),
    "accent_foreground": (0.205, 0.0, 0.0),
    "muted": (0.97, 0.0, 0.0),
    "muted_foreground": (0.5, 0.0, 0.0),
    # Status
    "destructive": (0.5, 0.17, 27.0),
    "destructive_foreground": (0.985, 0.0, 0.0),
    "warning": (0.75, 0.15, 70.0),
    "warning_foreground": (0.2, 0.0, 0.0),
    "success": (0.5, 0.12, 150.0),
    "success_foreground": (0.985, 0.0, 0.0),
    # Form controls
    "border": (0.92, 0.0, 0.0),
    "input": (0.92, 0.0, 0.0),
    "ring": (0.45, 0.2, 262.0),
    # Charts
    "chart_1": (0.65, 0.22, 41.0),
    "chart_2": (0.6, 0.12, 185.0),
    "chart_3": (0.4, 0.07, 227.0),
    "chart_4": (0.83, 0.19, 84.0),
    "chart_5": (0.77, 0.19, 70.0),
    # Sidebar
    "sidebar": (0.985, 0.0, 0.0),
    "sidebar_foreground": (0.145, 0.0, 0.0),
    "sidebar_primary": (0.45, 0.2, 262.0),
    "sidebar_primary_foreground": (0.985, 0.0, 0.0),
    "sidebar_accent": (0.97, 0.0, 0.0),
    "sidebar_accent_foreground": (0.205, 0.0, 0.0),
    "sidebar_border": (0.92, 0.0, 0.0),
    "sidebar_ring": (0.45, 0.2, 262.0),
    # Scrollbar
    "scrollbar_track": (0.97, 0.0, 0.0),
    "scrollbar_thumb": (0.7, 0.0, 0.0),
}

DARK_PALETTE: Final[dict[str, tuple[float, float, float]]] = {
    # Surfaces
    "background": (0.145, 0.0, 0.0),
    "foreground": (0.985, 0.0, 0.0),
    "card": (0.205, 0.0, 0.0),
    "card_foreground": (0.985, 0.0, 0.0),
    "popover": (0.205, 0.0, 0.0),
    "popover_foreground": (0.985, 0.0, 0.0),
    # Actions
    "primary": (0.7, 0.15, 255.0),
    "primary_foreground": (0.205, 0.0, 0.0),
    "secondary": (0.269, 0.0, 0.0),
    "secondary_foreground": (0.985, 0.0, 0.0),
    "accent": (0.269, 0.0, 0.0),
    "accent_foreground": (0.985, 0.0, 0.0),
    "muted": (0.269, 0.0, 0.0),
    "muted_foreground": (0.75, 0.0, 0.0),
    # Status
    "destructive": (0.7, 0.19, 22.0),
    "destructive_foreground": (0.145, 0.0, 0.0),
    "warning": (0.8, 0.15, 75.0),
    "warning_foreground": (0.205, 0.0, 0.0),
    "success": (0.7, 0.15, 150.0),
    "success_foreground": (0.205, 0.0, 0.0),
    # Form controls
    "border": (0.3, 0.0, 0.0),
    "input": (0.32, 0.0, 0.0),
    "ring": (0.7, 0.15, 255.0),
    # Charts
    "chart_1": (0.49, 0.24, 264.0),
    "chart_2": (0.7, 0.17, 162.0),
    "chart_3": (0.77, 0.19, 70.0),
    "chart_4": (0.63, 0.26, 304.0),
    "chart_5": (0.65, 0.25, 16.0),
    # Sidebar
    "sidebar": (0.205, 0.0, 0.0),
    "sidebar_foreground": (0.985, 0.0, 0.0),
    "sidebar_primary": (0.7, 0.15, 255.0),
    "sidebar_primary_foreground": (0.205, 0.0, 0.0),
    "sidebar_accent": (0.269, 0.0, 0.0),
    "sidebar_accent_foreground": (0.985, 0.0, 0.0),
    "sidebar_border": (0.3, 0.0, 0.0),
    "sidebar_ring": (0.7, 0.15, 255.0),
    # Scrollbar
    "scrollbar_track": (0.205, 0.0, 0.0),
    "scrollbar_thumb": (0.4, 0.0, 0.0),
}

# Roles that start out mirroring another role (child -> parent)
DEFAULT_COLOR_LINKS: Final[dict[str, str]] = {
    "ring": "primary",
    "sidebar_ring": "primary",
}

# =============================================================================
# Typography
# =============================================================================

FONT_FAMILIES: Final[dict[str, str]] = {
    "sans": "Inter, ui-sans-serif, system-ui, -apple-system, sans-serif",
    "serif": "Georgia, ui-serif, 'Times New Roman', serif",
    "mono": "'JetBrains Mono', 'Fira Code', ui-monospace, monospace",
}

TYPOGRAPHY_SCALE: Final[dict[str, dict[str, str]]] = {
    "h1": {"font_size": "2.25rem", "font_weight": "700", "line_height": "1.2", "letter_spacing": "-0.025em"},
    "h2": {"font_size": "1.875rem", "font_weight": "600", "line_height": "1.25", "letter_spacing": "-0.02em"},
    "h3": {"font_size": "1.5rem", "font_weight": "600", "line_height": "1.3"},
    "h4": {"font_size": "1.25rem", "font_weight": "600", "line_height": "1.4"},
    "h5": {"font_size": "1.125rem", "font_weight": "500", "line_height": "1.5"},
    "paragraph": {"font_size": "1rem", "font_weight": "400", "line_height": "1.6"},
    "quote": {
        "font_family": "var(--font-serif)",
        "font_size": "1.125rem",
        "line_height": "1.6",
        "font_style": "italic",
    },
    "emphasis": {"font_weight": "600", "font_style": "italic"},
}

# =============================================================================
# Borders, spacing, shadows
# =============================================================================

DEFAULT_RADIUS_PX: Final[float] = 8.0

SPACING: Final[dict[str, str]] = {
    "base": "0.25rem",  # 4px
    "small": "0.5rem",  # 8px
    "medium": "1rem",  # 16px
    "large": "2rem",  # 32px
}

SHADOWS: Final[dict[str, str]] = {
    "shadow_2xs": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "shadow_xs": "0 1px 3px 0 rgb(0 0 0 / 0.1)",
    "shadow_sm": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "shadow": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "shadow_md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "shadow_lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "shadow_xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "shadow_2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
}
