from theme_studio.domain.borders import (
    DEFAULT_GLOBAL_RADIUS,
    LinkedRadius,
    RadiusController,
    ThemeBorders,
    UnlinkedRadius,
)
from theme_studio.domain.colors import (
    COLOR_ROLES,
    CSS_VARIABLE_MAP,
    ColorToken,
    ThemeColors,
)
from theme_studio.domain.theme import (
    TYPOGRAPHY_ELEMENTS,
    ThemeBrand,
    ThemeData,
    ThemeScroll,
    ThemeShadows,
    ThemeSpacing,
    ThemeTypography,
    TypographyElement,
)
from theme_studio.domain.value_objects import (
    ContrastGrade,
    Hsv,
    Oklch,
    RadiusComponent,
    Rgb,
    ScrollBehavior,
    ThemeMode,
)

__all__ = [
    "COLOR_ROLES",
    "CSS_VARIABLE_MAP",
    "ColorToken",
    "ContrastGrade",
    "DEFAULT_GLOBAL_RADIUS",
    "Hsv",
    "LinkedRadius",
    "Oklch",
    "RadiusComponent",
    "RadiusController",
    "Rgb",
    "ScrollBehavior",
    "TYPOGRAPHY_ELEMENTS",
    "ThemeBorders",
    "ThemeBrand",
    "ThemeColors",
    "ThemeData",
    "ThemeMode",
    "ThemeScroll",
    "ThemeShadows",
    "ThemeSpacing",
    "ThemeTypography",
    "TypographyElement",
    "UnlinkedRadius",
]
