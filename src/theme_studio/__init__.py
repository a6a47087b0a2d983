from theme_studio.domain.borders import LinkedRadius, ThemeBorders, UnlinkedRadius
from theme_studio.domain.colors import ColorToken, ThemeColors
from theme_studio.domain.theme import ThemeData
from theme_studio.domain.value_objects import (
    ContrastGrade,
    Hsv,
    Oklch,
    RadiusComponent,
    Rgb,
    ThemeMode,
)
from theme_studio.services.editor import ThemeEditorSession
from theme_studio.services.token_sync import TokenSyncEngine

__all__ = [
    "ColorToken",
    "ContrastGrade",
    "Hsv",
    "LinkedRadius",
    "Oklch",
    "RadiusComponent",
    "Rgb",
    "ThemeBorders",
    "ThemeColors",
    "ThemeData",
    "ThemeEditorSession",
    "ThemeMode",
    "TokenSyncEngine",
    "UnlinkedRadius",
]

__version__ = "0.1.0"
