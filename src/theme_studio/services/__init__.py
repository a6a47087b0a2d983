from theme_studio.services.color_input import (
    NEUTRAL_OKLCH,
    parse_color,
    parse_hex,
    token_from_input,
)
from theme_studio.services.contrast import (
    CONTRAST_PAIRS,
    ContrastPair,
    ContrastResult,
    PairCategory,
    check_contrast,
    contrast_grade,
    contrast_ratio,
    count_contrast_issues,
    relative_luminance,
)
from theme_studio.services.editor import EditHistory, HistoryEntry, ThemeEditorSession
from theme_studio.services.style_target import (
    DARK_FLAG,
    InMemoryStyleTarget,
    StyleTarget,
    get_style_target,
)
from theme_studio.services.token_sync import (
    OWNED_PROPERTIES,
    PROPERTY_DEFAULTS,
    TokenSyncEngine,
    theme_properties,
)
from theme_studio.services.validation import missing_required_roles, validate_theme

__all__ = [
    # Color input
    "NEUTRAL_OKLCH",
    "parse_color",
    "parse_hex",
    "token_from_input",
    # Contrast
    "CONTRAST_PAIRS",
    "ContrastPair",
    "ContrastResult",
    "PairCategory",
    "check_contrast",
    "contrast_grade",
    "contrast_ratio",
    "count_contrast_issues",
    "relative_luminance",
    # Style target
    "DARK_FLAG",
    "InMemoryStyleTarget",
    "StyleTarget",
    "get_style_target",
    # Token sync
    "OWNED_PROPERTIES",
    "PROPERTY_DEFAULTS",
    "TokenSyncEngine",
    "theme_properties",
    # Validation
    "missing_required_roles",
    "validate_theme",
    # Editor
    "EditHistory",
    "HistoryEntry",
    "ThemeEditorSession",
]
