from theme_studio.domain.colors import REQUIRED_COLOR_ROLES
from theme_studio.domain.theme import ThemeData
from theme_studio.domain.value_objects import ThemeMode
from theme_studio.exceptions import IncompleteThemeError
from theme_studio.logging_config import get_logger

logger = get_logger(__name__)


def missing_required_roles(theme: ThemeData) -> list[str]:
    """Return ``mode.role`` for every required role absent from either mode."""
    missing = []
    for mode in ThemeMode:
        for role in theme.colors_for(mode).missing(REQUIRED_COLOR_ROLES):
            missing.append(f"{mode.value}.{role}")
    return missing


def validate_theme(theme: ThemeData) -> ThemeData:
    """Raise IncompleteThemeError unless both modes carry the required roles."""
    missing = missing_required_roles(theme)
    if missing:
        logger.warning("theme_rejected", theme=theme.name, missing_roles=missing)
        raise IncompleteThemeError(theme.name, missing)
    return theme
