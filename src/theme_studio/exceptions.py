"""Exception hierarchy for Theme Studio.

All application exceptions inherit from ThemeStudioError. Color parsing and
contrast grading never raise: malformed colors resolve to None or to the
neutral default token. Only validation and programming errors surface here.
"""

from typing import Any


class ThemeStudioError(Exception):
    """Base exception for all Theme Studio errors.

    Includes an error_code for callers that report errors and extra context.
    """

    error_code: str = "THEME_STUDIO_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for display surfaces."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Validation Errors
# =============================================================================


class ThemeValidationError(ThemeStudioError):
    """Base exception for theme validation failures."""

    error_code = "THEME_VALIDATION_ERROR"


class IncompleteThemeError(ThemeValidationError):
    """Raised when a theme is missing color roles required for rendering."""

    error_code = "INCOMPLETE_THEME"

    def __init__(self, theme_name: str, missing_roles: list[str]) -> None:
        super().__init__(
            f"Theme '{theme_name}' is missing required colors: "
            f"{', '.join(missing_roles)}",
            context={"theme": theme_name, "missing_roles": list(missing_roles)},
        )
        self.missing_roles = list(missing_roles)


# =============================================================================
# Editor Errors
# =============================================================================


class UnknownColorRoleError(ThemeStudioError):
    """Raised when an edit names a color role that does not exist."""

    error_code = "UNKNOWN_COLOR_ROLE"

    def __init__(self, role: str) -> None:
        super().__init__(f"Unknown color role: {role}", context={"role": role})


class UnknownTypographyElementError(ThemeStudioError):
    """Raised when an edit names a typography element that does not exist."""

    error_code = "UNKNOWN_TYPOGRAPHY_ELEMENT"

    def __init__(self, element: str) -> None:
        super().__init__(
            f"Unknown typography element: {element}", context={"element": element}
        )
