"""Exception hierarchy for universal-box.

All package exceptions inherit from UniversalBoxError so callers can catch
every resolution failure with one base class while keeping the specific
types available.

Only configuration problems raise. Data-shape issues in props (unknown
colors, unrecognized keys, empty values) degrade to "no value" instead.
"""

from typing import Any


class UniversalBoxError(Exception):
    """Base exception for all universal-box errors.

    Carries an error_code for structured reporting and extra context.
    """

    error_code: str = "UBOX_ERROR"

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
        """Convert exception to a dictionary for structured logs."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(UniversalBoxError):
    """Base exception for render-context misconfiguration."""

    error_code = "CONFIGURATION_ERROR"


class MissingThemeError(ConfigurationError):
    """Raised when style resolution is attempted without a theme."""

    error_code = "MISSING_THEME"

    def __init__(self) -> None:
        super().__init__("A theme is required to resolve box styles")


class ThemeConfigurationError(ConfigurationError):
    """Raised when a theme lacks its rhythm function or color map."""

    error_code = "INVALID_THEME"

    def __init__(self, theme_name: str, missing: str) -> None:
        super().__init__(
            f"Theme '{theme_name}' has no {missing}",
            context={"theme": theme_name, "missing": missing},
        )


class MissingPrimitiveError(ConfigurationError):
    """Raised when neither an explicit nor an ambient primitive is available."""

    error_code = "MISSING_PRIMITIVE"

    def __init__(self) -> None:
        super().__init__(
            "No primitive to render: pass as_= or configure a default primitive"
        )


class UnsupportedRenderTargetError(ConfigurationError):
    """Raised when a renderer is requested for an unknown target."""

    error_code = "UNSUPPORTED_RENDER_TARGET"

    def __init__(self, target: Any) -> None:
        super().__init__(
            f"Unsupported render target: {target}",
            context={"target": str(target)},
        )


# =============================================================================
# Rhythm Errors
# =============================================================================


class InvalidRhythmUnitError(UniversalBoxError, ValueError):
    """Raised when a rhythm unit is not a finite number."""

    error_code = "INVALID_RHYTHM_UNIT"

    def __init__(self, unit: Any) -> None:
        super().__init__(
            f"Rhythm unit must be a finite number, got {unit!r}",
            context={"unit": repr(unit)},
        )
