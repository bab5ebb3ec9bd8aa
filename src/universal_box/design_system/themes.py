"""Theme configurations.

A theme carries the symbolic color map and the typography whose rhythm
function turns dimensionless spacing units into lengths. Themes are frozen:
switching themes means replacing the whole object, never editing one.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from numbers import Real
from types import MappingProxyType
from typing import Final, Protocol, runtime_checkable

from universal_box.design_system.tokens import (
    DEFAULT_COLORS,
    INVERSE_COLORS,
    TYPOGRAPHY,
)
from universal_box.exceptions import InvalidRhythmUnitError


@runtime_checkable
class RhythmTypography(Protocol):
    """Anything a theme can use as typography."""

    def rhythm(self, unit: float) -> float: ...


@dataclass(frozen=True)
class Typography:
    """Vertical rhythm derived from a base font size and line height."""

    font_size: float = TYPOGRAPHY["font_size"]
    line_height: float = TYPOGRAPHY["line_height"]

    def rhythm(self, unit: float) -> float:
        """Translate a rhythm unit into a length.

        Args:
            unit: Number of line heights (fractions allowed)

        Returns:
            Length in the target's unit system (px on the document target,
            density-independent points on native)

        Raises:
            InvalidRhythmUnitError: If unit is not a finite number
        """
        if isinstance(unit, bool) or not isinstance(unit, Real):
            raise InvalidRhythmUnitError(unit)
        if not math.isfinite(unit):
            raise InvalidRhythmUnitError(unit)
        return unit * self.line_height


@dataclass(frozen=True)
class Theme:
    """Complete theme configuration."""

    name: str
    colors: Mapping[str, str] = field(default_factory=dict)
    typography: RhythmTypography = field(default_factory=Typography)

    def __post_init__(self) -> None:
        # Freeze the color map so shared themes can't be edited in place.
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))

    def __hash__(self) -> int:
        return hash((self.name, tuple(sorted(self.colors.items())), self.typography))

    def rhythm(self, unit: float) -> float:
        """Shortcut for typography.rhythm."""
        return self.typography.rhythm(unit)

    def with_colors(self, **overrides: str) -> "Theme":
        """Return a copy of this theme with some colors replaced."""
        return replace(self, colors={**self.colors, **overrides})


# =============================================================================
# Built-in Themes
# =============================================================================

DEFAULT_THEME: Final[Theme] = Theme(
    name="default",
    colors=DEFAULT_COLORS,
    typography=Typography(),
)

INVERSE_THEME: Final[Theme] = Theme(
    name="inverse",
    colors=INVERSE_COLORS,
    typography=Typography(),
)

THEMES: Final[Mapping[str, Theme]] = MappingProxyType({
    DEFAULT_THEME.name: DEFAULT_THEME,
    INVERSE_THEME.name: INVERSE_THEME,
})


def get_theme(name: str | None = None) -> Theme:
    """Get a built-in theme by name.

    Args:
        name: Theme name, or None for the default theme

    Returns:
        The named theme, or DEFAULT_THEME when the name is empty or unknown
    """
    if not name:
        return DEFAULT_THEME
    return THEMES.get(name.lower(), DEFAULT_THEME)
