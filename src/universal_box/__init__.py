from universal_box.config import RenderTarget
from universal_box.design_system import (
    DEFAULT_THEME,
    INVERSE_THEME,
    BoxContext,
    Element,
    Theme,
    Typography,
    create_renderer,
    get_theme,
    render_box,
    resolve_box_style,
    select_primitive,
)
from universal_box.exceptions import (
    ConfigurationError,
    InvalidRhythmUnitError,
    MissingPrimitiveError,
    MissingThemeError,
    UniversalBoxError,
)

__all__ = [
    "BoxContext",
    "ConfigurationError",
    "DEFAULT_THEME",
    "Element",
    "INVERSE_THEME",
    "InvalidRhythmUnitError",
    "MissingPrimitiveError",
    "MissingThemeError",
    "RenderTarget",
    "Theme",
    "Typography",
    "UniversalBoxError",
    "create_renderer",
    "get_theme",
    "render_box",
    "resolve_box_style",
    "select_primitive",
]

__version__ = "0.1.0"
