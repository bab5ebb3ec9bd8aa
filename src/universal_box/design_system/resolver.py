"""Style resolution for the universal Box.

Turns a theme and a bag of declarative layout props into one concrete style
dict that both render targets accept, plus the props it didn't recognize.

Resolution order, each stage overwriting the previous one:
    defaults -> rhythm props -> computed props -> value props

The caller's style override is applied later, by the renderer adapter.
"""

from collections.abc import Mapping
from typing import Any, NamedTuple

from universal_box.config import RenderTarget
from universal_box.design_system.properties import (
    COMPOUND_EXPANSIONS,
    RHYTHM_PROPERTIES,
    VALUE_PROPERTIES,
    is_defined,
    is_number,
    split_props,
)
from universal_box.design_system.themes import Theme
from universal_box.exceptions import MissingThemeError, ThemeConfigurationError
from universal_box.logging_config import get_logger

logger = get_logger(__name__)


class ResolvedBox(NamedTuple):
    """Computed style plus the props left for the primitive."""

    style: dict[str, Any]
    leftover: dict[str, Any]


def default_box_style(target: RenderTarget = RenderTarget.DOCUMENT) -> dict[str, Any]:
    """Get the style every Box starts from.

    Column direction and relative position are the native defaults. The
    document target also needs display: flex to behave the same way; the
    native target is flex already and must not receive the key.
    """
    style: dict[str, Any] = {
        "flexDirection": "column",
        "position": "relative",
    }
    if target == RenderTarget.DOCUMENT:
        style["display"] = "flex"
    return style


def _check_theme(theme: Theme | None) -> Theme:
    if theme is None:
        raise MissingThemeError()
    name = getattr(theme, "name", repr(theme))
    typography = getattr(theme, "typography", None)
    if typography is None or not callable(getattr(typography, "rhythm", None)):
        raise ThemeConfigurationError(name, "typography.rhythm")
    if getattr(theme, "colors", None) is None:
        raise ThemeConfigurationError(name, "colors")
    return theme


def resolve_box_style(
    theme: Theme,
    props: Mapping[str, Any] | None = None,
    target: RenderTarget = RenderTarget.DOCUMENT,
) -> ResolvedBox:
    """Resolve layout props against a theme.

    Args:
        theme: Active theme supplying colors and the rhythm function
        props: Raw props; may be empty
        target: Render target the style is computed for

    Returns:
        ResolvedBox(style, leftover), unpackable as a pair

    Raises:
        MissingThemeError: If theme is None
        ThemeConfigurationError: If the theme has no rhythm or color map
    """
    theme = _check_theme(theme)
    layout, leftover = split_props(props or {})
    style = default_box_style(target)

    # Rhythm props. Compound names expand into both directions; later,
    # more specific names overwrite them.
    for prop in RHYTHM_PROPERTIES:
        value = layout.get(prop)
        if not is_defined(value):
            continue
        computed = theme.typography.rhythm(value) if is_number(value) else value
        if prop in COMPOUND_EXPANSIONS:
            for direction in COMPOUND_EXPANSIONS[prop]:
                style[direction] = computed
        else:
            style[prop] = computed

    # Computed props.
    flex = layout.get("flex")
    if is_number(flex):
        # Native flex shorthand semantics. Value props can still override.
        style.update(flexBasis="auto", flexGrow=flex, flexShrink=1)

    background_color = layout.get("backgroundColor")
    if background_color:
        color = theme.colors.get(background_color)
        if color is None:
            logger.debug(
                "unknown_theme_color",
                color=background_color,
                theme=getattr(theme, "name", None),
            )
        style["backgroundColor"] = color

    # Value props.
    for prop in VALUE_PROPERTIES:
        value = layout.get(prop)
        if is_defined(value):
            style[prop] = value

    return ResolvedBox(style, leftover)
