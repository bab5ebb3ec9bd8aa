"""Closed schema of the layout props a Box understands.

Anything outside LAYOUT_PROPERTIES is a leftover prop: it is handed to the
rendered primitive untouched (event handlers, accessibility attributes,
test identifiers and so on).
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any, Final

# Props that accept either a raw length or a numeric rhythm unit.
# Don't sort it. margin < marginHorizontal < marginLeft | marginRight.
RHYTHM_PROPERTIES: Final[tuple[str, ...]] = (
    "margin",
    "marginHorizontal",
    "marginVertical",
    "marginBottom",
    "marginLeft",
    "marginRight",
    "marginTop",
    "padding",
    "paddingHorizontal",
    "paddingVertical",
    "paddingBottom",
    "paddingLeft",
    "paddingRight",
    "paddingTop",
    "height",
    "maxHeight",
    "maxWidth",
    "minHeight",
    "minWidth",
    "width",
    "bottom",
    "left",
    "right",
    "top",
)

COMPOUND_EXPANSIONS: Final[dict[str, tuple[str, str]]] = {
    "marginHorizontal": ("marginLeft", "marginRight"),
    "marginVertical": ("marginTop", "marginBottom"),
    "paddingHorizontal": ("paddingLeft", "paddingRight"),
    "paddingVertical": ("paddingTop", "paddingBottom"),
}

COMPUTED_PROPERTIES: Final[tuple[str, ...]] = (
    "flex",
    "backgroundColor",
)

# Props copied verbatim, after everything else.
VALUE_PROPERTIES: Final[tuple[str, ...]] = (
    "alignItems",
    "alignSelf",
    "flexBasis",
    "flexDirection",
    "flexGrow",
    "flexShrink",
    "flexWrap",
    "justifyContent",
    "opacity",
    "overflow",
    "position",
    "zIndex",
)

LAYOUT_PROPERTIES: Final[frozenset[str]] = frozenset(
    RHYTHM_PROPERTIES + COMPUTED_PROPERTIES + VALUE_PROPERTIES
)


def is_number(value: Any) -> bool:
    """Check for a numeric value; booleans don't count."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_defined(value: Any) -> bool:
    """Check whether a prop value should produce a style declaration.

    Numbers are always defined, zero included, since 0 is a valid rhythm
    unit. Anything else is defined only when truthy, so "", False and
    None are skipped.
    """
    return is_number(value) or bool(value)


def split_props(props: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Partition a prop bag into layout props and leftover props.

    Args:
        props: Open-ended mapping of prop names to values

    Returns:
        Tuple of (layout props, leftover props)
    """
    layout: dict[str, Any] = {}
    leftover: dict[str, Any] = {}
    for name, value in props.items():
        if name in LAYOUT_PROPERTIES:
            layout[name] = value
        else:
            leftover[name] = value
    return layout, leftover
