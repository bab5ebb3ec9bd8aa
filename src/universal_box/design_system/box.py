"""Universal Box component.

The same API for the document and native targets. Some behaviour is fixed
to match the native layout model:
    - display is always flex
    - default position is relative
    - default flex direction is column

Use the style override for platform specific styling.

The theme, default primitive and renderer travel in an explicit BoxContext
built once at the application root (see universal_box.container).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from universal_box.config import RenderTarget
from universal_box.design_system.renderers import (
    StyleOverride,
    StyleRenderer,
    render_style,
)
from universal_box.design_system.resolver import resolve_box_style
from universal_box.design_system.themes import Theme
from universal_box.exceptions import MissingPrimitiveError


@dataclass(frozen=True)
class BoxContext:
    """Render context threaded from the application root.

    Attributes:
        theme: Active theme, replaced wholesale on theme switch
        primitive: Default element or component rendered by a Box
        renderer: Style renderer for the configured target
    """

    theme: Theme
    primitive: Any
    renderer: StyleRenderer

    @property
    def target(self) -> RenderTarget:
        return self.renderer.target

    def with_theme(self, theme: Theme) -> "BoxContext":
        """Return a context using another theme."""
        return replace(self, theme=theme)


@dataclass(frozen=True)
class Element:
    """What to render: a primitive and the props to render it with."""

    type: Any
    props: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))


def select_primitive(override: Any = None, default: Any = None) -> Any:
    """Pick the primitive to render.

    Args:
        override: Explicit primitive passed by the caller
        default: Ambient default primitive from the render context

    Returns:
        override when given, else default

    Raises:
        MissingPrimitiveError: If neither is available
    """
    if override is not None:
        return override
    if default is None:
        raise MissingPrimitiveError()
    return default


def render_box(
    context: BoxContext,
    *,
    as_: Any = None,
    style: StyleOverride | None = None,
    **props: Any,
) -> Element:
    """Render a Box into an element description.

    Args:
        context: Render context with theme, default primitive and renderer
        as_: Primitive overriding the context default
        style: Optional (theme) -> style function applied over the computed style
        **props: Layout props plus anything the primitive accepts

    Returns:
        Element with the chosen primitive, the leftover props and the
        rendered style under the renderer's style prop
    """
    component = select_primitive(as_, context.primitive)
    box_style, rest_props = resolve_box_style(context.theme, props, context.target)
    rendered = render_style(context.renderer, context.theme, box_style, style)
    return Element(component, {**rest_props, context.renderer.style_prop: rendered})
