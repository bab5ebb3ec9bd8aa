"""Design system: themes, style resolution and render target adapters.

Usage:
    from universal_box.design_system import (
        DEFAULT_THEME, BoxContext, create_renderer, render_box,
    )

    context = BoxContext(
        theme=DEFAULT_THEME,
        primitive="div",
        renderer=create_renderer("document"),
    )
    element = render_box(context, padding=1, backgroundColor="primary")
    print(element.props["className"])  # "a b c d ..."
"""

from universal_box.design_system.box import (
    BoxContext,
    Element,
    render_box,
    select_primitive,
)
from universal_box.design_system.properties import (
    COMPOUND_EXPANSIONS,
    COMPUTED_PROPERTIES,
    LAYOUT_PROPERTIES,
    RHYTHM_PROPERTIES,
    VALUE_PROPERTIES,
    is_defined,
    split_props,
)
from universal_box.design_system.renderers import (
    DocumentStyleRenderer,
    NativeStyle,
    NativeStyleRenderer,
    StyleOverride,
    StyleRenderer,
    create_renderer,
    merge_styles,
    render_style,
)
from universal_box.design_system.resolver import (
    ResolvedBox,
    default_box_style,
    resolve_box_style,
)
from universal_box.design_system.themes import (
    DEFAULT_THEME,
    INVERSE_THEME,
    THEMES,
    RhythmTypography,
    Theme,
    Typography,
    get_theme,
)

__all__ = [
    # Themes
    "Theme",
    "Typography",
    "RhythmTypography",
    "DEFAULT_THEME",
    "INVERSE_THEME",
    "THEMES",
    "get_theme",
    # Properties
    "RHYTHM_PROPERTIES",
    "COMPUTED_PROPERTIES",
    "VALUE_PROPERTIES",
    "COMPOUND_EXPANSIONS",
    "LAYOUT_PROPERTIES",
    "is_defined",
    "split_props",
    # Resolver
    "ResolvedBox",
    "default_box_style",
    "resolve_box_style",
    # Renderers
    "StyleOverride",
    "StyleRenderer",
    "DocumentStyleRenderer",
    "NativeStyleRenderer",
    "NativeStyle",
    "create_renderer",
    "merge_styles",
    "render_style",
    # Box
    "BoxContext",
    "Element",
    "render_box",
    "select_primitive",
]
