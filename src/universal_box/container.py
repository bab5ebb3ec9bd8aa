"""Application-root container for universal-box.

Builds the theme, the style renderer and the BoxContext once, from
settings, so nothing below the root has to look them up ambiently.

Usage:
    from universal_box.container import Container

    container = Container()
    context = container.box_context(primitive="div")
    element = render_box(context, padding=2)

    # Switching themes replaces the theme wholesale
    context = container.switch_theme("inverse").box_context(primitive="div")
"""

from functools import cached_property, lru_cache
from typing import Any

from universal_box.config import RenderTarget, Settings, get_settings
from universal_box.design_system.box import BoxContext
from universal_box.design_system.renderers import StyleRenderer, create_renderer
from universal_box.design_system.themes import Theme, get_theme
from universal_box.logging_config import get_logger

logger = get_logger(__name__)


class Container:
    """Render-context container.

    The container can be configured with custom settings for testing:

        container = Container(settings=Settings(render_target=RenderTarget.NATIVE))
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        primitive: Any = None,
    ) -> None:
        """Initialize the container.

        Args:
            settings: Application settings. If None, loads from environment.
            primitive: Default primitive for contexts built by this container
        """
        self._settings = settings or get_settings()
        self._primitive = primitive
        self._theme = get_theme(self._settings.theme)
        logger.debug(
            "container_created",
            render_target=self._settings.render_target.value,
            theme=self._theme.name,
        )

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        return self._settings

    @property
    def target(self) -> RenderTarget:
        return self._settings.render_target

    @property
    def theme(self) -> Theme:
        """Get the active theme."""
        return self._theme

    @cached_property
    def renderer(self) -> StyleRenderer:
        """Get the style renderer for the configured target.

        One renderer per container, so its deduplication cache is shared by
        every Box rendered through this container.
        """
        return create_renderer(self._settings.render_target)

    def switch_theme(self, theme: Theme | str | None) -> "Container":
        """Replace the active theme.

        Args:
            theme: Theme instance, or a built-in theme name

        Returns:
            This container, for chaining
        """
        previous = self._theme
        self._theme = theme if isinstance(theme, Theme) else get_theme(theme)
        logger.info("theme_switched", previous=previous.name, theme=self._theme.name)
        return self

    def box_context(self, primitive: Any = None) -> BoxContext:
        """Build a render context from the active theme and renderer.

        Args:
            primitive: Default primitive; falls back to the container's
        """
        return BoxContext(
            theme=self._theme,
            primitive=primitive if primitive is not None else self._primitive,
            renderer=self.renderer,
        )


@lru_cache
def get_container() -> Container:
    """Get the global container singleton.

    For testing, create a Container directly with custom settings instead
    of using this function. Call get_container.cache_clear() to reset it.
    """
    return Container()
