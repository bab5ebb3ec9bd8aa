import pytest

from universal_box.config import get_settings
from universal_box.design_system.renderers import (
    DocumentStyleRenderer,
    NativeStyleRenderer,
)
from universal_box.design_system.themes import Theme, Typography


@pytest.fixture
def eight_point_theme() -> Theme:
    """Theme with rhythm(n) = n * 8."""
    return Theme(
        name="eight",
        colors={"bg": "white", "brand": "#123456"},
        typography=Typography(font_size=16, line_height=8),
    )


@pytest.fixture
def document_renderer() -> DocumentStyleRenderer:
    return DocumentStyleRenderer()


@pytest.fixture
def native_renderer() -> NativeStyleRenderer:
    return NativeStyleRenderer()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
