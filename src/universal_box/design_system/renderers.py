"""Style renderer adapters.

A renderer turns a final style dict into whatever its target consumes and
deduplicates identical shapes, so rendering the same Box twice never
creates a second style artifact.

- DocumentStyleRenderer: atomic CSS, one class per declaration
- NativeStyleRenderer: immutable style records with sequential ids

Both caches are append-only and guarded by a lock; registering the same
shape concurrently always yields the same identifier.
"""

import re
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Final

from universal_box.config import RenderTarget
from universal_box.design_system.properties import is_number
from universal_box.design_system.themes import Theme
from universal_box.exceptions import UnsupportedRenderTargetError
from universal_box.logging_config import get_logger

logger = get_logger(__name__)

StyleOverride = Callable[[Theme], Mapping[str, Any] | None]

# Numeric CSS properties that take no length unit.
UNITLESS_PROPERTIES: Final[frozenset[str]] = frozenset({
    "flex",
    "flexGrow",
    "flexShrink",
    "fontWeight",
    "lineHeight",
    "opacity",
    "order",
    "zIndex",
})

_UPPER = re.compile(r"[A-Z]")


def _freeze(value: Any) -> Any:
    """Make a style value hashable for use as a cache key."""
    if isinstance(value, Mapping):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    if isinstance(value, list | tuple):
        return tuple(_freeze(v) for v in value)
    return value


def _read_only(value: Any) -> Any:
    """Copy a nested style value so later edits by the caller can't reach it."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _read_only(v) for k, v in value.items()})
    if isinstance(value, list | tuple):
        return tuple(_read_only(v) for v in value)
    return value


def _drop_empty(style: Mapping[str, Any]) -> dict[str, Any]:
    """Remove declarations whose value is None ("no value")."""
    return {key: value for key, value in style.items() if value is not None}


def merge_styles(
    computed: Mapping[str, Any],
    theme: Theme,
    override: StyleOverride | None = None,
) -> dict[str, Any]:
    """Shallow-merge the caller's override on top of a computed style.

    Args:
        computed: Style produced by the resolver
        theme: Active theme passed to the override
        override: Optional function of the theme returning a partial style

    Returns:
        New dict; override keys win
    """
    merged = dict(computed)
    if override is not None:
        merged.update(override(theme) or {})
    return merged


class StyleRenderer(ABC):
    """Interface shared by the render target adapters."""

    target: RenderTarget
    # Prop name the rendered identifier is passed under.
    style_prop: str

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @abstractmethod
    def render_rule(self, style: Mapping[str, Any]) -> Any:
        """Register a style (once) and return its render-target identifier."""

    @property
    @abstractmethod
    def registered_count(self) -> int:
        """Number of distinct style artifacts registered so far."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every registered style artifact."""


# =============================================================================
# Document Target
# =============================================================================


def _class_name(index: int) -> str:
    """Generate a short class name: a, b, ..., z, aa, ab, ..."""
    name = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        name = chr(ord("a") + remainder) + name
    return name


def to_css_property(name: str) -> str:
    """Convert a camelCase style key to a CSS property name."""
    return _UPPER.sub(lambda match: "-" + match.group(0).lower(), name)


def _format_number(value: Any) -> str:
    """Write a number in plain decimal notation, never exponent form."""
    if isinstance(value, int):
        return str(value)
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


def to_css_value(name: str, value: Any) -> str:
    """Format a style value for CSS, adding px to unit-bearing numbers."""
    if is_number(value):
        text = _format_number(value)
        if name in UNITLESS_PROPERTIES or value == 0:
            return text
        return f"{text}px"
    return str(value)


class DocumentStyleRenderer(StyleRenderer):
    """Atomic CSS renderer for the document target.

    Every distinct declaration is registered once under its own class name.
    render_rule returns the class names of a style, in property order, so
    equal styles always map to the same className string.
    """

    target = RenderTarget.DOCUMENT
    style_prop = "className"

    def __init__(self) -> None:
        super().__init__()
        self._classes: dict[tuple[str, Any], str] = {}
        self._rules: list[str] = []

    def render_rule(self, style: Mapping[str, Any]) -> str:
        declarations = sorted(_drop_empty(style).items())
        names = []
        with self._lock:
            for prop, value in declarations:
                key = (prop, _freeze(value))
                class_name = self._classes.get(key)
                if class_name is None:
                    class_name = _class_name(len(self._classes))
                    self._classes[key] = class_name
                    self._rules.append(
                        f".{class_name}{{{to_css_property(prop)}:{to_css_value(prop, value)}}}"
                    )
                    logger.debug(
                        "style_registered",
                        target=self.target.value,
                        identifier=class_name,
                        property=prop,
                    )
                names.append(class_name)
        return " ".join(names)

    def render_to_string(self) -> str:
        """Get the stylesheet for every registered declaration."""
        with self._lock:
            return "".join(self._rules)

    @property
    def registered_count(self) -> int:
        return len(self._classes)

    def clear(self) -> None:
        with self._lock:
            self._classes.clear()
            self._rules.clear()


# =============================================================================
# Native Target
# =============================================================================


@dataclass(frozen=True)
class NativeStyle:
    """Registered native style record."""

    id: int
    style: Mapping[str, Any] = field(compare=False, hash=False)


class NativeStyleRenderer(StyleRenderer):
    """Style sheet registry for the native target.

    Structurally equal styles share one NativeStyle record.
    """

    target = RenderTarget.NATIVE
    style_prop = "style"

    def __init__(self) -> None:
        super().__init__()
        self._records: dict[Any, NativeStyle] = {}

    def render_rule(self, style: Mapping[str, Any]) -> NativeStyle:
        cleaned = _drop_empty(style)
        key = _freeze(cleaned)
        with self._lock:
            record = self._records.get(key)
            if record is None:
                record = NativeStyle(
                    id=len(self._records) + 1,
                    style=_read_only(cleaned),
                )
                self._records[key] = record
                logger.debug(
                    "style_registered",
                    target=self.target.value,
                    identifier=record.id,
                    declarations=len(cleaned),
                )
        return record

    @property
    def registered_count(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


_RENDERERS: Final[dict[RenderTarget, type[StyleRenderer]]] = {
    RenderTarget.DOCUMENT: DocumentStyleRenderer,
    RenderTarget.NATIVE: NativeStyleRenderer,
}


def create_renderer(target: RenderTarget | str) -> StyleRenderer:
    """Create the renderer adapter for a render target.

    Raises:
        UnsupportedRenderTargetError: If the target is unknown
    """
    try:
        target = RenderTarget(target)
    except ValueError:
        raise UnsupportedRenderTargetError(target) from None
    return _RENDERERS[target]()


def render_style(
    renderer: StyleRenderer,
    theme: Theme,
    computed: Mapping[str, Any],
    override: StyleOverride | None = None,
) -> Any:
    """Merge the caller override onto a computed style and render it.

    Args:
        renderer: Adapter for the active render target
        theme: Active theme, passed to the override
        computed: Style produced by the resolver
        override: Optional (theme) -> partial style function; wins key for key

    Returns:
        Render-target identifier (className string or NativeStyle)
    """
    return renderer.render_rule(merge_styles(computed, theme, override))
