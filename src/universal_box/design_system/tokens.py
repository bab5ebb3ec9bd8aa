"""Design tokens for the built-in themes.

Design tokens are the atomic values the themes are assembled from. Colors
follow Tailwind CSS naming; the typography scale is the base font size and
line height the rhythm is derived from.
"""

from typing import Final

# =============================================================================
# Color Palette
# =============================================================================

PALETTE: Final[dict[str, dict[str, str]]] = {
    # Blue
    "primary": {
        "400": "#60a5fa",
        "500": "#3b82f6",
        "600": "#2563eb",
    },
    # Slate - neutral grays with slight blue tint
    "slate": {
        "50": "#f8fafc",
        "100": "#f1f5f9",
        "200": "#e2e8f0",
        "400": "#94a3b8",
        "500": "#64748b",
        "700": "#334155",
        "800": "#1e293b",
        "900": "#0f172a",
    },
    # Emerald
    "success": {
        "500": "#10b981",
        "600": "#059669",
    },
    # Amber
    "warning": {
        "500": "#f59e0b",
        "600": "#d97706",
    },
    # Rose
    "danger": {
        "500": "#f43f5e",
        "600": "#e11d48",
    },
}

WHITE: Final[str] = "#ffffff"
BLACK: Final[str] = "#000000"

# Symbolic color names a Box may reference through backgroundColor.
DEFAULT_COLORS: Final[dict[str, str]] = {
    "primary": PALETTE["primary"]["600"],
    "success": PALETTE["success"]["600"],
    "warning": PALETTE["warning"]["600"],
    "danger": PALETTE["danger"]["600"],
    "black": BLACK,
    "white": WHITE,
    "gray": PALETTE["slate"]["500"],
    "background": WHITE,
    "foreground": PALETTE["slate"]["900"],
    "border": PALETTE["slate"]["200"],
}

INVERSE_COLORS: Final[dict[str, str]] = {
    "primary": PALETTE["primary"]["400"],
    "success": PALETTE["success"]["500"],
    "warning": PALETTE["warning"]["500"],
    "danger": PALETTE["danger"]["500"],
    "black": BLACK,
    "white": WHITE,
    "gray": PALETTE["slate"]["400"],
    "background": PALETTE["slate"]["900"],
    "foreground": PALETTE["slate"]["50"],
    "border": PALETTE["slate"]["700"],
}

# =============================================================================
# Typography
# =============================================================================

TYPOGRAPHY: Final[dict[str, float]] = {
    "font_size": 16,  # px
    "line_height": 24,  # px, one rhythm unit
}
