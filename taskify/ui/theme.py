"""One Monokai color theme for Taskify.

All UI components reference these constants via f-string interpolation in
their CSS definitions. Each priority level has its own accent color, used for
column borders and headers.
"""

from typing import Dict

from taskify.models import Priority


# ============================================================================
# BASE COLORS
# ============================================================================

BACKGROUND = "#272822"  # Main application background (dark charcoal)
FOREGROUND = "#F8F8F2"  # Primary text color (off-white)
SELECTION = "#49483E"   # Selected item background (medium gray)
BORDER = "#3E3D32"      # Borders and dividers (dark gray-green)


# ============================================================================
# ACCENT COLORS
# ============================================================================

CYAN = "#66D9EF"
GREEN = "#A6E22E"
PINK = "#F92672"
YELLOW = "#E6DB74"
PURPLE = "#AE81FF"

HOVER_OPACITY = "20"  # Hover effect transparency (hex: ~12% opacity)


# ============================================================================
# PRIORITY COLORS
# ============================================================================

PRIORITY_COLORS: Dict[Priority, str] = {
    Priority.HIGH: PINK,
    Priority.MEDIUM: YELLOW,
    Priority.LOW: GREEN,
}


def get_priority_color(priority: Priority) -> str:
    """Get the accent color for a priority level.

    Args:
        priority: Priority member or label

    Returns:
        Hex color string
    """
    return PRIORITY_COLORS[Priority.parse(priority)]


def with_alpha(color: str, alpha: str) -> str:
    """Append a hex alpha channel to a color.

    Args:
        color: Hex color like '#49483E'
        alpha: Two-digit hex alpha like '20'

    Returns:
        Hex color with alpha, e.g. '#49483E20'
    """
    return f"{color}{alpha}"
