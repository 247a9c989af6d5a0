"""Derive badge lamp and fill color from the status query parameter."""

from typing import Any, Dict, Optional

from src.core.imaging import RGBA, solid_png

BADGE_WIDTH = 120
BADGE_HEIGHT = 40

BLUE_SIZE = 100
BLUE: RGBA = (0, 0, 255, 255)

_LAMP_COLORS: Dict[str, RGBA] = {
    "green": (0, 200, 0, 255),
    "orange": (255, 165, 0, 255),
    "red": (200, 0, 0, 255),
}


def derive_badge(status: Optional[str]) -> Dict[str, Any]:
    """Compute badge lamp (green/orange/red) and RGBA color.

    Args:
        status: Raw query value; None or "" means "ok".

    Returns:
        {"status": <normalized>, "lamp": "green"|"orange"|"red", "color": (r, g, b, a)}
    """
    status = status or "ok"
    if status == "ok":
        lamp = "green"
    elif status == "warn":
        lamp = "orange"
    else:
        # Unrecognized values are treated as failures
        lamp = "red"
    return {"status": status, "lamp": lamp, "color": _LAMP_COLORS[lamp]}


def render_badge(status: Optional[str]) -> bytes:
    return solid_png(BADGE_WIDTH, BADGE_HEIGHT, derive_badge(status)["color"])


def render_blue() -> bytes:
    return solid_png(BLUE_SIZE, BLUE_SIZE, BLUE)
