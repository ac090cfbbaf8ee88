"""Shared constants: single source of truth.

Centralises the physical constants, unit conversions, viewport defaults
and map tile templates used across geometry, configuration and the
preview orchestrator.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Earth model and units
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_378_137.0
"""WGS 84 equatorial radius in metres, used by the tangent-plane projection."""

SQ_FEET_PER_SQ_METRE: float = 10.7639
"""Square feet in one square metre."""

MIN_RING_POINTS: int = 3
"""Rings with fewer points have zero area by definition."""

# ---------------------------------------------------------------------------
# Preview viewport
# ---------------------------------------------------------------------------

DEFAULT_VIEWPORT_SIZE_PX: float = 200.0
"""Side length of the square preview viewport."""

DEFAULT_VIEWPORT_MARGIN_PX: float = 10.0
"""Inset applied on every side of the preview viewport."""

VIEWPORT_EPSILON: float = 1e-9
"""Floor for degenerate (zero-width or zero-height) coordinate ranges."""

# ---------------------------------------------------------------------------
# Map surface
# ---------------------------------------------------------------------------

AERIAL_TILE_LAYER = "aerial"
STANDARD_TILE_LAYER = "standard"

TILE_URL_TEMPLATES: dict[str, str] = {
    AERIAL_TILE_LAYER: (
        "https://server.arcgisonline.com/ArcGIS/rest/services/"
        "World_Imagery/MapServer/tile/{z}/{y}/{x}"
    ),
    STANDARD_TILE_LAYER: "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
}


def resolve_tile_url(layer: str) -> str:
    """Resolve a tile layer name to its URL template.

    Args:
        layer: Layer name (``"aerial"`` or ``"standard"``), case-insensitive.

    Returns:
        The tile URL template for the map widget.

    Raises:
        KeyError: If the layer name is unknown.
    """
    key = layer.strip().lower()
    if key not in TILE_URL_TEMPLATES:
        available = ", ".join(sorted(TILE_URL_TEMPLATES))
        msg = f"Unknown tile layer: {layer!r}. Available: {available}"
        raise KeyError(msg)
    return TILE_URL_TEMPLATES[key]
