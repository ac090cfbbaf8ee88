"""Projection of a drawn ring into the square preview viewport.

The preview draws the polygon outline in screen coordinates: x grows to
the right, y grows downwards, so latitudes are flipped. Each axis is
scaled independently to fill the area inside the margin, which distorts
the aspect ratio but always uses the whole preview.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tenant_footprint.core.constants import (
    DEFAULT_VIEWPORT_MARGIN_PX,
    DEFAULT_VIEWPORT_SIZE_PX,
    VIEWPORT_EPSILON,
)
from tenant_footprint.models.geometry import PlanarPoint, Rect

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tenant_footprint.models.geometry import GeoPoint

DEFAULT_BOUNDS = Rect(
    x=DEFAULT_VIEWPORT_MARGIN_PX,
    y=DEFAULT_VIEWPORT_MARGIN_PX,
    width=DEFAULT_VIEWPORT_SIZE_PX - 2 * DEFAULT_VIEWPORT_MARGIN_PX,
    height=DEFAULT_VIEWPORT_SIZE_PX - 2 * DEFAULT_VIEWPORT_MARGIN_PX,
)
"""Bounds reported for an empty outline: the default viewport inside its margin."""


def ring_to_normalized_viewport(
    ring: Sequence[GeoPoint],
    margin_px: float = DEFAULT_VIEWPORT_MARGIN_PX,
    viewport_size_px: float = DEFAULT_VIEWPORT_SIZE_PX,
) -> list[PlanarPoint]:
    """Fit *ring* into a square viewport, north up.

    Args:
        ring: Boundary vertices.
        margin_px: Inset on every side of the viewport.
        viewport_size_px: Side length of the square viewport.

    Returns:
        One ``PlanarPoint`` per ring vertex, in ring order. Empty for an
        empty ring.
    """
    if not ring:
        return []

    lngs = [p.lng for p in ring]
    lats = [p.lat for p in ring]
    min_lng, max_lng = min(lngs), max(lngs)
    min_lat, max_lat = min(lats), max(lats)

    lng_range = max(max_lng - min_lng, VIEWPORT_EPSILON)
    lat_range = max(max_lat - min_lat, VIEWPORT_EPSILON)
    available = viewport_size_px - 2 * margin_px

    return [
        PlanarPoint(
            x=margin_px + (p.lng - min_lng) / lng_range * available,
            y=margin_px + (max_lat - p.lat) / lat_range * available,
        )
        for p in ring
    ]


def bounding_rect(points: Sequence[PlanarPoint]) -> Rect:
    """Axis-aligned bounding rectangle of *points*.

    An empty sequence yields ``DEFAULT_BOUNDS``.
    """
    if not points:
        return DEFAULT_BOUNDS
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x, min_y = min(xs), min(ys)
    return Rect(x=min_x, y=min_y, width=max(xs) - min_x, height=max(ys) - min_y)
