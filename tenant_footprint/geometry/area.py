"""Floor-area estimation for drawn polygons.

Projects a ring of geographic coordinates onto a local tangent plane and
applies the shoelace formula. The projection is equirectangular around
the mean of the ring's vertices, which is accurate for building-scale
polygons and needs no projection library.

The reference point is the vertex centroid, not the area centroid. For
convex, roughly regular polygons the difference is negligible; for
strongly irregular ones it adds a small projection distortion.

None of these functions raise. Degenerate input (fewer than three
points, non-finite arithmetic) yields an area of exactly ``0.0``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from tenant_footprint.core.constants import (
    EARTH_RADIUS_M,
    MIN_RING_POINTS,
    SQ_FEET_PER_SQ_METRE,
)
from tenant_footprint.models.geometry import GeoPoint, PlanarPoint

if TYPE_CHECKING:
    from collections.abc import Sequence

_DEG_TO_RAD = math.pi / 180.0


def reference_point(ring: Sequence[GeoPoint]) -> GeoPoint:
    """Arithmetic mean of the ring's latitudes and longitudes.

    An empty ring yields ``GeoPoint(0.0, 0.0)``.
    """
    if not ring:
        return GeoPoint(lat=0.0, lng=0.0)
    n = len(ring)
    return GeoPoint(
        lat=sum(p.lat for p in ring) / n,
        lng=sum(p.lng for p in ring) / n,
    )


def project_to_tangent_plane(
    ring: Sequence[GeoPoint],
    reference: GeoPoint,
) -> list[PlanarPoint]:
    """Project geographic points onto a plane tangent at *reference*.

    Equirectangular approximation: x grows east, y grows north, both in
    metres.
    """
    cos_ref = math.cos(reference.lat * _DEG_TO_RAD)
    return [
        PlanarPoint(
            x=(p.lng - reference.lng) * _DEG_TO_RAD * EARTH_RADIUS_M * cos_ref,
            y=(p.lat - reference.lat) * _DEG_TO_RAD * EARTH_RADIUS_M,
        )
        for p in ring
    ]


def shoelace_area(points: Sequence[PlanarPoint]) -> float:
    """Unsigned polygon area via the shoelace formula. Works for either winding."""
    n = len(points)
    if n < MIN_RING_POINTS:
        return 0.0
    twice_area = 0.0
    for i in range(n):
        j = (i + 1) % n
        twice_area += points[i].x * points[j].y - points[j].x * points[i].y
    return abs(twice_area) / 2


def estimate_area_sq_m(ring: Sequence[GeoPoint]) -> float:
    """Estimate the planar area of *ring* in square metres."""
    if len(ring) < MIN_RING_POINTS:
        return 0.0
    planar = project_to_tangent_plane(ring, reference_point(ring))
    return _normalise(shoelace_area(planar))


def estimate_area_sq_ft(ring: Sequence[GeoPoint]) -> float:
    """Estimate the floor area of *ring* in square feet.

    Args:
        ring: Boundary vertices, implicitly closed. A closing vertex equal
            to the first one is allowed and does not change the result.

    Returns:
        Area in square feet, always finite and ``>= 0``. Invariant to the
        starting vertex and to winding direction.
    """
    return _normalise(estimate_area_sq_m(ring) * SQ_FEET_PER_SQ_METRE)


def _normalise(area: float) -> float:
    """Clamp to ``>= 0`` and map non-finite values to ``0.0``."""
    if not math.isfinite(area):
        return 0.0
    return max(0.0, area)
