"""Pure geometry: area estimation, band subdivision, viewport projection.

These functions are synchronous, side-effect free and never raise.
"""

from tenant_footprint.geometry.area import (
    estimate_area_sq_ft,
    estimate_area_sq_m,
    project_to_tangent_plane,
    reference_point,
    shoelace_area,
)
from tenant_footprint.geometry.subdivide import allocation_ratio, subdivide
from tenant_footprint.geometry.viewport import (
    DEFAULT_BOUNDS,
    bounding_rect,
    ring_to_normalized_viewport,
)

__all__ = [
    "DEFAULT_BOUNDS",
    "allocation_ratio",
    "bounding_rect",
    "estimate_area_sq_ft",
    "estimate_area_sq_m",
    "project_to_tangent_plane",
    "reference_point",
    "ring_to_normalized_viewport",
    "shoelace_area",
    "subdivide",
]
