"""Area-proportional subdivision of a rectangle into bands.

Each occupant receives a band whose extent along the split axis is its
requested size divided by the reference total area, saturated at the full
extent. Bands are laid out in the caller's order with no gaps; the only
tie-break is that order.

Over-allocation (ratios summing past 1.0) is not rejected: later bands are
positioned beyond the rectangle's far edge. Zero, negative and non-finite
sizes produce empty bands. Nothing here raises.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from tenant_footprint.models.geometry import Axis, Band, Rect

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tenant_footprint.models.allocation import OccupantAllocation

MAX_RATIO = 1.0


def allocation_ratio(size: float, total_area: float) -> float:
    """Fraction of the rectangle's extent an occupant of *size* receives.

    Returns 0 unless both *size* and *total_area* are positive; the result
    is capped at ``MAX_RATIO``.
    """
    if not (size > 0 and total_area > 0):
        return 0.0
    ratio = size / total_area
    if math.isnan(ratio):
        # inf / inf
        return MAX_RATIO if math.isinf(size) else 0.0
    return min(ratio, MAX_RATIO)


def subdivide(
    rect: Rect,
    allocations: Sequence[OccupantAllocation],
    axis: Axis,
    total_area: float,
) -> list[Band]:
    """Slice *rect* into one band per allocation.

    Args:
        rect: Bounding rectangle to slice.
        allocations: Occupants in placement order.
        axis: ``HORIZONTAL`` stacks full-width bands top to bottom,
            ``VERTICAL`` stacks full-height bands left to right.
        total_area: Normalisation denominator, usually the polygon's
            estimated area in square feet.

    Returns:
        Bands in the same order as *allocations*. A band with no positive
        extent has an empty ``path`` and must not be drawn.
    """
    bands: list[Band] = []
    offset = 0.0
    for allocation in allocations:
        ratio = allocation_ratio(allocation.size, total_area)
        if axis is Axis.HORIZONTAL:
            band_rect = Rect(
                x=rect.x,
                y=rect.y + offset * rect.height,
                width=rect.width,
                height=ratio * rect.height,
            )
        else:
            band_rect = Rect(
                x=rect.x + offset * rect.width,
                y=rect.y,
                width=ratio * rect.width,
                height=rect.height,
            )
        offset += ratio
        bands.append(
            Band(
                occupant_id=allocation.occupant_id,
                rect=band_rect,
                path=band_rect.to_svg_path(),
            )
        )
    return bands
