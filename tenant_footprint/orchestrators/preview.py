"""Subdivision preview, polygon annotation and export flows.

Preview data flow (one rendering pass):
1. ring → ``estimate_area_sq_ft`` → polygon area
2. ring → ``ring_to_normalized_viewport`` → outline in viewport pixels
3. outline → ``bounding_rect`` → rectangle to slice
4. rectangle + tenant allocations + axis + area → ``subdivide`` → bands

Annotation flow:
1. ring → centroid (Shapely area centroid)
2. centroid → ``Geocoder.reverse`` → address
3. address → ``BusinessLookup.lookup`` → recommendations

Export flow:
1. preview + annotation → ``PolygonExportRecord`` (pydantic) → JSON document

Over-allocation (tenant sizes summing past the polygon area) is reported
on the preview and logged, never rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shapely.geometry import Polygon

from tenant_footprint.core.constants import (
    DEFAULT_VIEWPORT_MARGIN_PX,
    DEFAULT_VIEWPORT_SIZE_PX,
    MIN_RING_POINTS,
)
from tenant_footprint.core.exceptions import ValidationError
from tenant_footprint.geometry.area import estimate_area_sq_ft, reference_point
from tenant_footprint.geometry.subdivide import subdivide
from tenant_footprint.geometry.viewport import bounding_rect, ring_to_normalized_viewport
from tenant_footprint.models.export import PolygonExportRecord
from tenant_footprint.models.geometry import Axis, GeoPoint

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tenant_footprint.core.config import FootprintConfig
    from tenant_footprint.core.workspace import Workspace
    from tenant_footprint.models.allocation import OccupantAllocation
    from tenant_footprint.models.geometry import Band, PlanarPoint, Rect
    from tenant_footprint.models.records import PolygonRecord
    from tenant_footprint.providers.base import BusinessLookup, Geocoder

logger = logging.getLogger(__name__)


class AnnotationError(ValidationError):
    """Raised when a polygon cannot be annotated (e.g. it has no vertices)."""

    default_stage = "annotate_polygon"
    default_code = "ANNOTATION_FAILED"


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SubdivisionPreview:
    """Everything needed to draw one polygon's subdivision preview.

    Attributes:
        polygon_id: The previewed polygon.
        axis: Split axis used.
        area_sq_ft: Estimated polygon area (the normalisation denominator).
        outline: Polygon vertices in viewport pixels.
        bounds: Bounding rectangle of ``outline``; the rectangle sliced.
        bands: One band per tenant, in tenant order.
        allocated_sq_ft: Sum of the requested tenant sizes.
    """

    polygon_id: int
    axis: Axis
    area_sq_ft: float
    outline: tuple[PlanarPoint, ...] = ()
    bounds: Rect | None = None
    bands: tuple[Band, ...] = ()
    allocated_sq_ft: float = 0.0

    @property
    def is_over_allocated(self) -> bool:
        """Whether tenants request more than the polygon's area."""
        return self.allocated_sq_ft > self.area_sq_ft

    @property
    def unallocated_sq_ft(self) -> float:
        """Area not claimed by any tenant (never negative)."""
        return max(0.0, self.area_sq_ft - self.allocated_sq_ft)

    @property
    def drawable_bands(self) -> list[Band]:
        return [b for b in self.bands if b.is_drawable]


@dataclass(frozen=True, slots=True)
class PolygonAnnotation:
    """Address and business recommendations for a polygon.

    Attributes:
        polygon_id: The annotated polygon.
        centroid: Point that was reverse geocoded.
        address: Address from the geocoder (``""`` if unknown).
        businesses: Recommendations for ``address``.
    """

    polygon_id: int
    centroid: GeoPoint
    address: str = ""
    businesses: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------------


def build_subdivision_preview(
    polygon: PolygonRecord,
    allocations: Sequence[OccupantAllocation],
    *,
    axis: Axis | None = None,
    viewport_size_px: float = DEFAULT_VIEWPORT_SIZE_PX,
    margin_px: float = DEFAULT_VIEWPORT_MARGIN_PX,
) -> SubdivisionPreview:
    """Compute the subdivision preview for *polygon*.

    Args:
        polygon: The polygon record (its ring and, by default, its axis).
        allocations: Tenant allocations in placement order.
        axis: Split axis override; defaults to ``polygon.axis``.
        viewport_size_px: Side length of the square preview viewport.
        margin_px: Inset on every side of the viewport.

    Returns:
        A ``SubdivisionPreview``. Never raises for degenerate rings or
        sizes; those produce zero areas and empty bands.
    """
    axis = axis or polygon.axis
    area_sq_ft = estimate_area_sq_ft(polygon.ring)
    outline = ring_to_normalized_viewport(polygon.ring, margin_px, viewport_size_px)
    bounds = bounding_rect(outline)
    bands = subdivide(bounds, allocations, axis, area_sq_ft)
    allocated = sum(a.size for a in allocations if a.size > 0)

    preview = SubdivisionPreview(
        polygon_id=polygon.polygon_id,
        axis=axis,
        area_sq_ft=area_sq_ft,
        outline=tuple(outline),
        bounds=bounds,
        bands=tuple(bands),
        allocated_sq_ft=allocated,
    )

    if preview.is_over_allocated:
        logger.warning(
            "Tenant sizes exceed polygon area | polygon_id=%d | area=%.0f sq ft | "
            "allocated=%.0f sq ft",
            polygon.polygon_id,
            area_sq_ft,
            allocated,
        )

    logger.info(
        "Preview built | polygon_id=%d | area=%.0f sq ft | axis=%s | bands=%d | drawable=%d",
        polygon.polygon_id,
        area_sq_ft,
        axis.value,
        len(bands),
        len(preview.drawable_bands),
    )
    return preview


def preview_workspace_polygon(
    workspace: Workspace,
    polygon_id: int,
    config: FootprintConfig | None = None,
) -> SubdivisionPreview:
    """Build the preview for a workspace polygon from its current tenant list.

    Raises:
        UnknownRecordError: If *polygon_id* is not in the workspace.
    """
    polygon = workspace.polygon(polygon_id)
    allocations = workspace.allocations(polygon_id)
    if config is None:
        return build_subdivision_preview(polygon, allocations)
    return build_subdivision_preview(
        polygon,
        allocations,
        viewport_size_px=config.viewport_size_px,
        margin_px=config.viewport_margin_px,
    )


# ---------------------------------------------------------------------------
# Annotation
# ---------------------------------------------------------------------------


def polygon_centroid(ring: Sequence[GeoPoint]) -> GeoPoint:
    """Area centroid of *ring*, computed with Shapely.

    Rings too small or too thin to have an area fall back to the mean of
    their vertices.

    Raises:
        AnnotationError: If the ring is empty.
    """
    if not ring:
        msg = "Cannot compute centroid of an empty ring"
        raise AnnotationError(msg)

    if len(ring) >= MIN_RING_POINTS:
        shape = Polygon([p.to_lon_lat() for p in ring])
        if not shape.is_empty and shape.area > 0:
            centroid = shape.centroid
            return GeoPoint(lat=centroid.y, lng=centroid.x)

    return reference_point(ring)


def annotate_polygon(
    polygon: PolygonRecord,
    geocoder: Geocoder,
    business_lookup: BusinessLookup,
) -> PolygonAnnotation:
    """Reverse geocode a polygon's centroid and look up nearby businesses.

    Raises:
        AnnotationError: If the polygon has no vertices.
        ProviderError: If either provider fails.
    """
    centroid = polygon_centroid(polygon.ring)
    address = geocoder.reverse(centroid)
    businesses = business_lookup.lookup(address) if address else []

    logger.info(
        "Polygon annotated | polygon_id=%d | centroid=(%.5f, %.5f) | geocoder=%s | "
        "business_lookup=%s | businesses=%d",
        polygon.polygon_id,
        centroid.lat,
        centroid.lng,
        geocoder.name,
        business_lookup.name,
        len(businesses),
    )
    return PolygonAnnotation(
        polygon_id=polygon.polygon_id,
        centroid=centroid,
        address=address,
        businesses=businesses,
    )


def annotate_workspace_polygon(
    workspace: Workspace,
    polygon_id: int,
    geocoder: Geocoder,
    business_lookup: BusinessLookup,
) -> PolygonAnnotation:
    """Annotate a workspace polygon and store the resolved address on it.

    The stored address is left untouched when the geocoder finds none.
    """
    annotation = annotate_polygon(workspace.polygon(polygon_id), geocoder, business_lookup)
    if annotation.address:
        workspace.set_address(polygon_id, annotation.address)
    return annotation


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


def export_workspace_polygon(
    workspace: Workspace,
    polygon_id: int,
    annotation: PolygonAnnotation | None = None,
    config: FootprintConfig | None = None,
) -> PolygonExportRecord:
    """Build the JSON export document for a workspace polygon.

    The preview is recomputed from the polygon's current tenants, so the
    document always matches what the workspace holds.

    Raises:
        UnknownRecordError: If *polygon_id* is not in the workspace.
    """
    preview = preview_workspace_polygon(workspace, polygon_id, config)
    record = PolygonExportRecord.from_preview(workspace.polygon(polygon_id), preview, annotation)
    logger.info(
        "Polygon exported | polygon_id=%d | schema=%s | bands=%d",
        polygon_id,
        record.schema_version,
        len(record.subdivision.bands),
    )
    return record
