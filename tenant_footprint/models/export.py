"""Pydantic export record for a polygon and its subdivision.

One JSON document per polygon, holding what was drawn, how it was
divided, and what the providers said about it. Hand it to a UI, or keep it
to reproduce the preview later.

The document has three nested sections:
- **geometry**: GeoJSON-style ring, centroid and estimated area
- **subdivision**: split axis, allocation totals, one entry per band
- **annotation**: resolved address and business recommendations

Units are explicit in every field name (``_sq_ft``, ``_sq_m``, ``_px``).
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from tenant_footprint.core.constants import SQ_FEET_PER_SQ_METRE
from tenant_footprint.utils.helpers import parse_size

if TYPE_CHECKING:
    from tenant_footprint.models.records import PolygonRecord
    from tenant_footprint.orchestrators.preview import PolygonAnnotation, SubdivisionPreview

SCHEMA_VERSION = "tenant-footprint-v1"


class GeometrySection(BaseModel):
    """Geometry section of the export.

    Attributes:
        type: GeoJSON geometry type, always ``"Polygon"``.
        coordinates: ``[exterior_ring]`` where the ring is a closed list of
            ``[lon, lat]`` pairs.
        centroid: Annotated centroid as ``[lon, lat]``; empty if the
            polygon was never annotated.
        area_sq_ft: Estimated area in square feet.
        area_sq_m: Estimated area in square metres.
    """

    type: str = "Polygon"
    coordinates: list[list[list[float]]] = Field(default_factory=list)
    centroid: list[float] = Field(default_factory=list)
    area_sq_ft: float = 0.0
    area_sq_m: float = 0.0


class BandEntry(BaseModel):
    """One tenant band in viewport pixels.

    ``tenant_id`` keeps int and str occupant ids as they are; any other id
    type is stored as its ``str()``.
    """

    tenant_id: int | str
    name: str = ""
    size_text: str = ""
    size_sq_ft: float = 0.0
    x_px: float = 0.0
    y_px: float = 0.0
    width_px: float = 0.0
    height_px: float = 0.0
    path: str = ""


class SubdivisionSection(BaseModel):
    """Subdivision section of the export.

    Attributes:
        axis: ``"horizontal"`` or ``"vertical"``.
        allocated_sq_ft: Sum of the requested tenant sizes.
        unallocated_sq_ft: Area left over (never negative).
        over_allocated: Whether tenants request more than the area.
        bands: One entry per tenant, in tenant order.
    """

    axis: str = "horizontal"
    allocated_sq_ft: float = 0.0
    unallocated_sq_ft: float = 0.0
    over_allocated: bool = False
    bands: list[BandEntry] = Field(default_factory=list)


class AnnotationSection(BaseModel):
    address: str = ""
    businesses: list[str] = Field(default_factory=list)


class PolygonExportRecord(BaseModel):
    """Top-level export document for one polygon.

    Attributes:
        schema_version: Schema identifier for forward compatibility.
        polygon_id: Workspace polygon identifier.
        name: Polygon display name.
        exported_at: Export timestamp (ISO 8601).
        geometry: Boundary and area.
        subdivision: Tenant bands.
        annotation: Address and recommendations.
    """

    schema_version: str = Field(default=SCHEMA_VERSION, alias="$schema")
    polygon_id: int
    name: str = ""
    exported_at: str = ""
    geometry: GeometrySection = Field(default_factory=GeometrySection)
    subdivision: SubdivisionSection = Field(default_factory=SubdivisionSection)
    annotation: AnnotationSection = Field(default_factory=AnnotationSection)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_preview(
        cls,
        polygon: PolygonRecord,
        preview: SubdivisionPreview,
        annotation: PolygonAnnotation | None = None,
        *,
        exported_at: str = "",
    ) -> PolygonExportRecord:
        """Build the export document for *polygon*.

        Args:
            polygon: The polygon record (ring, name, tenants, address).
            preview: Its subdivision preview.
            annotation: Optional annotation; its address wins over the
                stored one.
            exported_at: Timestamp (ISO 8601). Defaults to now, in UTC.

        Raises:
            ValueError: If *preview* belongs to a different polygon.
        """
        if preview.polygon_id != polygon.polygon_id:
            msg = (
                f"Preview for polygon {preview.polygon_id} does not match "
                f"polygon {polygon.polygon_id}"
            )
            raise ValueError(msg)

        if not exported_at:
            exported_at = datetime.now(UTC).isoformat()

        ring = [[p.lng, p.lat] for p in polygon.ring]
        if ring and ring[0] != ring[-1]:
            ring.append(list(ring[0]))

        tenants = {t.tenant_id: t for t in polygon.tenants}
        bands = []
        for band in preview.bands:
            tenant = tenants.get(band.occupant_id) if isinstance(band.occupant_id, int) else None
            size_text = tenant.size_text if tenant else ""
            bands.append(
                BandEntry(
                    tenant_id=_export_id(band.occupant_id),
                    name=tenant.name if tenant else "",
                    size_text=size_text,
                    size_sq_ft=parse_size(size_text),
                    x_px=band.rect.x,
                    y_px=band.rect.y,
                    width_px=band.rect.width,
                    height_px=band.rect.height,
                    path=band.path,
                )
            )

        centroid: list[float] = []
        address = polygon.address
        businesses: list[str] = []
        if annotation is not None:
            centroid = list(annotation.centroid.to_lon_lat())
            address = annotation.address or address
            businesses = list(annotation.businesses)

        return cls(
            polygon_id=polygon.polygon_id,
            name=polygon.name,
            exported_at=exported_at,
            geometry=GeometrySection(
                coordinates=[ring] if ring else [],
                centroid=centroid,
                area_sq_ft=preview.area_sq_ft,
                area_sq_m=preview.area_sq_ft / SQ_FEET_PER_SQ_METRE,
            ),
            subdivision=SubdivisionSection(
                axis=preview.axis.value,
                allocated_sq_ft=preview.allocated_sq_ft,
                unallocated_sq_ft=preview.unallocated_sq_ft,
                over_allocated=preview.is_over_allocated,
                bands=bands,
            ),
            annotation=AnnotationSection(address=address, businesses=businesses),
        )

    def to_json(self, *, indent: int = 2) -> str:
        """Serialise to a JSON string, with ``$schema`` as the version key."""
        return self.model_dump_json(indent=indent, by_alias=True)

    def to_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)  # type: ignore[return-value]


def _export_id(occupant_id: object) -> int | str:
    """Occupant ids are opaque; anything but an int or str is exported as text."""
    if isinstance(occupant_id, int | str):
        return occupant_id
    return str(occupant_id)
