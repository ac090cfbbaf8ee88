"""In-memory workspace of drawn polygons and their tenants.

The workspace holds the state of one editing session. It owns two
``IdSequence`` counters (polygons and tenants), so identifiers are
assigned in exactly one place and never reused. Records are immutable;
every edit swaps in a new record.

Nothing here touches geometry beyond storing rings: area and subdivision
are computed on demand by ``tenant_footprint.orchestrators.preview``.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from tenant_footprint.core.exceptions import ValidationError
from tenant_footprint.models.allocation import OccupantAllocation
from tenant_footprint.models.geometry import Axis
from tenant_footprint.models.records import IdSequence, PolygonRecord, TenantRecord
from tenant_footprint.utils.helpers import parse_size

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tenant_footprint.core.config import FootprintConfig
    from tenant_footprint.models.geometry import GeoPoint

logger = logging.getLogger(__name__)


class UnknownRecordError(KeyError, ValidationError):
    """Raised when a polygon or tenant id is not in the workspace.

    Attributes:
        kind: ``"polygon"`` or ``"tenant"``.
        record_id: The id that was looked up.
    """

    default_stage = "workspace"
    default_code = "UNKNOWN_RECORD"

    def __init__(self, kind: str, record_id: int) -> None:
        self.kind = kind
        self.record_id = record_id
        ValidationError.__init__(self, f"Unknown {kind} id: {record_id}")

    def __str__(self) -> str:
        return self.message


class Workspace:
    """Polygons drawn during one session, in drawing order.

    Args:
        default_axis: Split axis assigned to newly added polygons.
    """

    def __init__(self, *, default_axis: Axis = Axis.HORIZONTAL) -> None:
        self._default_axis = default_axis
        self._polygons: dict[int, PolygonRecord] = {}
        self._polygon_ids = IdSequence()
        self._tenant_ids = IdSequence()

    @classmethod
    def from_config(cls, config: FootprintConfig) -> Workspace:
        """Create an empty workspace using the configured default split axis."""
        return cls(default_axis=config.axis)

    def __len__(self) -> int:
        return len(self._polygons)

    def __contains__(self, polygon_id: object) -> bool:
        return polygon_id in self._polygons

    # ------------------------------------------------------------------
    # Polygons
    # ------------------------------------------------------------------

    def add_polygon(
        self,
        ring: Iterable[GeoPoint],
        *,
        name: str = "",
        address: str = "",
    ) -> PolygonRecord:
        """Register a newly drawn polygon and return its record."""
        polygon_id = self._polygon_ids.next_id()
        record = PolygonRecord(
            polygon_id=polygon_id,
            ring=tuple(ring),
            name=name or f"Polygon {polygon_id}",
            address=address,
            axis=self._default_axis,
        )
        self._polygons[polygon_id] = record
        logger.info(
            "Polygon added | polygon_id=%d | vertices=%d | name=%s",
            polygon_id,
            record.vertex_count,
            record.name,
        )
        return record

    def polygon(self, polygon_id: int) -> PolygonRecord:
        """Return the record for *polygon_id*.

        Raises:
            UnknownRecordError: If no such polygon exists.
        """
        try:
            return self._polygons[polygon_id]
        except KeyError:
            raise UnknownRecordError("polygon", polygon_id) from None

    def polygons(self) -> list[PolygonRecord]:
        """All polygons in the order they were drawn."""
        return list(self._polygons.values())

    def update_ring(self, polygon_id: int, ring: Iterable[GeoPoint]) -> PolygonRecord:
        """Replace the boundary of a polygon after the user edits its vertices."""
        return self._replace(self.polygon(polygon_id), ring=tuple(ring))

    def rename_polygon(self, polygon_id: int, name: str) -> PolygonRecord:
        return self._replace(self.polygon(polygon_id), name=name)

    def set_address(self, polygon_id: int, address: str) -> PolygonRecord:
        return self._replace(self.polygon(polygon_id), address=address)

    def set_axis(self, polygon_id: int, axis: Axis | str) -> PolygonRecord:
        """Set the split axis; accepts an ``Axis`` or its toggle string."""
        return self._replace(self.polygon(polygon_id), axis=Axis.parse(axis))

    def remove_polygon(self, polygon_id: int) -> PolygonRecord:
        """Delete a polygon and its tenants, returning the removed record."""
        record = self.polygon(polygon_id)
        del self._polygons[polygon_id]
        logger.info("Polygon removed | polygon_id=%d", polygon_id)
        return record

    # ------------------------------------------------------------------
    # Tenants
    # ------------------------------------------------------------------

    def add_tenant(self, polygon_id: int, name: str = "", size_text: str = "") -> TenantRecord:
        """Append a tenant to a polygon's tenant list."""
        record = self.polygon(polygon_id)
        tenant = TenantRecord(
            tenant_id=self._tenant_ids.next_id(),
            name=name,
            size_text=size_text,
        )
        self._replace(record, tenants=(*record.tenants, tenant))
        logger.debug(
            "Tenant added | polygon_id=%d | tenant_id=%d | size=%r",
            polygon_id,
            tenant.tenant_id,
            size_text,
        )
        return tenant

    def update_tenant(
        self,
        polygon_id: int,
        tenant_id: int,
        *,
        name: str | None = None,
        size_text: str | None = None,
    ) -> TenantRecord:
        """Edit a tenant's name and/or size text in place (order is kept)."""
        record = self.polygon(polygon_id)
        index = self._tenant_index(record, tenant_id)
        tenant = record.tenants[index]
        if name is not None:
            tenant = dataclasses.replace(tenant, name=name)
        if size_text is not None:
            tenant = dataclasses.replace(tenant, size_text=size_text)
        tenants = list(record.tenants)
        tenants[index] = tenant
        self._replace(record, tenants=tuple(tenants))
        return tenant

    def remove_tenant(self, polygon_id: int, tenant_id: int) -> TenantRecord:
        record = self.polygon(polygon_id)
        index = self._tenant_index(record, tenant_id)
        tenant = record.tenants[index]
        self._replace(record, tenants=record.tenants[:index] + record.tenants[index + 1 :])
        return tenant

    def allocations(self, polygon_id: int) -> list[OccupantAllocation]:
        """Current tenant list of a polygon as subdivision input.

        Size texts are parsed with ``parse_size``: blank or unparseable
        values count as 0.
        """
        return [
            OccupantAllocation(occupant_id=t.tenant_id, size=parse_size(t.size_text))
            for t in self.polygon(polygon_id).tenants
        ]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _replace(self, record: PolygonRecord, **changes: object) -> PolygonRecord:
        updated = dataclasses.replace(record, **changes)  # type: ignore[arg-type]
        self._polygons[record.polygon_id] = updated
        return updated

    @staticmethod
    def _tenant_index(record: PolygonRecord, tenant_id: int) -> int:
        for i, tenant in enumerate(record.tenants):
            if tenant.tenant_id == tenant_id:
                return i
        raise UnknownRecordError("tenant", tenant_id)
