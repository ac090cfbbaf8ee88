"""Workspace records for drawn polygons and their tenants.

Records are immutable snapshots; the ``Workspace`` replaces a record
wholesale on every edit. Identifiers come from an ``IdSequence`` owned by
the workspace and are opaque to the geometry core.
"""

from __future__ import annotations

from dataclasses import dataclass

from tenant_footprint.models.geometry import Axis, GeoPoint


class IdSequence:
    """Monotonic integer identifier generator.

    Identifiers are never reused, including after the record that held
    one is removed.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> int:
        """Return the next identifier and advance the sequence."""
        value = self._next
        self._next += 1
        return value

    @property
    def peek(self) -> int:
        """The identifier the next call to ``next_id`` will return."""
        return self._next


@dataclass(frozen=True, slots=True)
class TenantRecord:
    """A tenant assigned a share of a polygon.

    Attributes:
        tenant_id: Workspace-assigned identifier.
        name: Display name entered by the user.
        size_text: Requested size exactly as typed (free text, square feet).
    """

    tenant_id: int
    name: str = ""
    size_text: str = ""


@dataclass(frozen=True, slots=True)
class PolygonRecord:
    """A polygon drawn on the map together with its annotations.

    Attributes:
        polygon_id: Workspace-assigned identifier.
        ring: Boundary vertices in drawing order.
        name: Display name.
        address: Postal address (typically from reverse geocoding).
        axis: Split axis selected for the subdivision preview.
        tenants: Tenants in the order the user listed them.
    """

    polygon_id: int
    ring: tuple[GeoPoint, ...] = ()
    name: str = ""
    address: str = ""
    axis: Axis = Axis.HORIZONTAL
    tenants: tuple[TenantRecord, ...] = ()

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the boundary ring."""
        return len(self.ring)
