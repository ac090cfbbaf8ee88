"""Data models.

Defines the data structures used throughout the package:
- GeoPoint, PlanarPoint, Rect, Axis, Band: geometric primitives
- OccupantAllocation: a requested share of a polygon's area
- PolygonRecord, TenantRecord, IdSequence: workspace records
- ProviderConfig: provider adapter configuration
"""

from tenant_footprint.models.allocation import OccupantAllocation
from tenant_footprint.models.geometry import (
    Axis,
    Band,
    GeoPoint,
    ModelValidationError,
    PlanarPoint,
    Rect,
    ring_from_lon_lat,
)
from tenant_footprint.models.providers import ProviderConfig
from tenant_footprint.models.records import IdSequence, PolygonRecord, TenantRecord

__all__ = [
    "Axis",
    "Band",
    "GeoPoint",
    "IdSequence",
    "ModelValidationError",
    "OccupantAllocation",
    "PlanarPoint",
    "PolygonRecord",
    "ProviderConfig",
    "Rect",
    "TenantRecord",
    "ring_from_lon_lat",
]
