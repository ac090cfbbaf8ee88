"""Shared pytest fixtures for the Tenant Footprint test suite."""

from __future__ import annotations

import math

import pytest

from tenant_footprint.core.workspace import Workspace
from tenant_footprint.models.geometry import GeoPoint

# ---------------------------------------------------------------------------
# Reference polygons
# ---------------------------------------------------------------------------

FRESNO_CENTER = GeoPoint(lat=36.7378, lng=-119.7871)

# Degrees per metre on the tangent plane used by the area estimator.
_METRES_PER_DEG_LAT = math.pi / 180 * 6_378_137.0


def rectangle_ring(center: GeoPoint, width_m: float, height_m: float) -> list[GeoPoint]:
    """Counter-clockwise rectangle of *width_m* x *height_m* centred on *center*."""
    half_lat = height_m / 2 / _METRES_PER_DEG_LAT
    half_lng = width_m / 2 / (_METRES_PER_DEG_LAT * math.cos(math.radians(center.lat)))
    return [
        GeoPoint(lat=center.lat - half_lat, lng=center.lng - half_lng),
        GeoPoint(lat=center.lat - half_lat, lng=center.lng + half_lng),
        GeoPoint(lat=center.lat + half_lat, lng=center.lng + half_lng),
        GeoPoint(lat=center.lat + half_lat, lng=center.lng - half_lng),
    ]


@pytest.fixture()
def fresno_rectangle() -> list[GeoPoint]:
    """A 100 m x 50 m rectangle near Fresno, CA (~53,800 sq ft)."""
    return rectangle_ring(FRESNO_CENTER, 100.0, 50.0)


@pytest.fixture()
def workspace() -> Workspace:
    """An empty workspace."""
    return Workspace()


@pytest.fixture()
def make_rectangle():
    """Factory fixture building metric rectangles around a centre point."""
    return rectangle_ring
