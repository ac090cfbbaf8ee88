"""Tests for the in-memory workspace and its id sequences."""

from __future__ import annotations

import unittest

import pytest

from tenant_footprint.core.config import FootprintConfig
from tenant_footprint.core.exceptions import ValidationError
from tenant_footprint.core.workspace import UnknownRecordError, Workspace
from tenant_footprint.models.allocation import OccupantAllocation
from tenant_footprint.models.geometry import Axis, GeoPoint, ModelValidationError
from tenant_footprint.models.records import IdSequence

TRIANGLE = [
    GeoPoint(lat=36.7370, lng=-119.7880),
    GeoPoint(lat=36.7372, lng=-119.7862),
    GeoPoint(lat=36.7381, lng=-119.7858),
]


class TestIdSequence(unittest.TestCase):
    """IdSequence hands out increasing ids."""

    def test_starts_at_one(self) -> None:
        seq = IdSequence()
        assert seq.next_id() == 1
        assert seq.next_id() == 2

    def test_custom_start(self) -> None:
        seq = IdSequence(start=100)
        assert seq.peek == 100
        assert seq.next_id() == 100
        assert seq.peek == 101


class TestPolygons:
    """Polygon lifecycle."""

    def test_add_polygon_assigns_ids_in_order(self, workspace: Workspace) -> None:
        first = workspace.add_polygon(TRIANGLE)
        second = workspace.add_polygon(TRIANGLE, name="Annex")

        assert first.polygon_id == 1
        assert second.polygon_id == 2
        assert first.name == "Polygon 1"
        assert second.name == "Annex"
        assert [p.polygon_id for p in workspace.polygons()] == [1, 2]
        assert len(workspace) == 2

    def test_ring_is_stored_as_tuple(self, workspace: Workspace) -> None:
        record = workspace.add_polygon(iter(TRIANGLE))
        assert record.ring == tuple(TRIANGLE)
        assert record.vertex_count == 3

    def test_ids_are_not_reused_after_removal(self, workspace: Workspace) -> None:
        first = workspace.add_polygon(TRIANGLE)
        workspace.remove_polygon(first.polygon_id)
        second = workspace.add_polygon(TRIANGLE)

        assert second.polygon_id == 2
        assert first.polygon_id not in workspace

    def test_updates_replace_record(self, workspace: Workspace) -> None:
        record = workspace.add_polygon(TRIANGLE)
        workspace.rename_polygon(record.polygon_id, "Main St Plaza")
        workspace.set_address(record.polygon_id, "1 Main St")
        workspace.update_ring(record.polygon_id, TRIANGLE[:2])

        current = workspace.polygon(record.polygon_id)
        assert current.name == "Main St Plaza"
        assert current.address == "1 Main St"
        assert current.vertex_count == 2
        assert record.name == "Polygon 1"

    def test_default_axis_and_set_axis(self) -> None:
        ws = Workspace(default_axis=Axis.VERTICAL)
        record = ws.add_polygon(TRIANGLE)
        assert record.axis is Axis.VERTICAL

        updated = ws.set_axis(record.polygon_id, "Horizontal")
        assert updated.axis is Axis.HORIZONTAL

    def test_from_config_uses_default_axis(self) -> None:
        ws = Workspace.from_config(FootprintConfig(default_axis="vertical"))
        assert len(ws) == 0
        assert ws.add_polygon(TRIANGLE).axis is Axis.VERTICAL

    def test_set_axis_rejects_unknown_value(self, workspace: Workspace) -> None:
        record = workspace.add_polygon(TRIANGLE)
        with pytest.raises(ModelValidationError):
            workspace.set_axis(record.polygon_id, "diagonal")

    def test_unknown_polygon_raises(self, workspace: Workspace) -> None:
        with pytest.raises(UnknownRecordError) as excinfo:
            workspace.polygon(42)

        err = excinfo.value
        assert isinstance(err, KeyError)
        assert isinstance(err, ValidationError)
        assert err.kind == "polygon"
        assert err.record_id == 42
        assert str(err) == "Unknown polygon id: 42"
        assert err.to_error_dict()["code"] == "UNKNOWN_RECORD"


class TestTenants:
    """Tenant lifecycle and allocation building."""

    def test_tenant_ids_are_global(self, workspace: Workspace) -> None:
        a = workspace.add_polygon(TRIANGLE)
        b = workspace.add_polygon(TRIANGLE)

        t1 = workspace.add_tenant(a.polygon_id, "Cafe", "1000")
        t2 = workspace.add_tenant(b.polygon_id, "Salon", "800")
        t3 = workspace.add_tenant(a.polygon_id, "Bank", "")

        assert (t1.tenant_id, t2.tenant_id, t3.tenant_id) == (1, 2, 3)
        assert [t.name for t in workspace.polygon(a.polygon_id).tenants] == ["Cafe", "Bank"]

    def test_allocations_parse_size_text(self, workspace: Workspace) -> None:
        record = workspace.add_polygon(TRIANGLE)
        workspace.add_tenant(record.polygon_id, "Cafe", "1,000")
        workspace.add_tenant(record.polygon_id, "Salon", "abc")
        workspace.add_tenant(record.polygon_id, "Bank", "  ")

        assert workspace.allocations(record.polygon_id) == [
            OccupantAllocation(occupant_id=1, size=1000.0),
            OccupantAllocation(occupant_id=2, size=0.0),
            OccupantAllocation(occupant_id=3, size=0.0),
        ]

    def test_update_tenant_keeps_position(self, workspace: Workspace) -> None:
        record = workspace.add_polygon(TRIANGLE)
        first = workspace.add_tenant(record.polygon_id, "Cafe", "100")
        workspace.add_tenant(record.polygon_id, "Salon", "200")

        updated = workspace.update_tenant(record.polygon_id, first.tenant_id, size_text="150")

        tenants = workspace.polygon(record.polygon_id).tenants
        assert tenants[0] == updated
        assert updated.name == "Cafe"
        assert updated.size_text == "150"

    def test_remove_tenant(self, workspace: Workspace) -> None:
        record = workspace.add_polygon(TRIANGLE)
        first = workspace.add_tenant(record.polygon_id, "Cafe", "100")
        second = workspace.add_tenant(record.polygon_id, "Salon", "200")

        removed = workspace.remove_tenant(record.polygon_id, first.tenant_id)

        assert removed == first
        assert workspace.polygon(record.polygon_id).tenants == (second,)

    def test_unknown_tenant_raises(self, workspace: Workspace) -> None:
        record = workspace.add_polygon(TRIANGLE)
        with pytest.raises(UnknownRecordError, match="tenant"):
            workspace.update_tenant(record.polygon_id, 99, name="Ghost")

    def test_add_tenant_to_unknown_polygon_raises(self, workspace: Workspace) -> None:
        with pytest.raises(UnknownRecordError):
            workspace.add_tenant(7, "Cafe", "100")

    def test_removing_polygon_drops_its_tenants(self, workspace: Workspace) -> None:
        record = workspace.add_polygon(TRIANGLE)
        workspace.add_tenant(record.polygon_id, "Cafe", "100")
        removed = workspace.remove_polygon(record.polygon_id)

        assert len(removed.tenants) == 1
        with pytest.raises(UnknownRecordError):
            workspace.allocations(record.polygon_id)
