"""Tests for the subdivision preview and annotation flows."""

from __future__ import annotations

import logging
import unittest
from unittest.mock import MagicMock

import pytest

from tenant_footprint.core.config import FootprintConfig
from tenant_footprint.core.workspace import UnknownRecordError, Workspace
from tenant_footprint.models.allocation import OccupantAllocation
from tenant_footprint.models.geometry import Axis, GeoPoint, Rect
from tenant_footprint.models.providers import ProviderConfig
from tenant_footprint.orchestrators.preview import (
    AnnotationError,
    annotate_polygon,
    annotate_workspace_polygon,
    build_subdivision_preview,
    polygon_centroid,
    preview_workspace_polygon,
)
from tenant_footprint.providers.base import BusinessLookup, Geocoder, ProviderLookupError
from tenant_footprint.providers.offline import SimulatedBusinessLookup, StaticGeocoder
from tests.conftest import FRESNO_CENTER, rectangle_ring

# 100 m x 50 m on the tangent plane, in square feet.
FRESNO_AREA_SQ_FT = 5000.0 * 10.7639


# ---------------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------------


class TestBuildSubdivisionPreview:
    def test_two_equal_tenants_split_the_viewport(self, workspace: Workspace) -> None:
        polygon = workspace.add_polygon(rectangle_ring(FRESNO_CENTER, 100.0, 50.0))
        half = FRESNO_AREA_SQ_FT / 2
        allocations = [OccupantAllocation("a", half), OccupantAllocation("b", half)]

        preview = build_subdivision_preview(polygon, allocations)

        assert preview.area_sq_ft == pytest.approx(FRESNO_AREA_SQ_FT, rel=1e-6)
        assert preview.axis is Axis.HORIZONTAL
        assert len(preview.outline) == 4
        assert preview.bounds is not None
        assert preview.bounds.x == pytest.approx(10.0)
        assert preview.bounds.width == pytest.approx(180.0)
        assert [b.occupant_id for b in preview.bands] == ["a", "b"]
        assert preview.bands[0].rect.height == pytest.approx(90.0, rel=1e-6)
        assert preview.bands[1].rect.y == pytest.approx(100.0, rel=1e-6)
        assert not preview.is_over_allocated
        assert preview.unallocated_sq_ft == pytest.approx(0.0, abs=FRESNO_AREA_SQ_FT * 1e-9)

    def test_axis_override(self, fresno_rectangle: list[GeoPoint], workspace: Workspace) -> None:
        polygon = workspace.add_polygon(fresno_rectangle)
        preview = build_subdivision_preview(
            polygon, [OccupantAllocation(1, FRESNO_AREA_SQ_FT / 4)], axis=Axis.VERTICAL
        )
        assert preview.axis is Axis.VERTICAL
        band = preview.bands[0]
        assert band.rect.width == pytest.approx(45.0, rel=1e-6)
        assert band.rect.height == pytest.approx(180.0, rel=1e-6)

    def test_over_allocation_is_reported_not_rejected(
        self,
        fresno_rectangle: list[GeoPoint],
        workspace: Workspace,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        polygon = workspace.add_polygon(fresno_rectangle)
        allocations = [
            OccupantAllocation("a", FRESNO_AREA_SQ_FT),
            OccupantAllocation("b", FRESNO_AREA_SQ_FT),
        ]

        with caplog.at_level(logging.WARNING, logger="tenant_footprint.orchestrators.preview"):
            preview = build_subdivision_preview(polygon, allocations)

        assert preview.is_over_allocated
        assert preview.unallocated_sq_ft == 0.0
        assert preview.allocated_sq_ft == pytest.approx(2 * FRESNO_AREA_SQ_FT)
        # The overflow band is placed past the bounds rather than shrunk.
        assert len(preview.drawable_bands) == 2
        assert preview.bands[1].rect.y == pytest.approx(190.0, rel=1e-6)
        assert "exceed polygon area" in caplog.text

    def test_degenerate_ring_yields_empty_bands(self, workspace: Workspace) -> None:
        polygon = workspace.add_polygon([GeoPoint(lat=1.0, lng=1.0), GeoPoint(lat=2.0, lng=2.0)])
        preview = build_subdivision_preview(polygon, [OccupantAllocation("a", 100.0)])
        assert preview.area_sq_ft == 0.0
        assert preview.drawable_bands == []
        assert preview.bands[0].path == ""

    def test_empty_ring_uses_default_bounds(self, workspace: Workspace) -> None:
        polygon = workspace.add_polygon([])
        preview = build_subdivision_preview(polygon, [])
        assert preview.outline == ()
        assert preview.bounds == Rect(10.0, 10.0, 180.0, 180.0)
        assert preview.bands == ()


class TestPreviewWorkspacePolygon:
    def test_uses_tenant_sizes(self, fresno_rectangle: list[GeoPoint], workspace: Workspace) -> None:
        polygon = workspace.add_polygon(fresno_rectangle)
        first = workspace.add_tenant(polygon.polygon_id, "Cafe", "26,909.75")
        second = workspace.add_tenant(polygon.polygon_id, "Vacant", "")

        preview = preview_workspace_polygon(workspace, polygon.polygon_id)

        assert [b.occupant_id for b in preview.bands] == [first.tenant_id, second.tenant_id]
        assert preview.bands[0].is_drawable
        assert not preview.bands[1].is_drawable
        assert preview.allocated_sq_ft == pytest.approx(26909.75)

    def test_uses_polygon_axis(self, fresno_rectangle: list[GeoPoint], workspace: Workspace) -> None:
        polygon = workspace.add_polygon(fresno_rectangle)
        workspace.set_axis(polygon.polygon_id, "vertical")
        assert preview_workspace_polygon(workspace, polygon.polygon_id).axis is Axis.VERTICAL

    def test_config_viewport(self, fresno_rectangle: list[GeoPoint], workspace: Workspace) -> None:
        polygon = workspace.add_polygon(fresno_rectangle)
        cfg = FootprintConfig(viewport_size_px=400.0, viewport_margin_px=20.0)
        preview = preview_workspace_polygon(workspace, polygon.polygon_id, cfg)
        assert preview.bounds is not None
        assert preview.bounds.x == pytest.approx(20.0)
        assert preview.bounds.width == pytest.approx(360.0)

    def test_unknown_polygon(self, workspace: Workspace) -> None:
        with pytest.raises(UnknownRecordError):
            preview_workspace_polygon(workspace, 99)


# ---------------------------------------------------------------------------
# Annotation
# ---------------------------------------------------------------------------


class TestPolygonCentroid:
    def test_rectangle_centroid(self, fresno_rectangle: list[GeoPoint]) -> None:
        centroid = polygon_centroid(fresno_rectangle)
        assert centroid.lat == pytest.approx(FRESNO_CENTER.lat, abs=1e-9)
        assert centroid.lng == pytest.approx(FRESNO_CENTER.lng, abs=1e-9)

    def test_collinear_falls_back_to_vertex_mean(self) -> None:
        ring = [GeoPoint(lat=0.0, lng=0.0), GeoPoint(lat=1.0, lng=1.0), GeoPoint(lat=2.0, lng=2.0)]
        assert polygon_centroid(ring) == GeoPoint(lat=1.0, lng=1.0)

    def test_single_point(self) -> None:
        assert polygon_centroid([FRESNO_CENTER]) == FRESNO_CENTER

    def test_empty_ring_raises(self) -> None:
        with pytest.raises(AnnotationError):
            polygon_centroid([])


class TestAnnotatePolygon(unittest.TestCase):
    def setUp(self) -> None:
        self.workspace = Workspace()
        self.polygon = self.workspace.add_polygon(rectangle_ring(FRESNO_CENTER, 100.0, 50.0))
        self.geocoder = StaticGeocoder(ProviderConfig(name="static"))
        self.lookup = SimulatedBusinessLookup(ProviderConfig(name="simulated"))

    def test_offline_providers(self) -> None:
        annotation = annotate_polygon(self.polygon, self.geocoder, self.lookup)
        assert annotation.polygon_id == self.polygon.polygon_id
        assert annotation.address == "36.73780, -119.78710"
        assert annotation.businesses == self.lookup.lookup(annotation.address)

    def test_no_address_skips_lookup(self) -> None:
        geocoder = MagicMock(spec=Geocoder)
        geocoder.reverse.return_value = ""
        lookup = MagicMock(spec=BusinessLookup)

        annotation = annotate_polygon(self.polygon, geocoder, lookup)

        assert annotation.address == ""
        assert annotation.businesses == []
        lookup.lookup.assert_not_called()

    def test_provider_error_propagates(self) -> None:
        geocoder = MagicMock(spec=Geocoder)
        geocoder.reverse.side_effect = ProviderLookupError("nominatim", "down", retryable=True)
        with self.assertRaises(ProviderLookupError):
            annotate_polygon(self.polygon, geocoder, self.lookup)

    def test_workspace_address_is_stored(self) -> None:
        annotation = annotate_workspace_polygon(
            self.workspace, self.polygon.polygon_id, self.geocoder, self.lookup
        )
        stored = self.workspace.polygon(self.polygon.polygon_id)
        assert stored.address == annotation.address

    def test_workspace_address_kept_when_unknown(self) -> None:
        self.workspace.set_address(self.polygon.polygon_id, "2600 Fresno St")
        geocoder = MagicMock(spec=Geocoder)
        geocoder.reverse.return_value = ""

        annotate_workspace_polygon(
            self.workspace, self.polygon.polygon_id, geocoder, self.lookup
        )

        assert self.workspace.polygon(self.polygon.polygon_id).address == "2600 Fresno St"
