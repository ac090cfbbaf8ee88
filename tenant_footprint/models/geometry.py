"""Geometric primitives shared by the area estimator and the subdivider.

- ``GeoPoint``: latitude/longitude pair in degrees
- ``PlanarPoint``: ``(x, y)`` in a local unit (metres or viewport pixels)
- ``Rect``: axis-aligned rectangle, origin plus width and height
- ``Axis``: split axis selector for subdivision
- ``Band``: one occupant's slice of a rectangle

Design notes:
- All models are frozen dataclasses; the geometry functions never mutate
  their inputs.
- ``Rect`` accepts zero or negative extents. Those are computation
  artifacts, not errors, and are filtered at render time
  (``Rect.is_drawable``).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tenant_footprint.core.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


class ModelValidationError(ValueError, ValidationError):
    """Raised when a domain model is constructed from invalid input.

    Attributes:
        model: Name of the model class that failed validation.
        field_name: The field that violated the invariant.
        value: The invalid value.
    """

    default_stage = "model_validation"
    default_code = "MODEL_VALIDATION_FAILED"

    def __init__(self, model: str, field_name: str, value: object, message: str) -> None:
        self.model = model
        self.field_name = field_name
        self.value = value
        formatted = f"{model}.{field_name}={value!r}: {message}"
        ValidationError.__init__(self, formatted)


# ---------------------------------------------------------------------------
# Points
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A geographic coordinate in degrees (WGS 84).

    Attributes:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
    """

    lat: float
    lng: float

    def to_lon_lat(self) -> tuple[float, float]:
        """Return ``(lon, lat)``, the axis order used by the map widget and Shapely."""
        return (self.lng, self.lat)


@dataclass(frozen=True, slots=True)
class PlanarPoint:
    """A point in a local planar frame."""

    x: float
    y: float


def ring_from_lon_lat(coords: Iterable[Sequence[float]]) -> list[GeoPoint]:
    """Convert ``(lon, lat)`` pairs into a ring of ``GeoPoint``.

    The drawing surface reports vertices in ``(lon, lat)`` order; the ring
    keeps the input order since it defines winding and edge connectivity.
    """
    return [GeoPoint(lat=float(c[1]), lng=float(c[0])) for c in coords]


# ---------------------------------------------------------------------------
# Rectangles and bands
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle.

    Attributes:
        x: Left edge.
        y: Top edge (screen coordinates, y grows downwards).
        width: Extent along x. May be zero or negative.
        height: Extent along y. May be zero or negative.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def is_drawable(self) -> bool:
        """Whether the rectangle has a strictly positive area."""
        return self.width > 0 and self.height > 0

    def to_svg_path(self) -> str:
        """Render the rectangle as a closed SVG path.

        Returns an empty string for non-drawable rectangles.
        """
        if not self.is_drawable:
            return ""
        return f"M{self.x:g} {self.y:g}h{self.width:g}v{self.height:g}h{-self.width:g}Z"


class Axis(enum.Enum):
    """Direction along which a rectangle is sliced into bands.

    Values:
        HORIZONTAL: Bands span the full width and stack top to bottom.
        VERTICAL:   Bands span the full height and stack left to right.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, value: str | Axis) -> Axis:
        """Parse an axis toggle value (case-insensitive).

        Raises:
            ModelValidationError: If the value names no axis.
        """
        if isinstance(value, Axis):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ModelValidationError(
            "Axis", "value", value, "must be 'horizontal' or 'vertical'"
        )


@dataclass(frozen=True, slots=True)
class Band:
    """One occupant's proportional slice of a bounding rectangle.

    Attributes:
        occupant_id: Opaque identifier copied from the allocation.
        rect: The computed rectangle, possibly with zero extent.
        path: SVG path for the rectangle, or ``""`` when nothing is drawn.
    """

    occupant_id: object
    rect: Rect
    path: str = ""

    @property
    def is_drawable(self) -> bool:
        """Whether the band renders anything."""
        return bool(self.path)
