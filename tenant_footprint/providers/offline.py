"""Offline adapters for development and tests.

- ``StaticGeocoder`` formats the centroid itself as the "address".
- ``SimulatedBusinessLookup`` returns deterministic recommendations picked
  from a fixed catalogue by hashing the address, so the same address
  always yields the same list across processes.

Neither adapter performs I/O; both are the defaults when no provider is
configured.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

from tenant_footprint.providers.base import BusinessLookup, Geocoder, ProviderConfigError

if TYPE_CHECKING:
    from tenant_footprint.models.geometry import GeoPoint
    from tenant_footprint.models.providers import ProviderConfig

BUSINESS_CATALOGUE: tuple[str, ...] = (
    "Coffee Shop",
    "Dental Office",
    "Fitness Studio",
    "Hair Salon",
    "Urgent Care Clinic",
    "Pharmacy",
    "Pizza Restaurant",
    "Bank Branch",
    "Dry Cleaner",
    "Pet Supply Store",
    "Tax Preparation Office",
    "Bakery",
)

_DEFAULT_RESULT_COUNT = 3


class StaticGeocoder(Geocoder):
    """Geocoder that reports the coordinates as the address."""

    def reverse(self, point: GeoPoint) -> str:
        return f"{point.lat:.5f}, {point.lng:.5f}"


class SimulatedBusinessLookup(BusinessLookup):
    """Deterministic stand-in for a business search service.

    ``extra_params["count"]`` sets the number of results (default 3,
    capped at the catalogue size).
    """

    def __init__(self, config: ProviderConfig) -> None:
        super().__init__(config)
        try:
            count = int(config.extra_params.get("count", _DEFAULT_RESULT_COUNT))
        except (TypeError, ValueError) as exc:
            msg = f"count must be an integer, got {config.extra_params['count']!r}"
            raise ProviderConfigError(config.name, msg) from exc
        self._count = max(0, min(count, len(BUSINESS_CATALOGUE)))

    def lookup(self, address: str) -> list[str]:
        if not address.strip():
            return []
        digest = hashlib.sha256(address.strip().lower().encode("utf-8")).digest()
        start = int.from_bytes(digest[:4], "big") % len(BUSINESS_CATALOGUE)
        return [
            BUSINESS_CATALOGUE[(start + i) % len(BUSINESS_CATALOGUE)]
            for i in range(self._count)
        ]
