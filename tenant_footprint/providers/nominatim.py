"""OpenStreetMap Nominatim reverse geocoding adapter.

Resolves a polygon centroid to a postal address via the Nominatim
``/reverse`` endpoint (``format=jsonv2``). The public instance requires a
descriptive ``User-Agent``; set ``ProviderConfig.user_agent`` accordingly.

Configuration:
    The API URL defaults to ``https://nominatim.openstreetmap.org``.
    Override via ``ProviderConfig.api_base_url`` for a self-hosted
    instance. ``extra_params["zoom"]`` sets the address detail level
    (default 18, building).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tenant_footprint.providers._http import get_json
from tenant_footprint.providers.base import Geocoder, ProviderLookupError

if TYPE_CHECKING:
    from tenant_footprint.models.geometry import GeoPoint
    from tenant_footprint.models.providers import ProviderConfig

logger = logging.getLogger(__name__)

_DEFAULT_NOMINATIM_URL = "https://nominatim.openstreetmap.org"
_DEFAULT_ZOOM = "18"


class NominatimGeocoder(Geocoder):
    """Reverse geocoder backed by an OSM Nominatim server."""

    def __init__(self, config: ProviderConfig) -> None:
        super().__init__(config)
        self._base_url = (config.api_base_url or _DEFAULT_NOMINATIM_URL).rstrip("/")

    def reverse(self, point: GeoPoint) -> str:
        """Resolve *point* to Nominatim's ``display_name``.

        Returns ``""`` when Nominatim reports no address at the location.

        Raises:
            ProviderLookupError: On HTTP failure or an unexpected payload.
        """
        params = {
            "format": "jsonv2",
            "lat": f"{point.lat:.7f}",
            "lon": f"{point.lng:.7f}",
            "zoom": self.config.extra_params.get("zoom", _DEFAULT_ZOOM),
        }
        payload = get_json(self.config, f"{self._base_url}/reverse", params)

        if not isinstance(payload, dict):
            msg = f"Unexpected reverse geocoding payload: {type(payload).__name__}"
            raise ProviderLookupError(self.name, msg)

        if "error" in payload:
            logger.info(
                "No address found | provider=%s | lat=%.6f | lng=%.6f | detail=%s",
                self.name,
                point.lat,
                point.lng,
                payload["error"],
            )
            return ""

        return str(payload.get("display_name", ""))
