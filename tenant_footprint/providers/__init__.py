"""Geocoding and business lookup provider adapters.

Implements the provider-agnostic adapter pattern (Strategy pattern):
- Geocoder: polygon centroid → postal address
- BusinessLookup: postal address → business recommendations

Built-in adapters:
- static / simulated: offline, deterministic (defaults)
- nominatim: OpenStreetMap Nominatim reverse geocoding over HTTP
- http_search: JSON business search endpoint over HTTP

The active providers are selected via configuration, enabling
zero-code-change switching between offline and networked lookups.
"""

from tenant_footprint.providers.base import (
    BusinessLookup,
    Geocoder,
    ProviderConfigError,
    ProviderError,
    ProviderLookupError,
)
from tenant_footprint.providers.factory import (
    HTTP_SEARCH,
    NOMINATIM,
    SIMULATED_BUSINESS_LOOKUP,
    STATIC_GEOCODER,
    get_business_lookup,
    get_geocoder,
    list_business_lookups,
    list_geocoders,
    register_business_lookup,
    register_geocoder,
)

__all__ = [
    "HTTP_SEARCH",
    "NOMINATIM",
    "SIMULATED_BUSINESS_LOOKUP",
    "STATIC_GEOCODER",
    "BusinessLookup",
    "Geocoder",
    "ProviderConfigError",
    "ProviderError",
    "ProviderLookupError",
    "get_business_lookup",
    "get_geocoder",
    "list_business_lookups",
    "list_geocoders",
    "register_business_lookup",
    "register_geocoder",
]
