"""Provider factory: selects the active geocoder and business lookup by name.

The factory maintains one registry per provider kind. Built-in adapters
are registered lazily on first use; additional adapters can be plugged
in with ``register_geocoder`` / ``register_business_lookup``.

Usage::

    from tenant_footprint.providers.factory import get_business_lookup, get_geocoder

    geocoder = get_geocoder(config.geocoder, config.geocoder_config())
    address = geocoder.reverse(centroid)

The provider names are read from ``FOOTPRINT_GEOCODER`` and
``FOOTPRINT_BUSINESS_LOOKUP`` via ``FootprintConfig``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from tenant_footprint.models.providers import ProviderConfig
from tenant_footprint.providers.base import BusinessLookup, Geocoder, ProviderError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Provider name constants
# ---------------------------------------------------------------------------

STATIC_GEOCODER = "static"
NOMINATIM = "nominatim"
SIMULATED_BUSINESS_LOOKUP = "simulated"
HTTP_SEARCH = "http_search"

# ---------------------------------------------------------------------------
# Lazy-import adapter registries
# ---------------------------------------------------------------------------

# Each entry maps a provider name to a callable that returns the adapter
# *class*, so httpx is only imported when a networked adapter is selected.

_GEOCODER_REGISTRY: dict[str, Callable[[], type[Geocoder]]] = {}
_BUSINESS_LOOKUP_REGISTRY: dict[str, Callable[[], type[BusinessLookup]]] = {}

_P = TypeVar("_P", Geocoder, BusinessLookup)


def _register_builtin_adapters() -> None:
    """Register the built-in adapters. Each entry is a lazy import thunk."""

    def _static() -> type[Geocoder]:
        from tenant_footprint.providers.offline import StaticGeocoder

        return StaticGeocoder

    def _nominatim() -> type[Geocoder]:
        from tenant_footprint.providers.nominatim import NominatimGeocoder

        return NominatimGeocoder

    def _simulated() -> type[BusinessLookup]:
        from tenant_footprint.providers.offline import SimulatedBusinessLookup

        return SimulatedBusinessLookup

    def _http_search() -> type[BusinessLookup]:
        from tenant_footprint.providers.http_search import HttpBusinessLookup

        return HttpBusinessLookup

    _GEOCODER_REGISTRY.setdefault(STATIC_GEOCODER, _static)
    _GEOCODER_REGISTRY.setdefault(NOMINATIM, _nominatim)
    _BUSINESS_LOOKUP_REGISTRY.setdefault(SIMULATED_BUSINESS_LOOKUP, _simulated)
    _BUSINESS_LOOKUP_REGISTRY.setdefault(HTTP_SEARCH, _http_search)


def _ensure_registry() -> None:
    """Initialise the adapter registries once (idempotent)."""
    if STATIC_GEOCODER not in _GEOCODER_REGISTRY or (
        SIMULATED_BUSINESS_LOOKUP not in _BUSINESS_LOOKUP_REGISTRY
    ):
        _register_builtin_adapters()


def _create(
    registry: dict[str, Callable[[], type[_P]]],
    kind: str,
    name: str,
    config: ProviderConfig | None,
) -> _P:
    _ensure_registry()

    loader = registry.get(name)
    if loader is None:
        available = ", ".join(sorted(registry))
        msg = f"Unknown {kind}: {name!r}. Available: {available}"
        raise ProviderError(provider=name, message=msg)

    adapter_cls = loader()

    if config is None:
        config = ProviderConfig(name=name)
    elif config.name != name:
        msg = f"ProviderConfig.name {config.name!r} does not match requested {kind} {name!r}"
        raise ProviderError(provider=name, message=msg)

    logger.info("Creating %s | provider=%s", kind, name)
    return adapter_cls(config)


def _register(
    registry: dict[str, Callable[[], type[_P]]],
    kind: str,
    name: str,
    loader: Callable[[], type[_P]],
) -> None:
    if not name:
        msg = "Provider name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    registry[name] = loader
    logger.debug("Registered %s adapter: %s", kind, name)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_geocoder(name: str, loader: Callable[[], type[Geocoder]]) -> None:
    """Register a custom geocoder adapter.

    Args:
        name: Provider name (e.g. ``"my_geocoder"``).
        loader: A zero-argument callable that returns the adapter class.

    Raises:
        ValueError: If the name is empty.
    """
    _register(_GEOCODER_REGISTRY, "geocoder", name, loader)


def register_business_lookup(name: str, loader: Callable[[], type[BusinessLookup]]) -> None:
    """Register a custom business lookup adapter.

    Raises:
        ValueError: If the name is empty.
    """
    _register(_BUSINESS_LOOKUP_REGISTRY, "business lookup", name, loader)


def get_geocoder(name: str, config: ProviderConfig | None = None) -> Geocoder:
    """Create and return a geocoder instance.

    Args:
        name: Provider identifier (e.g. ``"static"``, ``"nominatim"``).
        config: Optional ``ProviderConfig``. If ``None``, a default config
            with just the provider name is used.

    Raises:
        ProviderError: If the named provider is not registered or the
            config names a different provider.
    """
    return _create(_GEOCODER_REGISTRY, "geocoder", name, config)


def get_business_lookup(name: str, config: ProviderConfig | None = None) -> BusinessLookup:
    """Create and return a business lookup instance.

    Raises:
        ProviderError: If the named provider is not registered or the
            config names a different provider.
    """
    return _create(_BUSINESS_LOOKUP_REGISTRY, "business lookup", name, config)


def list_geocoders() -> list[str]:
    """Return the names of all registered geocoder adapters."""
    _ensure_registry()
    return sorted(_GEOCODER_REGISTRY)


def list_business_lookups() -> list[str]:
    """Return the names of all registered business lookup adapters."""
    _ensure_registry()
    return sorted(_BUSINESS_LOOKUP_REGISTRY)
