"""Provider abstract base classes.

Defines the contracts for the two external lookups the annotation flow
depends on. The orchestrator interacts exclusively with these interfaces;
it never knows which concrete adapter is behind them.

- ``Geocoder.reverse(point)``       : polygon centroid to postal address.
- ``BusinessLookup.lookup(address)``: address to business recommendations.

Each concrete adapter receives a ``ProviderConfig`` carrying the API URL,
timeout and provider-specific parameters.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from tenant_footprint.core.exceptions import FootprintError

if TYPE_CHECKING:
    from tenant_footprint.models.geometry import GeoPoint
    from tenant_footprint.models.providers import ProviderConfig


class _ConfiguredProvider:
    """Shared constructor and config accessors for all adapters."""

    def __init__(self, config: ProviderConfig) -> None:
        self._config = config

    @property
    def name(self) -> str:
        """Return the provider name from configuration."""
        return self._config.name

    @property
    def config(self) -> ProviderConfig:
        """Return the provider configuration (read-only)."""
        return self._config


class Geocoder(_ConfiguredProvider, abc.ABC):
    """Abstract base class for reverse geocoding adapters.

    Example usage::

        geocoder = get_geocoder("nominatim")
        address = geocoder.reverse(GeoPoint(lat=36.7378, lng=-119.7871))
    """

    @abc.abstractmethod
    def reverse(self, point: GeoPoint) -> str:
        """Resolve *point* to a human-readable postal address.

        Returns:
            The address, or ``""`` when the provider knows none.

        Raises:
            ProviderError: On transient or permanent API errors.
        """


class BusinessLookup(_ConfiguredProvider, abc.ABC):
    """Abstract base class for business recommendation adapters."""

    @abc.abstractmethod
    def lookup(self, address: str) -> list[str]:
        """Return business names relevant to *address*, best match first.

        Returns:
            Possibly empty list of business names.

        Raises:
            ProviderError: On transient or permanent API errors.
        """


# ---------------------------------------------------------------------------
# Provider exceptions
# ---------------------------------------------------------------------------


class ProviderError(FootprintError):
    """Base exception for provider adapter errors.

    Attributes:
        provider: Name of the provider that raised the error.
        message: Human-readable error description.
        retryable: Whether the caller should retry the operation.
    """

    default_stage = "provider"
    default_code = "PROVIDER_ERROR"

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        retryable: bool = False,
    ) -> None:
        self.provider = provider
        super().__init__(
            message,
            retryable=retryable,
            code=self.default_code,
            stage=self.default_stage,
        )

    def __str__(self) -> str:
        return f"[{self.provider}] {self.message}"


class ProviderConfigError(ProviderError):
    """The adapter cannot run with the configuration it was given."""

    default_code = "PROVIDER_CONFIG_INVALID"

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(provider, message, retryable=False)


class ProviderLookupError(ProviderError):
    """An HTTP lookup failed or returned an unusable payload."""

    default_code = "PROVIDER_LOOKUP_FAILED"
