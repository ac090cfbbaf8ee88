"""Application configuration loaded from environment variables.

All configuration values have sensible defaults: with no environment set
the package runs fully offline (static geocoder, simulated business
lookup).

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range, so bad configuration is caught at startup rather than
    on the first preview render.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from tenant_footprint.core.constants import (
    AERIAL_TILE_LAYER,
    DEFAULT_VIEWPORT_MARGIN_PX,
    DEFAULT_VIEWPORT_SIZE_PX,
    TILE_URL_TEMPLATES,
    resolve_tile_url,
)
from tenant_footprint.core.exceptions import FootprintError
from tenant_footprint.models.geometry import Axis, ModelValidationError
from tenant_footprint.models.providers import DEFAULT_TIMEOUT_S, ProviderConfig


class ConfigValidationError(FootprintError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class FootprintConfig:
    """Immutable application configuration.

    Attributes:
        geocoder: Active reverse geocoder (``static`` or ``nominatim``).
        geocoder_api_url: Base URL override for the geocoder.
        business_lookup: Active business lookup (``simulated`` or ``http_search``).
        business_lookup_api_url: Base URL for the business lookup.
        http_timeout_s: Timeout applied to every provider HTTP call.
        viewport_size_px: Side length of the square preview viewport.
        viewport_margin_px: Inset on every side of the preview viewport.
        default_axis: Split axis for newly drawn polygons.
        tile_layer: Map tile layer (``aerial`` or ``standard``).
    """

    geocoder: str = "static"
    geocoder_api_url: str = ""
    business_lookup: str = "simulated"
    business_lookup_api_url: str = ""
    http_timeout_s: float = DEFAULT_TIMEOUT_S
    viewport_size_px: float = DEFAULT_VIEWPORT_SIZE_PX
    viewport_margin_px: float = DEFAULT_VIEWPORT_MARGIN_PX
    default_axis: str = Axis.HORIZONTAL.value
    tile_layer: str = AERIAL_TILE_LAYER

    @classmethod
    def from_env(cls) -> FootprintConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or unknown.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``FOOTPRINT_HTTP_TIMEOUT_S=abc``).
        """
        config = cls(
            geocoder=os.getenv("FOOTPRINT_GEOCODER", "static"),
            geocoder_api_url=os.getenv("FOOTPRINT_GEOCODER_URL", ""),
            business_lookup=os.getenv("FOOTPRINT_BUSINESS_LOOKUP", "simulated"),
            business_lookup_api_url=os.getenv("FOOTPRINT_BUSINESS_LOOKUP_URL", ""),
            http_timeout_s=float(os.getenv("FOOTPRINT_HTTP_TIMEOUT_S", str(DEFAULT_TIMEOUT_S))),
            viewport_size_px=float(
                os.getenv("FOOTPRINT_VIEWPORT_SIZE_PX", str(DEFAULT_VIEWPORT_SIZE_PX))
            ),
            viewport_margin_px=float(
                os.getenv("FOOTPRINT_VIEWPORT_MARGIN_PX", str(DEFAULT_VIEWPORT_MARGIN_PX))
            ),
            default_axis=os.getenv("FOOTPRINT_DEFAULT_AXIS", Axis.HORIZONTAL.value),
            tile_layer=os.getenv("FOOTPRINT_TILE_LAYER", AERIAL_TILE_LAYER),
        )
        _validate(config)
        return config

    @property
    def axis(self) -> Axis:
        """The default split axis as an ``Axis`` member."""
        return Axis.parse(self.default_axis)

    @property
    def tile_url(self) -> str:
        """URL template of the configured tile layer."""
        return resolve_tile_url(self.tile_layer)

    def geocoder_config(self) -> ProviderConfig:
        """Build the ``ProviderConfig`` for the active geocoder."""
        return ProviderConfig(
            name=self.geocoder,
            api_base_url=self.geocoder_api_url,
            timeout_s=self.http_timeout_s,
        )

    def business_lookup_config(self) -> ProviderConfig:
        """Build the ``ProviderConfig`` for the active business lookup."""
        return ProviderConfig(
            name=self.business_lookup,
            api_base_url=self.business_lookup_api_url,
            timeout_s=self.http_timeout_s,
        )


def _validate(config: FootprintConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.geocoder:
        raise ConfigValidationError("FOOTPRINT_GEOCODER", config.geocoder, "must not be empty")

    if not config.business_lookup:
        raise ConfigValidationError(
            "FOOTPRINT_BUSINESS_LOOKUP",
            config.business_lookup,
            "must not be empty",
        )

    if config.http_timeout_s <= 0:
        raise ConfigValidationError(
            "FOOTPRINT_HTTP_TIMEOUT_S",
            config.http_timeout_s,
            "must be > 0 (seconds)",
        )

    if config.viewport_size_px <= 0:
        raise ConfigValidationError(
            "FOOTPRINT_VIEWPORT_SIZE_PX",
            config.viewport_size_px,
            "must be > 0 (pixels)",
        )

    if config.viewport_margin_px < 0 or 2 * config.viewport_margin_px >= config.viewport_size_px:
        raise ConfigValidationError(
            "FOOTPRINT_VIEWPORT_MARGIN_PX",
            config.viewport_margin_px,
            f"must be >= 0 and less than half the viewport size ({config.viewport_size_px})",
        )

    try:
        Axis.parse(config.default_axis)
    except ModelValidationError as exc:
        raise ConfigValidationError(
            "FOOTPRINT_DEFAULT_AXIS",
            config.default_axis,
            "must be 'horizontal' or 'vertical'",
        ) from exc

    if config.tile_layer.strip().lower() not in TILE_URL_TEMPLATES:
        raise ConfigValidationError(
            "FOOTPRINT_TILE_LAYER",
            config.tile_layer,
            f"must be one of {', '.join(sorted(TILE_URL_TEMPLATES))}",
        )
