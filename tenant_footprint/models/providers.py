"""Configuration model for geocoder and business lookup adapters."""

from __future__ import annotations

from dataclasses import dataclass, field

from tenant_footprint.models.geometry import ModelValidationError

DEFAULT_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "tenant-footprint/0.1"


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Configuration for a specific provider adapter.

    Attributes:
        name: Provider identifier (must match the adapter registry key).
        api_base_url: Base URL for the provider's HTTP API (empty for
            offline adapters, or to use the adapter's default).
        timeout_s: HTTP timeout in seconds.
        user_agent: ``User-Agent`` header sent with every request.
        extra_params: Provider-specific parameters.
    """

    name: str
    api_base_url: str = ""
    timeout_s: float = DEFAULT_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT
    extra_params: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ModelValidationError("ProviderConfig", "name", self.name, "must not be empty")
        if self.timeout_s <= 0:
            raise ModelValidationError("ProviderConfig", "timeout_s", self.timeout_s, "must be > 0")
