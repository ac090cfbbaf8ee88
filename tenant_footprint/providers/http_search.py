"""HTTP business search adapter.

Queries a JSON business-search endpoint with the polygon's address and
returns the business names it recommends.

Request:
    ``GET {api_base_url}{path}?{query_param}={address}&limit={limit}``
    where ``path`` (default ``/search``), ``query_param`` (default ``q``)
    and ``limit`` (default 10) come from ``ProviderConfig.extra_params``.

Accepted response bodies:
    - a JSON list of strings;
    - a JSON list of objects with a ``name`` key;
    - an object whose ``results`` (or ``businesses``) key holds either
      of the above.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tenant_footprint.providers._http import get_json
from tenant_footprint.providers.base import (
    BusinessLookup,
    ProviderConfigError,
    ProviderLookupError,
)

if TYPE_CHECKING:
    from tenant_footprint.models.providers import ProviderConfig

logger = logging.getLogger(__name__)

_DEFAULT_PATH = "/search"
_DEFAULT_QUERY_PARAM = "q"
_DEFAULT_LIMIT = 10
_RESULT_KEYS = ("results", "businesses")


class HttpBusinessLookup(BusinessLookup):
    """Business lookup against a configurable JSON search endpoint."""

    def __init__(self, config: ProviderConfig) -> None:
        super().__init__(config)
        if not config.api_base_url:
            msg = "api_base_url is required (set FOOTPRINT_BUSINESS_LOOKUP_URL)"
            raise ProviderConfigError(config.name, msg)
        path = config.extra_params.get("path", _DEFAULT_PATH)
        self._url = config.api_base_url.rstrip("/") + "/" + path.lstrip("/")
        self._query_param = config.extra_params.get("query_param", _DEFAULT_QUERY_PARAM)
        try:
            self._limit = int(config.extra_params.get("limit", _DEFAULT_LIMIT))
        except (TypeError, ValueError) as exc:
            msg = f"limit must be an integer, got {config.extra_params['limit']!r}"
            raise ProviderConfigError(config.name, msg) from exc

    def lookup(self, address: str) -> list[str]:
        """Search businesses near *address*.

        A blank address returns ``[]`` without a request.

        Raises:
            ProviderLookupError: On HTTP failure or an unexpected payload.
        """
        if not address.strip():
            return []

        params = {self._query_param: address, "limit": self._limit}
        payload = get_json(self.config, self._url, params)
        names = _extract_names(payload, self.name)
        logger.info(
            "Business lookup complete | provider=%s | address=%s | results=%d",
            self.name,
            address,
            len(names),
        )
        return names[: self._limit]


def _extract_names(payload: Any, provider: str) -> list[str]:
    """Pull business names out of the accepted payload shapes."""
    if isinstance(payload, dict):
        for key in _RESULT_KEYS:
            if key in payload:
                payload = payload[key]
                break
        else:
            msg = f"Response object has none of the keys {', '.join(_RESULT_KEYS)}"
            raise ProviderLookupError(provider, msg)

    if not isinstance(payload, list):
        msg = f"Unexpected business search payload: {type(payload).__name__}"
        raise ProviderLookupError(provider, msg)

    names: list[str] = []
    for item in payload:
        if isinstance(item, str):
            name = item
        elif isinstance(item, dict) and item.get("name"):
            name = str(item["name"])
        else:
            continue
        if name.strip():
            names.append(name.strip())
    return names
