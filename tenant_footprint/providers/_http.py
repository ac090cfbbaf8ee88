"""JSON-over-HTTP plumbing shared by the networked adapters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from tenant_footprint.providers.base import ProviderLookupError

if TYPE_CHECKING:
    from tenant_footprint.models.providers import ProviderConfig

logger = logging.getLogger(__name__)

# Status codes worth retrying besides 5xx.
_RETRYABLE_STATUS = frozenset({408, 429})


def get_json(config: ProviderConfig, url: str, params: dict[str, Any]) -> Any:
    """GET *url* and decode the JSON body.

    Raises:
        ProviderLookupError: On transport errors (retryable), error status
            codes (retryable for 5xx, 408 and 429), or a body that is not
            JSON.
    """
    headers = {"User-Agent": config.user_agent, "Accept": "application/json"}
    try:
        with httpx.Client(timeout=config.timeout_s, follow_redirects=True) as client:
            response = client.get(url, params=params, headers=headers)
            response.raise_for_status()
            payload = response.json()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        retryable = status >= 500 or status in _RETRYABLE_STATUS
        logger.warning(
            "Provider request rejected | provider=%s | url=%s | status=%d | retryable=%s",
            config.name,
            url,
            status,
            retryable,
        )
        msg = f"HTTP {status} from {url}"
        raise ProviderLookupError(config.name, msg, retryable=retryable) from exc
    except httpx.HTTPError as exc:
        logger.warning(
            "Provider request failed | provider=%s | url=%s | error=%s",
            config.name,
            url,
            exc,
        )
        msg = f"Request to {url} failed: {exc}"
        raise ProviderLookupError(config.name, msg, retryable=True) from exc
    except ValueError as exc:
        msg = f"Response from {url} is not valid JSON: {exc}"
        raise ProviderLookupError(config.name, msg) from exc

    logger.debug("Provider request succeeded | provider=%s | url=%s", config.name, url)
    return payload
