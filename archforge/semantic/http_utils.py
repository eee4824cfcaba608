"""Shared HTTP helpers for completion providers."""

import logging
from typing import Any, Dict, Optional

import requests

from ..errors import ProviderError, ProviderResponseError, ProviderTimeoutError

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT = 10


def post_json(
    url: str,
    payload: Dict[str, Any],
    *,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 90,
) -> Any:
    """
    POST `payload` once and return the decoded JSON body.

    There is no retry: one call issues at most one request. The session is
    closed on every exit path.

    `timeout` bounds connecting (capped at CONNECT_TIMEOUT) and each socket
    read separately, as requests does; it is not a deadline for the whole
    exchange, so a provider trickling bytes can run past it.
    """
    timeouts = (min(CONNECT_TIMEOUT, timeout), timeout)
    with requests.Session() as session:
        try:
            response = session.post(url, json=payload, headers=headers, timeout=timeouts)
        except requests.Timeout as exc:
            raise ProviderTimeoutError(f"Completion request timed out after {timeout:g}s.") from exc
        except requests.RequestException as exc:
            raise ProviderError(f"Completion request failed: {exc}") from exc

        if not response.ok:
            logger.info("[CALL] Provider returned %s: %s", response.status_code, response.text[:500])
            raise ProviderError(
                f"Completion request failed ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ProviderResponseError("Provider response body is not JSON.", status_code=response.status_code) from exc
