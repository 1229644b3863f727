"""Cloudflare REST API client."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from dns01_cloudflare.config import CLOUDFLARE_API_URL
from dns01_cloudflare.credentials import Credentials
from dns01_cloudflare.exceptions import ApiRequestError

logger = logging.getLogger(__name__)

_USER_AGENT = "dns01-cloudflare"


class ApiClient(Protocol):
    """What the zone resolver and record manager need from an API client."""

    def make_request(self, method: str, uri: str, body: dict | None = None) -> Any: ...


class CloudflareClient:
    """Authenticated access to the Cloudflare v4 API.

    Responses use the Cloudflare envelope ``{"success", "errors", "result"}``;
    :meth:`make_request` returns ``result`` and turns everything else into an
    :class:`ApiRequestError`.
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = CLOUDFLARE_API_URL,
        timeout: int = 30,
        _http_client: httpx.Client | None = None,
    ) -> None:
        self._client = _http_client or httpx.Client(
            base_url=base_url,
            headers={
                **credentials.auth_headers(),
                "Content-Type": "application/json",
                "User-Agent": _USER_AGENT,
            },
            timeout=timeout,
        )

    def make_request(self, method: str, uri: str, body: dict | None = None) -> Any:
        """Send a request and return the ``result`` member of the response.

        Args:
            method: HTTP method.
            uri: Path relative to the API base, query string included
                (e.g. "/zones?name=example.com").
            body: JSON body, if any.

        Raises:
            ApiRequestError: On transport failure, a non-JSON response, or a
                response whose ``success`` flag is not set.
        """
        logger.debug("Cloudflare API request %s %s", method, uri)
        try:
            resp = self._client.request(method, uri, json=body)
        except httpx.HTTPError as err:
            raise ApiRequestError(method, uri, detail=str(err)) from err

        try:
            payload = resp.json()
        except ValueError as err:
            raise ApiRequestError(
                method,
                uri,
                status_code=resp.status_code,
                detail=f"invalid JSON response (HTTP {resp.status_code})",
            ) from err

        if not isinstance(payload, dict) or not payload.get("success"):
            errors = payload.get("errors") if isinstance(payload, dict) else None
            raise ApiRequestError(method, uri, errors=errors, status_code=resp.status_code)
        return payload.get("result")

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
