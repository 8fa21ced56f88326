"""
Backend - pure boundary to the smart tree HTTP API.
Sends one request. Classifies failure. Nothing more.
"""

import logging
from typing import Any

import httpx

from destination import BackendRequest

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Backend call failed"""
    pass


class InvalidBackendPayloadError(BackendError):
    """Backend answered with a body that is not JSON"""
    pass


async def send(client: httpx.AsyncClient, request: BackendRequest) -> httpx.Response:
    """
    Issue one backend call and wait for it.

    Does NOT:
    - Retry
    - Set its own timeout
    - Interpret the body

    Raises BackendError on transport failure or a non-2xx status.
    """
    try:
        response = await client.request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body
        )
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise BackendError(f"{request.method} {request.url} failed: {e}") from e

    logger.debug(f"{request.method} {request.url} -> {response.status_code}")
    return response


def parse_json(response: httpx.Response) -> Any:
    """Decode the body, or classify it as an invalid payload"""
    try:
        return response.json()
    except ValueError as e:
        raise InvalidBackendPayloadError(
            f"{response.request.method} {response.request.url} returned invalid JSON: {e}"
        ) from e
