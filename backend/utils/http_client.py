import logging
from typing import Any

import httpx

from config import settings

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def get_client() -> httpx.AsyncClient:
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=settings.request_timeout_seconds,
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        )
    return _client


async def close_client():
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


async def request_json(
    url: str,
    params: dict[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any | None:
    """GET a URL once and return the parsed JSON body.

    Any non-2xx status, network error or unparseable body is logged and
    reported as None. There are no retries.
    """
    client = client or get_client()
    try:
        response = await client.get(url, params=params)
        if not response.is_success:
            logger.error(
                "Request failed: HTTP %s %s for %s",
                response.status_code, response.reason_phrase, url,
            )
            return None
        return response.json()
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        logger.error("Request failed for %s: %s", url, e)
        return None
