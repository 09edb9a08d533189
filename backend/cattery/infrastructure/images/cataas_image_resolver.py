"""Cataas image resolver: implements the ImageResolver interface.

Asks https://cataas.com for a random cat without following the redirect,
so the stored URL points at one concrete picture instead of the
"random cat" endpoint. A timestamp query parameter defeats caching
between consecutive calls.
"""

import logging
import time
from urllib.parse import urljoin

import httpx

from cattery.application.interfaces import ImageResolver

logger = logging.getLogger(__name__)

_REDIRECT_CODES = frozenset({301, 302, 303, 307, 308})


class CataasImageResolver(ImageResolver):
    """Infrastructure adapter: one GET against the cataas ``/cat`` endpoint."""

    def __init__(
        self,
        base_url: str = "https://cataas.com",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def resolve_image_url(self) -> str | None:
        url = f"{self._base_url}/cat"
        params = {"_ts": str(int(time.time() * 1000))}

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            # Stream so a 200 response does not pull the whole image body
            async with client.stream(
                "GET", url, params=params, follow_redirects=False, timeout=self._timeout
            ) as response:
                if response.status_code in _REDIRECT_CODES:
                    location = response.headers.get("location")
                    if not location:
                        logger.warning("Cataas redirect without Location header")
                        return None
                    resolved = urljoin(str(response.url), location)
                elif response.status_code == 200:
                    resolved = str(response.url)
                else:
                    logger.warning("Cataas API response status: %d", response.status_code)
                    return None
        except httpx.HTTPError as exc:
            logger.warning("Cataas image fetch failed: %s", exc)
            return None
        finally:
            if should_close:
                await client.aclose()

        logger.info("Resolved cat image %s", resolved)
        return resolved
