import logging

import httpx

from core.errors import TokenFetchError
from schemas.config import WidgetConfig
from storefront.mirror import MemoryTokenMirror, TokenMirror

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Content-Type": "application/json",
    "Cache-Control": "no-store",
    "Pragma": "no-cache",
}


class SessionContextManager:
    """
    Owns the Shopware context token of the shopper's storefront session.

    The token is fetched from the storefront context endpoint, which relies on the
    session cookie carried by the shared HTTP client. Fetch failures are soft: they
    are logged and the previous token is kept.
    """

    def __init__(self, config: WidgetConfig, http_client: httpx.AsyncClient, mirror: TokenMirror | None = None):
        self.config = config
        self._client = http_client
        self.mirror = mirror or MemoryTokenMirror()
        self._token: str | None = None

    def current(self) -> str | None:
        return self._token

    def update(self, token: str | None):
        """Replace the current token wholesale. Empty values are ignored."""
        if not token:
            return
        self._token = token
        self.mirror.write(token)

    async def initialize(self):
        await self.refresh()
        if self._token:
            logger.info(f"Context token initialized: {self._token}")

    async def refresh(self):
        """Re-fetch the token. Concurrent refreshes are fine: the last response wins."""
        missing = self.config.missing_fields()
        if missing:
            logger.error(f"Missing configuration ({', '.join(missing)}), not fetching context token")
            return

        try:
            token = await self._fetch_token()
        except TokenFetchError as e:
            logger.warning(f"Failed to fetch context token: {e}")
            return

        if token:
            self.update(token)
        else:
            logger.warning("Context endpoint returned no token, keeping the previous one")

    async def _fetch_token(self) -> str | None:
        url = self.config.token_endpoint
        try:
            response = await self._client.get(url, headers=NO_CACHE_HEADERS, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TokenFetchError(f"{type(e).__name__}: {e}") from e

        if response.status_code != 200:
            raise TokenFetchError(f"status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise TokenFetchError(f"undecodable body: {e}") from e

        if not isinstance(data, dict):
            raise TokenFetchError("body is not a JSON object")
        token = data.get("token")
        return token if isinstance(token, str) else None
