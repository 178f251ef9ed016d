import logging
import time

import httpx
from pydantic import ValidationError

from core.errors import ConfigError, DecodeError, HttpError, NetworkError
from schemas.chat import ChatRequest, ChatResponse
from schemas.config import WidgetConfig
from storefront.context import SessionContextManager

logger = logging.getLogger(__name__)


class MessageDispatcher:
    """Sends shopper messages to the conversational backend. No retries, no backoff."""

    def __init__(self, config: WidgetConfig, context: SessionContextManager, http_client: httpx.AsyncClient):
        self.config = config
        self.context = context
        self._client = http_client

    async def send(self, utterance: str) -> ChatResponse | None:
        """
        Send one message and return the decoded response.

        Blank input is a no-op and returns None. The context token is always refreshed
        before the request body is built, so a login or session rotation between
        opening the panel and sending is picked up.

        Raises ConfigError, HttpError, NetworkError or DecodeError.
        """
        message = utterance.strip()
        if not message:
            return None

        missing = self.config.missing_fields()
        if missing:
            logger.error(f"Missing configuration ({', '.join(missing)}), message not sent")
            raise ConfigError(missing)

        await self.context.refresh()

        request = ChatRequest(
            message=message,
            swAccessKey=self.config.swAccessKey,
            shopUrl=self.config.shopUrl,
            swContextToken=self.context.current(),
        )
        return await self._post(request)

    async def _post(self, request: ChatRequest) -> ChatResponse:
        start_time = time.perf_counter()
        logger.info(f"Sending chat message to {self.config.apiEndpoint}")

        try:
            response = await self._client.post(
                self.config.apiEndpoint,
                headers={"Content-Type": "application/json"},
                json=request.model_dump(exclude_none=True),
                follow_redirects=True,
            )
        except httpx.DecodingError as e:
            raise DecodeError(f"Undecodable chat response body: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            raise HttpError(response.status_code)

        try:
            payload = ChatResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise DecodeError(f"Unexpected chat response body: {e}") from e

        duration = time.perf_counter() - start_time
        logger.info(f"Chat response of type '{payload.type}' received in {duration:.3f}s")
        return payload
