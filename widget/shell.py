import logging
from enum import Enum

import httpx

from core.errors import ConfigError, DispatchError
from rendering.blocks import TextBlock
from rendering.message_log import MessageLog, Sender
from rendering.renderer import ResponseRenderer
from schemas.config import WidgetConfig
from storefront.context import SessionContextManager
from storefront.dispatcher import MessageDispatcher
from storefront.mirror import TokenMirror
from widget.theme import build_theme

logger = logging.getLogger(__name__)

APOLOGY = "Sorry, I encountered an error. Please try again."


class PanelState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class ChatWidget:
    """
    State shell of the chat widget.

    Wires the session manager, dispatcher and renderer together and keeps the bits of
    UI state an adapter needs to draw: panel state, input focus, the typing indicator
    and the message log.
    """

    def __init__(
        self,
        config: WidgetConfig,
        http_client: httpx.AsyncClient | None = None,
        mirror: TokenMirror | None = None,
    ):
        self.config = config
        self._owns_client = http_client is None
        # No timeout: a stuck request keeps the typing indicator up
        self._client = http_client or httpx.AsyncClient(timeout=None, follow_redirects=True)

        self.context = SessionContextManager(config, self._client, mirror=mirror)
        self.dispatcher = MessageDispatcher(config, self.context, self._client)
        self.renderer = ResponseRenderer(self.context)
        self.log = MessageLog()
        self.theme = build_theme(config)

        self.active = False
        self.state = PanelState.CLOSED
        self.input_focused = False
        self.typing_indicator = False
        self.sending = False

    async def activate(self) -> bool:
        """Start the widget. Returns False and leaves it inert when disabled or misconfigured."""
        if not self.config.enabled:
            logger.info("Chat widget disabled by configuration")
            return False

        missing = self.config.missing_fields()
        if missing:
            logger.error(f"{ConfigError(missing)}; chat widget stays inert")
            return False

        self.active = True
        await self.context.initialize()
        return True

    async def toggle(self):
        if self.state == PanelState.CLOSED:
            self.state = PanelState.OPEN
            self.input_focused = True
            # The shopper may have logged in or out since the page loaded
            await self.context.refresh()
        else:
            self.state = PanelState.CLOSED
            self.input_focused = False

    async def submit(self, text: str):
        message = text.strip()
        if not message:
            return

        self.log.append(Sender.USER, TextBlock(message))
        # Re-entrant submits are not guarded; the first completion hides the indicator
        self.typing_indicator = True
        self.sending = True
        try:
            response = await self.dispatcher.send(message)
        except (ConfigError, DispatchError) as e:
            self.typing_indicator = False
            self.sending = False
            self.log.append(Sender.BOT, TextBlock(APOLOGY))
            logger.error(f"Chat error: {type(e).__name__}: {e}")
            return

        self.typing_indicator = False
        self.sending = False
        self.renderer.apply(response, self.log)

    async def close(self):
        """Release the HTTP client if the widget created it."""
        if self._owns_client:
            await self._client.aclose()
