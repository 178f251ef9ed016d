import logging

from rendering.blocks import TextBlock
from rendering.message_log import MessageLog, Sender
from rendering.strategies import STRATEGIES, ResponseType
from schemas.chat import ChatResponse
from storefront.context import SessionContextManager

logger = logging.getLogger(__name__)


class ResponseRenderer:
    """Turns chat responses into message log entries."""

    def __init__(self, context: SessionContextManager):
        self.context = context

    def apply(self, payload: ChatResponse, log: MessageLog):
        # 1. Rotated session token
        token = payload.context_token
        if token:
            self.context.update(token)

        # 2. Human readable message
        if payload.message:
            log.append(Sender.BOT, TextBlock(payload.message))

        # 3. At most one structured block
        response_type = ResponseType(payload.type)
        if response_type.value != payload.type:
            logger.debug(f"Unknown response type {payload.type!r}, rendering as text")

        block = STRATEGIES[response_type](payload.data)
        if block is not None:
            log.append(Sender.BOT, block)
