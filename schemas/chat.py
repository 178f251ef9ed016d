from typing import Any

from pydantic import BaseModel, Field

CONTEXT_TOKEN_KEY = "swContextToken"


class ChatRequest(BaseModel):
    message: str = Field(..., description="The user's query or input message.", examples=["Find me a red t-shirt"])
    swAccessKey: str = Field(..., description="Shopware Sales Channel Access Key.", examples=["SWJAVW8YDRJ5RJN2D3I2WJ5WGA"])
    shopUrl: str = Field(..., description="Base URL of the shop.", examples=["http://localhost:8000"])
    swContextToken: str | None = Field(None, description="Shopware Context Token (Session/Cart ID).", examples=["a1b2c3d4e5f6..."])


class ChatResponse(BaseModel):
    message: str | None = Field(None, description="The AI's response message.")
    type: str | None = Field("text", description="Type of content: text, product_list, product_detail, cart_list, order_list.")
    suggestions: list[str] | None = Field(None, description="List of suggested follow-up questions.")
    data: Any = Field(None, description="Structured data payload corresponding to the type.")
    context: dict | None = Field(None, description="Updated context to be passed back in the next request.")

    @property
    def context_token(self) -> str | None:
        """The rotated session token carried by the response, if any."""
        if not self.context:
            return None
        token = self.context.get(CONTEXT_TOKEN_KEY)
        if isinstance(token, str) and token:
            return token
        return None
