from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PRIMARY_COLOR = "#007bff"
CONTEXT_ROUTE = "/agentic-ai/context"


class Position(str, Enum):
    BOTTOM_RIGHT = "bottom-right"
    BOTTOM_LEFT = "bottom-left"


class WidgetConfig(BaseModel):
    """Host-supplied settings. Immutable for the lifetime of a widget."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(False, description="Gates whether the widget initializes at all.")
    apiEndpoint: str | None = Field(None, description="Chat backend URL.", examples=["http://localhost:8000/chat/"])
    swAccessKey: str | None = Field(None, description="Shopware Sales Channel Access Key.", examples=["SWJAVW8YDRJ5RJN2D3I2WJ5WGA"])
    shopUrl: str | None = Field(None, description="Base URL of the shop.", examples=["http://localhost:8000"])
    contextEndpoint: str | None = Field(None, description="Token endpoint. Defaults to the storefront context route of shopUrl.")
    primaryColor: str = Field(DEFAULT_PRIMARY_COLOR, description="CSS color applied as a theme variable.")
    position: Position = Field(Position.BOTTOM_RIGHT, description="Placement of the toggle and the panel.")

    @field_validator("primaryColor", mode="before")
    @classmethod
    def _default_color(cls, value):
        return value or DEFAULT_PRIMARY_COLOR

    @field_validator("position", mode="before")
    @classmethod
    def _default_position(cls, value):
        # Anything other than bottom-left is laid out like bottom-right
        if value == Position.BOTTOM_LEFT.value:
            return Position.BOTTOM_LEFT
        return Position.BOTTOM_RIGHT

    @property
    def token_endpoint(self) -> str | None:
        if self.contextEndpoint:
            return self.contextEndpoint
        if not self.shopUrl:
            return None
        return self.shopUrl.rstrip("/") + CONTEXT_ROUTE

    def missing_fields(self) -> list[str]:
        """Names of the fields every network call requires but which are unset."""
        required = {
            "apiEndpoint": self.apiEndpoint,
            "swAccessKey": self.swAccessKey,
            "shopUrl": self.shopUrl,
        }
        return [name for name, value in required.items() if not value]
