import logging
import os
from typing import Any, Mapping

from dotenv import load_dotenv

from schemas.config import WidgetConfig

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def load_config() -> WidgetConfig:
    """Build the widget configuration from the environment (and a local .env file)."""
    load_dotenv()
    config = WidgetConfig(
        enabled=os.getenv("AGENTIC_AI_ENABLED", "false").lower() in _TRUTHY,
        apiEndpoint=os.getenv("AGENTIC_AI_API_ENDPOINT"),
        swAccessKey=os.getenv("AGENTIC_AI_ACCESS_KEY"),
        shopUrl=os.getenv("AGENTIC_AI_SHOP_URL"),
        contextEndpoint=os.getenv("AGENTIC_AI_CONTEXT_ENDPOINT"),
        primaryColor=os.getenv("AGENTIC_AI_PRIMARY_COLOR", ""),
        position=os.getenv("AGENTIC_AI_POSITION", ""),
    )
    logger.debug(f"Loaded widget configuration for shop {config.shopUrl}")
    return config


def config_from_host(host_config: Mapping[str, Any] | None) -> WidgetConfig:
    """Snapshot a host-supplied configuration object. A missing object yields a disabled widget."""
    return WidgetConfig.model_validate(dict(host_config or {}))
