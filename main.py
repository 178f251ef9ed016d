import asyncio
import logging
import os

from dotenv import load_dotenv

from cli.terminal import run
from core.config import load_config
from core.logging import setup_logging
from storefront.mirror import FileTokenMirror
from widget.shell import ChatWidget

# Load env vars
load_dotenv()


def main():
    setup_logging()
    logger = logging.getLogger(__name__)

    config = load_config()
    if not config.enabled:
        logger.info("AGENTIC_AI_ENABLED is not set, nothing to do")
        return

    mirror_path = os.getenv("AGENTIC_AI_MIRROR_PATH")
    mirror = FileTokenMirror(mirror_path) if mirror_path else None

    asyncio.run(run(ChatWidget(config, mirror=mirror)))


if __name__ == "__main__":
    main()
