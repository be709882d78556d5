"""Main entry point for the Wilson chat service."""

import logging
import sys

import uvicorn
from dotenv import load_dotenv

from .api import create_app
from .config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the chat API with uvicorn."""
    load_dotenv()
    settings = get_settings()

    logger.info(f"Starting Wilson chat service on {settings.host}:{settings.port}")
    logger.info(f"Model: {settings.openai_model} via {settings.openai_api_base}")
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; model calls will fail")

    app = create_app(settings)
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")


if __name__ == "__main__":
    main()
