import logging
import uvicorn
from .config import settings
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def run() -> None:
    """Serve the application on the configured host and port until stopped."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    logger.info("Starting MovieHub on %s:%d", settings.HOST, settings.PORT)
    uvicorn.run(
        "moviehub.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
