"""
Application entry point.

Configures logging and error tracking, then builds the app via the factory.
"""

import logging

import sentry_sdk

from vaxplan.config.settings import get_settings
from vaxplan.core.app_factory import create_app

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

# No DSN means the SDK stays disabled
sentry_sdk.init(
    dsn=settings.SENTRY_DSN,
    send_default_pii=False,
    environment=settings.ENVIRONMENT,
)

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "vaxplan.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.DEBUG,
    )
