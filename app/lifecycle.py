# =============================================================================
# app/lifecycle.py - Startup and Shutdown Sequence
# =============================================================================
# Startup runs in a fixed order:
#   1. connect the database (ping)   -> fatal on failure
#   2. configure image-host credentials -> missing credentials only logged
#
# Middleware and routes are registered by create_app(); the socket is
# bound by app/server.py once startup has succeeded.
# =============================================================================

import logging
from dataclasses import dataclass

from app.dependencies import Services
from lib.mongo_client import DatabaseConnectionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartupReport:
    """Outcome of the startup sequence."""
    environment: str
    database_connected: bool
    media_configured: bool


async def run_startup(services: Services) -> StartupReport:
    """
    Bring up external dependencies.

    Returns:
        StartupReport describing what came up

    Raises:
        DatabaseConnectionError: If MongoDB is unreachable
    """
    settings = services.settings
    logger.info(f"Starting Catering API in {settings.NODE_ENV} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    try:
        await services.mongo.connect()
    except DatabaseConnectionError as e:
        logger.error(f"Startup aborted: {e}")
        raise

    media_configured = services.media.configure()

    report = StartupReport(
        environment=settings.NODE_ENV,
        database_connected=True,
        media_configured=media_configured,
    )
    logger.info(f"Startup complete: {report}")
    return report


async def run_shutdown(services: Services) -> None:
    """Release external resources once in-flight requests have drained."""
    logger.info("Shutting down Catering API")
    services.mongo.close()
    logger.info("Process terminated")
