# =============================================================================
# tests/slow_server.py - Server Runner for Shutdown Tests
# =============================================================================
# Runs the real uvicorn host around an app with a slow endpoint, so a test
# can signal the process while a request is in flight.
#
# Usage:
#   python -m tests.slow_server <port>
# =============================================================================

import asyncio
import sys
from unittest.mock import MagicMock

from app.config import Settings
from app.dependencies import Services
from app.main import create_app
from app.server import build_server, serve
from lib.cloudinary_client import CloudinaryClient
from lib.mongo_client import MongoConnector

SLOW_SECONDS = 2


class OfflineConnector(MongoConnector):
    """Connector that reports a reachable database without one."""

    async def connect(self) -> None:
        self.connected = True

    def close(self) -> None:
        self.connected = False


def run(port: int) -> None:
    settings = Settings(
        _env_file=None,
        NODE_ENV="test",
        HOST="127.0.0.1",
        PORT=port,
        SHUTDOWN_TIMEOUT_SECONDS=10,
        LOG_LEVEL="INFO",
    )
    services = Services(
        settings=settings,
        mongo=OfflineConnector("mongodb://offline", "catering_test", client=MagicMock()),
        media=CloudinaryClient("", "", ""),
    )
    app = create_app(settings=settings, services=services)

    @app.get("/slow")
    async def slow():
        await asyncio.sleep(SLOW_SECONDS)
        return {"done": True}

    serve(build_server(settings, app))


if __name__ == "__main__":
    run(int(sys.argv[1]))
