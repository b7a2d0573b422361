# =============================================================================
# app/server.py - HTTP Server Host
# =============================================================================
# Runs the app under uvicorn with a bounded graceful shutdown:
#
#   RUNNING --SIGINT/SIGTERM--> SHUTTING_DOWN --drained or timed out--> TERMINATED
#
# On a signal uvicorn stops accepting connections, waits for in-flight
# requests for at most SHUTDOWN_TIMEOUT_SECONDS, runs the lifespan shutdown
# and exits 0. A failed startup (e.g. MongoDB unreachable) exits 1.
#
# Usage:
#   python -m app.server
# =============================================================================

import contextlib
import logging
import signal
import sys
import threading

import uvicorn
from fastapi import FastAPI
from uvicorn.server import HANDLED_SIGNALS

from app.config import Settings, get_settings

logger = logging.getLogger(__name__)


class CateringServer(uvicorn.Server):
    """uvicorn server that logs lifecycle transitions."""

    @contextlib.contextmanager
    def capture_signals(self):
        """
        Route SIGINT/SIGTERM to handle_exit while serving.

        The previous handlers are restored afterwards and the signal is not
        re-raised, so a drained shutdown ends the process with exit code 0.
        """
        if threading.current_thread() is not threading.main_thread():
            yield
            return

        original_handlers = {sig: signal.signal(sig, self.handle_exit) for sig in HANDLED_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in original_handlers.items():
                signal.signal(sig, handler)

    def handle_exit(self, sig: int, frame) -> None:
        if not self.should_exit:
            logger.info(f"{signal.Signals(sig).name} received. Shutting down...")
        super().handle_exit(sig, frame)

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Server running on port {self.config.port}")
            logger.info("Health check → /health")


def build_server(settings: Settings, app: FastAPI | str = "app.main:app") -> CateringServer:
    """Configure uvicorn from settings."""
    config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.PORT,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT_SECONDS,
        log_level=settings.LOG_LEVEL.lower(),
        lifespan="on",
    )
    return CateringServer(config)


def serve(server: CateringServer) -> None:
    """Run until shut down. Exits 1 if startup failed, otherwise returns (exit 0)."""
    server.run()
    if not server.started:
        logger.error("Server failed to start")
        sys.exit(1)


def main() -> None:
    serve(build_server(get_settings()))


if __name__ == "__main__":
    main()
