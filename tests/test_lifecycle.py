# =============================================================================
# tests/test_lifecycle.py - Startup, Shutdown and Server Tests
# =============================================================================
# Tests for:
# - The startup sequence (database fatal, Cloudinary non-fatal)
# - Lifespan wiring in create_app
# - The uvicorn host (drain timeout, signal logging, exit codes)
# - A real signal during an in-flight request, in a subprocess
# =============================================================================

import asyncio
import logging
import os
import signal
import socket
import subprocess
import sys
import threading
import time
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from app.dependencies import Services
from app.lifecycle import StartupReport, run_shutdown, run_startup
from app.main import create_app
from app.server import CateringServer, build_server, main
from lib.cloudinary_client import CloudinaryClient
from lib.mongo_client import DatabaseConnectionError, MongoConnector


class StubConnector(MongoConnector):
    """MongoConnector whose ping succeeds or fails on demand."""

    def __init__(self, reachable: bool = True):
        super().__init__("mongodb://stub", "catering_test", client=MagicMock())
        self.reachable = reachable
        self.closed = False

    async def connect(self) -> None:
        if not self.reachable:
            raise DatabaseConnectionError("Failed to connect to MongoDB: refused")
        self.connected = True

    def close(self) -> None:
        self.closed = True
        self.connected = False


def stub_services(settings, reachable: bool = True, cloudinary: bool = False) -> Services:
    media = CloudinaryClient("demo", "key", "secret") if cloudinary else CloudinaryClient("", "", "")
    return Services(settings=settings, mongo=StubConnector(reachable), media=media)


# =============================================================================
# Startup Sequence
# =============================================================================

class TestStartupSequence:
    """Tests for run_startup / run_shutdown."""

    def test_startup_report(self, settings):
        services = stub_services(settings, cloudinary=True)

        report = asyncio.run(run_startup(services))

        assert report == StartupReport(environment="test", database_connected=True, media_configured=True)
        assert services.mongo.connected

    def test_missing_cloudinary_only_logged(self, settings, caplog):
        services = stub_services(settings, cloudinary=False)

        with caplog.at_level(logging.ERROR):
            report = asyncio.run(run_startup(services))

        assert report.media_configured is False
        assert "Cloudinary env missing" in caplog.text

    def test_unreachable_database_aborts(self, settings):
        services = stub_services(settings, reachable=False)

        with pytest.raises(DatabaseConnectionError):
            asyncio.run(run_startup(services))

    def test_shutdown_closes_database(self, settings, caplog):
        services = stub_services(settings)

        with caplog.at_level(logging.INFO):
            asyncio.run(run_shutdown(services))

        assert services.mongo.closed
        assert "Process terminated" in caplog.text

    def test_real_connector_wraps_ping_errors(self):
        client = MagicMock()
        client.admin.command.side_effect = RuntimeError("no route to host")
        connector = MongoConnector("mongodb://nowhere", "catering", client=client)

        with pytest.raises(DatabaseConnectionError) as exc_info:
            asyncio.run(connector.connect())

        assert exc_info.value.code == "DATABASE_UNREACHABLE"
        assert "no route to host" in exc_info.value.message
        assert connector.connected is False


# =============================================================================
# Lifespan
# =============================================================================

class TestLifespan:
    """Tests for the lifespan registered by create_app."""

    def test_lifespan_runs_startup_and_shutdown(self, settings):
        services = stub_services(settings)
        app = create_app(services=services)

        with TestClient(app) as client:
            assert client.get("/health").status_code == 200
            assert app.state.startup_report.database_connected is True

        assert services.mongo.closed

    def test_lifespan_fails_when_database_unreachable(self, settings):
        app = create_app(services=stub_services(settings, reachable=False))

        with pytest.raises(DatabaseConnectionError):
            with TestClient(app):
                pass


# =============================================================================
# Server Host
# =============================================================================

class TestServer:
    """Tests for the uvicorn host."""

    def test_build_server_uses_settings(self, settings):
        app = create_app(services=stub_services(settings))
        drained = settings.model_copy(update={"PORT": 6001, "SHUTDOWN_TIMEOUT_SECONDS": 12})

        server = build_server(drained, app)

        assert isinstance(server, CateringServer)
        assert server.config.port == 6001
        assert server.config.timeout_graceful_shutdown == 12

    def test_signal_logged_once(self, settings, caplog):
        server = build_server(settings, create_app(services=stub_services(settings)))

        with caplog.at_level(logging.INFO):
            server.handle_exit(signal.SIGTERM, None)
            server.handle_exit(signal.SIGTERM, None)

        assert server.should_exit
        assert caplog.text.count("SIGTERM received. Shutting down...") == 1

    def test_main_exits_nonzero_when_startup_fails(self):
        with patch("app.server.build_server") as mock_build:
            mock_build.return_value.started = False

            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        mock_build.return_value.run.assert_called_once()

    def test_main_clean_exit(self):
        with patch("app.server.build_server") as mock_build:
            mock_build.return_value.started = True
            main()

        mock_build.return_value.run.assert_called_once()

    def test_signal_handlers_restored_without_reraising(self, settings):
        server = build_server(settings, create_app(services=stub_services(settings)))
        before = signal.getsignal(signal.SIGTERM)

        with server.capture_signals():
            assert signal.getsignal(signal.SIGTERM) == server.handle_exit
            server.handle_exit(signal.SIGTERM, None)

        assert signal.getsignal(signal.SIGTERM) == before
        assert server.should_exit


# =============================================================================
# Signal Shutdown (subprocess)
# =============================================================================

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def free_port() -> int:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def wait_until_healthy(base_url: str, proc: subprocess.Popen, timeout: float = 15.0) -> None:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if proc.poll() is not None:
            pytest.fail(f"server exited early with code {proc.returncode}")
        try:
            if httpx.get(f"{base_url}/health", timeout=1.0).status_code == 200:
                return
        except httpx.TransportError:
            pass
        time.sleep(0.1)
    pytest.fail("server did not become healthy")


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
class TestSignalShutdown:
    """Sends a real signal to a running server while a request is in flight."""

    @pytest.mark.parametrize("sig", [signal.SIGTERM, signal.SIGINT])
    def test_drains_in_flight_request_and_exits_zero(self, sig):
        port = free_port()
        base_url = f"http://127.0.0.1:{port}"
        env = {**os.environ, "LOG_LEVEL": "INFO", "PYTHONPATH": str(PROJECT_ROOT)}
        proc = subprocess.Popen(
            [sys.executable, "-m", "tests.slow_server", str(port)],
            cwd=PROJECT_ROOT,
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
        try:
            wait_until_healthy(base_url, proc)

            result = {}

            def slow_request():
                result["response"] = httpx.get(f"{base_url}/slow", timeout=15.0)

            worker = threading.Thread(target=slow_request)
            worker.start()
            time.sleep(0.5)

            proc.send_signal(sig)
            worker.join(timeout=15.0)
            output, _ = proc.communicate(timeout=20.0)
        finally:
            if proc.poll() is None:
                proc.kill()
                proc.wait()

        response = result["response"]
        assert response.status_code == 200
        assert response.json() == {"done": True}
        assert proc.returncode == 0
        assert f"{sig.name} received. Shutting down..." in output
        assert "Traceback" not in output
