"""Shared test fixtures for DDNS updater tests."""

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
import yaml
from typer.testing import CliRunner

from ddnsupdater.providers.powerdns import PowerDNSProvider


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def anyio_backend() -> str:
    """Run coroutine tests on asyncio only."""
    return "asyncio"


# ============================================================================
# Provider Fixtures
# ============================================================================


@pytest.fixture
def powerdns_data() -> dict:
    """Provide a valid PowerDNS settings block."""
    return {
        "server_url": "https://dns.example.com",
        "api_key": "s3cret-api-key",
    }


@pytest.fixture
def provider(powerdns_data: dict) -> PowerDNSProvider:
    """Provide a PowerDNS provider for www.example.com."""
    return PowerDNSProvider(powerdns_data, "example.com", "www")


@pytest.fixture
def settings_file(tmp_path: Path, monkeypatch, powerdns_data: dict) -> Path:
    """Write the PowerDNS settings block to a YAML file."""
    path = tmp_path / "powerdns.yaml"
    with open(path, "w") as f:
        yaml.dump(powerdns_data, f)

    # Keep a stray .env out of the settings lookup
    monkeypatch.chdir(tmp_path)
    return path


# ============================================================================
# Mock Fixtures - HTTP
# ============================================================================


class RecordingTransport(httpx.MockTransport):
    """Mock transport keeping every request it answers."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Build a transport answering every request with a fixed response."""

    def factory(status_code: int = 204, text: str = "") -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, text=text))

    return factory
