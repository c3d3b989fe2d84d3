"""Tests for the CLI."""

import json
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from ddnsupdater import __version__
from ddnsupdater.cli import app
from ddnsupdater.commands import powerdns as powerdns_commands

REAL_ASYNC_CLIENT = httpx.AsyncClient


@pytest.fixture
def patched_client(make_transport):
    """Route the CLI's HTTP client through a recording transport."""

    def patch_with(status_code: int = 204, text: str = ""):
        transport = make_transport(status_code, text)

        def client_factory(**kwargs):
            return REAL_ASYNC_CLIENT(transport=transport, **kwargs)

        return transport, patch.object(
            powerdns_commands.httpx, "AsyncClient", side_effect=client_factory
        )

    return patch_with


class TestVersion:
    """Tests for the version command."""

    def test_version(self, runner: CliRunner):
        """Test version output."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestUpdate:
    """Tests for powerdns update."""

    def test_update_success(self, runner: CliRunner, settings_file: Path, patched_client):
        """Test a successful update sends one PATCH and reports it."""
        transport, client_patch = patched_client(204)
        with client_patch as mock_client:
            result = runner.invoke(
                app,
                [
                    "powerdns", "update",
                    "--settings", str(settings_file),
                    "--domain", "example.com",
                    "--owner", "home",
                    "--ip", "203.0.113.7",
                ],
            )

        assert result.exit_code == 0, result.stdout
        assert "A record updated" in result.stdout
        assert mock_client.call_args.kwargs["timeout"] == 10.0

        request = transport.requests[0]
        assert request.method == "PATCH"
        rrset = json.loads(request.content)["rrsets"][0]
        assert rrset["name"] == "home.example.com."
        assert rrset["records"][0]["content"] == "203.0.113.7"

    def test_update_ipv6(self, runner: CliRunner, settings_file: Path, patched_client):
        """Test an IPv6 address updates the AAAA record."""
        transport, client_patch = patched_client(204)
        with client_patch:
            result = runner.invoke(
                app,
                [
                    "powerdns", "update",
                    "-s", str(settings_file),
                    "-d", "example.com",
                    "--ip", "2001:db8::1",
                ],
            )

        assert result.exit_code == 0, result.stdout
        assert "AAAA record updated" in result.stdout
        assert json.loads(transport.requests[0].content)["rrsets"][0]["type"] == "AAAA"

    def test_update_timeout_from_environment(
        self, runner: CliRunner, settings_file: Path, patched_client, monkeypatch
    ):
        """Test DDNS_HTTP_TIMEOUT reaches the HTTP client."""
        monkeypatch.setenv("DDNS_HTTP_TIMEOUT", "2.5")
        _, client_patch = patched_client(204)
        with client_patch as mock_client:
            result = runner.invoke(
                app,
                ["powerdns", "update", "-s", str(settings_file), "-d", "example.com", "--ip", "203.0.113.7"],
            )

        assert result.exit_code == 0, result.stdout
        assert mock_client.call_args.kwargs["timeout"] == 2.5

    def test_update_rejected(self, runner: CliRunner, settings_file: Path, patched_client):
        """Test a non-204 answer exits with an error."""
        _, client_patch = patched_client(401, "Unauthorized")
        with client_patch:
            result = runner.invoke(
                app,
                ["powerdns", "update", "-s", str(settings_file), "-d", "example.com", "--ip", "203.0.113.7"],
            )

        assert result.exit_code == 1
        assert "✗" in result.stdout
        assert "401" in result.stdout

    def test_update_invalid_ip(self, runner: CliRunner, settings_file: Path):
        """Test a malformed IP address exits before building the provider."""
        result = runner.invoke(
            app,
            ["powerdns", "update", "-s", str(settings_file), "-d", "example.com", "--ip", "not-an-ip"],
        )

        assert result.exit_code == 1
        assert "✗" in result.stdout

    def test_update_missing_settings_file(self, runner: CliRunner, tmp_path: Path, monkeypatch):
        """Test a missing settings file exits with an error."""
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app,
            [
                "powerdns", "update",
                "-s", str(tmp_path / "missing.yaml"),
                "-d", "example.com",
                "--ip", "203.0.113.7",
            ],
        )

        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_update_missing_api_key(self, runner: CliRunner, settings_file: Path):
        """Test a settings file without an API key exits with an error."""
        settings_file.write_text("server_url: https://dns.example.com\n")
        result = runner.invoke(
            app,
            ["powerdns", "update", "-s", str(settings_file), "-d", "example.com", "--ip", "203.0.113.7"],
        )

        assert result.exit_code == 1
        assert "API key is not set" in result.stdout

    def test_update_invalid_ip_version(self, runner: CliRunner, settings_file: Path):
        """Test an unknown IP version exits with an error."""
        result = runner.invoke(
            app,
            [
                "powerdns", "update",
                "-s", str(settings_file),
                "-d", "example.com",
                "--ip-version", "ipv5",
                "--ip", "203.0.113.7",
            ],
        )

        assert result.exit_code == 1
        assert "IP version is not valid" in result.stdout


class TestShow:
    """Tests for powerdns show."""

    def test_show_table(self, runner: CliRunner, settings_file: Path):
        """Test the row is shown as a table."""
        result = runner.invoke(
            app,
            ["powerdns", "show", "-s", str(settings_file), "-d", "example.com", "-o", "www", "--ip-version", "ipv4"],
        )

        assert result.exit_code == 0, result.stdout
        assert "www.example.com" in result.stdout
        assert "powerdns" in result.stdout
        assert "ipv4" in result.stdout

    def test_show_html(self, runner: CliRunner, settings_file: Path):
        """Test the row is printed as HTML."""
        result = runner.invoke(
            app,
            ["powerdns", "show", "-s", str(settings_file), "-d", "example.com", "-o", "www", "--html"],
        )

        assert result.exit_code == 0, result.stdout
        assert result.stdout.strip() == (
            '<tr><td><a href="http://www.example.com">www.example.com</a></td>'
            "<td>www</td>"
            '<td><a href="https://doc.powerdns.com/authoritative/http-api/">PowerDNS</a></td>'
            "<td>ipv4 or ipv6</td></tr>"
        )

    def test_show_invalid_domain(self, runner: CliRunner, settings_file: Path):
        """Test an invalid domain exits with an error."""
        result = runner.invoke(app, ["powerdns", "show", "-s", str(settings_file), "-d", "bad_domain"])

        assert result.exit_code == 1
        assert "bad_domain" in result.stdout
