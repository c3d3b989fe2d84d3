"""PowerDNS record commands."""

import asyncio
from ipaddress import IPv6Network, ip_address
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.table import Table

from ddnsupdater.config import load_provider_block, load_settings
from ddnsupdater.errors import APIError, ProviderError
from ddnsupdater.ipversion import IPVersion
from ddnsupdater.log import setup_logging
from ddnsupdater.providers import IPAddress, PowerDNSProvider
from ddnsupdater.templates import render_row

app = typer.Typer()
console = Console()

SETTINGS_HELP = "YAML file holding server_url, api_key and optionally server_id and ttl"


def get_provider(
    settings_path: Path,
    domain: str,
    owner: str,
    ip_version: str,
    ipv6_suffix: str | None,
) -> PowerDNSProvider:
    """Build a PowerDNS provider from a settings file, exiting on bad input."""
    try:
        version = IPVersion.parse(ip_version)
        suffix = IPv6Network(ipv6_suffix, strict=False) if ipv6_suffix else None
        block = load_provider_block(settings_path)
        return PowerDNSProvider(block, domain, owner, version, suffix)
    except (ProviderError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)


async def run_update(
    provider: PowerDNSProvider, ip: IPAddress, timeout: float
) -> IPAddress:
    """Send one update with a client owned for the duration of the call."""
    async with httpx.AsyncClient(timeout=timeout) as client:
        return await provider.update(client, ip)


@app.command()
def update(
    settings_path: Path = typer.Option(..., "--settings", "-s", help=SETTINGS_HELP),
    domain: str = typer.Option(..., "--domain", "-d", help="Zone name, e.g. example.com"),
    owner: str = typer.Option("@", "--owner", "-o", help="Record name, @ for the zone root"),
    ip_version: str = typer.Option("", "--ip-version", help="ipv4, ipv6 or 'ipv4 or ipv6'"),
    ipv6_suffix: str | None = typer.Option(None, "--ipv6-suffix", help="IPv6 interface identifier"),
    ip: str = typer.Option(..., "--ip", help="IP address the record should point to"),
) -> None:
    """Point a record at a new IP address."""
    settings = load_settings()
    setup_logging(settings.log_level)

    try:
        target_ip = ip_address(ip)
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    provider = get_provider(settings_path, domain, owner, ip_version, ipv6_suffix)

    console.print(f"[bold]Updating {provider.build_domain_name()}...[/bold]")
    console.print(f"  IP: {target_ip}")

    try:
        new_ip = asyncio.run(run_update(provider, target_ip, settings.http_timeout))
    except APIError as e:
        console.print(f"[red]✗[/red] PowerDNS rejected the update: {e}")
        raise typer.Exit(1)
    except ProviderError as e:
        console.print(f"[red]✗[/red] Failed to update record: {e}")
        raise typer.Exit(1)

    record_type = "AAAA" if new_ip.version == 6 else "A"
    console.print(
        f"[green]✓[/green] {record_type} record updated: {provider.build_domain_name()} → {new_ip}"
    )


@app.command()
def show(
    settings_path: Path = typer.Option(..., "--settings", "-s", help=SETTINGS_HELP),
    domain: str = typer.Option(..., "--domain", "-d", help="Zone name, e.g. example.com"),
    owner: str = typer.Option("@", "--owner", "-o", help="Record name, @ for the zone root"),
    ip_version: str = typer.Option("", "--ip-version", help="ipv4, ipv6 or 'ipv4 or ipv6'"),
    ipv6_suffix: str | None = typer.Option(None, "--ipv6-suffix", help="IPv6 interface identifier"),
    html: bool = typer.Option(False, "--html", help="Print the status row as HTML"),
) -> None:
    """Show how a configured record is described."""
    provider = get_provider(settings_path, domain, owner, ip_version, ipv6_suffix)

    if html:
        typer.echo(render_row(provider.html()))
        return

    table = Table()
    table.add_column("Domain")
    table.add_column("Owner")
    table.add_column("Provider")
    table.add_column("IP version")
    table.add_row(
        provider.build_domain_name(),
        provider.owner,
        provider.NAME,
        str(provider.ip_version),
    )
    console.print(table)
