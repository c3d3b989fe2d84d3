"""CLI entry point for the DDNS updater."""

import typer
from rich.console import Console

from ddnsupdater import __version__
from ddnsupdater.commands import powerdns

app = typer.Typer(
    name="ddns-updater",
    help="Point DNS records at a new public IP address.",
    no_args_is_help=True,
)
console = Console()

# Register sub-commands
app.add_typer(powerdns.app, name="powerdns", help="Manage records on a PowerDNS server")


@app.command()
def version() -> None:
    """Show the updater version."""
    console.print(f"ddns-updater v{__version__}")


@app.callback()
def main() -> None:
    """DDNS updater - keep DNS records pointed at your public IP."""
    pass


if __name__ == "__main__":
    app()
