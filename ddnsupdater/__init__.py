"""Dynamic DNS record updater."""

__version__ = "0.1.0"
