"""DNS provider implementations."""

from ddnsupdater.providers.base import IPAddress, Provider
from ddnsupdater.providers.powerdns import PowerDNSProvider

__all__ = ["IPAddress", "Provider", "PowerDNSProvider"]
