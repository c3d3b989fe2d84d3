"""Abstract base class for DNS providers."""

from abc import ABC, abstractmethod
from ipaddress import IPv4Address, IPv6Address, IPv6Network

import httpx

from ddnsupdater.ipversion import IPVersion
from ddnsupdater.models import HTMLRow

IPAddress = IPv4Address | IPv6Address


class Provider(ABC):
    """Abstract DNS provider interface.

    Instances are immutable once constructed; the HTTP client is borrowed
    for each update and never stored.
    """

    @property
    @abstractmethod
    def domain(self) -> str:
        """The parent zone name (e.g., "example.com")."""
        pass

    @property
    @abstractmethod
    def owner(self) -> str:
        """The record name within the zone ("@" for the zone root)."""
        pass

    @property
    @abstractmethod
    def ip_version(self) -> IPVersion:
        """Which record types this instance manages."""
        pass

    @property
    @abstractmethod
    def ipv6_suffix(self) -> IPv6Network | None:
        """Optional interface identifier used to compose IPv6 addresses."""
        pass

    @abstractmethod
    def proxied(self) -> bool:
        """Whether the provider proxies traffic for the record."""
        pass

    @abstractmethod
    def build_domain_name(self) -> str:
        """Build the fully qualified name used for display."""
        pass

    @abstractmethod
    def html(self) -> HTMLRow:
        """Describe the provider as a status table row."""
        pass

    @abstractmethod
    async def update(self, client: httpx.AsyncClient, ip: IPAddress) -> IPAddress:
        """Point the record at a new IP address.

        Args:
            client: Caller owned HTTP client (timeouts, pooling)
            ip: The IP address to point to

        Returns:
            The IP address now held by the record

        Raises:
            ProviderError: on any failure; nothing is retried
        """
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass
