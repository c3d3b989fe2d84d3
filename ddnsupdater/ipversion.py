"""IP version policy for a managed record."""

from enum import Enum


class IPVersion(str, Enum):
    """Which record types an updater instance manages."""

    IP4_OR_IP6 = "ipv4 or ipv6"
    IP4 = "ipv4"
    IP6 = "ipv6"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "IPVersion":
        """Parse a user supplied IP version string.

        An empty value means both versions are managed.
        """
        normalized = value.strip().lower()
        if normalized == "":
            return cls.IP4_OR_IP6
        for version in cls:
            if version.value == normalized:
                return version
        raise ValueError(f"IP version is not valid: {value!r}")
