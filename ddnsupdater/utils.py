"""Helpers shared by DNS provider implementations."""

import re
from collections.abc import MutableMapping

from ddnsupdater import __version__
from ddnsupdater.ipversion import IPVersion

MAX_DOMAIN_LENGTH = 253
MAX_LABEL_LENGTH = 63
MAX_BODY_LENGTH = 256

_LABEL_RE = re.compile(r"^[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$", re.IGNORECASE)


def check_domain(domain: str) -> None:
    """Check a domain name is syntactically valid.

    Args:
        domain: The domain name (e.g., "example.com")

    Raises:
        ValueError: describing the first problem found
    """
    if not domain:
        raise ValueError("domain is empty")
    if len(domain) > MAX_DOMAIN_LENGTH:
        raise ValueError(
            f"domain is longer than {MAX_DOMAIN_LENGTH} characters: {domain}"
        )

    labels = domain.split(".")
    if len(labels) < 2:
        raise ValueError(f"domain has no top level domain: {domain}")

    for label in labels:
        if not label:
            raise ValueError(f"domain has an empty label: {domain}")
        if len(label) > MAX_LABEL_LENGTH:
            raise ValueError(
                f"label {label!r} is longer than {MAX_LABEL_LENGTH} characters"
            )
        if not _LABEL_RE.match(label):
            raise ValueError(f"label {label!r} contains invalid characters")


def _is_root(owner: str) -> bool:
    return owner in ("", "@")


def build_domain_name(owner: str, domain: str) -> str:
    """Build a browsable FQDN for display ("*" becomes "any")."""
    if _is_root(owner):
        return domain
    if owner == "*":
        return f"any.{domain}"
    return f"{owner}.{domain}"


def build_url_query_hostname(owner: str, domain: str) -> str:
    """Build the hostname a provider API expects, keeping wildcards."""
    if _is_root(owner):
        return domain
    return f"{owner}.{domain}"


def to_string(domain: str, owner: str, provider: str, ip_version: IPVersion) -> str:
    return f"[domain: {domain} | owner: {owner} | provider: {provider} | ip: {ip_version}]"


def body_to_single_line(body: str, max_length: int = MAX_BODY_LENGTH) -> str:
    """Flatten a response body into one line, truncated to max_length."""
    line = " ".join(body.split())
    if len(line) > max_length:
        line = line[:max_length] + "..."
    return line


def default_user_agent() -> str:
    return f"ddns-updater/{__version__}"


def set_user_agent(headers: MutableMapping[str, str], user_agent: str | None = None) -> None:
    headers["User-Agent"] = user_agent or default_user_agent()


def set_content_type(headers: MutableMapping[str, str], content_type: str) -> None:
    headers["Content-Type"] = content_type


def set_accept(headers: MutableMapping[str, str], accept: str) -> None:
    headers["Accept"] = accept
