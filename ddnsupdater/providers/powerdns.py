"""PowerDNS DNS provider implementation."""

import logging
from collections.abc import Mapping
from ipaddress import IPv6Network
from typing import Any, Literal

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticSerializationError

from ddnsupdater.errors import (
    APIError,
    APIKeyNotSetError,
    ConfigError,
    DomainNotValidError,
    RequestBuildError,
    SettingsNotValidError,
    TransportError,
    UpdateTimeoutError,
    URLNotSetError,
    URLNotValidError,
)
from ddnsupdater.ipversion import IPVersion
from ddnsupdater.models import HTMLRow
from ddnsupdater.providers.base import IPAddress, Provider
from ddnsupdater.templates import render_link
from ddnsupdater.utils import (
    body_to_single_line,
    build_domain_name,
    build_url_query_hostname,
    check_domain,
    set_accept,
    set_content_type,
    set_user_agent,
    to_string,
)

logger = logging.getLogger(__name__)

DEFAULT_SERVER_ID = "localhost"
DEFAULT_TTL = 300
MAX_TTL = 2**32 - 1


class PowerDNSSettings(BaseModel):
    """Provider specific settings block. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True, validate_default=True)

    server_url: str = ""
    api_key: SecretStr = SecretStr("")
    server_id: str = ""
    ttl: int = Field(default=0, ge=0, le=MAX_TTL, strict=True)

    @field_validator("server_url", "api_key", "server_id", "ttl", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return 0 if info.field_name == "ttl" else ""
        return v

    @field_validator("server_id")
    @classmethod
    def default_server_id(cls, v: str) -> str:
        return v or DEFAULT_SERVER_ID

    @field_validator("ttl")
    @classmethod
    def default_ttl(cls, v: int) -> int:
        # 0 means "unset"
        return v or DEFAULT_TTL


class Record(BaseModel):
    content: str
    disabled: bool = False


class RRSet(BaseModel):
    name: str
    type: Literal["A", "AAAA"]
    ttl: int
    changetype: Literal["REPLACE"] = "REPLACE"
    records: list[Record]


class RRSetPatch(BaseModel):
    """Body of a zone PATCH request."""

    rrsets: list[RRSet]


def _describe_validation_error(exc: ValidationError) -> str:
    # Input values are left out so the API key never ends up in a message.
    parts = []
    for error in exc.errors(include_url=False, include_context=False, include_input=False):
        location = ".".join(str(part) for part in error["loc"]) or "settings"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def decode_settings(data: Mapping[str, Any] | str | bytes) -> PowerDNSSettings:
    """Decode a raw settings block (a mapping or a JSON document)."""
    try:
        if isinstance(data, (str, bytes, bytearray)):
            return PowerDNSSettings.model_validate_json(data)
        return PowerDNSSettings.model_validate(data)
    except ValidationError as exc:
        raise SettingsNotValidError(
            f"decoding provider specific settings: {_describe_validation_error(exc)}"
        ) from None


def validate_settings(domain: str, settings: PowerDNSSettings) -> None:
    """Check the settings in order, raising on the first violation."""
    try:
        check_domain(domain)
    except ValueError as exc:
        raise DomainNotValidError(f"domain is not valid: {exc}") from exc

    if not settings.server_url:
        raise URLNotSetError("server URL is not set")
    if not settings.api_key.get_secret_value():
        raise APIKeyNotSetError("API key is not set")

    try:
        url = httpx.URL(settings.server_url)
    except httpx.InvalidURL as exc:
        raise URLNotValidError(f"server URL is not valid: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise URLNotValidError(
            f"server URL is not valid: {settings.server_url!r} is not an http(s) URL"
        )


class PowerDNSProvider(Provider):
    """DNS provider implementation for the PowerDNS HTTP API."""

    NAME = "powerdns"
    DOCS_URL = "https://doc.powerdns.com/authoritative/http-api/"

    def __init__(
        self,
        data: Mapping[str, Any] | str | bytes,
        domain: str,
        owner: str = "@",
        ip_version: IPVersion = IPVersion.IP4_OR_IP6,
        ipv6_suffix: IPv6Network | None = None,
    ):
        """Initialize PowerDNS provider.

        Args:
            data: Provider specific settings (server_url, api_key,
                server_id, ttl) as a mapping or JSON document
            domain: The zone name (e.g., "example.com")
            owner: The record name (e.g., "www" or "@" for root)
            ip_version: Which record types this instance manages
            ipv6_suffix: Optional IPv6 interface identifier

        Raises:
            ConfigError: if the settings are not usable
        """
        settings = decode_settings(data)
        try:
            validate_settings(domain, settings)
        except ConfigError as exc:
            raise type(exc)(f"validating provider specific settings: {exc}") from exc

        self._domain = domain
        self._owner = owner
        self._ip_version = ip_version
        self._ipv6_suffix = ipv6_suffix
        self._server_url = settings.server_url.rstrip("/")
        self._api_key = settings.api_key
        self._server_id = settings.server_id
        self._ttl = settings.ttl

    def __str__(self) -> str:
        return to_string(self._domain, self._owner, self.NAME, self._ip_version)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(domain={self._domain!r}, owner={self._owner!r}, "
            f"server_url={self._server_url!r}, server_id={self._server_id!r}, "
            f"ttl={self._ttl})"
        )

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def ip_version(self) -> IPVersion:
        return self._ip_version

    @property
    def ipv6_suffix(self) -> IPv6Network | None:
        return self._ipv6_suffix

    def proxied(self) -> bool:
        return False

    def build_domain_name(self) -> str:
        return build_domain_name(self._owner, self._domain)

    def html(self) -> HTMLRow:
        fqdn = self.build_domain_name()
        return HTMLRow(
            domain=render_link(f"http://{fqdn}", fqdn),
            owner=self._owner,
            provider=render_link(self.DOCS_URL, "PowerDNS"),
            ip_version=str(self._ip_version),
        )

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        set_user_agent(headers)
        set_content_type(headers, "application/json")
        set_accept(headers, "application/json")
        headers["X-API-Key"] = self._api_key.get_secret_value()
        return headers

    def _zone_url(self) -> str:
        return f"{self._server_url}/api/v1/servers/{self._server_id}/zones/{self._domain}."

    def build_payload(self, ip: IPAddress) -> RRSetPatch:
        """Build the RRset REPLACE body for an IP address.

        The record type follows the address family of `ip` alone.
        """
        record_type = "AAAA" if ip.version == 6 else "A"
        record_name = build_url_query_hostname(self._owner, self._domain) + "."
        return RRSetPatch(
            rrsets=[
                RRSet(
                    name=record_name,
                    type=record_type,
                    ttl=self._ttl,
                    records=[Record(content=str(ip))],
                )
            ]
        )

    async def update(self, client: httpx.AsyncClient, ip: IPAddress) -> IPAddress:
        """Replace the record's RRset with a single record holding `ip`."""
        payload = self.build_payload(ip)
        try:
            body = payload.model_dump_json()
        except PydanticSerializationError as exc:
            raise RequestBuildError(f"json encoding request data: {exc}") from exc

        url = self._zone_url()
        rrset = payload.rrsets[0]
        logger.debug("Replacing %s %s with %s via %s", rrset.type, rrset.name, ip, url)

        try:
            response = await client.patch(url, content=body, headers=self._headers())
        except httpx.TimeoutException as exc:
            raise UpdateTimeoutError(f"doing http request: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"doing http request: {exc}") from exc

        if response.status_code != httpx.codes.NO_CONTENT:
            raise APIError(response.status_code, body_to_single_line(response.text))

        logger.debug("%s %s now points to %s", rrset.type, rrset.name, ip)
        return ip
