"""Errors raised by DNS providers."""


class ProviderError(Exception):
    """Base class for every provider failure."""


class ConfigError(ProviderError):
    """Provider settings are unusable. Raised before any network activity."""


class SettingsNotValidError(ConfigError):
    """The raw provider settings block could not be decoded."""


class DomainNotValidError(ConfigError):
    """The domain is not syntactically valid."""


class URLNotSetError(ConfigError):
    """The provider endpoint URL is empty."""


class APIKeyNotSetError(ConfigError):
    """The provider API key is empty."""


class URLNotValidError(ConfigError):
    """The provider endpoint URL is malformed."""


class RequestBuildError(ProviderError):
    """The request payload could not be serialized."""


class TransportError(ProviderError):
    """The request could not be sent or its response could not be read."""


class UpdateTimeoutError(TransportError):
    """The HTTP client gave up waiting on the provider."""


class APIError(ProviderError):
    """The provider answered with an unexpected HTTP status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP status is not valid: {status_code}: {body}")
