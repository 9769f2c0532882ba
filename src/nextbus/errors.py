"""Exceptions raised by the NextBus client. Library code raises; only the CLI exits."""


class NextBusError(Exception):
    """Base class for every failure surfaced by the client."""


class ConfigurationError(NextBusError):
    """The fixed base endpoint is not a usable absolute URL."""


class NetworkError(NextBusError):
    """Transport failure or non-2xx status. No body was decoded."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(NextBusError):
    """Body was not valid JSON or did not fit the requested shape."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class ServiceError(DecodeError):
    """The feed answered with its own error envelope instead of a payload."""

    def __init__(self, message: str, url: str, should_retry: bool = False):
        super().__init__(message, url)
        self.message = message
        self.should_retry = should_retry
