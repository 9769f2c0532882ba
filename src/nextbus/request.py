"""
Request URL builder for the NextBus publicJSONFeed.
Query is `command=<name>` followed by each parameter in the order given; keys may repeat.
"""
from collections.abc import Sequence

import httpx

from src.nextbus.errors import ConfigurationError

NEXTBUS_API_URL = "http://webservices.nextbus.com/service/publicJSONFeed"

Parameter = tuple[str, str]


def validate_base_url(base_url: str) -> httpx.URL:
    """Parse the fixed endpoint; anything but a bare absolute http(s) URL is a ConfigurationError."""
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigurationError(f"API URL is not valid: {base_url!r}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"API URL must be absolute http(s): {base_url!r}")
    if url.query or url.fragment:
        raise ConfigurationError(f"API URL must not carry a query or fragment: {base_url!r}")
    return url


def build_url(
    command: str,
    params: Sequence[Parameter] = (),
    base_url: str = NEXTBUS_API_URL,
) -> str:
    """Build the absolute request URL for a command and its ordered parameters."""
    command = getattr(command, "value", command)
    if not command:
        raise ValueError("command must be a non-empty string")
    pairs: list[Parameter] = [("command", command)]
    for key, value in params:
        if not key or not value:
            raise ValueError(f"parameter key and value must be non-empty: {(key, value)!r}")
        pairs.append((key, value))
    url = validate_base_url(base_url)
    return str(url.copy_with(params=httpx.QueryParams(pairs)))
