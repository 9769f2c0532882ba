"""Tests for the request URL builder."""
from urllib.parse import parse_qsl, urlsplit

import pytest

from src.nextbus.commands import Command
from src.nextbus.errors import ConfigurationError
from src.nextbus.request import NEXTBUS_API_URL, build_url, validate_base_url

BASE = "http://example.test/feed"


def _query(url: str) -> list[tuple[str, str]]:
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


def test_build_url_route_list_example():
    url = build_url("routeList", [("a", "ttc")], base_url=BASE)
    assert url.startswith(BASE + "?")
    pairs = _query(url)
    assert ("command", "routeList") in pairs
    assert ("a", "ttc") in pairs
    assert url == "http://example.test/feed?command=routeList&a=ttc"


def test_build_url_command_first_then_params_in_order():
    params = [("a", "ttc"), ("r", "510"), ("s", "14339"), ("t", "0")]
    pairs = _query(build_url("predictions", params, base_url=BASE))
    assert len(pairs) == len(params) + 1
    assert pairs[0] == ("command", "predictions")
    assert pairs[1:] == params


def test_build_url_no_params():
    pairs = _query(build_url("agencyList", base_url=BASE))
    assert pairs == [("command", "agencyList")]


def test_build_url_keeps_repeated_keys():
    params = [("a", "ttc"), ("r", "510"), ("r", "504"), ("r", "510")]
    pairs = _query(build_url("schedule", params, base_url=BASE))
    assert pairs[1:] == params


def test_build_url_reserved_characters_round_trip():
    value = "King & Spadina/Queen?=#%"
    url = build_url("predictions", [("a", "ttc"), ("s", value)], base_url=BASE)
    assert "&s=King" in url
    assert " " not in url
    assert dict(_query(url))["s"] == value


def test_build_url_accepts_command_enum():
    url = build_url(Command.ROUTE_CONFIG, [("a", "ttc"), ("r", "510")], base_url=BASE)
    assert _query(url)[0] == ("command", "routeConfig")


def test_build_url_default_base():
    url = build_url("agencyList")
    assert url == NEXTBUS_API_URL + "?command=agencyList"


def test_build_url_rejects_empty_command():
    with pytest.raises(ValueError):
        build_url("", base_url=BASE)


def test_build_url_rejects_empty_parameter():
    with pytest.raises(ValueError):
        build_url("routeList", [("a", "")], base_url=BASE)


@pytest.mark.parametrize(
    "base",
    ["", "/service/publicJSONFeed", "ftp://example.test/feed", "http://example.test/feed?x=1"],
)
def test_malformed_base_is_configuration_error(base):
    with pytest.raises(ConfigurationError):
        build_url("agencyList", base_url=base)


def test_validate_base_url_accepts_https():
    url = validate_base_url("https://example.test/feed")
    assert url.host == "example.test"
