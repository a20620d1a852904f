from __future__ import annotations

import asyncio

import httpx
import pytest

from src.adapters.upstream.http_client import RuterHttpClient, encode_params
from src.domain.exceptions import UpstreamMalformedResponse, UpstreamUnavailable


def _client(handler) -> RuterHttpClient:
    return RuterHttpClient(
        base_url="https://reisapi.test", transport=httpx.MockTransport(handler)
    )


def test_encode_params() -> None:
    assert encode_params(
        {"a": None, "b": True, "c": [2, 7], "d": 5, "e": [], "f": "(X=1,Y=2)"}
    ) == {"b": "true", "c": "2,7", "d": "5", "f": "(X=1,Y=2)"}


def test_build_url_joins_base_and_path() -> None:
    client = RuterHttpClient(base_url="https://reisapi.test/")
    assert client.build_url("/Place/GetStop/1") == "https://reisapi.test/Place/GetStop/1"


def test_get_json_returns_parsed_body_and_sends_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"ID": 1}])

    data = asyncio.run(
        _client(handler).get_json("/Place/GetStopsByArea", {"xmin": 1, "ymin": None})
    )

    assert data == [{"ID": 1}]
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/Place/GetStopsByArea"
    assert dict(seen[0].url.params) == {"xmin": "1"}


def test_non_2xx_raises_unavailable_with_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="down")

    with pytest.raises(UpstreamUnavailable) as excinfo:
        asyncio.run(_client(handler).get_json("/Line/GetDataByLineID/17"))

    assert excinfo.value.status == 503
    assert excinfo.value.url == "https://reisapi.test/Line/GetDataByLineID/17"


def test_network_error_raises_unavailable_without_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(UpstreamUnavailable) as excinfo:
        asyncio.run(_client(handler).get_json("/Place/GetStop/1"))

    assert excinfo.value.status is None


def test_invalid_json_raises_malformed_response() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    with pytest.raises(UpstreamMalformedResponse):
        asyncio.run(_client(handler).get_json("/Place/GetStop/1"))
