import json

import httpx
import pytest

from vehicle_cli.http_client import HttpClient


def _client(captured: list, status: int = 200, response_json=None, content: bytes = b"") -> HttpClient:
    def _handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        if response_json is not None:
            return httpx.Response(status, json=response_json)
        return httpx.Response(status, content=content)

    return HttpClient("http://test", transport=httpx.MockTransport(_handler))


def test_base_url_is_returned() -> None:
    with HttpClient("http://localhost:3000") as client:
        assert client.get_base_url() == "http://localhost:3000"
        assert client.base_url == "http://localhost:3000"


def test_get_returns_decoded_body() -> None:
    captured: list = []
    with _client(captured, response_json={"id": 1, "name": "Test"}) as client:
        assert client.get("/vehicles") == {"id": 1, "name": "Test"}

    request = captured[0]
    assert request.method == "GET"
    assert str(request.url) == "http://test/vehicles"
    assert request.headers["Content-Type"] == "application/json"


def test_post_and_put_send_json_body() -> None:
    captured: list = []
    with _client(captured, status=201, response_json={"id": 1}) as client:
        assert client.post("/vehicles", {"name": "New Vehicle"}) == {"id": 1}
        assert client.put("/vehicles/1", {"name": "Updated"}) == {"id": 1}

    assert [request.method for request in captured] == ["POST", "PUT"]
    assert json.loads(captured[0].content) == {"name": "New Vehicle"}
    assert json.loads(captured[1].content) == {"name": "Updated"}


def test_delete_without_content_returns_none() -> None:
    captured: list = []
    with _client(captured, status=204) as client:
        assert client.delete("/vehicles/1") is None
    assert captured[0].method == "DELETE"
    assert captured[0].url.path == "/vehicles/1"


def test_status_errors_propagate_unchanged() -> None:
    with _client([], status=404, response_json={"message": "Vehicle not found"}) as client:
        with pytest.raises(httpx.HTTPStatusError) as excinfo:
            client.get("/vehicles/9")
    assert excinfo.value.response.status_code == 404


def test_transport_errors_propagate_unchanged() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    with HttpClient("http://test", transport=httpx.MockTransport(_handler)) as client:
        with pytest.raises(httpx.ConnectError):
            client.get("/vehicles")


def test_non_json_body_is_returned_as_text() -> None:
    captured: list = []
    with _client(captured, status=200, content=b"OK") as client:
        assert client.delete("/vehicles/7") == "OK"


def test_unsupported_scheme_raises_before_sending() -> None:
    with HttpClient("ftp://example.com") as client:
        with pytest.raises(httpx.UnsupportedProtocol):
            client.get("/vehicles")
