from __future__ import annotations

import asyncio

import httpx
import pytest

from cumulocity_client.domain.entities.endpoint import PreparedRequest
from cumulocity_client.domain.entities.errors import HttpStatusError, TransportError
from cumulocity_client.infrastructure.pipeline import HttpxRequestExecutor


class _BlockingStream(httpx.AsyncByteStream):
    """Response body that never finishes arriving."""

    def __init__(self) -> None:
        self.started = asyncio.Event()
        self.closed = False

    async def __aiter__(self):
        self.started.set()
        await asyncio.sleep(3600)
        yield b""

    async def aclose(self) -> None:
        self.closed = True


def _get(path: str = "features") -> PreparedRequest:
    return PreparedRequest(method="GET", path=path, headers={"Accept": "application/json"})


@pytest.mark.asyncio
async def test_send_returns_body_and_headers(http_client, transport) -> None:
    transport.respond(200, json_body=[{"key": "a"}])

    response = await HttpxRequestExecutor(http_client).send(_get())

    assert response.status_code == 200
    assert response.text == '[{"key": "a"}]'
    assert response.headers["content-type"] == "application/json"
    assert str(transport.last.url) == "https://t100.example.com/features"
    assert transport.last.headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_send_passes_query_string_unchanged(http_client, transport) -> None:
    request = _get()
    request.query_string = "groups=1%2C2&dateFrom=2020-10-26T03%3A00%3A00%2B01%3A00"

    await HttpxRequestExecutor(http_client).send(request)

    params = transport.last.url.params
    assert params["groups"] == "1,2"
    assert params["dateFrom"] == "2020-10-26T03:00:00+01:00"


@pytest.mark.asyncio
async def test_send_sends_json_body(http_client, transport) -> None:
    request = PreparedRequest(
        method="POST",
        path="user/t100/users",
        headers={"Content-Type": "application/vnd.com.nsn.cumulocity.user+json"},
        json={"userName": "bob"},
    )

    await HttpxRequestExecutor(http_client).send(request)

    assert transport.last.method == "POST"
    assert transport.last_json() == {"userName": "bob"}
    assert transport.last.headers["Content-Type"] == (
        "application/vnd.com.nsn.cumulocity.user+json"
    )


@pytest.mark.asyncio
async def test_non_success_status_raises_http_status_error(http_client, transport) -> None:
    transport.respond(404, json_body={"error": "not found"})

    with pytest.raises(HttpStatusError) as exc_info:
        await HttpxRequestExecutor(http_client).send(_get("user/t100/users/bob"))

    error = exc_info.value
    assert error.status_code == 404
    assert error.error_code == "not found"
    assert error.error_message == "not found"
    assert error.body == '{"error": "not found"}'
    assert error.method == "GET"
    assert error.url == "https://t100.example.com/user/t100/users/bob"
    assert "not found" in str(error)


@pytest.mark.asyncio
async def test_platform_message_is_preferred(http_client, transport) -> None:
    transport.respond(
        422,
        json_body={"error": "users/Invalid Data", "message": "Username taken"},
    )

    with pytest.raises(HttpStatusError) as exc_info:
        await HttpxRequestExecutor(http_client).send(_get())

    assert exc_info.value.error_code == "users/Invalid Data"
    assert exc_info.value.error_message == "Username taken"


@pytest.mark.asyncio
async def test_non_json_error_body_is_kept(http_client, transport) -> None:
    transport.respond(503, content=b"<html>maintenance</html>")

    with pytest.raises(HttpStatusError) as exc_info:
        await HttpxRequestExecutor(http_client).send(_get())

    assert exc_info.value.error_code is None
    assert "<html>maintenance</html>" in str(exc_info.value)


@pytest.mark.asyncio
async def test_timeout_raises_transport_error(http_client, transport) -> None:
    transport.raise_error(httpx.ReadTimeout("timed out"))

    with pytest.raises(TransportError) as exc_info:
        await HttpxRequestExecutor(http_client).send(_get(), timeout=0.5)

    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
    assert exc_info.value.method == "GET"


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error(http_client, transport) -> None:
    transport.raise_error(httpx.ConnectError("connection refused"))

    with pytest.raises(TransportError) as exc_info:
        await HttpxRequestExecutor(http_client).send(_get())

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert "connection refused" in str(exc_info.value)


@pytest.mark.asyncio
async def test_cancellation_releases_the_response(http_client, transport) -> None:
    stream = _BlockingStream()
    transport.queue(httpx.Response(200, stream=stream))

    task = asyncio.create_task(HttpxRequestExecutor(http_client).send(_get()))
    await asyncio.wait_for(stream.started.wait(), timeout=1)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert stream.closed is True
