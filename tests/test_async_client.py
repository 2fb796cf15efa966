import asyncio

import httpx
import pytest

from syw_client import ApiError, AsyncSywClient, NetworkError


def _handler(response: httpx.Response | None = None, error: Exception | None = None):
    seen: list[httpx.Request] = []

    def _handle(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if error is not None:
            raise error
        return response if response is not None else httpx.Response(200, json={"x": 1})

    return _handle, seen


def test_async_get_returns_data() -> None:
    handle, seen = _handler()

    async def _run():
        async with AsyncSywClient(transport=httpx.MockTransport(handle), token="tok", app_secret="s") as client:
            return await client.get("/things", {"a": 1})

    assert asyncio.run(_run()) == {"x": 1}
    assert seen[0].url.params["token"] == "tok"


def test_async_raises_api_errors() -> None:
    handle, _ = _handler(httpx.Response(200, text='{"errors":["bad token"]}'))

    async def _run():
        async with AsyncSywClient(transport=httpx.MockTransport(handle)) as client:
            await client.post("/things", {"a": 1})

    with pytest.raises(ApiError) as exc_info:
        asyncio.run(_run())
    assert exc_info.value.errors == ["bad token"]


def test_async_callback_may_be_coroutine() -> None:
    handle, _ = _handler(error=httpx.ConnectError("down"))
    calls = []

    async def _callback(err, data, response):
        calls.append((err, data, response))

    async def _run():
        async with AsyncSywClient(transport=httpx.MockTransport(handle)) as client:
            return await client.get("/things", _callback)

    assert asyncio.run(_run()) is None
    err, data, response = calls[0]
    assert isinstance(err, NetworkError)
    assert data is None
    assert response is None


def test_async_multipart_upload_is_signed() -> None:
    handle, seen = _handler()

    async def _run():
        async with AsyncSywClient(transport=httpx.MockTransport(handle), consumer_key="ck") as client:
            await client.post("/media", {"media": b"raw-bytes"})

    asyncio.run(_run())
    request = seen[0]
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert request.headers["Authorization"].startswith("OAuth ")
