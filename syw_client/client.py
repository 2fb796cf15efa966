from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

import httpx

from .auth import inject_auth_params
from .config_types import ClientConfig, build_config
from .endpoint import resolve_endpoint
from .payload import Payload, build_payload, normalize_method
from .result import Failure, Result
from .transport import AsyncTransport, Transport

Callback = Callable[[Any, Any, "httpx.Response | None"], Any]


def _resolve_config(options: ClientConfig | Mapping[str, Any] | None, overrides: dict[str, Any]) -> ClientConfig:
    if isinstance(options, ClientConfig):
        if overrides:
            raise TypeError("keyword options cannot be combined with a ClientConfig")
        return options
    return build_config({**dict(options or {}), **overrides})


def _split_args(params: Any, callback: Callback | None) -> tuple[dict[str, Any], Callback | None]:
    # get(path, callback) is accepted as shorthand for get(path, {}, callback)
    if callable(params) and callback is None:
        return {}, params
    return dict(params or {}), callback


def _prepare(cfg: ClientConfig, method: str, path: str, params: Mapping[str, Any]) -> tuple[str, str, Payload]:
    method = normalize_method(method)
    url = resolve_endpoint(path, cfg.base_url)
    payload = build_payload(method, inject_auth_params(cfg, params))
    return method, url, payload


def _unwrap(result: Result) -> Any:
    if isinstance(result, Failure):
        raise result.error
    return result.data


def _callback_args(result: Result) -> tuple[Any, Any, httpx.Response | None]:
    if isinstance(result, Failure):
        return result.error, result.data, result.response
    return None, result.data, result.response


class SywClient:
    """Blocking client.

    Each call either hands ``(error, data, response)`` to ``callback`` and returns
    ``None``, or returns the decoded data and raises on failure.
    """

    def __init__(
            self,
            options: ClientConfig | Mapping[str, Any] | None = None,
            *,
            transport: httpx.BaseTransport | None = None,
            **kwargs: Any,
    ):
        self.config = _resolve_config(options, kwargs)
        self._t = Transport(self.config, transport=transport)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> SywClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(self, method: str, path: str, params: Any = None, callback: Callback | None = None) -> Any:
        params, callback = _split_args(params, callback)
        method, url, payload = _prepare(self.config, method, path, params)
        result = self._t.send(method, url, payload)
        if callback is not None:
            callback(*_callback_args(result))
            return None
        return _unwrap(result)

    def get(self, path: str, params: Any = None, callback: Callback | None = None) -> Any:
        return self.request("get", path, params, callback)

    def post(self, path: str, params: Any = None, callback: Callback | None = None) -> Any:
        return self.request("post", path, params, callback)


class AsyncSywClient:
    """Awaitable client; same calling conventions as :class:`SywClient`.

    Callbacks may be plain functions or coroutine functions.
    """

    def __init__(
            self,
            options: ClientConfig | Mapping[str, Any] | None = None,
            *,
            transport: httpx.AsyncBaseTransport | None = None,
            **kwargs: Any,
    ):
        self.config = _resolve_config(options, kwargs)
        self._t = AsyncTransport(self.config, transport=transport)

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> AsyncSywClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def request(self, method: str, path: str, params: Any = None, callback: Callback | None = None) -> Any:
        params, callback = _split_args(params, callback)
        method, url, payload = _prepare(self.config, method, path, params)
        result = await self._t.send(method, url, payload)
        if callback is not None:
            outcome = callback(*_callback_args(result))
            if inspect.isawaitable(outcome):
                await outcome
            return None
        return _unwrap(result)

    async def get(self, path: str, params: Any = None, callback: Callback | None = None) -> Any:
        return await self.request("get", path, params, callback)

    async def post(self, path: str, params: Any = None, callback: Callback | None = None) -> Any:
        return await self.request("post", path, params, callback)
