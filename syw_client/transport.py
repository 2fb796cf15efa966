from __future__ import annotations

import logging
from typing import Any

import httpx

from .auth import OAuth1Auth
from .config_types import ClientConfig
from .errors import NetworkError
from .payload import Payload
from .result import Failure, Result, Success, reduce_response

logger = logging.getLogger(__name__)

USER_AGENT = "syw-client/0.1.0"


def _client_kwargs(cfg: ClientConfig, transport: Any | None) -> dict[str, Any]:
    kwargs = dict(cfg.request_options)
    headers = {"User-Agent": USER_AGENT}
    headers.update(kwargs.pop("headers", None) or {})
    kwargs["headers"] = headers
    if cfg.oauth is not None:
        kwargs["auth"] = OAuth1Auth(cfg.oauth)
    if transport is not None:
        kwargs["transport"] = transport
    return kwargs


def _log_result(method: str, url: str, result: Result) -> Result:
    if isinstance(result, Failure):
        logger.debug("%s %s failed: %s: %s", method.upper(), url, type(result.error).__name__, result.error)
    elif isinstance(result, Success):
        logger.debug("%s %s -> %s", method.upper(), url, result.response.status_code)
    return result


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.Client(**_client_kwargs(cfg, transport))

    def close(self) -> None:
        self._client.close()

    def send(self, method: str, url: str, payload: Payload) -> Result:
        logger.debug("%s %s", method.upper(), url)
        try:
            r = self._client.request(method.upper(), url, **payload.request_kwargs())
        except httpx.RequestError as e:
            error = NetworkError(str(e))
            error.__cause__ = e
            return _log_result(method, url, Failure(error))
        return _log_result(method, url, reduce_response(r))


class AsyncTransport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.AsyncClient(**_client_kwargs(cfg, transport))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(self, method: str, url: str, payload: Payload) -> Result:
        logger.debug("%s %s", method.upper(), url)
        try:
            r = await self._client.request(method.upper(), url, **payload.request_kwargs())
        except httpx.RequestError as e:
            error = NetworkError(str(e))
            error.__cause__ = e
            return _log_result(method, url, Failure(error))
        return _log_result(method, url, reduce_response(r))
