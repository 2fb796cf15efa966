from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

import httpx

from .errors import ApiError, AuthError, HttpStatusError, ResponseParseError, SywClientError

_AUTH_STATUSES = (401, 403)


@dataclass(frozen=True)
class Success:
    data: Any
    response: httpx.Response | None = None


@dataclass(frozen=True)
class Failure:
    error: SywClientError
    data: Any = None
    response: httpx.Response | None = None


Result = Union[Success, Failure]


def decode_body(text: str) -> Any:
    # an empty body is a valid, empty result
    if text == "":
        return {}
    return json.loads(text)


def reduce_response(response: httpx.Response) -> Result:
    """Classify a completed HTTP exchange.

    Checks run in a fixed order: body decoding, an ``errors`` field in the
    decoded body, then the status code. The first one that fails wins.
    """
    status = response.status_code
    reason = response.reason_phrase
    text = response.text

    try:
        data = decode_body(text)
    except ValueError:
        return Failure(ResponseParseError(status, reason, response), text, response)

    if isinstance(data, dict) and "errors" in data:
        return Failure(ApiError(data["errors"], status), data, response)

    if status < 200 or status > 299:
        error_cls = AuthError if status in _AUTH_STATUSES else HttpStatusError
        return Failure(error_cls(status, reason, data, response), data, response)

    return Success(data, response)
