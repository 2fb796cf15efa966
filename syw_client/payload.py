from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from .errors import UnsupportedMethodError

MEDIA_KEY = "media"
SUPPORTED_METHODS = ("get", "post")


@dataclass(frozen=True)
class QueryPayload:
    params: dict[str, Any] = field(default_factory=dict)

    def request_kwargs(self) -> dict[str, Any]:
        return {"params": self.params}


@dataclass(frozen=True)
class FormPayload:
    data: dict[str, Any] = field(default_factory=dict)

    def request_kwargs(self) -> dict[str, Any]:
        return {"data": self.data}


@dataclass(frozen=True)
class MultipartPayload:
    data: dict[str, Any] = field(default_factory=dict)
    files: dict[str, Any] = field(default_factory=dict)

    def request_kwargs(self) -> dict[str, Any]:
        return {"data": self.data, "files": self.files}


Payload = Union[QueryPayload, FormPayload, MultipartPayload]


def normalize_method(method: str) -> str:
    normalized = (method or "").strip().lower()
    if normalized not in SUPPORTED_METHODS:
        raise UnsupportedMethodError(method)
    return normalized


def build_payload(method: str, params: Mapping[str, Any]) -> Payload:
    """Decide where ``params`` travel for ``method``.

    GET sends them in the query string. POST sends a url-encoded form, or a
    multipart body when a ``media`` entry is present; ``media`` then becomes the
    file part and the rest stay form fields.
    """
    method = normalize_method(method)
    params = dict(params)
    if method == "get":
        return QueryPayload(params)
    if MEDIA_KEY in params:
        media = params.pop(MEDIA_KEY)
        return MultipartPayload(data=params, files={MEDIA_KEY: media})
    return FormPayload(params)
