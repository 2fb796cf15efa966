from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping

BASE_URL_DEFAULT = "https://platform.shopyourway.com"

DEFAULT_OPTIONS: dict[str, Any] = {
    "token": None,
    "app_secret": None,
    "offline_token": None,
    "offline_hash": None,
    "base_url": BASE_URL_DEFAULT,
    "request_options": {
        "headers": {
            "Accept": "*/*",
            "Connection": "close",
        },
        "timeout": 15.0,
    },
    "consumer_key": None,
    "consumer_secret": None,
    "access_token_key": None,
    "access_token_secret": None,
}


def _default_request_options() -> dict[str, Any]:
    return copy.deepcopy(DEFAULT_OPTIONS["request_options"])


@dataclass(frozen=True)
class OAuthCredentials:
    consumer_key: str
    consumer_secret: str | None = None
    token: str | None = None
    token_secret: str | None = None


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = BASE_URL_DEFAULT
    token: str | None = None
    app_secret: str | None = None
    offline_token: str | None = None
    offline_hash: str | None = None
    request_options: dict[str, Any] = field(default_factory=_default_request_options)
    oauth: OAuthCredentials | None = None


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with ``overrides`` merged over ``base``, recursing into mappings."""
    merged = copy.deepcopy(dict(base))
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def build_config(options: Mapping[str, Any] | None = None) -> ClientConfig:
    options = dict(options or {})
    unknown = sorted(set(options) - set(DEFAULT_OPTIONS))
    if unknown:
        raise ValueError(f"unknown client options: {', '.join(unknown)}")

    merged = deep_merge(DEFAULT_OPTIONS, options)

    oauth = None
    if merged["consumer_key"]:
        oauth = OAuthCredentials(
            consumer_key=merged["consumer_key"],
            consumer_secret=merged["consumer_secret"],
            token=merged["access_token_key"],
            token_secret=merged["access_token_secret"],
        )

    return ClientConfig(
        base_url=merged["base_url"] or BASE_URL_DEFAULT,
        token=merged["token"],
        app_secret=merged["app_secret"],
        offline_token=merged["offline_token"],
        offline_hash=merged["offline_hash"],
        request_options=merged["request_options"] or {},
        oauth=oauth,
    )
