from __future__ import annotations

import hashlib
from typing import Any, Generator, Mapping

import httpx
from oauthlib.oauth1 import Client as OAuth1Client

from .config_types import ClientConfig, OAuthCredentials

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def generate_hash(token: str, app_secret: str | None) -> str:
    # token first, then app secret; the platform verifies in this order
    digest = hashlib.sha256()
    digest.update(token.encode("utf-8"))
    digest.update((app_secret or "").encode("utf-8"))
    return digest.hexdigest()


def inject_auth_params(cfg: ClientConfig, params: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``params`` with the configured ``token``/``hash`` pair added.

    An app token with its secret wins over an offline token/hash pair. With
    neither configured the copy is returned untouched and only OAuth1 signing
    (if any) authenticates the call.
    """
    out = dict(params)
    if cfg.token:
        out["token"] = cfg.token
        out["hash"] = generate_hash(cfg.token, cfg.app_secret)
    elif cfg.offline_token:
        out["token"] = cfg.offline_token
        out["hash"] = cfg.offline_hash
    return out


class OAuth1Auth(httpx.Auth):
    """HMAC-SHA1 OAuth1 signing in the ``Authorization`` header."""

    requires_request_body = True

    def __init__(self, credentials: OAuthCredentials):
        self._signer = OAuth1Client(
            credentials.consumer_key,
            client_secret=credentials.consumer_secret,
            resource_owner_key=credentials.token,
            resource_owner_secret=credentials.token_secret,
        )

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        body = None
        headers: dict[str, str] = {}
        # only url-encoded form bodies are part of the signature base string
        if request.headers.get("Content-Type") == _FORM_CONTENT_TYPE:
            body = request.content.decode("utf-8")
            headers["Content-Type"] = _FORM_CONTENT_TYPE

        _, signed_headers, _ = self._signer.sign(
            str(request.url),
            http_method=request.method,
            body=body,
            headers=headers,
        )
        request.headers["Authorization"] = signed_headers["Authorization"]
        yield request
