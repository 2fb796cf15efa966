from __future__ import annotations

from urllib.parse import urlsplit


def is_absolute_url(path: str) -> bool:
    return bool(urlsplit(path).scheme)


def resolve_endpoint(path: str, base_url: str) -> str:
    """Build the request URL for ``path``.

    Absolute URLs are used as-is and ``base_url`` is ignored. Relative paths are
    joined to ``base_url`` with a single ``/``. One trailing slash is dropped.
    """
    if is_absolute_url(path):
        endpoint = path
    else:
        endpoint = base_url + (path if path.startswith("/") else f"/{path}")

    if endpoint.endswith("/"):
        endpoint = endpoint[:-1]
    return endpoint
