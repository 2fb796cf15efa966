from .client import AsyncSywClient, SywClient
from .config_types import ClientConfig, OAuthCredentials, build_config
from .endpoint import resolve_endpoint
from .errors import (
    ApiError,
    AuthError,
    HttpStatusError,
    NetworkError,
    ResponseParseError,
    SywClientError,
    UnsupportedMethodError,
)
from .logging_ import setup_logging

__all__ = [
    "SywClient",
    "AsyncSywClient",
    "ClientConfig",
    "OAuthCredentials",
    "build_config",
    "resolve_endpoint",
    "SywClientError",
    "NetworkError",
    "ResponseParseError",
    "ApiError",
    "HttpStatusError",
    "AuthError",
    "UnsupportedMethodError",
    "setup_logging",
]
