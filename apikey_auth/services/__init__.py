"""API key extraction and verification."""

from apikey_auth.services.auth import (
    AuthErrorKind,
    AuthHeaderError,
    get_api_key,
    require_api_key,
)

__all__ = [
    "AuthErrorKind",
    "AuthHeaderError",
    "get_api_key",
    "require_api_key",
]
