"""API key extraction from request headers.

Clients authenticate with ``Authorization: ApiKey <key>``. Extraction is pure:
it reads the first Authorization value and returns everything after the first
space, verbatim.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from fastapi import HTTPException, Request

from apikey_auth.services.api_keys import key_fingerprint, verify_api_key

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"
API_KEY_SCHEME = "ApiKey"

# Sent with every 401 so clients know which scheme to retry with
WWW_AUTHENTICATE = {"WWW-Authenticate": API_KEY_SCHEME}


class AuthErrorKind(str, Enum):
    NO_AUTH_HEADER_INCLUDED = "no authorization header included"
    MALFORMED_AUTH_HEADER = "malformed authorization header"


class AuthHeaderError(ValueError):
    """Raised when the Authorization header is missing or not ``ApiKey <key>``."""

    def __init__(self, kind: AuthErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def _first_authorization_value(headers: Any) -> str:
    """Return the first Authorization value, or "" if there is none."""
    # httpx spells it get_list, Starlette getlist; both are case-insensitive
    getlist = getattr(headers, "get_list", None) or getattr(headers, "getlist", None)
    if callable(getlist):
        values = getlist(AUTHORIZATION_HEADER)
        return values[0] if values else ""

    # Canonical spelling wins, then the first case-insensitive match
    if AUTHORIZATION_HEADER in headers:
        values = headers[AUTHORIZATION_HEADER]
    else:
        wanted = AUTHORIZATION_HEADER.lower()
        values = next((v for name, v in headers.items() if name.lower() == wanted), None)
    if not values:
        return ""
    if isinstance(values, str):
        return values
    return values[0]


def get_api_key(headers: Any) -> str:
    """Extract the API key from an ``Authorization: ApiKey <key>`` header.

    ``headers`` may be a Starlette/httpx ``Headers`` object or a plain mapping
    of header name to a string or a list of strings. Only the first
    Authorization value is examined and only the first space splits it, so
    ``"ApiKey a b"`` yields ``"a b"``.

    Raises:
        AuthHeaderError: with ``NO_AUTH_HEADER_INCLUDED`` when the header is
            absent or empty, ``MALFORMED_AUTH_HEADER`` otherwise.
    """
    value = _first_authorization_value(headers)
    if not value:
        raise AuthHeaderError(AuthErrorKind.NO_AUTH_HEADER_INCLUDED)

    scheme, sep, key = value.partition(" ")
    if not sep or scheme != API_KEY_SCHEME or not key:
        raise AuthHeaderError(AuthErrorKind.MALFORMED_AUTH_HEADER)
    return key


def require_api_key(request: Request) -> str:
    """FastAPI dependency: return the caller's verified API key or raise 401."""
    try:
        key = get_api_key(request.headers)
    except AuthHeaderError as exc:
        logger.warning("Rejected %s: %s", request.url.path, exc.kind.value)
        raise HTTPException(status_code=401, detail=str(exc), headers=WWW_AUTHENTICATE) from exc

    if not verify_api_key(key):
        logger.warning("Rejected %s: unknown key %s", request.url.path, key_fingerprint(key))
        raise HTTPException(status_code=401, detail="invalid api key", headers=WWW_AUTHENTICATE)
    return key
