"""API key authentication middleware.

Requires ``Authorization: ApiKey <key>`` on all /api/* paths except
/api/health. Disabled with APIKEY_AUTH_DISABLED=true.
"""

from __future__ import annotations

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from apikey_auth.services.api_keys import auth_enabled, key_fingerprint, verify_api_key
from apikey_auth.services.auth import WWW_AUTHENTICATE, AuthHeaderError, get_api_key

logger = logging.getLogger(__name__)

# Paths that don't require authentication
_PUBLIC_PATHS = {"/api/health"}


def _unauthorized(detail: str, kind: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"detail": detail, "kind": kind},
        headers=WWW_AUTHENTICATE,
    )


class ApiKeyAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path

        if not path.startswith("/api/") or path in _PUBLIC_PATHS:
            return await call_next(request)

        if not auth_enabled():
            return await call_next(request)

        try:
            key = get_api_key(request.headers)
        except AuthHeaderError as exc:
            logger.warning("Rejected %s %s: %s", request.method, path, exc.kind.value)
            return _unauthorized(str(exc), exc.kind.name.lower())

        fingerprint = key_fingerprint(key)
        if not verify_api_key(key):
            logger.warning("Rejected %s %s: unknown key %s", request.method, path, fingerprint)
            return _unauthorized("invalid api key", "invalid_api_key")

        request.state.key_fingerprint = fingerprint
        return await call_next(request)
