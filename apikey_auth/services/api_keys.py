"""Accepted API keys, configured through the environment.

APIKEY_AUTH_KEYS holds a comma-separated list of accepted keys. When it is
unset or empty the service runs in extraction-only mode: any well-formed
``ApiKey <key>`` header is accepted.

The middleware can be switched off entirely with APIKEY_AUTH_DISABLED=true.
"""

from __future__ import annotations

import hashlib
import os
import secrets

_keys: frozenset[str] | None = None


def _encode(value: str) -> bytes:
    return value.encode("utf-8", "surrogatepass")


def get_accepted_keys() -> frozenset[str] | None:
    """Return the configured keys, or None in extraction-only mode."""
    global _keys
    if _keys is None:
        raw = os.environ.get("APIKEY_AUTH_KEYS", "")
        keys = frozenset(k.strip() for k in raw.split(",") if k.strip())
        if not keys:
            return None
        _keys = keys
    return _keys


def auth_enabled() -> bool:
    return os.environ.get("APIKEY_AUTH_DISABLED", "").lower() != "true"


def verify_api_key(key: str) -> bool:
    """Check a key against the configured set using constant-time comparison."""
    accepted = get_accepted_keys()
    if accepted is None:
        return True
    # Compare against every entry so timing does not reveal which one matched
    matched = False
    for candidate in accepted:
        if secrets.compare_digest(_encode(key), _encode(candidate)):
            matched = True
    return matched


def key_fingerprint(key: str) -> str:
    """Short SHA-256 digest of a key, safe to log or return to clients."""
    return hashlib.sha256(_encode(key)).hexdigest()[:12]
