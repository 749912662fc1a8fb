"""Pydantic models for the authentication endpoints."""

from pydantic import BaseModel


class KeyCheckResponse(BaseModel):
    authenticated: bool
    scheme: str
    key_fingerprint: str


class ErrorResponse(BaseModel):
    detail: str
    kind: str | None = None
