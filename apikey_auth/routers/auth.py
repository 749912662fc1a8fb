import logging

from fastapi import APIRouter, Depends

from apikey_auth.models.auth_models import ErrorResponse, KeyCheckResponse
from apikey_auth.services.api_keys import key_fingerprint
from apikey_auth.services.auth import API_KEY_SCHEME, require_api_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get(
    "/verify",
    response_model=KeyCheckResponse,
    responses={401: {"model": ErrorResponse}},
)
async def verify(api_key: str = Depends(require_api_key)) -> KeyCheckResponse:
    """Confirm the caller's key is accepted. The key itself is never echoed."""
    fingerprint = key_fingerprint(api_key)
    logger.info("Verified key %s", fingerprint)
    return KeyCheckResponse(authenticated=True, scheme=API_KEY_SCHEME, key_fingerprint=fingerprint)
