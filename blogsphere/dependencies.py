# blogsphere/dependencies.py
import logging

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from blogsphere.config import Settings, get_settings
from blogsphere.services.auth import decode_token

logger = logging.getLogger(__name__)

# Raw header value; the Bearer prefix is checked by CredentialVerifier
bearer_header = APIKeyHeader(
    name="Authorization", scheme_name="BearerToken", auto_error=False, description="Bearer <JWT>"
)


class AuthError(Exception):
    message = "Unauthorized"


class MissingToken(AuthError):
    message = "Unauthorized: Missing token"


class MalformedHeader(AuthError):
    message = "Unauthorized: Invalid token format"


class InvalidToken(AuthError):
    message = "Unauthorized: Invalid token"


class CredentialVerifier:
    """Checks an `Authorization: Bearer <token>` header against the configured secret."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def verify(self, header: str | None) -> dict:
        if not header:
            raise MissingToken()

        parts = header.split(" ")
        if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
            raise MalformedHeader()

        try:
            decoded = decode_token(parts[1], self.settings)
        except jwt.InvalidTokenError as e:
            # Covers bad signatures, garbage and expired tokens alike
            raise InvalidToken(str(e)) from e

        # Login wraps claims in "payload"; bare claims are accepted as well
        claims = decoded.get("payload", decoded)
        if not isinstance(claims, dict) or "id" not in claims:
            raise InvalidToken("Token carries no user id")
        return claims


def require_user(
    authorization: str | None = Depends(bearer_header),
    settings: Settings = Depends(get_settings),
) -> dict:
    try:
        return CredentialVerifier(settings).verify(authorization)
    except AuthError as e:
        logger.warning(f"Token validation failed: {type(e).__name__} {e}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
