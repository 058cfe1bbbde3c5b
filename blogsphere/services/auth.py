from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

from blogsphere.config import Settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def token_claims(user) -> dict:
    return {"email": user.email, "name": user.name, "id": user.id}


def issue_token(user, settings: Settings) -> str:
    """Sign a token carrying the user's claims under `payload`, valid for `jwt_expiry_hours`."""
    now = datetime.now(timezone.utc)
    to_encode = {
        "payload": token_claims(user),
        "iat": now,
        "exp": now + timedelta(hours=settings.jwt_expiry_hours),
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings) -> dict:
    """Verify signature and expiry. Raises `jwt.InvalidTokenError` (or a subclass) on failure."""
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
