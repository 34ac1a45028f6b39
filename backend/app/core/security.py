"""
Access token verification.

Sessions are owned by the identity provider. It signs an access token per
session (HS256 with a shared secret by default) whose ``sub`` claim is the
user's profile id; this service only checks the signature, expiry and,
when configured, the audience.
"""
from typing import Dict, Any
from jose import ExpiredSignatureError, JWTError, jwt

from app.core.config import settings
from app.core.exceptions import InvalidTokenError, TokenExpiredError


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and verify an identity-provider access token"""
    options = {"verify_aud": settings.JWT_AUDIENCE is not None}
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            options=options,
        )
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError:
        raise InvalidTokenError()


def get_token_subject(token: str) -> str:
    """Return the user id a token was issued for"""
    payload = decode_token(token)
    subject = payload.get("sub")
    if not subject:
        raise InvalidTokenError("Invalid token payload")
    return str(subject)
