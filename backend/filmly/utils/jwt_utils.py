"""JWT utilities: HS256 token signing and verification"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from jose import JWTError, jwt

from filmly.config import settings
from filmly.utils.duration import expires_in_seconds
from filmly.utils.logger import logger


class InvalidTokenError(Exception):
    """Token is malformed, has a bad signature, or has expired."""

    code = "INVALID_TOKEN"


# ---------------------------------------------------------------------------
# Token creation
# ---------------------------------------------------------------------------

def create_access_token(
    claims: Dict[str, Any],
    secret: Optional[str] = None,
    expires_in: Union[int, float, str, None] = None,
) -> str:
    """Sign and return a JWT access token.

    Args:
        claims:     Claims to embed (``email`` at minimum).
        secret:     Signing key; defaults to ``JWT_SECRET``.
        expires_in: Lifetime in seconds or ``<n><unit>``; defaults to
                    ``JWT_EXPIRES_IN``.

    Returns:
        Signed JWT string.
    """
    if expires_in is None:
        expires_in = settings.JWT_EXPIRES_IN

    now = int(datetime.now(timezone.utc).timestamp())

    payload: Dict[str, Any] = {
        **claims,
        "jti": str(uuid.uuid4()),
        "iat": now,
        "exp": now + expires_in_seconds(expires_in),
    }

    return jwt.encode(payload, secret or settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


# ---------------------------------------------------------------------------
# Token verification
# ---------------------------------------------------------------------------

def decode_access_token(token: str, secret: Optional[str] = None) -> Dict[str, Any]:
    """Verify a JWT's signature and expiry and return its claims.

    Revocation is not checked here; callers consult the token blacklist.

    Raises:
        InvalidTokenError: on any verification failure.
    """
    try:
        return jwt.decode(
            token,
            secret or settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError as exc:
        logger.debug(f"JWT decode failed: {exc}")
        raise InvalidTokenError("Invalid or expired token") from exc
