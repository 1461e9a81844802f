"""API dependencies: store access and the bearer-token gate.

Every route except health and login depends on :func:`require_auth`:

1. ``Authorization: Bearer <token>`` must be present.
2. The token must not be on the store's blacklist.
3. The signature and expiry must verify.

The resolved :class:`AuthContext` carries the raw token so logout can revoke it.
"""
from typing import Any, Dict, NamedTuple, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from filmly.errors import UnauthorizedError
from filmly.middleware.monitoring import record_auth_failure
from filmly.store import FilmStore
from filmly.utils.jwt_utils import InvalidTokenError, decode_access_token
from filmly.utils.logger import logger

_bearer_scheme = HTTPBearer(auto_error=False)


class AuthContext(NamedTuple):
    """Authenticated caller, populated by :func:`require_auth`."""
    token: str
    claims: Dict[str, Any]

    @property
    def email(self) -> Optional[str]:
        return self.claims.get("email")


def get_store(request: Request) -> FilmStore:
    """Return the application's store"""
    return request.app.state.store


def require_auth(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    store: FilmStore = Depends(get_store),
) -> AuthContext:
    """Require a valid, unrevoked bearer token."""
    request_id = getattr(request.state, "request_id", None)

    if credentials is None or not credentials.credentials:
        record_auth_failure("missing")
        raise UnauthorizedError("Authorization header is missing or invalid")

    token = credentials.credentials

    if store.is_revoked(token):
        record_auth_failure("revoked")
        logger.info("Rejected revoked token", extra={"request_id": request_id, "action": "auth"})
        raise UnauthorizedError("Token has been revoked")

    try:
        claims = decode_access_token(token)
    except InvalidTokenError:
        record_auth_failure("invalid")
        logger.info("Rejected invalid or expired token", extra={"request_id": request_id, "action": "auth"})
        raise UnauthorizedError("Invalid or expired token")
    except Exception:
        record_auth_failure("invalid")
        logger.warning(
            "Unexpected token verification failure",
            extra={"request_id": request_id, "action": "auth"},
            exc_info=True,
        )
        raise UnauthorizedError("Invalid or expired token")

    return AuthContext(token=token, claims=claims)
