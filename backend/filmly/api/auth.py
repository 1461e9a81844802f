"""Login and logout endpoints"""
from typing import Optional

from fastapi import APIRouter, Depends

from filmly.api.deps import AuthContext, get_store, require_auth
from filmly.config import settings
from filmly.errors import ValidationError
from filmly.middleware.monitoring import record_login, set_revoked_tokens
from filmly.schemas import ErrorResponse, LoginRequest, LogoutResponse, TokenResponse
from filmly.store import FilmStore
from filmly.utils.jwt_utils import create_access_token
from filmly.utils.logger import logger
from filmly.utils.validation import is_valid_email, is_valid_password, normalize_email

router = APIRouter(tags=["authentication"])


@router.post(
    "/auth",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}},
)
def login(request: Optional[LoginRequest] = None) -> TokenResponse:
    """Exchange an email and password for a bearer token.

    Any well-formed email with a non-empty password is accepted; there is no
    user store behind this endpoint. Replace it with real credential
    verification before exposing the service.
    """
    request = request or LoginRequest()
    email = normalize_email(request.email)

    # Never log the password
    logger.info("Authentication attempt", extra={"email": email, "action": "login"})

    if not is_valid_email(email) or not is_valid_password(request.password):
        raise ValidationError("Email or password is invalid")

    token = create_access_token({"email": email})
    record_login()

    logger.info("Issued access token", extra={"email": email, "action": "issue_token"})

    return TokenResponse(
        access_token=token,
        token_type="Bearer",
        expires_in=settings.jwt_expires_in_seconds,
    )


@router.post(
    "/logout",
    response_model=LogoutResponse,
    responses={401: {"model": ErrorResponse}},
)
def logout(
    auth: AuthContext = Depends(require_auth),
    store: FilmStore = Depends(get_store),
) -> LogoutResponse:
    """Revoke the bearer token used for this request."""
    if auth.token:
        store.revoke_token(auth.token)
        set_revoked_tokens(store.revoked_count())
        logger.info("Token revoked", extra={"email": auth.email, "action": "logout"})
    return LogoutResponse(message="Successfully logged out")
