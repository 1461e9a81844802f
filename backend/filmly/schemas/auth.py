"""Authentication schemas"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Login body. Fields are untyped so the handler reports bad values."""

    email: Any = None
    password: Any = None


class TokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")
    token_type: str = Field("Bearer", alias="tokenType")
    expires_in: int = Field(..., alias="expiresIn", description="Seconds until expiry")


class LogoutResponse(BaseModel):
    message: str
