"""Shared schemas"""
from typing import Any, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: Optional[Any] = None


class HealthResponse(BaseModel):
    status: str
