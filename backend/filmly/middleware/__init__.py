"""Middleware modules for production-ready features"""
from filmly.middleware.monitoring import (
    MonitoringMiddleware,
    record_auth_failure,
    record_favorite_change,
    record_login,
    set_revoked_tokens,
)

__all__ = [
    "MonitoringMiddleware",
    "record_auth_failure",
    "record_favorite_change",
    "record_login",
    "set_revoked_tokens",
]
