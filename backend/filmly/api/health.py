"""Health check endpoint"""
from fastapi import APIRouter

from filmly.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Returns 200 if the service is running"""
    return HealthResponse(status="ok")
