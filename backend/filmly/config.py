"""Application configuration"""
from typing import List

from pydantic_settings import BaseSettings

from filmly.utils.duration import expires_in_seconds

DEFAULT_JWT_SECRET = "filmly-dev-secret-change-in-production"


class Settings(BaseSettings):
    """Application settings"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    API_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000"

    # JWT Authentication
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_IN: str = "3600"  # seconds, or <n><unit> with unit in s/m/h/d

    # Monitoring
    METRICS_ENABLED: bool = True
    METRICS_PATH: str = "/metrics"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins string into list"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def jwt_expires_in_seconds(self) -> int:
        """Token lifetime in seconds"""
        return expires_in_seconds(self.JWT_EXPIRES_IN)


settings = Settings()
