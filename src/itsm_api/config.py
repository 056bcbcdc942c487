import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")

    # CORS (comma-separated origins, "*" for any)
    allowed_origins: str = os.getenv("ALLOWED_ORIGINS", "*")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "text")  # "json" or "text"

    # Dotted path to a factory returning a ServiceContainer
    # (e.g. "itsm_backend.wiring.build_container")
    service_container: str | None = os.getenv("SERVICE_CONTAINER")

    @property
    def origins(self) -> list[str]:
        """Return the allowed CORS origins as a list.

        Returns:
            List of origins, without surrounding whitespace or empty items
        """
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.log_format not in ("json", "text"):
            raise ValueError(f"LOG_FORMAT must be 'json' or 'text', got {self.log_format!r}")

        if self.api_prefix and not self.api_prefix.startswith("/"):
            raise ValueError(f"API_PREFIX must start with '/', got {self.api_prefix!r}")

        if self.service_container is not None and "." not in self.service_container:
            raise ValueError(
                "SERVICE_CONTAINER must be a dotted path 'package.module.factory', "
                f"got {self.service_container!r}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
