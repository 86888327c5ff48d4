"""Configuration management for the Charify chat server."""

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


def _load_env_file() -> None:
    """Load .env from root directory if present."""
    env_path = Path(__file__).parent.parent / ".env"
    if not env_path.is_file():
        return
    try:
        for line in env_path.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if stripped and not stripped.startswith("#") and "=" in stripped:
                key, value = stripped.split("=", 1)
                key, value = key.strip(), value.strip().strip("'\"")
                if key and value and key not in os.environ:
                    os.environ[key] = value
    except OSError:
        pass


_load_env_file()


DEFAULT_APP_NAME = "Charify Chat Server"
DEFAULT_APP_VERSION = "1.0.0"
DEFAULT_REQUESTS_FILE = str(Path(__file__).parent / "data" / "sample_requests.json")


def _env_int(name: str, fallback: int) -> int:
    try:
        return int(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


class Settings(BaseModel):
    """Application settings with environment fallbacks."""

    # App metadata
    app_name: str = Field(default=DEFAULT_APP_NAME)
    app_version: str = Field(default=DEFAULT_APP_VERSION)

    # Server runtime
    server_host: str = Field(default=os.getenv("CHARIFY_HOST", "0.0.0.0"))
    server_port: int = Field(default=_env_int("CHARIFY_PORT", 8001))

    # Help request records supplied by the request-management flow
    requests_file: Optional[str] = Field(default=os.getenv("CHARIFY_REQUESTS_FILE", DEFAULT_REQUESTS_FILE))

    # Chat behaviour
    max_attachment_bytes: int = Field(default=_env_int("CHARIFY_MAX_ATTACHMENT_BYTES", 10 * 1024 * 1024))
    request_summary_length: int = Field(default=100)

    # HTTP behaviour
    cors_allow_origins_raw: str = Field(default=os.getenv("CHARIFY_CORS_ALLOW_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000"))
    enable_docs: bool = Field(default=os.getenv("CHARIFY_ENABLE_DOCS", "1") != "0")
    docs_url: Optional[str] = Field(default=os.getenv("CHARIFY_DOCS_URL", "/docs"))

    @property
    def cors_allow_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_allow_origins_raw.strip() in {"", "*"}:
            return ["*"]
        return [origin.strip() for origin in self.cors_allow_origins_raw.split(",") if origin.strip()]

    @property
    def resolved_docs_url(self) -> Optional[str]:
        """Return documentation URL when docs are enabled."""
        return (self.docs_url or "/docs") if self.enable_docs else None

    @property
    def attachments_enabled(self) -> bool:
        """Flag indicating attachment uploads are accepted."""
        return self.max_attachment_bytes > 0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
