"""
Service configuration.

Read once from the environment (and backend/.env) at process start;
immutable afterwards.
"""

import os
import pathlib
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

# .env lives in the backend folder (parent of app)
ENV_PATH = pathlib.Path(__file__).resolve().parent.parent.parent / '.env'

LOG_LEVELS = ("error", "warn", "info", "debug")
DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024  # 10mb


@dataclass(frozen=True)
class AnalyzerSettings:
    """Process-wide settings for the analyzer service"""
    log_level: str = "info"
    host: str = "0.0.0.0"
    port: int = 6060
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    mappings_dir: str = "data/selector_mappings"
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES

    @classmethod
    def from_env(cls) -> "AnalyzerSettings":
        load_dotenv(ENV_PATH)

        log_level = os.getenv("LOG_LEVEL", "info").lower()
        if log_level == "warning":
            log_level = "warn"
        if log_level not in LOG_LEVELS:
            log_level = "info"

        # Comma-separated, e.g. CORS_ORIGINS=https://app.example.com,https://admin.example.com
        cors_origins_env = os.getenv("CORS_ORIGINS", "")
        if cors_origins_env:
            cors_origins = [origin.strip() for origin in cors_origins_env.split(",") if origin.strip()]
        else:
            cors_origins = ["*"]

        return cls(
            log_level=log_level,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "6060")),
            cors_origins=cors_origins,
            mappings_dir=os.getenv("MAPPINGS_DIR", "data/selector_mappings"),
            max_body_bytes=int(os.getenv("MAX_BODY_BYTES", str(DEFAULT_MAX_BODY_BYTES))),
        )


_settings: Optional[AnalyzerSettings] = None


def get_settings() -> AnalyzerSettings:
    """Get or create the settings instance"""
    global _settings
    if _settings is None:
        _settings = AnalyzerSettings.from_env()
    return _settings
