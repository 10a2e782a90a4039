# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_set(name: str, default: str) -> frozenset[str]:
    return frozenset(v.strip() for v in os.getenv(name, default).split(",") if v.strip())


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "safetynet-alerts")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8080"))

    DATA_FILE_PATH: str = os.getenv("DATA_FILE_PATH", "data/data.json")
    PERSIST_ON_MUTATION: bool = _env_bool("PERSIST_ON_MUTATION", "true")
    BACKUP_ON_SAVE: bool = _env_bool("BACKUP_ON_SAVE", "true")

    CHILD_AGE_LIMIT: int = int(os.getenv("CHILD_AGE_LIMIT", "18"))
    # Resolver operations that drop residents lacking a medical profile
    # instead of failing the whole query.
    MISSING_PROFILE_SKIP_OPERATIONS: frozenset[str] = _env_set(
        "MISSING_PROFILE_SKIP_OPERATIONS", "children_at_address"
    )

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
