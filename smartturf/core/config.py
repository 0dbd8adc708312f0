"""Configuration settings for the smart turf booking service."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Smart Turf Booking Service")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./smart_turf.db")
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "20"))
    DB_ECHO: bool = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "changeme")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    # Operating window for bookable slots, [open, close) in whole UTC hours.
    SLOT_OPEN_HOUR: int = int(os.getenv("SLOT_OPEN_HOUR", "6"))
    SLOT_CLOSE_HOUR: int = int(os.getenv("SLOT_CLOSE_HOUR", "24"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def __init__(self) -> None:
        if not 0 <= self.SLOT_OPEN_HOUR < self.SLOT_CLOSE_HOUR <= 24:
            raise ValueError(
                "SLOT_OPEN_HOUR and SLOT_CLOSE_HOUR must satisfy 0 <= open < close <= 24"
            )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
