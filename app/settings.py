# app/settings.py
from __future__ import annotations

from pydantic import BaseModel
import os


class Settings(BaseModel):
    APP_NAME: str = "body-parts-server"

    # Document store
    REDIS_URL: str = "redis://localhost:6379/0"
    # 0 keeps game documents forever
    GAME_TTL_SEC: int = 0

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    MAX_BODY_BYTES: int = 10 * 1024 * 1024

    # Dev
    LOG_LEVEL: str = "INFO"

    # CORS policy (comma-separated, "*" for any origin)
    CORS_ALLOWED_ORIGINS: str = "*"


def get_settings() -> Settings:
    return Settings(
        APP_NAME=os.getenv("APP_NAME", "body-parts-server"),
        REDIS_URL=os.getenv("REDIS_URL", "redis://localhost:6379/0"),
        GAME_TTL_SEC=int(os.getenv("GAME_TTL_SEC", "0")),
        HOST=os.getenv("HOST", "0.0.0.0"),
        PORT=int(os.getenv("PORT", "3000")),
        MAX_BODY_BYTES=int(os.getenv("MAX_BODY_BYTES", str(10 * 1024 * 1024))),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        CORS_ALLOWED_ORIGINS=os.getenv("CORS_ALLOWED_ORIGINS", "*"),
    )
