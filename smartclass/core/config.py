"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "smartclass"
    mongodb_timeout_ms: int = 5000

    # JWT Auth
    jwt_secret_key: str = "smartclass_secret_key"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 120

    # Password hashing
    bcrypt_rounds: int = 8

    # Which routes need a bearer token:
    #   none   - nothing is gated
    #   signup - POST /signup needs an admin token
    #   all    - signup needs an admin token, every data route needs a token
    auth_gate: Literal["none", "signup", "all"] = "none"

    # App
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    debug: bool = False

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
