"""Configuration settings for the arena simulator"""

from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_prefix="ARENA_", env_file=".env", case_sensitive=False)

    service_name: str = "arena-sim"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
