from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    API_URL: str = 'https://api.themoviedb.org/3'
    API_READ_ACCESS_TOKEN: str = ''
    PORT: int = 3000
    REQUEST_TIMEOUT: float = 10.0
    LOG_LEVEL: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'] = 'INFO'

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        frozen=True
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
