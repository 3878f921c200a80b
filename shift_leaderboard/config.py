from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    api_base_url: str = "http://localhost:3000"
    request_timeout: float = 30.0
    top_n: int = Field(default=3, ge=0)
    # the /shifts listing leads every page with a row that is not a shift
    discard_first_shift_per_page: bool = True
    workplace_strategy: Literal["per_entity", "bulk"] = "per_entity"
    log_level: LogLevel = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="SHIFT_LEADERBOARD_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
