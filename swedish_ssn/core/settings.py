from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    log_level: str = Field(default="INFO", alias="SSN_LOG_LEVEL")
    mask_char: str = Field(default="X", alias="SSN_MASK_CHAR")
    allow_coordination: bool = Field(default=True, alias="SSN_ALLOW_COORDINATION")
    county_check: bool = Field(default=True, alias="SSN_COUNTY_CHECK")
    default_country: str = Field(default="SE", alias="SSN_DEFAULT_COUNTRY")

    @field_validator("mask_char")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1 or value.isdigit():
            raise ValueError("mask_char must be exactly one non-digit character")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
