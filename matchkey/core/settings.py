from functools import lru_cache

import phonenumbers
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# region code phonenumbers reports for unassigned calling codes
_UNKNOWN_REGION = "ZZ"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Matchkey API", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    default_country_code: str = Field(default="1", alias="DEFAULT_COUNTRY_CODE")
    hash_address_fields: bool = Field(default=False, alias="HASH_ADDRESS_FIELDS")

    @field_validator("default_country_code")
    @classmethod
    def _check_country_code(cls, value: str) -> str:
        code = value.strip().lstrip("+")
        if not (code.isascii() and code.isdigit()) or not 1 <= len(code) <= 3:
            raise ValueError("DEFAULT_COUNTRY_CODE must be 1-3 digits")
        if phonenumbers.region_code_for_country_code(int(code)) == _UNKNOWN_REGION:
            raise ValueError(f"DEFAULT_COUNTRY_CODE {code} is not an assigned calling code")
        return code


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
