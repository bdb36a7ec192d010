# settings.py
from functools import lru_cache
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # API
    app_name: str = "Raiku Quiz"
    api_prefix: str = "/api/v1"

    # Gemini - an empty key switches every operation to offline behaviour
    gemini_api_key: str = Field("", validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"))
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    request_timeout: float = 60.0

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True)

@lru_cache
def get_settings() -> Settings:
    return Settings()
