from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 9000
    log_level: str = "INFO"
    google_ai_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    max_retries: int = 3
    retry_delay_seconds: float = 2.0
    restcountries_base: str = "https://restcountries.com/v3.1"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
