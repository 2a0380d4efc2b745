from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Service settings loaded from environment variables or a .env file."""

    app_env: str = os.getenv("APP_ENV", "development")
    database_path: str = os.getenv("STUDENTS_DB_PATH", "./students.db")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    ollama_base_url: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
    ollama_model: str = os.getenv("OLLAMA_MODEL", "llama2")
    ollama_timeout: float = float(os.getenv("OLLAMA_TIMEOUT", "120"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
