from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and endpoints centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    google_api_key: Optional[str] = os.getenv("GOOGLE_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    temperature: float = float(os.getenv("MODEL_TEMPERATURE", "0.3"))
    top_p: float = float(os.getenv("MODEL_TOP_P", "0.9"))
    model_timeout: float = float(os.getenv("MODEL_TIMEOUT_SECONDS", "30"))
    rdw_api_base: str = os.getenv(
        "RDW_API_BASE", "https://opendata.rdw.nl/resource/m9d7-ebf2.json"
    )
    rdw_timeout: float = float(os.getenv("RDW_TIMEOUT_SECONDS", "10"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
