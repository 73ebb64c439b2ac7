# petitbac/core/config.py
import pathlib
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

logger = logging.getLogger("petitbac.core.config")  # Logger for this module

BASE_DIR = pathlib.Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    PROJECT_NAME: str = "Petit Bac Validation Backend"
    API_V1_STR: str = "/api/v1"
    DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'petitbac.db'}"

    # Free dictionary service, no API key required. The lowercase word is appended as the last path segment.
    DICTIONARY_API_URL: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    DICTIONARY_API_TIMEOUT_SECONDS: float = 8.0

    WEB_VALIDATOR_ENABLED: bool = True
    # Stays off until a semantic model is wired in
    SEMANTIC_VALIDATOR_ENABLED: bool = False

    # A cache hit is "previously confirmed", deliberately below a fresh fixed-list match (1.0)
    LOCAL_CACHE_CONFIDENCE: float = 0.90
    CONFIDENCE_THRESHOLD: float = 0.8

    # Delay before a keystroke-triggered validation actually starts
    LIVE_VALIDATION_DEBOUNCE_SECONDS: float = 0.15

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

@lru_cache()
def get_settings():
    settings_instance = Settings()
    logger.info(f"Database URL set to: {settings_instance.DATABASE_URL}")
    return settings_instance

settings = get_settings()
