from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

# Application settings using pydantic-settings for structured configuration

DEFAULT_STOP_WORDS = [
    "a", "an", "the", "of", "and", "or", "to", "in", "on", "at", "is",
    "и", "в", "во", "на", "с", "со", "что", "как", "а", "но", "над", "чем", "их", "хотя",
]


class Settings(BaseSettings):
    # --- App ---
    app_name: str = "Document Analytics"
    app_env: str = "development"          # e.g., development / staging / production
    debug: bool = True
    log_level: str | None = None          # overrides debug when set (e.g. "WARNING")

    # --- Stop words ---
    # STOP_WORDS in the environment is a JSON list, e.g. '["a", "the"]'
    stop_words: list[str] = DEFAULT_STOP_WORDS
    # optional extra words, one per line
    stop_words_file: Optional[str] = None

    # --- MongoDB ---
    mongo_uri: str | None = None
    mongo_db_name: str = "doc_analytics"
    mongo_collection_docs: str = "documents"
    use_mongo: bool = False

    # pydantic v2 / pydantic-settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",     # auto-load from your .env
        case_sensitive=False,  # .env keys can be upper/lower
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Cache settings so we don’t re-parse .env on every request."""
    return Settings()
