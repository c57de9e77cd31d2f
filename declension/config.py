# declension/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration of the declension engine.
    Values come from DECLENSION_* environment variables or a local .env file.
    """

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    # --- Factory ---
    # Strict mode: raise for languages without a declension instead of
    # falling back to the simple (uninflected) declension.
    FAIL_ON_MISSING_DECLENSION: bool = False

    # --- Catalog ---
    DEFAULT_LANGUAGE: str = "en_US"

    model_config = SettingsConfigDict(
        env_prefix="DECLENSION_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
