from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Used when a cleaner is called with recursive=None / clean_empty=None
    default_recursive: bool = Field(default=True)
    default_clean_empty: bool = Field(default=False)

    # Marks after which capitalise_first re-capitalises
    sentence_endings: str = Field(default="!?.", min_length=1)

    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_prefix="OBJ_UTILS_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
