"""Library configuration management via environment variables."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="SILLY_NLP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Logging
    log_level: str = "INFO"
    
    # Approximate equality: allowed edit distance as a share of the
    # shorter canonical form
    fuzzy_threshold_ratio: float = Field(default=0.2, ge=0.0, le=1.0)
    
    # Simplification: remove every [bracketed] run, or only the first one
    remove_all_bracketed: bool = True
    
    # Word list overrides (bundled lists are used when unset)
    english_words_path: Optional[Path] = None
    stop_words_path: Optional[Path] = None


# Global settings instance
settings = Settings()
