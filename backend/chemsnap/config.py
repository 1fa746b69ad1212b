"""Application configuration."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # App settings
    app_name: str = "ChemSnap Label Extraction API"
    debug: bool = False
    log_level: str = "INFO"
    
    # CORS - the capture app is served from a different origin
    cors_origins: list[str] = ["*"]
    
    # Request limits
    max_text_length: int = 20_000  # Recognized text longer than this is rejected by the API
    
    # Candidate ranking
    max_candidates: int = 6  # Shortlist size presented per field
    chemical_name_min_length: int = 3
    chemical_name_max_length: int = 70
    
    # Manufacturer fallback (last plausible line) - tunable, precision unverified
    manufacturer_fallback_min_length: int = 3  # Line must be longer than this
    manufacturer_fallback_max_digit_run: int = 3  # Lines with a digit run this long are skipped
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "CHEMSNAP_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
