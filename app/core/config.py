# app/core/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

# repo root: app/core/config.py -> parents[2]
DEFAULT_LISTINGS_PATH = Path(__file__).resolve().parents[2] / "data" / "listings.json"

# ----- App settings (env-driven) -----
class Settings(BaseSettings):
    listings_path: Path = DEFAULT_LISTINGS_PATH
    api_prefix: str = "/api"
    cors_origins: List[str] = ["*"]
    default_page_size: int = 20

    placeholder_max_dimension: int = 2000
    placeholder_ttl_seconds: int = 3600
    placeholder_max_items: int = 512
    placeholder_quality: int = 80
    placeholder_font_path: str = "DejaVuSans.ttf"

    log_level: str = "INFO"

    class Config:
        env_prefix = ""
        env_file = ".env"
        case_sensitive = False

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
