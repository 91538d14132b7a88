import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:8501",
    "http://127.0.0.1",
    "http://127.0.0.1:8501",
]


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    api_base: str = "http://127.0.0.1:8000/api"
    image_width: int = 1200


def _split_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_settings() -> Settings:
    """Read settings from the environment (after .env has been loaded)."""
    return Settings(
        log_level=os.environ.get("TABLEVIEW_LOG_LEVEL", "INFO"),
        log_file=os.environ.get("TABLEVIEW_LOG_FILE") or None,
        cors_origins=_split_origins(os.environ.get("TABLEVIEW_CORS_ORIGINS")),
        api_base=os.environ.get("TABLEVIEW_API_BASE", "http://127.0.0.1:8000/api"),
        image_width=int(os.environ.get("TABLEVIEW_IMAGE_WIDTH", "1200")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
