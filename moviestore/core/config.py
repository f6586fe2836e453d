# moviestore/core/config.py
import json
import os
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field

# ─── 1) Locate the JSON file ─────────────────────────────────────────────────
# moviestore/core/config.py  ->  moviestore/core/config.json

BASE_DIR    = Path(__file__).parent
CONFIG_PATH = BASE_DIR / "config.json"


# ─── 2) Validated settings model ─────────────────────────────────────────────
class Settings(BaseModel):
    # Server
    host: str = "0.0.0.0"
    port: int = Field(
        1234,
        ge=1, le=65535,
        description="Listening port; the PORT environment variable wins",
    )
    log_level: str = "INFO"

    # CORS
    accepted_origins: List[str] = Field(
        default_factory=lambda: [
            "http://127.0.0.1:5500",
            "http://localhost:5500",
            "http://localhost:1234",
            "https://movies.com",
            "https://midu.dev",
        ],
        description="Origins allowed to call the API from a browser",
    )

    # Seed data
    seed_path: Path = Field(
        Path("../data/movies.json"),
        description="Initial movie collection, relative to the config directory",
    )

    @property
    def seed_file(self) -> Path:
        path = self.seed_path
        return path if path.is_absolute() else (BASE_DIR / path).resolve()

    @property
    def listen_port(self) -> int:
        return int(os.environ.get("PORT", self.port))


# ─── 3) Cached loader ────────────────────────────────────────────────────────
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and return the Settings instance from config.json, cached in-memory.
    Falls back to defaults when the file is absent.
    """
    if not CONFIG_PATH.exists():
        return Settings()
    with CONFIG_PATH.open(encoding="utf-8") as f:
        data = json.load(f)
    return Settings(**data)


def reload_settings() -> None:
    """Clear the cached Settings so that next get_settings() re-reads config.json."""
    get_settings.cache_clear()
