from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Runtime configuration values shared by the localization and membership helpers."""

    online_window_minutes: int = int(os.getenv("USER_IS_ONLINE_WINDOW_MINUTES", "15"))
    localization_resource_path: str = os.getenv("LOCALIZATION_RESOURCE_PATH", "")
    localization_redis_url: str = os.getenv("LOCALIZATION_REDIS_URL", "")
    localization_redis_prefix: str = os.getenv("LOCALIZATION_REDIS_PREFIX", "strings")
    localization_culture: str = os.getenv("LOCALIZATION_CULTURE", "en").lower()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings instance for the running process."""
    return Settings()
