"""Shared FastAPI dependencies — singleton services."""

from typing import Optional

from core.catalog import DishCatalog
from core.runtime_state import PrayerTimeCache
from utils.config_loader import load_config

_config: Optional[dict] = None
_prayer_cache: Optional[PrayerTimeCache] = None
_catalog: Optional[DishCatalog] = None


def get_config() -> dict:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_prayer_cache() -> PrayerTimeCache:
    """Process-wide prayer time cache, built from config on first use."""
    global _prayer_cache
    if _prayer_cache is None:
        _prayer_cache = PrayerTimeCache.from_config(get_config())
    return _prayer_cache


def get_catalog() -> DishCatalog:
    """Process-wide dish catalog, read from disk on first use."""
    global _catalog
    if _catalog is None:
        _catalog = DishCatalog.from_config(get_config())
    return _catalog
