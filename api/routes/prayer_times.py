from fastapi import APIRouter, Depends

from api.dependencies import get_prayer_cache
from core.runtime_state import PrayerTimeCache

router = APIRouter()


@router.get("/prayer-times")
def prayer_times(cache: PrayerTimeCache = Depends(get_prayer_cache)):
    return cache.ensure_loaded()
