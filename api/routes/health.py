from fastapi import APIRouter, Depends

from api.dependencies import get_catalog, get_prayer_cache
from core.catalog import DishCatalog
from core.runtime_state import PrayerTimeCache

router = APIRouter()


@router.get("/health")
def health(
    cache: PrayerTimeCache = Depends(get_prayer_cache),
    catalog: DishCatalog = Depends(get_catalog),
):
    return {
        "status": "ok",
        "prayer_times_loaded": cache.loaded,
        "dishes": len(catalog),
    }
