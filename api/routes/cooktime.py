from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog, get_prayer_cache
from api.helpers import day_times, dish_response, parse_day
from core.catalog import DishCatalog
from core.errors import ValidationError
from core.runtime_state import PrayerTimeCache

router = APIRouter()


@router.get("/cooktime")
def cooktime(
    ingredient: Optional[str] = Query(None),
    day: Optional[str] = Query(None),
    cache: PrayerTimeCache = Depends(get_prayer_cache),
    catalog: DishCatalog = Depends(get_catalog),
):
    cache.ensure_loaded()

    if not ingredient or not day:
        raise ValidationError("Ingredient and day parameters are required")

    times = day_times(cache, parse_day(day))
    return [dish_response(dish, times) for dish in catalog.with_ingredient(ingredient)]
