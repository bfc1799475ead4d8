import re

from core.cook_time import compute_offset
from core.errors import ValidationError
from core.runtime_state import PrayerTimeCache

# leading integer, trailing text ignored: "3days" -> 3, "1.5" -> 1
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_day(day: str) -> int:
    match = LEADING_INT.match(day)
    if not match:
        raise ValidationError("Day parameter must be a number")
    return int(match.group(1))


def day_times(cache: PrayerTimeCache, day_number: int) -> dict:
    """Prayer times for a 1-based day of a loaded cache."""
    if day_number < 1 or day_number > len(cache):
        raise ValidationError("Invalid day number")
    return cache.day(day_number)


def dish_response(dish, times: dict) -> dict:
    return {
        "dishName": dish.name,
        "ingredients": list(dish.ingredients),
        "cookingTime": compute_offset(times["asr"], dish.duration, times["maghrib"]),
    }
