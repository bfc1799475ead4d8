import logging
from datetime import date, datetime
from typing import Iterator, List, Tuple

import requests

from core.errors import UpstreamFetchError

ALADHAN_CALENDAR_URL = "https://api.aladhan.com/v1/calendar"


def _covered_months(start: date, end: date) -> Iterator[Tuple[int, int]]:
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield year, month
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)


def _normalise_timing(raw: str) -> str:
    """'15:52 (+03)' -> '15:52'. Raises ValueError if not HH:MM."""
    hhmm = str(raw).split()[0]
    return datetime.strptime(hhmm, "%H:%M").strftime("%H:%M")


def get_calendar_month(year: int, month: int, latitude: float, longitude: float,
                       method: int, base_url: str = ALADHAN_CALENDAR_URL,
                       timeout: float = 10) -> List[dict]:
    """Fetch one month of daily records from the Aladhan calendar API."""
    api_url = f"{base_url}/{year}/{month}"
    params = {"latitude": latitude, "longitude": longitude, "method": method}

    logging.info(f"[PRAYER] Fetching calendar {year}-{month:02d} ({latitude}, {longitude})")

    try:
        response = requests.get(api_url, params=params, timeout=timeout)
        response.raise_for_status()
        days = response.json()["data"]
    except requests.RequestException as e:
        logging.error(f"[PRAYER] Failed to fetch calendar {year}-{month:02d}: {e}")
        raise UpstreamFetchError(f"Calendar request for {year}-{month:02d} failed") from e
    except (ValueError, KeyError, TypeError) as e:
        logging.error(f"[PRAYER] Malformed calendar payload for {year}-{month:02d}: {e}")
        raise UpstreamFetchError(f"Malformed calendar payload for {year}-{month:02d}") from e

    if not isinstance(days, list):
        raise UpstreamFetchError(f"Malformed calendar payload for {year}-{month:02d}")
    return days


def project_day(day: dict) -> Tuple[date, dict]:
    """Reduce an Aladhan day record to its gregorian date and {date, maghrib, asr}."""
    gregorian = day["date"]["gregorian"]
    day_date = date(
        int(gregorian["year"]),
        int(gregorian["month"]["number"]),
        int(gregorian["day"]),
    )
    timings = day["timings"]
    return day_date, {
        "date": day["date"]["readable"],
        "maghrib": _normalise_timing(timings["Maghrib"]),
        "asr": _normalise_timing(timings["Asr"]),
    }


def get_prayer_window(start: date, end: date, latitude: float, longitude: float,
                      method: int, base_url: str = ALADHAN_CALENDAR_URL,
                      timeout: float = 10) -> List[dict]:
    """Fetch every month in [start, end] and keep the days inside the window.

    Any failure aborts the whole window with UpstreamFetchError.
    """
    combined = []
    for year, month in _covered_months(start, end):
        combined.extend(get_calendar_month(year, month, latitude, longitude, method, base_url, timeout))

    window = []
    try:
        for day in combined:
            day_date, times = project_day(day)
            if start <= day_date <= end:
                window.append(times)
    except (ValueError, KeyError, TypeError) as e:
        logging.error(f"[PRAYER] Malformed day record: {e}")
        raise UpstreamFetchError("Malformed day record in calendar payload") from e

    logging.info(f"[PRAYER] Window {start} → {end}: {len(window)} days")
    return window
