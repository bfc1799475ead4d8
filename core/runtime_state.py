import logging
from datetime import date
from threading import Lock

from core.errors import UpstreamFetchError
from utils.prayer_api import ALADHAN_CALENDAR_URL, get_prayer_window


class PrayerTimeCache:
    """Lazily loaded window of daily Asr/Maghrib times.

    Filled once by the first caller of ensure_loaded() and never refreshed.
    A failed load leaves the cache empty so the next caller retries.
    """

    def __init__(self, start: date, end: date, latitude: float, longitude: float,
                 method: int, base_url: str = ALADHAN_CALENDAR_URL, timeout: float = 10,
                 fetcher=get_prayer_window):
        self.lock = Lock()
        self.start = start
        self.end = end
        self.latitude = latitude
        self.longitude = longitude
        self.method = method
        self.base_url = base_url
        self.timeout = timeout
        self._fetcher = fetcher
        self._days = []
        self.loaded = False

    def ensure_loaded(self) -> list:
        if self.loaded:
            return self._days

        with self.lock:
            # another thread may have finished while we waited
            if not self.loaded:
                logging.info("[CACHE] Prayer times not loaded, fetching")
                try:
                    days = self._fetcher(
                        self.start, self.end, self.latitude, self.longitude,
                        self.method, self.base_url, self.timeout,
                    )
                except UpstreamFetchError:
                    logging.error("[CACHE] Prayer time load failed; will retry on next request")
                    raise
                self._days = list(days)
                self.loaded = True
                logging.info(f"[CACHE] Loaded {len(self._days)} days")
        return self._days

    def __len__(self):
        return len(self._days)

    def day(self, day_number: int) -> dict:
        """1-based lookup; caller validates the range."""
        return self._days[day_number - 1]

    @classmethod
    def from_config(cls, cfg: dict) -> "PrayerTimeCache":
        api = cfg.get("prayer_api", {})
        window = cfg.get("window", {})
        return cls(
            start=date.fromisoformat(str(window.get("start", "2024-03-11"))),
            end=date.fromisoformat(str(window.get("end", "2024-04-09"))),
            latitude=api.get("latitude", 21.4225),
            longitude=api.get("longitude", 39.8262),
            method=api.get("method", 0),
            base_url=api.get("base_url", ALADHAN_CALENDAR_URL),
            timeout=api.get("timeout", 10),
        )
