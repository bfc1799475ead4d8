import calendar
import os
from datetime import date
from pathlib import Path

import pytest
import requests
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parent.parent
os.environ.setdefault("COOKTIME_CONFIG", str(PROJECT_ROOT / "config.yml"))

from api.app import app
from api.dependencies import get_catalog, get_prayer_cache
from core.catalog import Dish, DishCatalog
from core.runtime_state import PrayerTimeCache

WINDOW_START = date(2024, 3, 11)
WINDOW_END = date(2024, 4, 9)


@pytest.fixture(autouse=True)
def project_cwd(monkeypatch):
    # config.yml and assets/ are looked up relative to the working directory
    monkeypatch.chdir(PROJECT_ROOT)


def make_day(year, month, day, asr="15:30 (+03)", maghrib="18:00 (+03)"):
    """Aladhan-shaped calendar day record."""
    d = date(year, month, day)
    return {
        "timings": {"Fajr": "05:00 (+03)", "Asr": asr, "Maghrib": maghrib, "Isha": "19:30 (+03)"},
        "date": {
            "readable": d.strftime("%d %b %Y"),
            "gregorian": {
                "day": f"{day:02d}",
                "month": {"number": month, "en": d.strftime("%B")},
                "year": str(year),
            },
        },
    }


def make_month(year, month, **timings):
    days = calendar.monthrange(year, month)[1]
    return [make_day(year, month, d, **timings) for d in range(1, days + 1)]


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self._payload


@pytest.fixture
def window_days():
    days = []
    for month in (3, 4):
        for rec in make_month(2024, month):
            greg = rec["date"]["gregorian"]
            d = date(2024, greg["month"]["number"], int(greg["day"]))
            if WINDOW_START <= d <= WINDOW_END:
                days.append({"date": rec["date"]["readable"], "maghrib": "18:00", "asr": "15:30"})
    return days


@pytest.fixture
def fetch_calls():
    return []


@pytest.fixture
def prayer_cache(window_days, fetch_calls):
    def fetcher(*args):
        fetch_calls.append(args)
        return window_days

    return PrayerTimeCache(WINDOW_START, WINDOW_END, 21.4225, 39.8262, 0, fetcher=fetcher)


@pytest.fixture
def catalog():
    return DishCatalog([
        Dish("Lentil Soup", ("Red Lentils", "Onion", "Lemon"), 20),
        Dish("Lamb Mandi", ("Lamb", "Basmati Rice", "Onion"), 200),
        Dish("Hummus", ("Chickpeas", "Tahini", "Lemon"), 15),
    ])


@pytest.fixture
def client(prayer_cache, catalog):
    app.dependency_overrides[get_prayer_cache] = lambda: prayer_cache
    app.dependency_overrides[get_catalog] = lambda: catalog
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
