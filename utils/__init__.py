"""
Utils Package
-------------
Provides helper modules for configuration loading, logging and the prayer calendar API.
"""

from .config_loader import load_config
from .prayer_api import get_calendar_month, get_prayer_window

__all__ = ["load_config", "get_calendar_month", "get_prayer_window"]
