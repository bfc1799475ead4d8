from datetime import datetime

# Minutes reserved before Maghrib for serving.
SERVING_BUFFER_MINUTES = 15


def to_minutes(time_str: str) -> int:
    """'HH:MM' -> minutes since midnight. Raises ValueError on bad input."""
    t = datetime.strptime(time_str.strip(), "%H:%M").time()
    return t.hour * 60 + t.minute


def compute_offset(time_a: str, duration_minutes: int, time_b: str, label: str = "Asr") -> str:
    """Describe when to start cooking relative to ``time_a``.

    The dish has to be ready SERVING_BUFFER_MINUTES before ``time_b``.
    Both times are same-day wall-clock values; no rollover handling.
    """
    offset = to_minutes(time_b) - SERVING_BUFFER_MINUTES - int(duration_minutes) - to_minutes(time_a)
    before_or_after = "after" if offset >= 0 else "before"
    return f"{abs(offset)} minutes {before_or_after} {label}"
