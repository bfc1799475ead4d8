"""Initialize the core package and expose key functionality."""

from .errors import CookTimeError, EmptyCatalogError, ValidationError, UpstreamFetchError
from .cook_time import compute_offset, SERVING_BUFFER_MINUTES

__all__ = [
    "CookTimeError",
    "EmptyCatalogError",
    "ValidationError",
    "UpstreamFetchError",
    "compute_offset",
    "SERVING_BUFFER_MINUTES",
]
