"""Error types raised by the cook-time service and mapped to HTTP in api.app."""


class CookTimeError(Exception):
    """Base class for errors the API turns into a JSON error envelope."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CookTimeError):
    """Missing, malformed or out-of-range query parameter."""

    status_code = 400


class UpstreamFetchError(CookTimeError):
    """The remote prayer calendar could not be fetched or understood."""

    status_code = 500


class EmptyCatalogError(CookTimeError):
    """The dish dataset has nothing to suggest."""

    status_code = 500
