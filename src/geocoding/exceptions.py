"""
Error types raised while geocoding a coordinate table.

Per-row lookup failures derive from GeocodingError and are recorded on the
row; InputFileNotFound is the only error that aborts a run.
"""


class GeocoderError(Exception):
    """Base class for every error raised by this package."""


class InputFileNotFound(GeocoderError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Input file '{path}' not found.")


class GeocodingError(GeocoderError):
    """A single coordinate pair could not be resolved."""


class InvalidCoordinates(GeocodingError):
    def __init__(self, latitude, longitude):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(f"Invalid coordinates: {latitude}, {longitude}")


class RateLimited(GeocodingError):
    def __init__(self, message="Rate limit exceeded. Please try again later."):
        super().__init__(message)


class HttpError(GeocodingError):
    def __init__(self, status_code, reason):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP Error: {status_code} - {reason}")


class TransportError(GeocodingError):
    """Network failure, timeout or an unreadable response body."""
