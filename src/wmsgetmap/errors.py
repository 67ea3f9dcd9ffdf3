"""Custom exception hierarchy for wmsgetmap."""

from typing import Optional


class WmsGetMapError(Exception):
    """Base exception for the wmsgetmap library."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class InvalidConfigurationError(WmsGetMapError):
    """A required configuration value is missing or empty."""
    pass


class InvalidArgumentError(WmsGetMapError):
    """An argument passed to a URL building call is missing."""
    pass
