"""
Error hierarchy raised by the SteamGridDB client.
"""
import requests

# Network failures surface as the transport's own exceptions.
TransportError = requests.RequestException


class SGDBError(Exception):
    """Base class for every error raised by this library."""


class InvalidArgumentError(SGDBError, TypeError):
    """A caller-supplied value was rejected before any request was sent."""


class MalformedResponseError(SGDBError):
    """The server body could not be read as a JSON envelope."""

    def __init__(self, message: str = "Server responded with invalid JSON.", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ApiError(SGDBError):
    """The server answered with ``success: false``."""

    def __init__(self, errors: list[str] | None = None, status_code: int | None = None):
        self.errors = list(errors or [])
        self.status_code = status_code
        super().__init__(", ".join(self.errors) if self.errors else "Unknown API error")
