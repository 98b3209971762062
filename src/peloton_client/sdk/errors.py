"""
Peloton SDK error classes.

Transport failures are not wrapped: they surface as the original
``requests.exceptions.RequestException``.
"""

from typing import Optional


class PelotonError(Exception):
    """Base error class for the Peloton client."""


class NotAuthenticatedError(PelotonError, RuntimeError):
    """An authenticated call was made before authenticate() or set_token()."""

    def __init__(self, message: str = "Must authenticate before making API call."):
        super().__init__(message)


class PelotonAuthError(PelotonError, ValueError):
    """The login response did not carry what a session needs."""


class PelotonDecodeError(PelotonError, ValueError):
    """A response body was not valid JSON or did not match its expected shape."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r}, field={self.field!r})"
