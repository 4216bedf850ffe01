"""Exceptions raised by the Coincheck SDK."""

from typing import Optional


class CoincheckError(Exception):
    """Base class for all SDK errors."""


class TransportError(CoincheckError):
    """The request never produced an HTTP response."""


class RequestTimeoutError(TransportError):
    """The transport gave up waiting for the exchange."""


class DecodeError(CoincheckError):
    """The response body was not the JSON shape we expected."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class APIError(CoincheckError):
    """
    The exchange answered but reported a failure.

    Raised both for an explicit ``error`` message in the response envelope
    and for ``success: false`` without one.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UsageError(CoincheckError):
    """The CLI or configuration was used incorrectly."""
