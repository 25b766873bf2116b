"""FusionAuth client exceptions."""
from __future__ import annotations


class FusionAuthError(Exception):
    """Base exception for all FusionAuth client operations."""
    pass


class RequestConfigurationError(FusionAuthError, ValueError):
    """The request builder was executed without a URL or a valid HTTP method.

    Raised before any network I/O. This signals a bug in the calling code,
    never an environment condition.
    """
    pass


class ResponseDecodeError(FusionAuthError):
    """A response body could not be parsed as JSON.

    Attributes:
        status_code: HTTP status code of the response (None when unknown)
        body: Raw response body
    """

    def __init__(self, message: str, body: bytes | str, status_code: int | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class FusionAuthAPIError(FusionAuthError):
    """HTTP error from the FusionAuth API.

    Only raised by ClientResponse.raise_for_status(); the request builder
    itself reports HTTP errors on the response envelope.

    Attributes:
        status_code: HTTP status code
        message: Error message (field errors, general errors or raw text)
        endpoint: API endpoint that failed
    """

    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")
