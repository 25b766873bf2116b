"""Uniform response envelope for a single FusionAuth API call."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .exceptions import FusionAuthAPIError, ResponseDecodeError

TRANSPORT_FAILURE = -1


@dataclass(frozen=True)
class ClientResponse:
    """Outcome of one HTTP call made by RESTClient.go().

    Exactly one of these describes a finished call:
    - ``success_response`` set: 2xx status with a JSON body
    - ``error_response`` set: non-2xx status with a JSON body
    - ``exception`` set, status -1: no HTTP response was obtained
      (DNS, connect, TLS, timeout); ``exception`` is never set otherwise
    - ``decode_error`` set: the server answered but its body was not valid
      JSON; the HTTP status is kept and both bodies stay None
    - none of them: the server answered without a body (e.g. 200 on delete, 404)

    Attributes:
        url: Fully resolved request URL (path segments and query string included)
        method: HTTP verb used
        request: Serialized request body, or None
        status: HTTP status code, or -1 on transport failure
        success_response: Decoded 2xx body
        error_response: Decoded non-2xx body
        exception: Transport failure (only with status -1)
        decode_error: ResponseDecodeError for an undecodable body
        headers: Response headers (empty on transport failure)
    """

    url: str
    method: str
    request: Optional[bytes] = None
    status: int = TRANSPORT_FAILURE
    success_response: Any = None
    error_response: Any = None
    exception: Optional[BaseException] = None
    decode_error: Optional[ResponseDecodeError] = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def was_successful(self) -> bool:
        """True for a 2xx response whose body (if any) decoded cleanly."""
        return 200 <= self.status <= 299 and self.exception is None and self.decode_error is None

    @property
    def transport_failed(self) -> bool:
        return self.status == TRANSPORT_FAILURE

    def raise_for_status(self) -> "ClientResponse":
        """Raise when the call did not succeed, otherwise return self.

        Transport failures re-raise the captured exception; decode failures
        raise the ResponseDecodeError; HTTP errors raise FusionAuthAPIError.
        """
        if self.exception is not None:
            raise self.exception
        if self.decode_error is not None:
            raise self.decode_error
        if not self.was_successful:
            raise FusionAuthAPIError(self.status, _error_message(self.error_response), self.url)
        return self


def _error_message(error_response: Any) -> str:
    """Flatten a FusionAuth Errors body into a readable message."""
    if error_response is None:
        return ""
    if isinstance(error_response, str):
        return error_response

    messages = []
    general = _field(error_response, "generalErrors") or []
    for error in general:
        messages.append(f"{_field(error, 'code')}: {_field(error, 'message')}")

    field_errors = _field(error_response, "fieldErrors") or {}
    items = vars(field_errors).items() if hasattr(field_errors, "__dict__") else dict(field_errors).items()
    for name, errors in items:
        for error in errors or []:
            messages.append(f"{name}: {_field(error, 'message')}")

    return "; ".join(messages) if messages else str(error_response)


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


__all__ = ["ClientResponse", "TRANSPORT_FAILURE"]
