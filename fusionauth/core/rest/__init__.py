"""Request building and response normalization shared by every API call.

Architecture:
- client.py: RESTClient fluent builder and HTTPMethod
- body.py: JSON and form-urlencoded request bodies
- handlers.py: JSON response decoder producing DynamicObject trees
- response.py: ClientResponse envelope
- exceptions.py: Typed exceptions
"""
from .body import BodyHandler, FormDataBodyHandler, JSONBodyHandler
from .client import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    HTTPMethod,
    RESTClient,
)
from .exceptions import (
    FusionAuthAPIError,
    FusionAuthError,
    RequestConfigurationError,
    ResponseDecodeError,
)
from .handlers import DynamicObject, JSONResponseHandler, to_plain
from .response import TRANSPORT_FAILURE, ClientResponse

__all__ = [
    # Builder
    "RESTClient",
    "HTTPMethod",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_READ_TIMEOUT",

    # Bodies
    "BodyHandler",
    "JSONBodyHandler",
    "FormDataBodyHandler",

    # Responses
    "ClientResponse",
    "TRANSPORT_FAILURE",
    "JSONResponseHandler",
    "DynamicObject",
    "to_plain",

    # Exceptions
    "FusionAuthError",
    "FusionAuthAPIError",
    "RequestConfigurationError",
    "ResponseDecodeError",
]
