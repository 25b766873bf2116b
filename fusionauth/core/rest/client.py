"""Fluent HTTP request builder for the FusionAuth API.

A RESTClient describes exactly one request. Configure it with chained calls
and finish with go(), which always returns a ClientResponse: HTTP errors and
transport failures are reported on the envelope, never raised.

Usage:
    response = (
        RESTClient()
        .url("http://localhost:9011")
        .uri("/api/user")
        .url_segment(user_id)
        .authorization(api_key)
        .success_response_handler(JSONResponseHandler())
        .error_response_handler(JSONResponseHandler())
        .get()
        .go()
    )
    if response.was_successful:
        print(response.success_response.user.email)
"""
from __future__ import annotations
import base64
import logging
from collections.abc import Set
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote, quote_plus

import requests

from .body import BodyHandler
from .exceptions import RequestConfigurationError, ResponseDecodeError
from .response import ClientResponse, TRANSPORT_FAILURE

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 1000
DEFAULT_READ_TIMEOUT = 2000

ResponseHandler = Callable[[bytes], Any]


class HTTPMethod(str, Enum):
    """HTTP verbs accepted by RESTClient, WebDAV extensions included."""

    COPY = "COPY"
    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    LOCK = "LOCK"
    MKCOL = "MKCOL"
    MOVE = "MOVE"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    POST = "POST"
    PROPFIND = "PROPFIND"
    PROPPATCH = "PROPPATCH"
    PUT = "PUT"
    TRACE = "TRACE"
    UNLOCK = "UNLOCK"

    @classmethod
    def parse(cls, value: Union["HTTPMethod", str]) -> "HTTPMethod":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise RequestConfigurationError(f"Invalid HTTP method {value}") from None


def _render_parameter(value: Any) -> str:
    """String form of a query parameter value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return str(int(value.timestamp() * 1000))
    return str(value)


class RESTClient:
    """Single-use builder for one HTTP request.

    Every setter returns the builder. The instance is not meant to be executed
    twice: the query string is appended to the URL during go().
    """

    def __init__(self) -> None:
        self._url: str = ""
        self._method: Optional[HTTPMethod] = None
        self._headers: Dict[str, str] = {}
        self._parameters: Dict[str, List[Any]] = {}
        self._body_handler: Optional[BodyHandler] = None
        self._certificate: Union[str, Tuple[str, str], None] = None
        self._proxy: Dict[str, Any] = {}
        self._connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
        self._read_timeout: int = DEFAULT_READ_TIMEOUT
        self._success_response_handler: Optional[ResponseHandler] = None
        self._error_response_handler: Optional[ResponseHandler] = None
        self._session: Optional[requests.Session] = None

    # ─────────────────────────────────────────────────────────────────────
    # URL
    # ─────────────────────────────────────────────────────────────────────
    def url(self, url: str) -> "RESTClient":
        """Set the base URL; uri/url_segment/url_parameter build on it."""
        self._url = str(url)
        return self

    def uri(self, uri: str) -> "RESTClient":
        """Append a path such as ``/api/user``, joined with exactly one slash."""
        if not uri:
            return self
        if self._url.endswith("/") and uri.startswith("/"):
            self._url += uri[1:]
        elif not self._url.endswith("/") and not uri.startswith("/"):
            self._url += "/" + uri
        else:
            self._url += uri
        return self

    def url_segment(self, value: Any) -> "RESTClient":
        """Append one path segment; a None value is ignored.

        Skipping None lets an optional Id fall back to the collection endpoint,
        e.g. ``/api/user`` instead of ``/api/user/None``.
        """
        if value is None:
            return self
        if not self._url.endswith("/"):
            self._url += "/"
        self._url += str(value)
        return self

    def url_parameter(self, name: str, value: Any) -> "RESTClient":
        """Add a query parameter.

        None is ignored. A list, tuple or set replaces every value already
        recorded for the name and renders as repeated keys (``ids=a&ids=b``).
        Any other value is appended to the values for the name.
        """
        if value is None:
            return self
        if isinstance(value, (list, tuple, Set)):
            self._parameters[name] = [item for item in value if item is not None]
        else:
            self._parameters.setdefault(name, []).append(value)
        return self

    def _query_string(self) -> str:
        pairs = []
        for name, values in self._parameters.items():
            for value in values:
                pairs.append(f"{quote_plus(str(name))}={quote_plus(_render_parameter(value))}")
        return "&".join(pairs)

    # ─────────────────────────────────────────────────────────────────────
    # Headers & authentication
    # ─────────────────────────────────────────────────────────────────────
    def header(self, name: str, value: str) -> "RESTClient":
        self._headers[name] = value
        return self

    def headers(self, headers: Mapping[str, str]) -> "RESTClient":
        self._headers.update(headers)
        return self

    def authorization(self, authorization: Optional[str]) -> "RESTClient":
        """Set the Authorization header verbatim (callers add any ``Bearer `` prefix)."""
        if authorization is not None:
            self._headers["Authorization"] = authorization
        return self

    def basic_authorization(self, username: Optional[str], password: Optional[str]) -> "RESTClient":
        """Set HTTP Basic credentials; no-op unless both values are given."""
        if username is not None and password is not None:
            credentials = f"{username}:{password}".encode("utf-8")
            encoded = base64.b64encode(credentials).decode("ascii")
            self._headers["Authorization"] = f"Basic {encoded}"
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Body & response handling
    # ─────────────────────────────────────────────────────────────────────
    def body_handler(self, body_handler: Optional[BodyHandler]) -> "RESTClient":
        self._body_handler = body_handler
        return self

    def success_response_handler(self, handler: Optional[ResponseHandler]) -> "RESTClient":
        self._success_response_handler = handler
        return self

    def error_response_handler(self, handler: Optional[ResponseHandler]) -> "RESTClient":
        self._error_response_handler = handler
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Transport options
    # ─────────────────────────────────────────────────────────────────────
    def connect_timeout(self, connect_timeout: int) -> "RESTClient":
        """Connect timeout in milliseconds."""
        self._connect_timeout = connect_timeout
        return self

    def read_timeout(self, read_timeout: int) -> "RESTClient":
        """Read timeout in milliseconds."""
        self._read_timeout = read_timeout
        return self

    def certificate(self, certificate: Union[str, Tuple[str, str], None]) -> "RESTClient":
        """Client certificate for mutual TLS: a PEM path or a (cert, key) tuple."""
        self._certificate = certificate
        return self

    def proxy(
        self,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> "RESTClient":
        self._proxy = {"host": host, "port": port, "username": username, "password": password}
        return self

    def session(self, session: Optional[requests.Session]) -> "RESTClient":
        """Send through this session instead of a one-off connection."""
        self._session = session
        return self

    def _proxies(self) -> Optional[Dict[str, str]]:
        if not self._proxy.get("host"):
            return None
        credentials = ""
        if self._proxy.get("username") is not None:
            credentials = quote(str(self._proxy["username"]), safe="")
            if self._proxy.get("password") is not None:
                credentials += ":" + quote(str(self._proxy["password"]), safe="")
            credentials += "@"
        proxy_url = f"http://{credentials}{self._proxy['host']}:{self._proxy['port']}"
        return {"http": proxy_url, "https": proxy_url}

    # ─────────────────────────────────────────────────────────────────────
    # HTTP method
    # ─────────────────────────────────────────────────────────────────────
    def method(self, method: Union[HTTPMethod, str]) -> "RESTClient":
        self._method = HTTPMethod.parse(method)
        return self

    def get(self) -> "RESTClient":
        return self.method(HTTPMethod.GET)

    def post(self) -> "RESTClient":
        return self.method(HTTPMethod.POST)

    def put(self) -> "RESTClient":
        return self.method(HTTPMethod.PUT)

    def patch(self) -> "RESTClient":
        return self.method(HTTPMethod.PATCH)

    def delete(self) -> "RESTClient":
        return self.method(HTTPMethod.DELETE)

    def head(self) -> "RESTClient":
        return self.method(HTTPMethod.HEAD)

    def options(self) -> "RESTClient":
        return self.method(HTTPMethod.OPTIONS)

    # ─────────────────────────────────────────────────────────────────────
    # Execution
    # ─────────────────────────────────────────────────────────────────────
    def go(self) -> ClientResponse:
        """Execute the request and wrap the outcome in a ClientResponse.

        Raises:
            RequestConfigurationError: No URL or no HTTP method was set
        """
        if not self._url:
            raise RequestConfigurationError("You must specify a URL")
        if self._method is None:
            raise RequestConfigurationError("You must specify a HTTP method")

        method = self._method.value
        if self._parameters:
            self._url += "&" if "?" in self._url else "?"
            self._url += self._query_string()

        request_body = None
        if self._body_handler is not None:
            request_body = self._body_handler.body_object
            self._body_handler.set_headers(self._headers)

        send = self._session.request if self._session is not None else requests.request
        log_url = self._url.split("?", 1)[0]
        logger.debug(f"{method} {log_url}")
        try:
            http_response = send(
                method,
                self._url,
                data=request_body,
                headers=self._headers,
                timeout=(self._connect_timeout / 1000.0, self._read_timeout / 1000.0),
                cert=self._certificate,
                proxies=self._proxies(),
                allow_redirects=False,
            )
            status = http_response.status_code
            content = b"" if self._method is HTTPMethod.HEAD else (http_response.content or b"")
        except (requests.RequestException, OSError, ValueError) as e:
            # OSError: sockets and unreadable cert files; ValueError: URLs urllib3 cannot parse
            logger.warning(f"{method} {log_url} failed before a response was received: {type(e).__name__}")
            return ClientResponse(
                url=self._url,
                method=method,
                request=request_body,
                status=TRANSPORT_FAILURE,
                exception=e,
            )

        logger.debug(f"{method} {log_url} -> {status}")
        success_response = None
        error_response = None
        decode_error = None
        try:
            if 200 <= status <= 299:
                if content and self._success_response_handler is not None:
                    success_response = self._success_response_handler(content)
            elif content and self._error_response_handler is not None:
                error_response = self._error_response_handler(content)
        except ResponseDecodeError as e:
            e.status_code = status
            decode_error = e
            logger.warning(f"{method} {log_url} returned {status} with an undecodable body: {e}")

        return ClientResponse(
            url=self._url,
            method=method,
            request=request_body,
            status=status,
            success_response=success_response,
            error_response=error_response,
            decode_error=decode_error,
            headers=getattr(http_response, "headers", None) or {},
        )
