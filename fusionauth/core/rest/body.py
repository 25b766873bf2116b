"""Request body handlers.

A body handler owns the serialized request payload and declares the headers
needed to describe it. The request builder calls ``set_headers`` right before
sending, so the handler can be attached at any point of the chain.
"""
from __future__ import annotations
import dataclasses
import json
from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from typing import Any, Dict, Mapping, MutableMapping, Optional
from urllib.parse import urlencode
from uuid import UUID


def _epoch_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def _normalize(value: Any) -> Any:
    """Turn an arbitrary object graph into JSON-compatible primitives.

    Map keys are coerced to strings, instants become epoch milliseconds
    (the FusionAuth wire format for ZonedDateTime).
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Mapping):
        return {_key(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, SimpleNamespace):
        return {_key(k): _normalize(v) for k, v in vars(value).items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_normalize(item) for item in value]
    if isinstance(value, datetime):
        return _epoch_millis(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (UUID, Decimal)):
        return str(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _normalize(dataclasses.asdict(value))
    if hasattr(value, "__dict__"):
        return {_key(k): _normalize(v) for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


class BodyHandler:
    """Interface shared by request body handlers."""

    content_type: str = ""

    def __init__(self) -> None:
        self.body: bytes = b""

    @property
    def body_object(self) -> bytes:
        """Serialized body sent on the wire."""
        return self.body

    def set_headers(self, headers: MutableMapping[str, str]) -> None:
        """Add the headers needed by this body to the request headers."""
        headers["Content-Length"] = str(len(self.body))
        headers["Content-Type"] = self.content_type


class JSONBodyHandler(BodyHandler):
    """JSON request body.

    Args:
        body_object: Any structured value: dicts, lists, scalars,
            SimpleNamespace/DynamicObject trees, dataclasses or plain objects.
    """

    content_type = "application/json"

    def __init__(self, body_object: Any):
        super().__init__()
        self.body = json.dumps(_normalize(body_object), ensure_ascii=False).encode("utf-8")


class FormDataBodyHandler(BodyHandler):
    """application/x-www-form-urlencoded request body.

    Used by the OAuth2 endpoints. Entries whose value is None are omitted
    entirely rather than sent empty.

    Args:
        body: Flat mapping of parameter name to value
    """

    content_type = "application/x-www-form-urlencoded"

    def __init__(self, body: Optional[Mapping[str, Any]]):
        super().__init__()
        fields: Dict[str, str] = {}
        for key, value in (body or {}).items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            fields[str(key)] = str(value)
        self.fields = fields
        self.body = urlencode(fields).encode("ascii")
