"""Response decoders for FusionAuth API bodies.

FusionAuth responses have no fixed shape per call: success and error bodies
are decoded into DynamicObject trees that can be navigated with attribute
access (``response.success_response.user.email``).
"""
from __future__ import annotations
import json
from types import SimpleNamespace
from typing import Any, Optional

from .exceptions import ResponseDecodeError


class DynamicObject(SimpleNamespace):
    """Attribute-style view over a decoded JSON object.

    Fields absent from the payload read as None instead of raising, so
    callers can probe optional fields (``user.middleName``) without guards.
    Keys that are not valid identifiers remain reachable via ``obj["key"]``.
    An object is always truthy, even when the JSON object was empty.
    """

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return None

    def __getitem__(self, key: str) -> Any:
        return self.__dict__[key]

    def __contains__(self, key: str) -> bool:
        return key in self.__dict__

    def __iter__(self):
        return iter(self.__dict__)

    def get(self, key: str, default: Any = None) -> Any:
        return self.__dict__.get(key, default)

    def keys(self):
        return self.__dict__.keys()

    def items(self):
        return self.__dict__.items()

    def to_dict(self) -> dict:
        """Convert back to plain dicts and lists, recursively."""
        return to_plain(self)


def to_plain(value: Any) -> Any:
    """Convert a decoded value (DynamicObject trees included) to plain dicts and lists.

    Prefer this over ``obj.to_dict()`` for arbitrary payloads: a JSON field
    named ``to_dict``, ``get``, ``keys`` or ``items`` shadows the method of
    the same name on that instance.
    """
    if isinstance(value, SimpleNamespace):
        return {key: to_plain(item) for key, item in vars(value).items()}
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value


class JSONResponseHandler:
    """Callable decoder turning a raw JSON body into a navigable value.

    Args:
        object_class: Type used for JSON objects; it is called with the
            object's fields as keyword arguments (default: DynamicObject).
            Pass ``dict`` to get plain dictionaries.
    """

    def __init__(self, object_class: Optional[type] = DynamicObject):
        self.object_class = object_class or DynamicObject

    def _hook(self, fields: dict) -> Any:
        if self.object_class is dict:
            return fields
        return self.object_class(**fields)

    def __call__(self, body: bytes | str) -> Any:
        if isinstance(body, bytes):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ResponseDecodeError(f"Response body is not valid UTF-8: {e}", body) from e
        try:
            return json.loads(body, object_hook=self._hook)
        except ValueError as e:
            raise ResponseDecodeError(f"Response body is not valid JSON: {e}", body) from e
