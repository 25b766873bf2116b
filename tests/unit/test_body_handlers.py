"""Unit tests for fusionauth/core/rest/body.py."""
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from urllib.parse import parse_qsl
from uuid import UUID

import pytest

from fusionauth.core.rest import DynamicObject, FormDataBodyHandler, JSONBodyHandler


class TestJSONBodyHandler:
    def test_serializes_nested_structures(self):
        handler = JSONBodyHandler({"user": {"email": "a@b.com", "roles": ["admin", "user"], "data": {"n": 1}}})
        assert json.loads(handler.body_object) == {
            "user": {"email": "a@b.com", "roles": ["admin", "user"], "data": {"n": 1}},
        }

    def test_sets_content_headers(self):
        handler = JSONBodyHandler({"name": "é"})
        headers = {"Authorization": "key"}
        handler.set_headers(headers)
        assert headers["Content-Type"] == "application/json"
        # Length counts UTF-8 bytes, not characters
        assert headers["Content-Length"] == str(len('{"name": "é"}'.encode("utf-8")))
        assert headers["Authorization"] == "key"

    def test_body_is_utf8_bytes(self):
        assert JSONBodyHandler({"name": "é"}).body_object == '{"name": "é"}'.encode("utf-8")

    def test_non_string_keys_are_coerced(self):
        key = UUID("00000000-0000-0000-0000-000000000001")
        handler = JSONBodyHandler({1: "a", 2.5: "b", key: "c"})
        assert json.loads(handler.body_object) == {
            "1": "a",
            "2.5": "b",
            "00000000-0000-0000-0000-000000000001": "c",
        }

    def test_datetimes_become_epoch_millis(self):
        handler = JSONBodyHandler({"expiry": datetime(2024, 1, 1, tzinfo=timezone.utc)})
        assert json.loads(handler.body_object) == {"expiry": 1704067200000}

    def test_object_graphs_are_serialized(self):
        @dataclass
        class Role:
            name: str
            isDefault: bool = False

        payload = SimpleNamespace(
            application=DynamicObject(name="app", roles=[Role("admin")], tags={"b"}),
            price=Decimal("1.50"),
        )
        assert json.loads(JSONBodyHandler(payload).body_object) == {
            "application": {"name": "app", "roles": [{"name": "admin", "isDefault": False}], "tags": ["b"]},
            "price": "1.50",
        }

    def test_scalars_and_null(self):
        assert JSONBodyHandler(None).body_object == b"null"
        assert JSONBodyHandler([1, 2.5, "x"]).body_object == b'[1, 2.5, "x"]'

    def test_unserializable_value_raises(self):
        class Slotted:
            __slots__ = ()

        with pytest.raises(TypeError):
            JSONBodyHandler({"f": Slotted()})


class TestFormDataBodyHandler:
    def test_encodes_key_values(self):
        handler = FormDataBodyHandler({"grant_type": "password", "username": "a b@c.com"})
        assert handler.body_object == b"grant_type=password&username=a+b%40c.com"

    def test_none_values_are_omitted(self):
        handler = FormDataBodyHandler({"client_id": "abc", "client_secret": None, "scope": None})
        assert handler.body_object == b"client_id=abc"
        assert "client_secret" not in handler.fields

    def test_empty_string_is_kept(self):
        assert FormDataBodyHandler({"scope": ""}).body_object == b"scope="

    def test_roundtrips_special_characters(self):
        body = {"redirect_uri": "https://app.test/cb?x=1&y=2", "code": "+/="}
        handler = FormDataBodyHandler(body)
        assert dict(parse_qsl(handler.body_object.decode())) == body

    def test_sets_content_headers(self):
        handler = FormDataBodyHandler({"a": "1"})
        headers = {}
        handler.set_headers(headers)
        assert headers == {
            "Content-Length": "3",
            "Content-Type": "application/x-www-form-urlencoded",
        }

    def test_none_body_is_empty(self):
        assert FormDataBodyHandler(None).body_object == b""
