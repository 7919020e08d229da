# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.
"""Unit tests for deep object coercion."""

import copy

import pytest

from advanced_http.coercion.coercer import coerce_object
from advanced_http.core.errors import CoercionError


class TestCoercePassthrough:
    @pytest.mark.parametrize("value", [None, 1, 2.5, "text", True])
    def test_scalars_unchanged(self, value):
        assert coerce_object(value) == value

    def test_plain_json_is_identity(self):
        payload = {
            "name": "widget",
            "tags": ["a", "b"],
            "dims": {"w": 1, "h": [2, 3]},
            "type": "not-a-descriptor",
            "flag": None,
        }
        assert coerce_object(payload) == payload

    def test_missing_value_key_left_alone(self):
        payload = {"field": {"type": "integer"}}
        assert coerce_object(payload) == payload


class TestCoerceDescriptors:
    def test_top_level_fields(self):
        body = {
            "name": {"type": "string", "value": "test"},
            "age": {"type": "integer", "value": "25"},
            "active": {"type": "boolean", "value": "true"},
            "tags": {"type": "array", "value": '["tag1", "tag2"]'},
        }
        assert coerce_object(body) == {
            "name": "test",
            "age": 25,
            "active": True,
            "tags": ["tag1", "tag2"],
        }

    def test_nested_objects(self):
        body = {"user": {"profile": {"score": {"type": "number", "value": "9.5"}}}}
        assert coerce_object(body) == {"user": {"profile": {"score": 9.5}}}

    def test_objects_inside_arrays(self):
        body = {"lines": [{"qty": {"type": "integer", "value": "2"}}, {"qty": 3}]}
        assert coerce_object(body) == {"lines": [{"qty": 2}, {"qty": 3}]}

    def test_array_elements_are_not_descriptors(self):
        body = [{"type": "integer", "value": "5"}]
        assert coerce_object(body) == [{"type": "integer", "value": "5"}]

    def test_converted_values_are_not_walked_again(self):
        inner = '{"x": {"type": "integer", "value": "1"}}'
        body = {"meta": {"type": "object", "value": inner}}
        assert coerce_object(body) == {"meta": {"x": {"type": "integer", "value": "1"}}}

    def test_input_not_mutated(self):
        body = {"a": {"b": {"type": "integer", "value": "1"}}, "c": [{"d": {"type": "string", "value": 2}}]}
        snapshot = copy.deepcopy(body)
        coerce_object(body)
        assert body == snapshot


class TestCoerceErrors:
    def test_field_name_in_message(self):
        with pytest.raises(CoercionError) as exc:
            coerce_object({"age": {"type": "integer", "value": "abc"}})
        assert str(exc.value) == 'Error converting field "age": Invalid integer value: abc'
        assert exc.value.path == ["age"]
        assert exc.value.reason == "Invalid integer value: abc"

    def test_nested_path(self):
        with pytest.raises(CoercionError) as exc:
            coerce_object({"user": {"age": {"type": "integer", "value": "x"}}})
        assert str(exc.value).startswith('Error converting field "user.age":')

    def test_path_through_array(self):
        body = {"items": [{"ok": 1}, {"qty": {"type": "number", "value": "lots"}}]}
        with pytest.raises(CoercionError) as exc:
            coerce_object(body)
        assert exc.value.path == ["items", "[1]", "qty"]
        assert 'field "items[1].qty"' in str(exc.value)

    def test_unknown_type_aborts(self):
        with pytest.raises(CoercionError, match="Unknown type: uuid"):
            coerce_object({"ok": {"type": "string", "value": "x"}, "id": {"type": "uuid", "value": "1"}})
