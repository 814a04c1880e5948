"""Tests for payload schema checks."""

import jsonschema
import pytest

from openverb import SchemaError, check_payload, default_registry
from openverb.schema import validate_payload


@pytest.fixture(scope="module")
def registry():
    return default_registry()


class TestCheckPayload:
    def test_conforming_payload(self, registry):
        schema = registry.find_verb("ui.toast.show").input

        assert check_payload(schema, {"message": "Saved", "variant": "success"}) == []

    def test_wrong_type(self):
        problems = check_payload({"type": "object"}, "not an object")
        assert problems == ["$: 'not an object' is not of type 'object'"]

    def test_bool_is_not_integer(self):
        schema = {"type": "object", "properties": {"limit": {"type": "integer"}}}

        assert check_payload(schema, {"limit": True}) == ["$.limit: True is not of type 'integer'"]
        assert check_payload(schema, {"limit": 5}) == []

    def test_enum(self, registry):
        schema = registry.find_verb("ui.theme.set").input

        problems = check_payload(schema, {"mode": "neon"})

        assert problems == ["$.mode: 'neon' is not one of ['light', 'dark', 'system']"]

    def test_missing_required(self, registry):
        schema = registry.find_verb("ui.form.fill").input

        assert check_payload(schema, {"formId": "signup"}) == [
            "$: 'values' is a required property"
        ]

    def test_nullable_type(self, registry):
        schema = registry.find_verb("user.session.get").output

        assert check_payload(schema, {"authenticated": False, "user": None}) == []
        assert check_payload(schema, {"authenticated": False, "user": "ada"}) == [
            "$.user: 'ada' is not of type 'object', 'null'"
        ]

    def test_array_items(self, registry):
        schema = registry.find_verb("ui.nav.list_pages").output

        problems = check_payload(schema, {"routes": [{"id": "a", "tags": ["x", 1]}]})

        assert problems == ["$.routes[0].tags[1]: 1 is not of type 'string'"]

    def test_problems_ordered_by_path(self, registry):
        schema = registry.find_verb("ui.toast.show").input

        problems = check_payload(schema, {"message": 1, "variant": "loud"})

        assert [p.split(":")[0] for p in problems] == ["$.message", "$.variant"]

    def test_extra_fields_allowed(self):
        schema = {"type": "object", "properties": {"a": {"type": "string"}}}
        assert check_payload(schema, {"a": "x", "b": 1}) == []

    def test_malformed_schema_raises(self):
        with pytest.raises(jsonschema.exceptions.SchemaError):
            check_payload({"type": "object", "properties": []}, {"a": 1})


class TestValidatePayload:
    def test_raises_schema_error(self):
        with pytest.raises(SchemaError) as exc_info:
            validate_payload("ui.search.query", "input", {"type": "object", "required": ["query"]}, {})

        err = exc_info.value
        assert err.verb_id == "ui.search.query"
        assert err.direction == "input"
        assert str(err) == "Invalid input for ui.search.query: $: 'query' is a required property"

    def test_malformed_schema_reported_as_schema_error(self):
        with pytest.raises(SchemaError) as exc_info:
            validate_payload("app.x.y", "input", {"type": "object", "properties": []}, {"a": 1})

        assert exc_info.value.problems[0].startswith("malformed schema:")

    def test_schema_error_is_value_error(self):
        assert issubclass(SchemaError, ValueError)

    def test_passes_silently(self):
        validate_payload("x.y.z", "output", {"type": "object"}, {})
