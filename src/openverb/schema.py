"""
Opt-in schema conformance for verb payloads.

Manifests declare input/output JSON Schemas but the dispatcher does not
enforce them unless asked to. Checks run through jsonschema's Draft 7
validator.
"""

from typing import Any, Dict, List

from jsonschema import Draft7Validator
from jsonschema import exceptions as jsonschema_exceptions


class SchemaError(ValueError):
    """A payload (or the schema it was checked against) failed validation"""

    def __init__(self, verb_id: str, direction: str, problems: List[str]):
        self.verb_id = verb_id
        self.direction = direction
        self.problems = problems
        super().__init__(f"Invalid {direction} for {verb_id}: {'; '.join(problems)}")


def check_payload(schema: Dict[str, Any], payload: Any) -> List[str]:
    """
    Check a payload against a schema.

    Args:
        schema: Schema from a verb definition
        payload: Value to check

    Returns:
        List of problems as "<json path>: <message>" (empty if the payload
        conforms), ordered by path

    Raises:
        jsonschema.exceptions.SchemaError: If the schema itself is malformed
    """
    Draft7Validator.check_schema(schema)
    errors = Draft7Validator(schema).iter_errors(payload)
    return [f"{e.json_path}: {e.message}" for e in sorted(errors, key=lambda e: e.json_path)]


def validate_payload(verb_id: str, direction: str, schema: Dict[str, Any], payload: Any):
    """
    Raise SchemaError if payload does not conform to schema.

    A malformed schema is reported the same way, so callers only handle
    SchemaError.
    """
    try:
        problems = check_payload(schema, payload)
    except jsonschema_exceptions.SchemaError as e:
        raise SchemaError(verb_id, direction, [f"malformed schema: {e.message}"]) from e
    if problems:
        raise SchemaError(verb_id, direction, problems)
