"""
JSON Schema Contract Validators

Validation of JSON payloads exchanged with callers of the transform library.
Uses jsonschema (Draft 2020-12) against the schemas shipped in schema/.

Schemas:
- event.json             ({"x", "t"}), used by Event.from_payload
- transform_request.json ({"x", "t", "beta"}, -1 < beta < 1), used by the
  demo's --json input through parse_transform_request
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files, by default the schema/ directory of this
    package. Schemas are meta-validated once and cached.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file by name (without extension).

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

            self._schemas[schema_name] = schema
        return self._schemas[schema_name]


_SCHEMA_LOADER = SchemaLoader()


@lru_cache(maxsize=None)
def _draft_validator(schema_name: str) -> Draft202012Validator:
    return Draft202012Validator(_SCHEMA_LOADER.load_schema(schema_name))


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Validator for one named contract.

    Subclasses only set schema_name; the underlying Draft 2020-12 validator
    is built once per schema and shared.
    """

    schema_name: str = ""

    def __init__(self, schema_name: str | None = None):
        if schema_name is not None:
            self.schema_name = schema_name
        self.validator = _draft_validator(self.schema_name)
        self.schema = self.validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Every validation error found in data, not just the first."""
        return self.validator.iter_errors(data)


class EventValidator(ContractValidator):
    schema_name = "event"


class TransformRequestValidator(ContractValidator):
    schema_name = "transform_request"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_event(data: Dict[str, Any]) -> None:
    """Validate an event payload; raises ValidationError on mismatch."""
    EventValidator().validate(data)


def validate_transform_request(data: Dict[str, Any]) -> None:
    """Validate a transform request payload; raises ValidationError on mismatch."""
    TransformRequestValidator().validate(data)


def parse_transform_request(text: str) -> tuple[float, float, float]:
    """
    Decode and validate a transform request given as JSON text.

    Args:
        text: JSON object with numeric "x", "t" and "beta"

    Returns:
        (x, t, beta) as floats

    Raises:
        json.JSONDecodeError: If text is not valid JSON
        ValidationError: If the payload violates the transform_request contract
    """
    data = json.loads(text)
    validate_transform_request(data)
    return (float(data["x"]), float(data["t"]), float(data["beta"]))
