"""
JSON Schema Contract Validators

Validation of the plain-dict form of the value types (to_dict / from_dict) against
formal JSON Schema contracts, using the jsonschema library.

Schemas (shipped in lars/core/contracts/schema/):
- vec2.json
- vec3.json
- mat2.json
- mat3.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Looks up schemas in the schema/ directory next to this module and caches them.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'vec2')

        Returns:
            The schema as a dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base contract validator.

    Wraps a Draft 2020-12 validator for one schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Yields a ValidationError for every violation found."""
        return self.validator.iter_errors(data)


class Vec2Validator(ContractValidator):
    def __init__(self):
        super().__init__("vec2")


class Vec3Validator(ContractValidator):
    def __init__(self):
        super().__init__("vec3")


class Mat2Validator(ContractValidator):
    def __init__(self):
        super().__init__("mat2")


class Mat3Validator(ContractValidator):
    def __init__(self):
        super().__init__("mat3")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# One compiled validator per contract, shared by every from_dict call
_VEC2_VALIDATOR = Vec2Validator()
_VEC3_VALIDATOR = Vec3Validator()
_MAT2_VALIDATOR = Mat2Validator()
_MAT3_VALIDATOR = Mat3Validator()


def validate_vec2(data: Dict[str, Any]) -> None:
    """Raises ValidationError if data is not a vec2 contract."""
    _VEC2_VALIDATOR.validate(data)


def validate_vec3(data: Dict[str, Any]) -> None:
    """Raises ValidationError if data is not a vec3 contract."""
    _VEC3_VALIDATOR.validate(data)


def validate_mat2(data: Dict[str, Any]) -> None:
    """Raises ValidationError if data is not a mat2 contract."""
    _MAT2_VALIDATOR.validate(data)


def validate_mat3(data: Dict[str, Any]) -> None:
    """Raises ValidationError if data is not a mat3 contract."""
    _MAT3_VALIDATOR.validate(data)
