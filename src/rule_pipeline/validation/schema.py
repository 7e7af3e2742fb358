"""
JSON Schema stage.

Validate a parsed JSON document (dict) against a Draft 7 JSON Schema.
Structural check: halts by default so later stages see well-formed input.
"""

import json
from pathlib import Path
from typing import Any, Union

import structlog
from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from ..models.outcome import ErrorRecord, ValidationOutcome
from .exceptions import StageConfigurationError
from .stage import ValidationStage

logger = structlog.get_logger(__name__)


class JsonSchemaStage(ValidationStage):
    """
    Report every JSON Schema violation as an ErrorRecord.

    Errors are ordered by field path, then message, so repeated runs over the
    same document give identical outcomes.
    """

    def __init__(
        self,
        schema: Union[dict, bool],
        name: str = "json_schema",
        halt_on_failure: bool = True,
    ):
        """
        Initialize schema stage.

        Args:
            schema: JSON Schema dict, or a boolean schema (True accepts
                everything, False rejects everything). A
                {"name": ..., "schema": {...}} wrapper is unwrapped.
            name: Stage name
            halt_on_failure: Stop the pipeline on schema violations (default True)

        Raises:
            StageConfigurationError: If the schema is not a dict/bool or is invalid
        """
        super().__init__(name=name, halt_on_failure=halt_on_failure)

        if not isinstance(schema, (dict, bool)):
            raise StageConfigurationError(
                f"JSON Schema must be a dict or a boolean, got {type(schema).__name__}",
                details={"stage": name},
            )
        if isinstance(schema, dict) and isinstance(schema.get("schema"), (dict, bool)):
            schema = schema["schema"]

        try:
            Draft7Validator.check_schema(schema)
        except SchemaError as e:
            raise StageConfigurationError(
                f"Invalid JSON Schema: {e.message}",
                details={"stage": name},
            ) from e

        self.schema = schema
        self._validator = Draft7Validator(schema)

    @classmethod
    def from_file(
        cls,
        schema_path: Union[str, Path],
        name: str = "json_schema",
        halt_on_failure: bool = True,
    ) -> "JsonSchemaStage":
        """
        Load the schema from a JSON file.

        Raises:
            StageConfigurationError: If the file is missing or not valid JSON
        """
        schema_file = Path(schema_path)
        if not schema_file.exists():
            raise StageConfigurationError(
                f"JSON Schema file not found: {schema_path}",
                details={"schema_path": str(schema_path)},
            )

        try:
            with open(schema_file, "r", encoding="utf-8") as f:
                schema = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StageConfigurationError(
                f"Failed to load JSON Schema: {e}",
                details={"schema_path": str(schema_path)},
            ) from e

        logger.info("Loaded JSON Schema", schema_path=str(schema_path), stage=name)
        return cls(schema, name=name, halt_on_failure=halt_on_failure)

    def check(self, value: Any) -> ValidationOutcome:
        errors = []
        for error in self._validator.iter_errors(value):
            path = ".".join(str(p) for p in error.absolute_path) or None
            errors.append(ErrorRecord(field=path, message=error.message))

        errors.sort(key=lambda e: (e.field or "", e.message))
        return ValidationOutcome.failure(errors)
