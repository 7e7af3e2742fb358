"""
Field format stage.

Checks present string fields against regular expressions. Absent fields are
skipped; presence is RequiredFieldsStage's job.
"""

import re
from typing import Any, Mapping, Pattern, Union

from ..models.outcome import ErrorRecord, ValidationOutcome
from .exceptions import StageConfigurationError
from .fields import MISSING, resolve_field
from .stage import ValidationStage


class FormatStage(ValidationStage):
    """
    Validate field formats with full-match regular expressions.

    Non-string values for a patterned field are reported as format errors.
    """

    def __init__(
        self,
        patterns: Mapping[str, Union[str, Pattern[str]]],
        name: str = "format",
        halt_on_failure: bool = False,
    ):
        """
        Initialize format stage.

        Args:
            patterns: Dotted field path -> regex (string or compiled)
            name: Stage name
            halt_on_failure: Stop the pipeline on format errors

        Raises:
            StageConfigurationError: If a pattern does not compile
        """
        super().__init__(name=name, halt_on_failure=halt_on_failure)

        compiled: dict[str, Pattern[str]] = {}
        for field, pattern in patterns.items():
            try:
                compiled[field] = re.compile(pattern)
            except re.error as e:
                raise StageConfigurationError(
                    f"Invalid pattern for field '{field}': {e}",
                    details={"field": field, "pattern": str(pattern)},
                ) from e
        self.patterns = compiled

    def check(self, value: Any) -> ValidationOutcome:
        errors: list[ErrorRecord] = []

        for field, pattern in self.patterns.items():
            field_value = resolve_field(value, field)
            if field_value is MISSING or field_value is None:
                continue

            if not isinstance(field_value, str):
                errors.append(ErrorRecord(
                    field=field,
                    message=f"{field} must be a string, got {type(field_value).__name__}",
                ))
            elif pattern.fullmatch(field_value) is None:
                errors.append(ErrorRecord(
                    field=field,
                    message=f"{field} has an invalid format",
                ))

        return ValidationOutcome.failure(errors)
