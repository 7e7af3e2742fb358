"""
Required fields stage.

Structural check that belongs at the front of a pipeline: later stages can
only inspect a complete input safely, so this stage halts by default.
"""

from typing import Any, Sequence

import structlog

from ..models.outcome import ErrorRecord, ValidationOutcome
from .exceptions import StageConfigurationError
from .fields import is_blank, resolve_field
from .stage import ValidationStage

logger = structlog.get_logger(__name__)


class RequiredFieldsStage(ValidationStage):
    """
    Report every missing required field, one error per field.

    A field is missing when it is absent, None, or a blank string.
    """

    def __init__(
        self,
        fields: Sequence[str],
        name: str = "required_fields",
        halt_on_failure: bool = True,
    ):
        """
        Initialize required fields stage.

        Args:
            fields: Dotted field paths, checked and reported in this order
            name: Stage name
            halt_on_failure: Stop the pipeline on missing fields (default True)

        Raises:
            StageConfigurationError: If fields is empty or a plain string
        """
        if isinstance(fields, str) or not fields:
            raise StageConfigurationError(
                "RequiredFieldsStage needs a non-empty sequence of field paths",
                details={"fields": fields},
            )
        super().__init__(name=name, halt_on_failure=halt_on_failure)
        self.fields = tuple(fields)

    def check(self, value: Any) -> ValidationOutcome:
        errors = [
            ErrorRecord(field=field, message=f"{field} is required")
            for field in self.fields
            if is_blank(resolve_field(value, field))
        ]

        if errors:
            logger.debug(
                "Required fields missing",
                stage=self.name,
                missing=[e.field for e in errors],
            )
        return ValidationOutcome.failure(errors)
