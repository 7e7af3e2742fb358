"""
Numeric limits stage.

Checks that present numeric fields fall inside inclusive bounds, e.g. loan
amounts, terms, daily card limits.
"""

from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, Mapping, Optional

from ..models.outcome import ErrorRecord, ValidationOutcome
from .exceptions import StageConfigurationError
from .fields import MISSING, resolve_field
from .stage import ValidationStage


@dataclass(frozen=True)
class Limit:
    """Inclusive numeric bounds. Either side may be open (None)."""

    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def __post_init__(self):
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            raise StageConfigurationError(
                f"Limit minimum {self.minimum} is greater than maximum {self.maximum}",
                details={"minimum": self.minimum, "maximum": self.maximum},
            )


class LimitsStage(ValidationStage):
    """Validate numeric fields against inclusive bounds."""

    def __init__(
        self,
        limits: Mapping[str, Limit],
        name: str = "limits",
        halt_on_failure: bool = False,
    ):
        """
        Initialize limits stage.

        Args:
            limits: Dotted field path -> Limit
            name: Stage name
            halt_on_failure: Stop the pipeline on limit violations
        """
        super().__init__(name=name, halt_on_failure=halt_on_failure)
        self.limits = dict(limits)

    def check(self, value: Any) -> ValidationOutcome:
        errors: list[ErrorRecord] = []

        for field, limit in self.limits.items():
            field_value = resolve_field(value, field)
            if field_value is MISSING or field_value is None:
                continue

            # bool is a Real subclass but never a meaningful amount
            if (
                isinstance(field_value, bool)
                or not isinstance(field_value, (Real, Decimal))
                or field_value != field_value  # NaN
            ):
                errors.append(ErrorRecord(
                    field=field,
                    message=f"{field} must be a number, got {type(field_value).__name__}",
                ))
                continue

            if limit.minimum is not None and field_value < limit.minimum:
                errors.append(ErrorRecord(
                    field=field,
                    message=f"{field} must be at least {limit.minimum}, got {field_value}",
                ))
            elif limit.maximum is not None and field_value > limit.maximum:
                errors.append(ErrorRecord(
                    field=field,
                    message=f"{field} must be at most {limit.maximum}, got {field_value}",
                ))

        return ValidationOutcome.failure(errors)
