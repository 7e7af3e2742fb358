"""
Outcome data models for the validation pipeline.

ErrorRecord describes one detected violation. ValidationOutcome aggregates the
records produced by one stage, or by merging the outcomes of several stages.
Both are frozen: merging always builds a new outcome and never mutates the
operands.
"""

from typing import Iterable, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rule_pipeline.models.enums import Severity


class ErrorRecord(BaseModel):
    """
    A single validation violation.

    Created by a stage at detection time and immutable afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: Optional[str] = Field(
        default=None,
        description="Offending input property (dotted path), if the violation has one"
    )
    message: str = Field(..., min_length=1, description="Human-readable description")
    severity: Severity = Field(default=Severity.ERROR, description="Informational severity")

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, v: str) -> str:
        """Reject whitespace-only messages."""
        if not v.strip():
            raise ValueError("message must not be blank")
        return v

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class ValidationOutcome(BaseModel):
    """
    Immutable result of validating one input against one stage or a pipeline.

    `valid` is True exactly when `errors` is empty. Every constructor keeps
    that invariant, including `merge`, whose validity is the logical AND of
    both operands.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    valid: bool
    errors: tuple[ErrorRecord, ...] = Field(
        default=(),
        description="Violations in detection order"
    )

    @model_validator(mode="after")
    def validity_matches_errors(self) -> "ValidationOutcome":
        if self.valid != (len(self.errors) == 0):
            raise ValueError(
                f"valid={self.valid} is inconsistent with {len(self.errors)} error(s)"
            )
        return self

    @classmethod
    def success(cls) -> "ValidationOutcome":
        """Outcome with no errors. Identity element of `merge`."""
        return cls(valid=True)

    @classmethod
    def failure(
        cls,
        message: Union[str, Sequence[ErrorRecord]],
        field: Optional[str] = None,
        severity: Optional[Severity] = None,
    ) -> "ValidationOutcome":
        """
        Build a failed outcome.

        Args:
            message: Either one error message, or a sequence of ErrorRecord
            field: Offending field for the single-message form
            severity: Severity for the single-message form (default ERROR)

        Returns:
            ValidationOutcome. When given a sequence, validity follows the
            sequence: `failure([])` is a *valid* outcome with no errors.

        Raises:
            TypeError: If field or severity is passed with a sequence of
                records, which carry their own
        """
        if isinstance(message, str):
            record = ErrorRecord(
                field=field, message=message, severity=severity or Severity.ERROR
            )
            return cls(valid=False, errors=(record,))

        if field is not None or severity is not None:
            raise TypeError(
                "field and severity only apply to the single-message form of failure()"
            )

        errors = tuple(message)
        return cls(valid=len(errors) == 0, errors=errors)

    @classmethod
    def combine(cls, outcomes: Iterable["ValidationOutcome"]) -> "ValidationOutcome":
        """Merge outcomes left to right, starting from `success()`."""
        combined = cls.success()
        for outcome in outcomes:
            combined = combined.merge(outcome)
        return combined

    def merge(self, other: "ValidationOutcome") -> "ValidationOutcome":
        """
        Combine two outcomes into a new one.

        Errors are concatenated (self first, then other) and validity is
        `self.valid and other.valid`. Associative, with `success()` as identity.
        """
        if not other.errors and other.valid:
            return self
        if not self.errors and self.valid:
            return other
        return ValidationOutcome(
            valid=self.valid and other.valid,
            errors=self.errors + other.errors,
        )

    def errors_with_severity(self, severity: Severity) -> tuple[ErrorRecord, ...]:
        """Errors of exactly the given severity, in detection order."""
        return tuple(e for e in self.errors if e.severity == severity)

    @property
    def highest_severity(self) -> Optional[Severity]:
        """Most severe level present, or None for a valid outcome."""
        if not self.errors:
            return None
        return max((e.severity for e in self.errors), key=Severity.get_ordinal)

    def error_messages(self) -> list[str]:
        """Rendered error strings, e.g. for API responses."""
        return [str(e) for e in self.errors]
