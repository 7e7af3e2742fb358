"""
Fatal exceptions for the validation pipeline.

These are NOT business validation failures. Business failures are returned as
ErrorRecords inside a ValidationOutcome and never raised. The exceptions here
mean the input could not be validated at all:
- StageConfigurationError: a stage or builder was set up incorrectly
- StageExecutionError: a stage could not finish; aborts the whole run
"""

from typing import Any


class PipelineError(Exception):
    """
    Base exception for all fatal pipeline errors.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize pipeline error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging/metrics
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class StageConfigurationError(PipelineError):
    """
    Raised at construction time when a stage or builder is misconfigured.

    Examples: invalid regex pattern, unreadable JSON Schema file, adding an
    object that is not a ValidationStage to a builder.
    """


class StageExecutionError(PipelineError):
    """
    Raised when a stage cannot complete its check.

    Aborts the pipeline invocation immediately, regardless of halt policies.
    Any other exception escaping a stage is wrapped in this one by the
    pipeline, with the original chained as __cause__.
    """

    def __init__(
        self,
        message: str,
        stage_name: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize stage execution error.

        Args:
            message: Error description
            stage_name: Name of the stage that failed
            details: Extra structured data
        """
        details = dict(details or {})
        if stage_name:
            details["stage_name"] = stage_name
        super().__init__(message, details)
        self.stage_name = stage_name


class CollaboratorUnavailableError(StageExecutionError):
    """
    An external collaborator (e.g. risk lookup service) failed or timed out.

    Infrastructure failure, not a business decision: the input is neither
    accepted nor rejected.
    """

    def __init__(
        self,
        message: str,
        stage_name: str | None = None,
        collaborator: str | None = None,
    ):
        """
        Initialize collaborator error.

        Args:
            message: Error description
            stage_name: Name of the stage that called the collaborator
            collaborator: Collaborator identifier (usually its class name)
        """
        details = {}
        if collaborator:
            details["collaborator"] = collaborator
        super().__init__(message, stage_name=stage_name, details=details)


class StageContractError(StageExecutionError):
    """
    A stage broke its contract by returning something other than a
    ValidationOutcome.
    """

    def __init__(self, message: str, stage_name: str | None = None, returned_type: str | None = None):
        details = {}
        if returned_type:
            details["returned_type"] = returned_type
        super().__init__(message, stage_name=stage_name, details=details)
