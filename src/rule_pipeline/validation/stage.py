"""
Abstract validation stage.

A stage is one independent unit of business-rule logic. Its identity is a
value (name + halt policy), so concrete stages subclass ValidationStage
directly and implement the single `check` method. FunctionStage adapts a
plain callable for rules that don't deserve their own class.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from rule_pipeline.models.outcome import ValidationOutcome


class ValidationStage(ABC):
    """
    Abstract base for all validation stages.

    Contract:
        - check() reads the input but never mutates it
        - check() returns a failed ValidationOutcome for business violations,
          it does not raise them
        - check() raises StageExecutionError (or lets any exception escape)
          only when the check could not be carried out
        - halts_on_failure is fixed at construction
        - no per-invocation state: one instance serves many concurrent runs
    """

    def __init__(self, name: Optional[str] = None, halt_on_failure: bool = False):
        """
        Initialize stage.

        Args:
            name: Diagnostic name (defaults to the class name)
            halt_on_failure: Stop the pipeline when this stage fails
        """
        self._name = name or self.__class__.__name__
        self._halts_on_failure = bool(halt_on_failure)

    @property
    def name(self) -> str:
        """Human-readable name for logging and metrics."""
        return self._name

    @property
    def halts_on_failure(self) -> bool:
        """Whether a failed outcome from this stage stops the pipeline."""
        return self._halts_on_failure

    @abstractmethod
    def check(self, value: Any) -> ValidationOutcome:
        """
        Validate one input value.

        Args:
            value: Input to inspect (read-only)

        Returns:
            ValidationOutcome (success() when no rule is violated)
        """
        ...

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self._name!r}, "
            f"halt_on_failure={self._halts_on_failure})"
        )


class FunctionStage(ValidationStage):
    """Stage backed by a plain function `value -> ValidationOutcome`."""

    def __init__(
        self,
        name: str,
        func: Callable[[Any], ValidationOutcome],
        halt_on_failure: bool = False,
    ):
        super().__init__(name=name, halt_on_failure=halt_on_failure)
        self._func = func

    def check(self, value: Any) -> ValidationOutcome:
        return self._func(value)
