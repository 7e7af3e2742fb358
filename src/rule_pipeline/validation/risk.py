"""
Risk lookup stage.

Delegates to an external risk/fraud service. The stage draws the line between
the two failure kinds explicitly:
- the service answered and the score is too high -> failed outcome (rejection)
- the service could not answer, or answered with something other than a
  RiskAssessment scored in [0, 1] -> CollaboratorUnavailableError (fatal)

Halts by default: once an input is rejected as risky there is no point (and
some leakage risk) in running further checks.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional, Protocol

import structlog

from ..config import settings
from ..models.enums import Severity
from ..models.outcome import ErrorRecord, ValidationOutcome
from .exceptions import CollaboratorUnavailableError, StageConfigurationError
from .stage import ValidationStage

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RiskAssessment:
    """Answer from a risk service: score in [0, 1] plus optional reasons."""

    score: float
    reasons: tuple[str, ...] = ()


class RiskClient(Protocol):
    """
    Risk/fraud lookup collaborator.

    Implementations own their transport, timeouts and thread-safety. They
    signal "could not assess" by raising.
    """

    def assess(self, value: Any) -> RiskAssessment:
        ...


class RiskLookupStage(ValidationStage):
    """
    Reject inputs whose risk score exceeds `max_score`.

    A rejection is one CRITICAL error; the reasons reported by the service are
    appended to the message.
    """

    def __init__(
        self,
        client: RiskClient,
        max_score: Optional[float] = None,
        name: str = "risk_lookup",
        halt_on_failure: bool = True,
    ):
        """
        Initialize risk lookup stage.

        Args:
            client: Injected risk service client (owned by the caller)
            max_score: Highest accepted score (defaults to settings.DEFAULT_RISK_MAX_SCORE)
            name: Stage name
            halt_on_failure: Stop the pipeline on rejection (default True)
        """
        super().__init__(name=name, halt_on_failure=halt_on_failure)

        if max_score is None:
            max_score = settings.DEFAULT_RISK_MAX_SCORE
        if not 0.0 <= max_score <= 1.0:
            raise StageConfigurationError(
                f"max_score must be within [0, 1], got {max_score}",
                details={"stage": name},
            )

        self.client = client
        self.max_score = max_score

    def check(self, value: Any) -> ValidationOutcome:
        try:
            assessment = self.client.assess(value)
        except Exception as e:
            logger.warning(
                "Risk lookup failed",
                stage=self.name,
                collaborator=type(self.client).__name__,
                error=str(e),
            )
            raise CollaboratorUnavailableError(
                f"Risk lookup failed: {e}",
                stage_name=self.name,
                collaborator=type(self.client).__name__,
            ) from e

        if not self._is_well_formed(assessment):
            logger.warning(
                "Risk lookup returned a malformed assessment",
                stage=self.name,
                collaborator=type(self.client).__name__,
                answer=repr(assessment),
            )
            raise CollaboratorUnavailableError(
                f"Risk lookup returned a malformed assessment: {assessment!r}",
                stage_name=self.name,
                collaborator=type(self.client).__name__,
            )

        if assessment.score <= self.max_score:
            return ValidationOutcome.success()

        message = f"Risk score {assessment.score:.2f} exceeds maximum {self.max_score:.2f}"
        if assessment.reasons:
            message += f" ({', '.join(assessment.reasons)})"

        return ValidationOutcome.failure([
            ErrorRecord(message=message, severity=Severity.CRITICAL)
        ])

    @staticmethod
    def _is_well_formed(assessment: Any) -> bool:
        """A RiskAssessment with a real, finite score inside [0, 1]."""
        if not isinstance(assessment, RiskAssessment):
            return False
        score = assessment.score
        if isinstance(score, bool) or not isinstance(score, Real):
            return False
        return math.isfinite(score) and 0.0 <= score <= 1.0
