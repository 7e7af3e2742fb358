"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
import pytest
from pathlib import Path
from typing import Any, Dict, Optional

from rule_pipeline.config import Settings
from rule_pipeline.models.enums import Severity
from rule_pipeline.models.outcome import ErrorRecord, ValidationOutcome
from rule_pipeline.validation.risk import RiskAssessment
from rule_pipeline.validation.stage import ValidationStage


class StubStage(ValidationStage):
    """Stage returning a fixed outcome and recording the inputs it saw."""

    def __init__(self, name: str, outcome: ValidationOutcome, halt_on_failure: bool = False):
        super().__init__(name=name, halt_on_failure=halt_on_failure)
        self.outcome = outcome
        self.calls: list[Any] = []

    def check(self, value: Any) -> ValidationOutcome:
        self.calls.append(value)
        return self.outcome


class FakeRiskClient:
    """Risk client returning a fixed score, or raising a configured error."""

    def __init__(self, score: float = 0.1, reasons: tuple[str, ...] = (), error: Optional[Exception] = None):
        self.score = score
        self.reasons = reasons
        self.error = error

    def assess(self, value: Any) -> RiskAssessment:
        if self.error is not None:
            raise self.error
        return RiskAssessment(score=self.score, reasons=self.reasons)


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with metrics disabled.

    Tests that check Prometheus collectors build their own Settings with
    PROMETHEUS_ENABLED=True.
    """
    return Settings(
        APP_NAME="Rule Pipeline (Test)",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        LOG_ERROR_PREVIEW=3,
        DEFAULT_RISK_MAX_SCORE=0.8,
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_application(fixtures_dir: Path) -> Dict[str, Any]:
    """Load the valid sample loan application as dict."""
    with open(fixtures_dir / "sample_application.json") as f:
        return json.load(f)


@pytest.fixture
def schema_path(fixtures_dir: Path) -> Path:
    """Path to the loan application JSON Schema."""
    return fixtures_dir / "loan_application_schema.json"


@pytest.fixture
def make_stage():
    """Factory fixture to create StubStage instances.

    Usage:
        def test_something(make_stage):
            failing = make_stage("limits", errors=["amount too high"], halt=True)
            passing = make_stage("format")
    """
    def _create(
        name: str,
        errors: Optional[list[str]] = None,
        halt: bool = False,
        severity: Severity = Severity.ERROR,
    ) -> StubStage:
        records = [
            ErrorRecord(field=f"{name}_field", message=msg, severity=severity)
            for msg in (errors or [])
        ]
        return StubStage(name, ValidationOutcome.failure(records), halt_on_failure=halt)

    return _create


@pytest.fixture
def make_risk_client():
    """Factory fixture to create FakeRiskClient instances."""
    def _create(score: float = 0.1, reasons: tuple[str, ...] = (), error: Optional[Exception] = None):
        return FakeRiskClient(score=score, reasons=reasons, error=error)

    return _create
