"""
Validation Pipeline: ordered multi-stage orchestrator.

Runs stages in declaration order against one input:
- Each stage's outcome is merged into the accumulated outcome
- A failing stage with halt_on_failure=True stops the run; errors collected
  so far (including that stage's) are returned
- A failing non-halting stage never prevents later stages from running
- Any exception escaping a stage aborts the run as a StageExecutionError

The pipeline is immutable and keeps no per-run state, so a single instance
can be shared between threads.
"""

import time
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

import structlog

from ..config import Settings, settings as default_settings
from ..models.outcome import ValidationOutcome
from ..monitoring.metrics import (
    pipeline_fatal_errors_total,
    pipeline_run_duration_seconds,
    pipeline_runs_total,
    stage_failures_total,
)
from .exceptions import StageContractError, StageExecutionError
from .stage import ValidationStage

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PipelineRun:
    """
    Trace of one pipeline invocation.

    Attributes:
        outcome: Merged outcome of every stage that ran
        stages_run: Names of the stages that ran, in order
        halted_by: Name of the stage that stopped the run, or None
    """

    outcome: ValidationOutcome
    stages_run: tuple[str, ...]
    halted_by: Optional[str] = None

    @property
    def halted(self) -> bool:
        return self.halted_by is not None


class ValidationPipeline:
    """
    Immutable ordered sequence of validation stages.

    Usually assembled with PipelineBuilder. An empty pipeline returns
    ValidationOutcome.success() for any input.
    """

    def __init__(
        self,
        stages: Iterable[ValidationStage] = (),
        settings: Optional[Settings] = None,
    ):
        """
        Initialize validation pipeline.

        Args:
            stages: Stages in evaluation order (copied)
            settings: Application settings (metrics toggle, log preview size)
        """
        self._stages: tuple[ValidationStage, ...] = tuple(stages)
        self.settings = settings or default_settings

        logger.debug(
            "ValidationPipeline initialized",
            stages=list(self.stage_names),
            halting_stages=[s.name for s in self._stages if s.halts_on_failure],
        )

    @property
    def stages(self) -> tuple[ValidationStage, ...]:
        return self._stages

    @property
    def stage_names(self) -> tuple[str, ...]:
        return tuple(stage.name for stage in self._stages)

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[ValidationStage]:
        return iter(self._stages)

    def __repr__(self) -> str:
        return f"ValidationPipeline(stages={list(self.stage_names)!r})"

    def validate(self, value: Any) -> ValidationOutcome:
        """
        Run the pipeline and return the merged outcome.

        Args:
            value: Input value (never mutated)

        Returns:
            Merged ValidationOutcome

        Raises:
            StageExecutionError: If a stage could not complete its check
        """
        return self.run(value).outcome

    def run(self, value: Any) -> PipelineRun:
        """
        Run the pipeline and return the outcome with its execution trace.

        Raises:
            StageExecutionError: If a stage could not complete its check
        """
        metrics_enabled = self.settings.PROMETHEUS_ENABLED
        start_time = time.perf_counter()

        accumulated = ValidationOutcome.success()
        stages_run: list[str] = []
        halted_by: Optional[str] = None

        try:
            for stage in self._stages:
                result = self._check_stage(stage, value)
                stages_run.append(stage.name)
                accumulated = accumulated.merge(result)

                if result.valid:
                    continue

                halts = stage.halts_on_failure
                logger.debug(
                    "Stage failed",
                    stage=stage.name,
                    error_count=len(result.errors),
                    halts=halts,
                )
                if metrics_enabled:
                    stage_failures_total.labels(
                        stage=stage.name, halted=str(halts).lower()
                    ).inc()

                if halts:
                    halted_by = stage.name
                    break
        finally:
            if metrics_enabled:
                pipeline_run_duration_seconds.observe(time.perf_counter() - start_time)

        if metrics_enabled:
            pipeline_runs_total.labels(
                result="valid" if accumulated.valid else "invalid"
            ).inc()

        self._log_run(accumulated, stages_run, halted_by, start_time)
        return PipelineRun(
            outcome=accumulated,
            stages_run=tuple(stages_run),
            halted_by=halted_by,
        )

    def _check_stage(self, stage: ValidationStage, value: Any) -> ValidationOutcome:
        """
        Run one stage, converting escaped exceptions into fatal pipeline errors.
        """
        try:
            result = stage.check(value)
        except StageExecutionError as e:
            if e.stage_name is None:
                e.stage_name = stage.name
                e.details["stage_name"] = stage.name
            self._record_fatal(stage, e)
            raise
        except Exception as e:
            wrapped = StageExecutionError(
                f"Stage '{stage.name}' could not complete: {e}",
                stage_name=stage.name,
                details={"error_type": type(e).__name__},
            )
            self._record_fatal(stage, wrapped)
            raise wrapped from e

        if not isinstance(result, ValidationOutcome):
            error = StageContractError(
                f"Stage '{stage.name}' returned {type(result).__name__}, "
                f"expected ValidationOutcome",
                stage_name=stage.name,
                returned_type=type(result).__name__,
            )
            self._record_fatal(stage, error)
            raise error

        return result

    def _record_fatal(self, stage: ValidationStage, error: StageExecutionError) -> None:
        logger.error(
            "Validation aborted by fatal stage error",
            stage=stage.name,
            error_type=type(error).__name__,
            error=str(error),
        )
        if self.settings.PROMETHEUS_ENABLED:
            pipeline_fatal_errors_total.labels(
                stage=stage.name, error_type=type(error).__name__
            ).inc()

    def _log_run(
        self,
        outcome: ValidationOutcome,
        stages_run: list[str],
        halted_by: Optional[str],
        start_time: float,
    ) -> None:
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

        if outcome.valid:
            logger.info(
                "Validation passed",
                stages_run=len(stages_run),
                duration_ms=duration_ms,
            )
            return

        preview = self.settings.LOG_ERROR_PREVIEW
        messages = outcome.error_messages()
        logger.info(
            "Validation failed",
            stages_run=len(stages_run),
            stage_count=len(self._stages),
            error_count=len(messages),
            halted_by=halted_by,
            errors=messages[:preview],
            truncated=len(messages) > preview,
            duration_ms=duration_ms,
        )
