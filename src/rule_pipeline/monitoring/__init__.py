"""Monitoring and metrics instrumentation for the rule pipeline.

Exports Prometheus collectors for pipeline runs and stage failures.
"""

from rule_pipeline.monitoring.metrics import (
    pipeline_fatal_errors_total,
    pipeline_run_duration_seconds,
    pipeline_runs_total,
    stage_failures_total,
)

__all__ = [
    "pipeline_runs_total",
    "pipeline_run_duration_seconds",
    "stage_failures_total",
    "pipeline_fatal_errors_total",
]
