"""Prometheus metrics for the rule pipeline.

Collectors live in the default registry; the host application decides how to
expose them (e.g. prometheus_client.start_http_server). Alert rules should be
configured for:
- pipeline_fatal_errors_total (collaborators down, broken stages)
- pipeline_runs_total{result="invalid"} (sudden rejection spikes)
"""

from prometheus_client import Counter, Histogram

# === Pipeline Metrics ===

pipeline_runs_total = Counter(
    "pipeline_runs_total",
    "Total completed pipeline runs by result",
    ["result"],
)
"""
Completed pipeline runs.

Labels:
- result: valid, invalid
"""

pipeline_run_duration_seconds = Histogram(
    "pipeline_run_duration_seconds",
    "Pipeline run latency in seconds",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
)
"""
Pipeline run latency, including runs aborted by fatal errors.

Buckets span in-memory rule checks (sub-millisecond) up to stages that call
external collaborators.
"""

# === Stage Metrics ===

stage_failures_total = Counter(
    "stage_failures_total",
    "Total stage validation failures by stage and halt",
    ["stage", "halted"],
)
"""
Stages that returned an invalid outcome.

Labels:
- stage: Stage name
- halted: true (the failure stopped the pipeline), false
"""

pipeline_fatal_errors_total = Counter(
    "pipeline_fatal_errors_total",
    "Total pipeline runs aborted by a fatal stage error",
    ["stage", "error_type"],
)
"""
Runs aborted because a stage could not complete.

Labels:
- stage: Stage name
- error_type: StageExecutionError, CollaboratorUnavailableError, StageContractError

Alert thresholds:
- WARN: any CollaboratorUnavailableError
"""
