"""
Rule Pipeline: ordered, multi-stage business-rule validation.

Runs a fixed sequence of independent validation stages over one input value:
- Structured error records (field, message, severity)
- Immutable outcomes with an associative merge
- Per-stage halt policy for short-circuiting expensive or unsafe stages
- Fatal errors kept apart from business validation failures

Architecture: stages -> builder -> immutable pipeline, structlog + Prometheus
"""

__version__ = "0.1.0"

from rule_pipeline.logging_config import configure_logging

__all__ = ["configure_logging", "__version__"]
