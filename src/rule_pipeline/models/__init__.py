"""
Data models for the rule pipeline.

- enums.py: Severity levels
- outcome.py: ErrorRecord and ValidationOutcome
"""

from rule_pipeline.models.enums import Severity
from rule_pipeline.models.outcome import ErrorRecord, ValidationOutcome

__all__ = [
    "Severity",
    "ErrorRecord",
    "ValidationOutcome",
]
