"""
Enumerations for validation data models.
"""

from enum import Enum


class Severity(str, Enum):
    """
    Informational classification of a validation error.

    Severity is presentation metadata for callers. It never decides whether
    the pipeline halts; that is controlled by each stage's halt policy.
    Ordered from least to most severe.
    """

    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @classmethod
    def get_ordinal(cls, severity: "Severity") -> int:
        """Get ordinal value for severity (0=warning, 1=error, 2=critical)."""
        order = [cls.WARNING, cls.ERROR, cls.CRITICAL]
        return order.index(severity)
