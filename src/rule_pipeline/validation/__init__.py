"""
Multi-stage validation pipeline.

- stage.py: ValidationStage base and FunctionStage
- pipeline.py: ValidationPipeline orchestrator and PipelineRun trace
- builder.py: PipelineBuilder
- required_fields.py, formats.py, limits.py, schema.py, risk.py: built-in stages
- exceptions.py: fatal errors (never used for business validation failures)
"""

from .builder import PipelineBuilder
from .exceptions import (
    CollaboratorUnavailableError,
    PipelineError,
    StageConfigurationError,
    StageContractError,
    StageExecutionError,
)
from .formats import FormatStage
from .limits import Limit, LimitsStage
from .pipeline import PipelineRun, ValidationPipeline
from .required_fields import RequiredFieldsStage
from .risk import RiskAssessment, RiskClient, RiskLookupStage
from .schema import JsonSchemaStage
from .stage import FunctionStage, ValidationStage

__all__ = [
    # Core
    "ValidationStage",
    "FunctionStage",
    "ValidationPipeline",
    "PipelineRun",
    "PipelineBuilder",
    # Built-in stages
    "RequiredFieldsStage",
    "FormatStage",
    "Limit",
    "LimitsStage",
    "JsonSchemaStage",
    "RiskAssessment",
    "RiskClient",
    "RiskLookupStage",
    # Exceptions (fatal, distinct from failed outcomes)
    "PipelineError",
    "StageConfigurationError",
    "StageExecutionError",
    "CollaboratorUnavailableError",
    "StageContractError",
]
