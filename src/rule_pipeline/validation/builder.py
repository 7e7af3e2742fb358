"""
Fluent builder for ValidationPipeline.

Usage:
    pipeline = (
        PipelineBuilder()
        .add(RequiredFieldsStage(["applicant.email", "amount"]))
        .add(FormatStage({"applicant.email": EMAIL_PATTERN}))
        .add(LimitsStage({"amount": Limit(minimum=1000, maximum=50000)}))
        .build()
    )
    outcome = pipeline.validate(application)
"""

from typing import Iterable, Optional

from ..config import Settings
from .exceptions import StageConfigurationError
from .pipeline import ValidationPipeline
from .stage import ValidationStage


class PipelineBuilder:
    """
    Collects stages in order and materializes an immutable pipeline.

    The builder can keep being used after build(); pipelines already built
    hold their own copy of the stage sequence.
    """

    def __init__(self):
        self._stages: list[ValidationStage] = []

    def add(self, stage: ValidationStage) -> "PipelineBuilder":
        """
        Append a stage to the end of the sequence.

        Raises:
            StageConfigurationError: If stage is not a ValidationStage
        """
        if not isinstance(stage, ValidationStage):
            raise StageConfigurationError(
                f"Expected a ValidationStage, got {type(stage).__name__}",
                details={"position": len(self._stages)},
            )
        self._stages.append(stage)
        return self

    def extend(self, stages: Iterable[ValidationStage]) -> "PipelineBuilder":
        """Append several stages, in iteration order."""
        for stage in stages:
            self.add(stage)
        return self

    def build(self, settings: Optional[Settings] = None) -> ValidationPipeline:
        """Create a pipeline from a snapshot of the current stages."""
        return ValidationPipeline(tuple(self._stages), settings=settings)

    def __len__(self) -> int:
        return len(self._stages)
