"""
Unit tests for PipelineBuilder.
"""

import pytest

from rule_pipeline.models.outcome import ValidationOutcome
from rule_pipeline.validation.builder import PipelineBuilder
from rule_pipeline.validation.exceptions import StageConfigurationError
from rule_pipeline.validation.pipeline import ValidationPipeline


class TestPipelineBuilder:
    """Test suite for fluent pipeline assembly."""

    def test_add_is_fluent_and_preserves_order(self, make_stage):
        builder = PipelineBuilder()

        returned = builder.add(make_stage("a")).add(make_stage("b")).add(make_stage("c"))
        pipeline = builder.build()

        assert returned is builder
        assert isinstance(pipeline, ValidationPipeline)
        assert pipeline.stage_names == ("a", "b", "c")

    def test_extend(self, make_stage):
        pipeline = (
            PipelineBuilder()
            .add(make_stage("a"))
            .extend([make_stage("b"), make_stage("c")])
            .build()
        )

        assert pipeline.stage_names == ("a", "b", "c")

    def test_empty_builder_builds_always_valid_pipeline(self, test_settings):
        pipeline = PipelineBuilder().build(settings=test_settings)

        assert len(pipeline) == 0
        assert pipeline.validate({"anything": True}) == ValidationOutcome.success()

    def test_mutating_builder_after_build_does_not_affect_pipeline(self, make_stage, test_settings):
        builder = PipelineBuilder().add(make_stage("a"))
        pipeline = builder.build(settings=test_settings)

        builder.add(make_stage("b", errors=["added later"], halt=True))
        second = builder.build(settings=test_settings)

        assert pipeline.stage_names == ("a",)
        assert pipeline.validate({}).valid is True
        assert second.stage_names == ("a", "b")
        assert second.validate({}).valid is False

    def test_build_forwards_settings(self, test_settings):
        pipeline = PipelineBuilder().build(settings=test_settings)

        assert pipeline.settings is test_settings

    @pytest.mark.parametrize("not_a_stage", [None, "stage", lambda value: ValidationOutcome.success()])
    def test_add_rejects_non_stages(self, not_a_stage):
        builder = PipelineBuilder()

        with pytest.raises(StageConfigurationError):
            builder.add(not_a_stage)

        assert len(builder) == 0
