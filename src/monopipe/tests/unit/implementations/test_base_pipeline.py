# ABOUTME: Unit tests for the shared pipeline container
# ABOUTME: Tests storage, composition, factories, context copying and step logging

from types import SimpleNamespace

import pytest

from monopipe.exceptions import IncompatiblePipelineError
from monopipe.implementations import BasePipeline, IntermediatePipeline, Pipeline, SyncPipeline, copy_context
from monopipe.interfaces import PipelineFactory


def inc(x):
    return x + 1


def double(x):
    return x * 2


def square(x):
    return x * x


def boom(x):
    raise RuntimeError("boom")


VARIANTS = [SyncPipeline, Pipeline, IntermediatePipeline]


class TestCopyContext:
    """Test suite for the defensive working copy."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, 1, 1.5, "text", b"bytes", True])
    def test_scalars_pass_through(self, value):
        assert copy_context(value) is value

    @pytest.mark.unit
    def test_list_is_copied_element_wise(self):
        nested = {"a": 1}
        original = [1, nested]

        copied = copy_context(original)

        assert copied == original
        assert copied is not original
        assert copied[1] is nested

    @pytest.mark.unit
    def test_dict_is_copied_shallowly(self):
        nested = [1, 2]
        original = {"test": 1, "nested": nested}

        copied = copy_context(original)
        copied["test"] = 2

        assert original["test"] == 1
        assert copied["nested"] is nested

    @pytest.mark.unit
    def test_object_is_copied_shallowly(self):
        original = SimpleNamespace(test=1)

        copied = copy_context(original)
        copied.test = 2

        assert copied is not original
        assert original.test == 1


class TestBasePipeline:
    """Test suite for BasePipeline behaviour shared by every variant."""

    @pytest.mark.unit
    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            BasePipeline([])

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_factory_is_registered(self, variant):
        assert isinstance(variant.factory, PipelineFactory)
        assert variant.factory.build is variant

    @pytest.mark.unit
    def test_variant_names_are_distinct(self):
        names = {variant.factory.variant for variant in VARIANTS}

        assert names == {"sync", "async", "intermediate"}

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_of_keeps_argument_order(self, variant):
        pipeline = variant.of(inc, double, square)

        assert isinstance(pipeline, variant)
        assert pipeline.to_array() == [inc, double, square]

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_from_accepts_any_iterable(self, variant):
        pipeline = variant.from_(m for m in (inc, double))

        assert pipeline.middleware == (inc, double)

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_pipe_appends(self, variant):
        pipeline = variant.of(inc).pipe(double).pipe(square)

        assert pipeline.to_array() == [inc, double, square]

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_composition_does_not_mutate_operands(self, variant):
        a = variant.of(inc)
        b = variant.of(double)

        a.concat(b)
        a.pipe(square)

        assert a.to_array() == [inc]
        assert b.to_array() == [double]

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_concat_length(self, variant):
        a = variant.of(inc, double)
        b = variant.of(square, inc, inc)

        assert len(a.concat(b)) == len(a) + len(b)

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_to_array_returns_new_list(self, variant):
        pipeline = variant.of(inc)

        pipeline.to_array().append(double)

        assert pipeline.to_array() == [inc]

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_duplicates_are_allowed(self, variant):
        assert variant.of(inc, inc, inc).to_array() == [inc, inc, inc]

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_invalid_entries_are_stored(self, variant):
        pipeline = variant.of(None).pipe(42).concat(variant.of("not callable"))

        assert pipeline.to_array() == [None, 42, "not callable"]

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_is_empty(self, variant):
        assert variant.empty().is_empty is True
        assert variant.of(lambda x: None).is_empty is False

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_instance_empty_is_same_variant(self, variant):
        pipeline = variant.of(inc)

        identity = pipeline.empty()

        assert isinstance(identity, variant)
        assert identity.is_empty
        assert identity == variant.empty()

    @pytest.mark.unit
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_add_operator_is_concat(self, variant):
        assert variant.of(inc) + variant.of(double) == variant.of(inc, double)

    @pytest.mark.unit
    def test_add_operator_rejects_non_pipelines(self):
        with pytest.raises(TypeError):
            SyncPipeline.of(inc) + [double]

    @pytest.mark.unit
    def test_concat_rejects_other_variants(self):
        with pytest.raises(IncompatiblePipelineError) as exc_info:
            SyncPipeline.of(inc).concat(Pipeline.of(inc))

        assert exc_info.value.details == {"left": "sync", "right": "async"}

    @pytest.mark.unit
    def test_concat_rejects_non_pipelines(self):
        with pytest.raises(IncompatiblePipelineError) as exc_info:
            Pipeline.of(inc).concat([double])

        assert exc_info.value.details["right"] == "list"

    @pytest.mark.unit
    def test_equality_and_hash(self):
        assert SyncPipeline.of(inc, double) == SyncPipeline.of(inc, double)
        assert SyncPipeline.of(inc, double) != SyncPipeline.of(double, inc)
        assert SyncPipeline.of(inc) != Pipeline.of(inc)
        assert hash(SyncPipeline.of(inc)) == hash(SyncPipeline.of(inc))

    @pytest.mark.unit
    def test_iteration_and_len(self):
        pipeline = Pipeline.of(inc, double)

        assert list(pipeline) == [inc, double]
        assert len(pipeline) == 2

    @pytest.mark.unit
    def test_repr_lists_middleware(self):
        assert repr(SyncPipeline.of(inc, None)) == "SyncPipeline([inc, NoneType])"


class TestStepLogging:
    """Test suite for debug records emitted while processing."""

    @pytest.mark.unit
    def test_start_and_finish_are_logged(self, log_records):
        SyncPipeline.of(inc).process(1)

        messages = [record["message"] for record in log_records]

        assert "Processing 1 middleware" in messages
        assert "Processed 1 middleware" in messages
        assert not any(message.startswith("Step") for message in messages)

    @pytest.mark.unit
    def test_steps_are_logged_when_enabled(self, log_records, monkeypatch):
        monkeypatch.setenv("MONOPIPE_PIPELINE_STEP_LOGGING", "true")

        SyncPipeline.of(inc, double).process(1)

        messages = [record["message"] for record in log_records]
        assert "Step 1/2: inc" in messages
        assert "Step 2/2: double" in messages

    @pytest.mark.unit
    def test_records_are_bound_to_variant(self, log_records):
        SyncPipeline.of(inc).process(1)

        assert all(record["extra"]["variant"] == "sync" for record in log_records)
        assert all(record["extra"]["name"] == "monopipe.pipeline" for record in log_records)

    @pytest.mark.unit
    def test_failure_is_logged_before_raising(self, log_records):
        with pytest.raises(RuntimeError):
            SyncPipeline.of(inc, boom).process(1)

        messages = [record["message"] for record in log_records]
        assert "Step 2/2 (boom) raised, aborting" in messages
        assert "Processed 2 middleware" not in messages


class TestSettingsIsolation:
    """Test suite for pipelines running next to unrelated environment variables."""

    @pytest.mark.unit
    @pytest.mark.parametrize("name,value", [("ENV", "test"), ("LOG_LEVEL", "warn"), ("LOG_FORMAT", "xml")])
    def test_unprefixed_variables_are_ignored(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        assert SyncPipeline.of(inc).pipe(double).process(1) == 4
        assert SyncPipeline.empty().concat(SyncPipeline.of(inc)).process(1) == 2

    @pytest.mark.unit
    @pytest.mark.parametrize("pipeline_class", VARIANTS)
    def test_construction_does_not_read_settings(self, monkeypatch, pipeline_class):
        monkeypatch.setenv("MONOPIPE_LOG_LEVEL", "verbose")

        pipeline = pipeline_class.of(inc).pipe(double).concat(pipeline_class.empty())

        assert pipeline.to_array() == [inc, double]
        assert pipeline_class.from_([inc]) == pipeline_class.of(inc)


class TaggedList(list):
    pass


class TaggedDict(dict):
    pass


class TestCopyContextSubclasses:
    """Test suite for how copy_context treats container subclasses."""

    @pytest.mark.unit
    def test_list_subclass_becomes_plain_list(self):
        copied = copy_context(TaggedList([1, 2]))

        assert type(copied) is list
        assert copied == [1, 2]

    @pytest.mark.unit
    def test_dict_subclass_keeps_type(self):
        ctx = TaggedDict(a=1)

        copied = copy_context(ctx)

        assert type(copied) is TaggedDict
        assert copied is not ctx


class TestVariantSubclassing:
    """Test suite for subclasses of a pipeline variant."""

    @pytest.mark.unit
    def test_subclass_inherits_parent_factory(self):
        class InheritingPipeline(SyncPipeline):
            pass

        assert type(InheritingPipeline.of(inc)) is SyncPipeline

    @pytest.mark.unit
    def test_subclass_with_own_factory_composes_into_itself(self):
        class OwnPipeline(SyncPipeline):
            pass

        OwnPipeline.factory = PipelineFactory("own", OwnPipeline)

        pipeline = OwnPipeline.of(inc).pipe(double)

        assert type(pipeline) is OwnPipeline
        assert pipeline.process(1) == 4
        with pytest.raises(IncompatiblePipelineError):
            pipeline.concat(SyncPipeline.of(inc))
