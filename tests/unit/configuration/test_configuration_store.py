"""
Unit-тесты загрузки конфигураций процессоров через ConfigurationStore.
"""

import pytest

from calamari_msa.configuration.resource_service import ConfigurationStore
from calamari_msa.domain.exceptions import ConfigurationUnavailableError
from contracts.job_dto import JobKind

EVALUATION_YAML = """
description: Evaluation
categories: [evaluation]
steps: [evaluation]
model: {}
mappings:
  - argument: confusion-matrix
    values: ["--n_confusions", "10"]
"""

RECOGNITION_YAML = """
description: Recognition
model: {}
mappings:
  - argument: voter
    values: ["--voter", "confidence_voter_default_ctc"]
  - argument: voter
    values: ["--voter", "sequence_voter"]
  - argument: nulls
    values: ["--a", null, "b"]
  - values: ["--ignored"]
"""

TRAINING_YAML = """
description: Training
model: {}
framework:
  version: "2.2"
  argument:
    images: "--train.images"
    output: "--trainer.output_dir"
"""


class TestBundledResources:
    """Ресурсы, поставляемые с пакетом."""

    def test_all_kinds_available(self, store):
        assert store.available_kinds() == [JobKind.EVALUATION, JobKind.RECOGNITION, JobKind.TRAINING]

    def test_training_framework(self, store):
        training = store.require(JobKind.TRAINING)
        assert training.framework is not None
        assert training.framework.version
        assert training.framework.argument.images
        assert training.framework.argument.output

    def test_descriptions_not_blank(self, store):
        for kind in JobKind:
            assert store.require(kind).description.strip()


class TestLoading:

    def test_missing_resource_makes_kind_unavailable(self, make_resources):
        store = ConfigurationStore(make_resources(evaluation=EVALUATION_YAML, training=TRAINING_YAML))

        assert not store.is_available(JobKind.RECOGNITION)
        assert store.get(JobKind.RECOGNITION) is None
        assert store.is_available(JobKind.EVALUATION)
        assert store.is_available(JobKind.TRAINING)

        with pytest.raises(ConfigurationUnavailableError):
            store.require(JobKind.RECOGNITION)

    def test_malformed_yaml_makes_kind_unavailable(self, make_resources, caplog):
        store = ConfigurationStore(make_resources(evaluation="description: [unclosed\n  model: {"))

        assert not store.is_available(JobKind.EVALUATION)
        assert "evaluation.yaml" in caplog.text

    def test_non_mapping_resource_unavailable(self, make_resources):
        store = ConfigurationStore(make_resources(evaluation="- just\n- a list\n"))
        assert not store.is_available(JobKind.EVALUATION)

    def test_blank_description_unavailable(self, make_resources):
        store = ConfigurationStore(make_resources(evaluation="description: '  '\nmodel: {}\n"))
        assert not store.is_available(JobKind.EVALUATION)

    def test_missing_model_unavailable(self, make_resources):
        store = ConfigurationStore(make_resources(evaluation="description: Evaluation\n"))
        assert not store.is_available(JobKind.EVALUATION)

    def test_training_without_framework_unavailable(self, make_resources):
        store = ConfigurationStore(make_resources(training="description: Training\nmodel: {}\n"))
        assert not store.is_available(JobKind.TRAINING)

    def test_empty_directory(self, tmp_path):
        store = ConfigurationStore(tmp_path / "nowhere")
        assert store.available_kinds() == []


class TestMappings:

    def test_duplicate_alias_keeps_first(self, make_resources, caplog):
        store = ConfigurationStore(make_resources(recognition=RECOGNITION_YAML))

        assert store.mappings(JobKind.RECOGNITION)["voter"] == ("--voter", "confidence_voter_default_ctc")
        assert "Неоднозначный аргумент 'voter'" in caplog.text

    def test_null_values_dropped_and_unnamed_ignored(self, make_resources):
        store = ConfigurationStore(make_resources(recognition=RECOGNITION_YAML))
        mappings = store.mappings(JobKind.RECOGNITION)

        assert mappings["nulls"] == ("--a", "b")
        assert set(mappings) == {"voter", "nulls"}

    def test_expand_uses_kind_table(self, make_resources):
        store = ConfigurationStore(make_resources(evaluation=EVALUATION_YAML, recognition=RECOGNITION_YAML))

        assert store.expand(JobKind.EVALUATION, ["confusion-matrix"]) == ["--n_confusions", "10"]
        # Псевдоним другого вида задания не раскрывается
        assert store.expand(JobKind.EVALUATION, ["voter"]) == ["voter"]

    def test_unavailable_kind_has_empty_table(self, make_resources):
        store = ConfigurationStore(make_resources(evaluation=EVALUATION_YAML))
        assert store.mappings(JobKind.TRAINING) == {}
        assert store.expand(JobKind.TRAINING, ["a"]) == ["a"]

    def test_mappings_returns_copy(self, make_resources):
        store = ConfigurationStore(make_resources(evaluation=EVALUATION_YAML))
        store.mappings(JobKind.EVALUATION).clear()
        assert "confusion-matrix" in store.mappings(JobKind.EVALUATION)


class TestYamlScalars:
    """null и числа без кавычек в ресурсах."""

    def test_null_mappings(self, make_resources):
        store = ConfigurationStore(make_resources(evaluation="description: Evaluation\nmodel: {}\nmappings:\n"))

        assert store.is_available(JobKind.EVALUATION)
        assert store.mappings(JobKind.EVALUATION) == {}

    def test_null_values(self, make_resources):
        text = (
            "description: Evaluation\nmodel: {}\ncategories:\nsteps:\n"
            "mappings:\n  - argument: skip\n    values:\n"
        )
        store = ConfigurationStore(make_resources(evaluation=text))

        assert store.is_available(JobKind.EVALUATION)
        assert store.expand(JobKind.EVALUATION, ["skip", "--x"]) == ["--x"]

    def test_numeric_values(self, make_resources):
        text = (
            "description: Evaluation\nmodel: {}\n"
            "mappings:\n  - argument: confusion-matrix\n    values: [\"--n_confusions\", 10, 0.5, true]\n"
        )
        store = ConfigurationStore(make_resources(evaluation=text))

        assert store.is_available(JobKind.EVALUATION)
        assert store.expand(JobKind.EVALUATION, ["confusion-matrix"]) == ["--n_confusions", "10", "0.5", "true"]

    def test_unquoted_framework_version(self, make_resources):
        text = TRAINING_YAML.replace('version: "2.2"', "version: 2.2")
        store = ConfigurationStore(make_resources(training=text))

        assert store.is_available(JobKind.TRAINING)
        assert store.require(JobKind.TRAINING).framework.version == "2.2"
