from pathlib import Path

import pytest
from pydantic import ValidationError

from config.settings import ProcessorSettings, parse_time_consuming, validate_config
from contracts.job_dto import JobKind


def test_parse_time_consuming():
    assert parse_time_consuming("training, recognition") == frozenset({JobKind.TRAINING, JobKind.RECOGNITION})
    assert parse_time_consuming("") == frozenset()


def test_parse_time_consuming_unknown_kind_ignored(caplog):
    assert parse_time_consuming("training,segmentation,,") == frozenset({JobKind.TRAINING})
    assert "segmentation" in caplog.text


def test_folders_normalized():
    settings = ProcessorSettings(
        data_folder="/srv/ocr/./data/",
        assemble_folder="/srv/ocr/x/../assemble",
        projects_folder="/srv/ocr/projects",
        temporary_folder="/srv/ocr/tmp",
    )
    assert settings.data_folder == Path("/srv/ocr/data")
    assert settings.assemble_folder == Path("/srv/ocr/assemble")


def test_processor_names(settings):
    assert settings.processor(JobKind.EVALUATION) == "calamari-eval"
    assert settings.processor(JobKind.RECOGNITION) == "calamari-predict"
    assert settings.processor(JobKind.TRAINING) == "calamari-train"


def test_blank_dataset_filename_rejected(folders):
    with pytest.raises(ValidationError):
        ProcessorSettings(
            data_folder=folders / "data",
            assemble_folder=folders / "assemble",
            projects_folder=folders / "projects",
            temporary_folder=folders / "temporary",
            training_dataset_filename=" ",
        )


def test_settings_frozen(settings):
    with pytest.raises(ValidationError):
        settings.training_processor = "other"


def test_validate_config(settings, folders):
    assert validate_config(settings) is True

    (folders / "projects").rmdir()
    with pytest.raises(ValueError, match="projects"):
        validate_config(settings)
