import pytest
from pathlib import Path
from loguru import logger

from calamari_msa.configuration.resource_service import ConfigurationStore
from calamari_msa.domain.interfaces import IJobScheduler
from calamari_msa.processor.processor_service import ProcessorService
from config.settings import ProcessorSettings
from contracts.job_dto import JobDescriptor, JobHandle, JobKind

BUNDLED_RESOURCES = Path(__file__).parent.parent / "calamari_msa" / "configuration" / "resources"


class RecordingScheduler(IJobScheduler):
    """Записывает дескрипторы вместо запуска процессов."""

    def __init__(self):
        self.descriptors = []

    def submit(self, descriptor: JobDescriptor) -> JobHandle:
        self.descriptors.append(descriptor)
        return JobHandle(id=len(self.descriptors), key=descriptor.key)


class FailingScheduler(IJobScheduler):
    def submit(self, descriptor: JobDescriptor) -> JobHandle:
        raise RuntimeError("scheduler is shut down")


@pytest.fixture
def caplog(caplog):
    """Перенаправляет loguru в caplog."""
    handler_id = logger.add(
        caplog.handler,
        format="{message}",
        level=0,
        filter=lambda record: record["level"].no >= caplog.handler.level,
        enqueue=False,
    )
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def folders(tmp_path):
    """Корневые папки сервиса: data, assemble, projects, temporary."""
    for name in ("data", "assemble", "projects", "temporary"):
        (tmp_path / name).mkdir()
    return tmp_path


@pytest.fixture
def settings(folders):
    return ProcessorSettings(
        data_folder=folders / "data",
        assemble_folder=folders / "assemble",
        projects_folder=folders / "projects",
        temporary_folder=folders / "temporary",
        resources_folder=BUNDLED_RESOURCES,
        time_consuming=frozenset({JobKind.TRAINING}),
    )


@pytest.fixture
def store(settings):
    return ConfigurationStore(settings.resources_folder)


@pytest.fixture
def scheduler():
    return RecordingScheduler()


@pytest.fixture
def service(settings, store, scheduler):
    return ProcessorService(settings, store, scheduler)


def write_resources(directory: Path, **resources: str) -> Path:
    """Записывает <kind>.yaml ресурсы в directory."""
    directory.mkdir(parents=True, exist_ok=True)
    for kind, text in resources.items():
        (directory / f"{kind}.yaml").write_text(text, encoding="utf-8")
    return directory


@pytest.fixture
def make_resources(tmp_path):
    """Фабрика папки ресурсов: make_resources(evaluation="...", training="...")."""
    def _make(**resources: str) -> Path:
        return write_resources(tmp_path / "resources", **resources)
    return _make


@pytest.fixture
def failing_scheduler():
    return FailingScheduler()
