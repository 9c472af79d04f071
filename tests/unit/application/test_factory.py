from calamari_msa.application.factory import ProcessorComponentFactory
from calamari_msa.evaluation.evaluation_runner import EvaluationRunner
from calamari_msa.infrastructure.engine_store import JsonEngineRecordStore
from calamari_msa.processor.processor_service import ProcessorService


def test_create_processor_service(settings, scheduler):
    service = ProcessorComponentFactory.create_processor_service(scheduler, settings=settings)

    assert isinstance(service, ProcessorService)
    assert service.scheduler is scheduler
    assert isinstance(service.engine_store, JsonEngineRecordStore)
    assert service.engine_store.file_manager is service.file_manager
    assert len(service.configuration_store.available_kinds()) == 3


def test_create_evaluation_runner(settings, store):
    runner = ProcessorComponentFactory.create_evaluation_runner(settings, store, timeout=5)

    assert isinstance(runner, EvaluationRunner)
    assert runner.timeout == 5
    assert runner.configuration_store is store


def test_service_info(settings, store):
    info = ProcessorComponentFactory.get_service_info(settings, store)

    assert info["available"] == ["evaluation", "recognition", "training"]
    assert info["time_consuming"] == ["training"]
    assert info["processors"]["training"] == "calamari-train"
    assert info["folders"]["data"] == str(settings.data_folder)
