"""
Фабрика для создания компонентов сервиса.

Собирает настройки, хранилище конфигураций, менеджер файлов,
ProcessorService и EvaluationRunner. Компоненты создаются явно
и передаются друг другу, глобального состояния нет.
"""

from typing import Any, Dict, Optional

from loguru import logger

from config.settings import ProcessorSettings, load_settings

from ..configuration.resource_service import ConfigurationStore
from ..domain.interfaces import IEngineRecordStore, IJobScheduler
from ..evaluation.evaluation_runner import EvaluationRunner
from ..infrastructure.engine_store import JsonEngineRecordStore
from ..infrastructure.file_manager import ProcessorFileManager
from ..processor.processor_service import ProcessorService


class ProcessorComponentFactory:
    """Фабрика компонентов домена Processor."""

    @staticmethod
    def create_configuration_store(settings: ProcessorSettings) -> ConfigurationStore:
        """Загружает конфигурации всех видов заданий из папки ресурсов."""
        logger.debug(f"[Factory] Создание хранилища конфигураций: {settings.resources_folder}")
        return ConfigurationStore(settings.resources_folder)

    @staticmethod
    def create_file_manager() -> ProcessorFileManager:
        return ProcessorFileManager()

    @staticmethod
    def create_engine_store(
        settings: ProcessorSettings,
        file_manager: Optional[ProcessorFileManager] = None
    ) -> IEngineRecordStore:
        return JsonEngineRecordStore(settings.engine_record_filename, file_manager)

    @staticmethod
    def create_processor_service(
        scheduler: IJobScheduler,
        settings: Optional[ProcessorSettings] = None,
        configuration_store: Optional[ConfigurationStore] = None,
        engine_store: Optional[IEngineRecordStore] = None,
        file_manager: Optional[ProcessorFileManager] = None,
    ) -> ProcessorService:
        """
        Создает ProcessorService.

        Args:
            scheduler: Планировщик заданий (внешняя зависимость)
            settings: Настройки (по умолчанию из переменных окружения)
            configuration_store: Конфигурации (по умолчанию из папки ресурсов)
            engine_store: Хранилище записей движка (по умолчанию JSON)
            file_manager: Менеджер файлов (опционально)
        """
        if settings is None:
            settings = load_settings()

        if configuration_store is None:
            configuration_store = ProcessorComponentFactory.create_configuration_store(settings)

        if file_manager is None:
            file_manager = ProcessorComponentFactory.create_file_manager()

        if engine_store is None:
            engine_store = ProcessorComponentFactory.create_engine_store(settings, file_manager)

        return ProcessorService(
            settings=settings,
            configuration_store=configuration_store,
            scheduler=scheduler,
            engine_store=engine_store,
            file_manager=file_manager,
        )

    @staticmethod
    def create_evaluation_runner(
        settings: Optional[ProcessorSettings] = None,
        configuration_store: Optional[ConfigurationStore] = None,
        timeout: Optional[float] = None,
    ) -> EvaluationRunner:
        """Создает синхронный запуск оценки."""
        if settings is None:
            settings = load_settings()

        if configuration_store is None:
            configuration_store = ProcessorComponentFactory.create_configuration_store(settings)

        return EvaluationRunner(settings, configuration_store, timeout=timeout)

    @staticmethod
    def get_service_info(
        settings: ProcessorSettings,
        configuration_store: ConfigurationStore
    ) -> Dict[str, Any]:
        """Сводка настроек для лога запуска."""
        return {
            "folders": {
                "data": str(settings.data_folder),
                "assemble": str(settings.assemble_folder),
                "projects": str(settings.projects_folder),
                "temporary": str(settings.temporary_folder),
            },
            "processors": {
                "evaluation": settings.evaluation_processor,
                "recognition": settings.recognition_processor,
                "training": settings.training_processor,
            },
            "available": [kind.value for kind in configuration_store.available_kinds()],
            "time_consuming": sorted(kind.value for kind in settings.time_consuming),
        }
