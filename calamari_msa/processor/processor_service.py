"""
Processor Service - сборка и запуск заданий движка Calamari.

Для каждого вида задания:
1. Проверка доступности конфигурации
2. Раскрытие псевдонимов аргументов
3. Проверка рабочей папки относительно корня
4. Зарезервированные аргументы, batch-аргументы, манифест датасета (обучение)
5. Передача JobDescriptor планировщику

ЦКП: Дескриптор задания планировщика (и EngineRecord для обучения).
Ошибки валидации возникают до записи файлов и запуска процессов.
"""

from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from loguru import logger

from config.settings import ProcessorSettings
from contracts.job_dto import (
    BatchArgument,
    Dataset,
    EngineJob,
    EngineRecord,
    JobDescriptor,
    JobKind,
    ThreadPool,
)
from contracts.request_dto import (
    EvaluationRequest,
    ProcessorDescription,
    RecognitionRequest,
    TrainingRequest,
)

from ..configuration.resource_service import ConfigurationStore
from ..domain.exceptions import InvalidArgumentError, JobSubmissionError, ProcessorError
from ..domain.interfaces import IEngineRecordStore, IJobScheduler
from ..infrastructure.engine_store import JsonEngineRecordStore
from ..infrastructure.file_manager import ProcessorFileManager
from .batch_resolver import resolve_batch_arguments
from .dataset_manifest import build_dataset_manifest
from .folder_resolver import resolve_folder


class ProcessorService:
    """
    Сборщик аргументов и запуск заданий движка.

    Не ждет завершения заданий: планировщик возвращает дескриптор сразу.
    """

    def __init__(
        self,
        settings: ProcessorSettings,
        configuration_store: ConfigurationStore,
        scheduler: IJobScheduler,
        engine_store: Optional[IEngineRecordStore] = None,
        file_manager: Optional[ProcessorFileManager] = None,
    ):
        """
        Args:
            settings: Настройки процессоров и корневые папки
            configuration_store: Загруженные конфигурации видов заданий
            scheduler: Планировщик заданий
            engine_store: Хранилище записей движка (по умолчанию JSON в папке модели)
            file_manager: Менеджер файлов (опционально)
        """
        self.settings = settings
        self.configuration_store = configuration_store
        self.scheduler = scheduler
        self.file_manager = file_manager or ProcessorFileManager()
        self.engine_store = engine_store or JsonEngineRecordStore(
            settings.engine_record_filename, self.file_manager
        )

        logger.info(
            f"[ProcessorService] Инициализирован: time-consuming "
            f"{sorted(kind.value for kind in settings.time_consuming)}"
        )

    # === Общие операции ===

    def processor(self, kind: JobKind) -> str:
        return self.settings.processor(kind)

    def select_pool(self, kind: JobKind) -> ThreadPool:
        """Пул зависит только от статической настройки, не от запроса."""
        return ThreadPool.TIME_CONSUMING if kind in self.settings.time_consuming else ThreadPool.STANDARD

    def describe(self, kind: JobKind) -> ProcessorDescription:
        """
        Описание процессора для web-слоя.

        Raises:
            ConfigurationUnavailableError: Если конфигурация не загружена
        """
        configuration = self.configuration_store.require(kind)
        return ProcessorDescription(
            identifier=self.processor(kind),
            description=configuration.description,
            categories=list(configuration.categories),
            steps=list(configuration.steps),
            model=dict(configuration.model),
        )

    def _prepare_arguments(self, kind: JobKind, arguments: Optional[Sequence[str]]) -> List[str]:
        self.configuration_store.require(kind)
        return list(self.configuration_store.expand(kind, arguments) or [])

    def _submit(self, kind: JobKind, key: Optional[str], folder: Path, arguments: List[str]) -> Any:
        descriptor = JobDescriptor(
            key=key,
            working_directory=folder,
            executable=self.processor(kind),
            arguments=arguments,
            pool=self.select_pool(kind),
            capture_standard_output=not self.settings.discard_output,
            capture_standard_error=not self.settings.discard_error,
        )

        logger.debug(
            f"[ProcessorService] execute process {kind.value}: key {key}, "
            f"folder '{folder}', arguments {arguments}"
        )

        try:
            job = self.scheduler.submit(descriptor)
        except ProcessorError:
            raise
        except Exception as e:
            raise JobSubmissionError(
                message=f"планировщик не принял задание {kind.value} (key {key})",
                component="ProcessorService",
                original_error=e
            ) from e

        logger.info(f"[ProcessorService] Задание {kind.value} запущено: key {key}, pool {descriptor.pool.value}")
        return job

    # === Оценка ===

    def start_evaluation(
        self,
        key: Optional[str],
        arguments: Optional[Sequence[str]],
        collection: Optional[str],
    ) -> Any:
        """
        Запускает оценку в папке коллекции.

        Raises:
            ConfigurationUnavailableError: Конфигурация оценки не загружена
            InvalidArgumentError: Коллекция не задана или не является папкой в data
        """
        values = self._prepare_arguments(JobKind.EVALUATION, arguments)
        folder = resolve_folder(self.settings.data_folder, collection, component="ProcessorService")

        return self._submit(JobKind.EVALUATION, key, folder, values)

    # === Распознавание ===

    def start_recognition(
        self,
        key: Optional[str],
        arguments: Optional[Sequence[str]],
        folder: Optional[str],
        models: Optional[Sequence[BatchArgument]] = None,
    ) -> Any:
        """
        Запускает распознавание в папке проекта.

        Args:
            models: Чекпоинты моделей (batch-аргументы относительно assemble)

        Raises:
            ConfigurationUnavailableError: Конфигурация распознавания не загружена
            InvalidArgumentError: Папка не задана или не является папкой в projects
        """
        values = self._prepare_arguments(JobKind.RECOGNITION, arguments)
        path = resolve_folder(self.settings.projects_folder, folder, component="ProcessorService")

        values.extend(resolve_batch_arguments(self.settings.assemble_folder, models))

        return self._submit(JobKind.RECOGNITION, key, path, values)

    # === Обучение ===

    def _resolve_model_folder(self, model_id: Optional[str]) -> Path:
        if model_id is None or not model_id.strip():
            raise InvalidArgumentError(
                message="model id is mandatory and may not be empty",
                component="ProcessorService"
            )

        model_id = model_id.strip()
        try:
            return resolve_folder(self.settings.assemble_folder, model_id, component="ProcessorService")
        except InvalidArgumentError as e:
            raise InvalidArgumentError(
                message=f"unknown model id '{model_id}'",
                component="ProcessorService"
            ) from e

    def start_training(
        self,
        key: Optional[str],
        arguments: Optional[Sequence[str]],
        model_id: Optional[str],
        dataset: Optional[Dataset],
        models: Optional[Sequence[BatchArgument]] = None,
        model_configuration_folder: Optional[str] = None,
        user: Optional[str] = None,
    ) -> EngineJob:
        """
        Запускает обучение модели.

        Порядок: проверка папок, датасета и моделей -> манифест -> зарезервированные аргументы ->
        batch-аргументы -> запись движка -> запуск.

        Args:
            model_id: Папка модели в assemble (должна существовать)
            dataset: Размеченные данные (относительно data)
            models: Дополнительные модели (batch-аргументы относительно assemble)
            model_configuration_folder: Подпапка конфигурации внутри папки модели
            user: Пользователь для записи движка

        Raises:
            ConfigurationUnavailableError: Конфигурация обучения не загружена
            InvalidArgumentError: Неизвестная модель, некорректная подпапка, пустой датасет
            ManifestWriteError / EngineRecordWriteError: Ошибка записи файлов
        """
        configuration = self.configuration_store.require(JobKind.TRAINING)
        values = self._prepare_arguments(JobKind.TRAINING, arguments)

        path = self._resolve_model_folder(model_id)

        if model_configuration_folder is None or not model_configuration_folder.strip():
            configuration_folder = path
        else:
            configuration_folder = resolve_folder(path, model_configuration_folder, component="ProcessorService")

        # 1. Манифест датасета и дополнительные модели (ошибки до записи файлов)
        lines = build_dataset_manifest(self.settings.data_folder, dataset)
        batch_values = resolve_batch_arguments(self.settings.assemble_folder, models)

        # 2. Запись манифеста
        manifest = configuration_folder / self.settings.training_dataset_filename
        self.file_manager.write_lines(lines, manifest)

        # 3. Зарезервированные аргументы
        argument = configuration.framework.argument
        values.extend([
            argument.images,
            str(manifest.relative_to(path)),
            argument.output,
            str(path),
        ])
        if argument.has_train:
            values.extend([argument.train.strip(), argument.train_value.strip()])

        # 4. Дополнительные модели
        values.extend(batch_values)

        # 5. Запись движка
        engine = EngineRecord(
            user=user,
            engine_type=self.settings.engine_type,
            engine_version=configuration.framework.version,
            processor_name=self.processor(JobKind.TRAINING),
            arguments=values,
        )
        self.engine_store.persist(engine, path)

        # 6. Запуск
        job = self._submit(JobKind.TRAINING, key, path, values)

        return EngineJob(job=job, engine=engine)

    # === Запросы web-слоя ===

    def execute(
        self,
        request: Union[EvaluationRequest, RecognitionRequest, TrainingRequest],
    ) -> Any:
        """Запускает задание по запросу web-слоя."""
        if isinstance(request, EvaluationRequest):
            return self.start_evaluation(request.key, request.arguments, request.collection)

        if isinstance(request, RecognitionRequest):
            return self.start_recognition(request.key, request.arguments, request.folder, request.models)

        if isinstance(request, TrainingRequest):
            return self.start_training(
                request.key,
                request.arguments,
                request.model_id,
                request.dataset,
                request.models,
                request.model_configuration_folder,
                request.user,
            )

        raise InvalidArgumentError(
            message=f"unsupported request type {type(request).__name__}",
            component="ProcessorService"
        )
