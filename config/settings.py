"""
Настройки сервиса Calamari MSA.

Все значения читаются из переменных окружения с разумными значениями по умолчанию.
В код компонентов настройки передаются явно через ProcessorSettings (load_settings()).
"""

import os
from pathlib import Path
from typing import FrozenSet, List

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from contracts.job_dto import JobKind

# =============================================================================
# ПУТИ
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent

# Коллекции размеченных данных (оценка, датасеты обучения)
DATA_FOLDER = Path(os.getenv("CALAMARI_MSA_DATA_FOLDER", "/srv/ocr/data"))

# Папки моделей (обучение, чекпоинты для распознавания)
ASSEMBLE_FOLDER = Path(os.getenv("CALAMARI_MSA_ASSEMBLE_FOLDER", "/srv/ocr/assemble"))

# Рабочие папки проектов (распознавание)
PROJECTS_FOLDER = Path(os.getenv("CALAMARI_MSA_PROJECTS_FOLDER", "/srv/ocr/projects"))

# Временные папки для синхронной оценки
TEMPORARY_FOLDER = Path(os.getenv("CALAMARI_MSA_TEMPORARY_FOLDER", "/srv/ocr/tmp"))

# Ресурсы конфигурации процессоров (<kind>.yaml)
RESOURCES_FOLDER = Path(
    os.getenv(
        "CALAMARI_MSA_RESOURCES_FOLDER",
        str(PROJECT_ROOT / "calamari_msa" / "configuration" / "resources"),
    )
)

# =============================================================================
# ПРОЦЕССОРЫ (исполняемые файлы Calamari)
# =============================================================================
EVALUATION_PROCESSOR = os.getenv("CALAMARI_MSA_EVALUATION_PROCESSOR", "calamari-eval")
RECOGNITION_PROCESSOR = os.getenv("CALAMARI_MSA_RECOGNITION_PROCESSOR", "calamari-predict")
TRAINING_PROCESSOR = os.getenv("CALAMARI_MSA_TRAINING_PROCESSOR", "calamari-train")

# Виды заданий для пула долгих задач (через запятую)
TIME_CONSUMING = os.getenv("CALAMARI_MSA_TIME_CONSUMING", "recognition,training")

# Имя файла-манифеста датасета внутри папки модели
TRAINING_DATASET_FILENAME = os.getenv("CALAMARI_MSA_TRAINING_DATASET_FILENAME", "dataset.files")

# Имя файла записи движка внутри папки модели
ENGINE_RECORD_FILENAME = os.getenv("CALAMARI_MSA_ENGINE_RECORD_FILENAME", "engine.json")

ENGINE_TYPE = "Calamari"

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
# Не сохранять stdout/stderr движка в планировщике
DISCARD_OUTPUT = os.getenv("CALAMARI_MSA_DISCARD_OUTPUT", "false").lower() == "true"
DISCARD_ERROR = os.getenv("CALAMARI_MSA_DISCARD_ERROR", "false").lower() == "true"

LOG_LEVEL = os.getenv("CALAMARI_MSA_LOG_LEVEL", "INFO")
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | <level>{message}</level>"
)


class ProcessorSettings(BaseModel):
    """
    Неизменяемые настройки процессоров.

    Создаётся один раз при старте и передаётся компонентам явно.
    """

    data_folder: Path
    assemble_folder: Path
    projects_folder: Path
    temporary_folder: Path
    resources_folder: Path = RESOURCES_FOLDER
    evaluation_processor: str = "calamari-eval"
    recognition_processor: str = "calamari-predict"
    training_processor: str = "calamari-train"
    time_consuming: FrozenSet[JobKind] = Field(default_factory=frozenset)
    training_dataset_filename: str = "dataset.files"
    engine_record_filename: str = "engine.json"
    engine_type: str = ENGINE_TYPE
    discard_output: bool = False
    discard_error: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("data_folder", "assemble_folder", "projects_folder", "temporary_folder", mode="before")
    @classmethod
    def _normalize_folder(cls, value: Path | str) -> Path:
        return Path(os.path.normpath(Path(value).expanduser()))

    @field_validator("training_dataset_filename", "engine_record_filename")
    @classmethod
    def _validate_filename(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Filename can not be blank")
        return v.strip()

    def processor(self, kind: JobKind) -> str:
        """Возвращает имя исполняемого файла для вида задания."""
        return {
            JobKind.EVALUATION: self.evaluation_processor,
            JobKind.RECOGNITION: self.recognition_processor,
            JobKind.TRAINING: self.training_processor,
        }[kind]


def parse_time_consuming(value: str) -> FrozenSet[JobKind]:
    """
    Разбирает список видов заданий через запятую.

    Неизвестные значения пропускаются с предупреждением.
    """
    kinds = set()
    for name in (value or "").split(","):
        name = name.strip()
        if not name:
            continue
        try:
            kinds.add(JobKind(name))
        except ValueError:
            logger.warning(f"[Settings] Неизвестный time-consuming вид задания '{name}'")
    return frozenset(kinds)


def load_settings() -> ProcessorSettings:
    """Собирает ProcessorSettings из переменных окружения."""
    return ProcessorSettings(
        data_folder=DATA_FOLDER,
        assemble_folder=ASSEMBLE_FOLDER,
        projects_folder=PROJECTS_FOLDER,
        temporary_folder=TEMPORARY_FOLDER,
        resources_folder=RESOURCES_FOLDER,
        evaluation_processor=EVALUATION_PROCESSOR,
        recognition_processor=RECOGNITION_PROCESSOR,
        training_processor=TRAINING_PROCESSOR,
        time_consuming=parse_time_consuming(TIME_CONSUMING),
        training_dataset_filename=TRAINING_DATASET_FILENAME,
        engine_record_filename=ENGINE_RECORD_FILENAME,
        discard_output=DISCARD_OUTPUT,
        discard_error=DISCARD_ERROR,
    )


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config(settings: ProcessorSettings) -> bool:
    """Проверяет, что все корневые папки существуют."""
    errors: List[str] = []

    folders = {
        "data": settings.data_folder,
        "assemble": settings.assemble_folder,
        "projects": settings.projects_folder,
        "temporary": settings.temporary_folder,
    }
    for name, folder in folders.items():
        if not folder.is_dir():
            errors.append(f"Папка {name} не найдена: {folder}")

    if not settings.resources_folder.is_dir():
        errors.append(f"Папка ресурсов конфигурации не найдена: {settings.resources_folder}")

    if errors:
        raise ValueError("\n".join(errors))

    return True
