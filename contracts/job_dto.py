"""
DTO контракт: Processor -> Scheduler

Описание задания для внешнего планировщика и сопутствующие структуры:
- JobKind / ThreadPool - виды заданий и пулы потоков
- BatchItem / BatchArgument / Dataset - ссылки на файлы моделей и данных
- JobDescriptor - готовый к запуску вызов движка
- EngineRecord - запись о запуске обучения для аудита

ВАЖНО: JobDescriptor принадлежит ProcessorService до вызова submit(),
после этого им владеет планировщик.
"""

from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class JobKind(str, Enum):
    """Вид задания движка."""
    EVALUATION = "evaluation"
    RECOGNITION = "recognition"
    TRAINING = "training"


class ThreadPool(str, Enum):
    """Пул потоков планировщика."""
    STANDARD = "standard"
    TIME_CONSUMING = "time-consuming"


class BatchItem(BaseModel):
    """Элемент батча: идентификатор папки и файлы внутри неё."""

    id: Optional[str] = Field(None, description="Идентификатор папки (модели или коллекции)")
    files: List[Optional[str]] = Field(default_factory=list, description="Имена файлов внутри папки")

    model_config = ConfigDict(frozen=True)


class BatchArgument(BaseModel):
    """
    Именованный аргумент командной строки, за которым следуют пути к файлам.

    Пример: --checkpoint /assemble/m1/best.ckpt /assemble/m2/best.ckpt
    """

    argument: Optional[str] = Field(None, description="Флаг движка (например, --checkpoint)")
    items: List[BatchItem] = Field(default_factory=list, description="Элементы с файлами")

    model_config = ConfigDict(frozen=True)


class Dataset(BaseModel):
    """Размеченный набор данных для обучения."""

    items: List[BatchItem] = Field(default_factory=list, description="Коллекции с файлами")

    model_config = ConfigDict(frozen=True)


class JobDescriptor(BaseModel):
    """Вызов движка, передаваемый планировщику."""

    key: Optional[str] = Field(None, description="Ключ задания от клиента")
    working_directory: Path = Field(..., description="Рабочая директория процесса")
    executable: str = Field(..., description="Исполняемый файл движка")
    arguments: List[str] = Field(default_factory=list, description="Аргументы в порядке передачи")
    pool: ThreadPool = Field(ThreadPool.STANDARD, description="Пул потоков планировщика")
    capture_standard_output: bool = True
    capture_standard_error: bool = True

    model_config = ConfigDict(frozen=True)


class JobHandle(BaseModel):
    """Дескриптор запущенного задания (для планировщиков без собственного типа)."""

    id: int
    key: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class EngineRecord(BaseModel):
    """
    Запись о запуске движка для последующего аудита.

    Создаётся при запуске обучения и больше не изменяется.
    """

    user: Optional[str] = Field(None, description="Пользователь, запустивший обучение")
    method: str = Field("processor", description="Способ создания модели")
    state: str = Field("running", description="Состояние движка на момент записи")
    engine_type: str = Field(..., description="Тип движка (Calamari)")
    engine_version: Optional[str] = Field(None, description="Версия движка из конфигурации")
    processor_name: str = Field(..., description="Имя исполняемого файла")
    arguments: List[str] = Field(default_factory=list, description="Итоговые аргументы запуска")

    model_config = ConfigDict(frozen=True)


class EngineJob(BaseModel):
    """Запущенное обучение: дескриптор задания + запись движка."""

    job: Any
    engine: EngineRecord

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
