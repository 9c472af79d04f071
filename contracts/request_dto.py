"""
DTO контракт: API -> Processor

Запросы на запуск заданий и описание процессора.
Web-слой валидирует JSON по этим моделям и передаёт поля в ProcessorService.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .job_dto import BatchArgument, Dataset


class EvaluationRequest(BaseModel):
    """Запрос на оценку модели по коллекции данных."""

    key: Optional[str] = None
    arguments: List[str] = Field(default_factory=list)
    collection: str = Field(..., description="Идентификатор коллекции в data-папке")


class RecognitionRequest(BaseModel):
    """Запрос на распознавание в папке проекта."""

    key: Optional[str] = None
    arguments: List[str] = Field(default_factory=list)
    folder: str = Field(..., description="Папка проекта относительно projects-папки")
    models: List[BatchArgument] = Field(default_factory=list)


class TrainingRequest(BaseModel):
    """Запрос на обучение модели."""

    key: Optional[str] = None
    arguments: List[str] = Field(default_factory=list)
    model_id: str = Field(..., description="Идентификатор модели в assemble-папке")
    dataset: Dataset = Field(default_factory=Dataset)
    models: List[BatchArgument] = Field(default_factory=list)
    model_configuration_folder: Optional[str] = Field(
        None, description="Подпапка конфигурации внутри папки модели"
    )
    user: Optional[str] = None


class ProcessorDescription(BaseModel):
    """Описание процессора для web-слоя."""

    identifier: str
    description: str
    categories: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    model: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
