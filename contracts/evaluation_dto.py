"""
DTO контракт: Evaluation -> API

Структурированный результат разбора отчёта оценки модели (stdout движка).
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MeasureState(str, Enum):
    """Состояние результата оценки."""
    COMPLETED = "completed"
    INCONSISTENT = "inconsistent"
    INTERRUPTED = "interrupted"


class EvaluationSummary(BaseModel):
    """Итоговая строка отчёта: средний процент ошибок и счётчики."""

    error_rate_percent: float = Field(..., description="Средний нормализованный процент ошибок")
    total_errors: int = Field(..., description="Количество ошибок")
    total_count: int = Field(..., description="Количество символов")
    total_labels: int = Field(..., description="Количество строк")

    model_config = ConfigDict(frozen=True)

    @field_validator("total_errors", "total_count", "total_labels")
    @classmethod
    def validate_counts(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Count must be non-negative")
        return v


class EvaluationDetail(BaseModel):
    """Строка таблицы расхождений: эталон / предсказание / количество / процент."""

    ground_truth: str
    predicted: str
    count: int
    percent: float

    model_config = ConfigDict(frozen=True)


class EvaluationMeasure(BaseModel):
    """
    Результат оценки.

    Всегда содержит сырые stdout/stderr движка для диагностики,
    даже если отчёт не удалось разобрать.
    """

    state: MeasureState
    message: Optional[str] = Field(None, description="Ошибки разбора или выполнения")
    standard_output: Optional[str] = None
    standard_error: Optional[str] = None
    summary: Optional[EvaluationSummary] = None
    details: List[EvaluationDetail] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
