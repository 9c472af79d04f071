"""
Контракты DTO между слоями сервиса Calamari MSA.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- API -> Processor: запросы и описание процессора (request_dto.py)
- Processor -> Scheduler: JobDescriptor, EngineRecord (job_dto.py)
- Evaluation -> API: EvaluationMeasure (evaluation_dto.py)
"""

# Processor -> Scheduler
from .job_dto import (
    JobKind,
    ThreadPool,
    BatchItem,
    BatchArgument,
    Dataset,
    JobDescriptor,
    JobHandle,
    EngineRecord,
    EngineJob,
)

# Evaluation -> API
from .evaluation_dto import (
    MeasureState,
    EvaluationSummary,
    EvaluationDetail,
    EvaluationMeasure,
)

# API -> Processor
from .request_dto import (
    EvaluationRequest,
    RecognitionRequest,
    TrainingRequest,
    ProcessorDescription,
)

__all__ = [
    # Processor -> Scheduler
    "JobKind",
    "ThreadPool",
    "BatchItem",
    "BatchArgument",
    "Dataset",
    "JobDescriptor",
    "JobHandle",
    "EngineRecord",
    "EngineJob",
    # Evaluation -> API
    "MeasureState",
    "EvaluationSummary",
    "EvaluationDetail",
    "EvaluationMeasure",
    # API -> Processor
    "EvaluationRequest",
    "RecognitionRequest",
    "TrainingRequest",
    "ProcessorDescription",
]
