"""
Calamari MSA - адаптер движка Calamari для OCR микросервиса.

Этот пакет отвечает за:
1. Загрузку конфигураций процессоров (оценка, распознавание, обучение)
2. Безопасную сборку аргументов командной строки движка
3. Передачу заданий внешнему планировщику
4. Разбор отчета оценки в структурированные метрики

Граница пакета: contracts (JobDescriptor, EngineRecord, EvaluationMeasure)
"""

from .application.factory import ProcessorComponentFactory
from .configuration.resource_service import ConfigurationStore
from .evaluation.evaluation_runner import EvaluationRunner
from .evaluation.report_parser import EvaluationReportParser, parse_evaluation
from .processor.processor_service import ProcessorService

__all__ = [
    "ProcessorComponentFactory",
    "ConfigurationStore",
    "EvaluationRunner",
    "EvaluationReportParser",
    "parse_evaluation",
    "ProcessorService",
]
