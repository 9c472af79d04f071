"""
Домен Evaluation: разбор отчета оценки и синхронный запуск оценки.
"""

from .report_parser import EvaluationReportParser, parse_evaluation, NO_SUMMARY_MESSAGE
from .evaluation_runner import EvaluationRunner, measure_from_process

__all__ = [
    "EvaluationReportParser",
    "parse_evaluation",
    "NO_SUMMARY_MESSAGE",
    "EvaluationRunner",
    "measure_from_process",
]
