"""
Парсер отчета оценки Calamari (stdout calamari-eval).

ЦКП: EvaluationMeasure со сводкой и таблицей расхождений.

Грамматика (состояния только вперед):
    summary -> header -> detail -> ready

    Got mean normalized label error rate of 2.50% (10 / 400, 4 Lines)   <- summary
    GT PRED COUNT PERCENT                                               <- header
    {abc} {abd} 3 0.75%                                                 <- detail
    {xyz} {xy} 1 0.25%                                                  <- detail
    ...                                                                 <- ready

Парсер не бросает исключений: ошибки разбора кодируются в состоянии и сообщении.
stderr не разбирается, только передается дальше.
"""

import re
from enum import Enum
from typing import List, Optional

from loguru import logger

from contracts.evaluation_dto import (
    EvaluationDetail,
    EvaluationMeasure,
    EvaluationSummary,
    MeasureState,
)

NO_SUMMARY_MESSAGE = "no summary available"

# Процент без локальных разделителей: 2.50, 2., .5, 3
_PERCENT = r'(\d+(?:\.\d*)?|\.\d+)%'

# Только \n, \r и \r\n: \x0c, \x85, \u2028 и т.п. остаются внутри строки таблицы
_LINE_BREAK = re.compile(r'\r\n|\r|\n')


class _ParserContext(Enum):
    """Состояние парсера и маркер начала строки для перехода."""
    SUMMARY = "Got mean normalized label error rate of "
    HEADER = "GT"
    DETAIL = "{"
    READY = None

    def match(self, line: str) -> bool:
        return self.value is None or line.startswith(self.value)


class EvaluationReportParser:
    """Элемент-функция: разбирает отчет оценки в EvaluationMeasure."""

    def __init__(self):
        # 2.50% (10 / 400, 4 Lines)
        self.summary_pattern = re.compile(_PERCENT + r'\D+(\d+)\D+(\d+)\D+(\d+)')
        # {abc} {abd} 3 0.75%
        self.detail_pattern = re.compile(r'\{([^}]*)\}\s+\{([^}]*)\}\s+(\d+)\s+' + _PERCENT)

    def parse(self, standard_output: Optional[str], standard_error: Optional[str] = None) -> EvaluationMeasure:
        """
        Разбирает stdout движка.

        Args:
            standard_output: stdout процесса оценки
            standard_error: stderr процесса (без разбора)

        Returns:
            completed - сводка разобрана, все строки таблицы корректны;
            inconsistent - нет сводки, сводка некорректна или часть строк таблицы не разобрана
        """
        if standard_output is None or not standard_output.strip():
            return self._no_summary(standard_output, standard_error)

        context = _ParserContext.SUMMARY
        summary: Optional[EvaluationSummary] = None
        details: List[EvaluationDetail] = []
        errors: List[str] = []

        for line in _LINE_BREAK.split(standard_output):
            if context is _ParserContext.SUMMARY:
                if context.match(line):
                    summary = self._parse_summary(line)
                    if summary is None:
                        logger.warning(f"[EvaluationReportParser] Некорректная строка сводки: {line}")
                        return EvaluationMeasure(
                            state=MeasureState.INCONSISTENT,
                            message=f"parser error (summary): {line}",
                            standard_output=standard_output,
                            standard_error=standard_error,
                        )
                    context = _ParserContext.HEADER

            elif context is _ParserContext.HEADER:
                if context.match(line):
                    context = _ParserContext.DETAIL

            elif context is _ParserContext.DETAIL:
                if context.match(line):
                    detail = self._parse_detail(line)
                    if detail is None:
                        logger.warning(f"[EvaluationReportParser] Некорректная строка таблицы: {line}")
                        errors.append(f"parser error (detail): {line}")
                    else:
                        details.append(detail)
                else:
                    context = _ParserContext.READY

            if context is _ParserContext.READY:
                break

        if summary is None:
            return self._no_summary(standard_output, standard_error)

        return EvaluationMeasure(
            state=MeasureState.INCONSISTENT if errors else MeasureState.COMPLETED,
            message="\n".join(errors) if errors else None,
            standard_output=standard_output,
            standard_error=standard_error,
            summary=summary,
            details=details,
        )

    def _parse_summary(self, line: str) -> Optional[EvaluationSummary]:
        match = self.summary_pattern.search(line)
        if match is None:
            return None

        return EvaluationSummary(
            error_rate_percent=float(match.group(1)),
            total_errors=int(match.group(2)),
            total_count=int(match.group(3)),
            total_labels=int(match.group(4)),
        )

    def _parse_detail(self, line: str) -> Optional[EvaluationDetail]:
        match = self.detail_pattern.search(line)
        if match is None:
            return None

        return EvaluationDetail(
            ground_truth=match.group(1),
            predicted=match.group(2),
            count=int(match.group(3)),
            percent=float(match.group(4)),
        )

    @staticmethod
    def _no_summary(standard_output: Optional[str], standard_error: Optional[str]) -> EvaluationMeasure:
        return EvaluationMeasure(
            state=MeasureState.INCONSISTENT,
            message=NO_SUMMARY_MESSAGE,
            standard_output=standard_output,
            standard_error=standard_error,
        )


def parse_evaluation(standard_output: Optional[str], standard_error: Optional[str] = None) -> EvaluationMeasure:
    """Разбирает отчет оценки парсером по умолчанию."""
    return EvaluationReportParser().parse(standard_output, standard_error)
