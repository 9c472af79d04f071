"""
Синхронный запуск оценки во временной папке.

Процесс движка, который не удалось запустить или который завершился
с ненулевым кодом, дает EvaluationMeasure в состоянии interrupted.
"""

import subprocess
from typing import Optional, Sequence

from loguru import logger

from config.settings import ProcessorSettings
from contracts.evaluation_dto import EvaluationMeasure, MeasureState
from contracts.job_dto import JobKind

from ..configuration.resource_service import ConfigurationStore
from ..processor.folder_resolver import resolve_folder
from .report_parser import EvaluationReportParser


def measure_from_process(
    exit_code: int,
    standard_output: Optional[str],
    standard_error: Optional[str],
    parser: Optional[EvaluationReportParser] = None,
) -> EvaluationMeasure:
    """
    Переводит результат процесса оценки в EvaluationMeasure.

    Используется и для заданий, завершенных планировщиком.
    """
    if exit_code != 0:
        return EvaluationMeasure(
            state=MeasureState.INTERRUPTED,
            message=f"process exit code {exit_code}: {(standard_error or '').strip()}",
            standard_output=standard_output,
            standard_error=standard_error,
        )

    return (parser or EvaluationReportParser()).parse(standard_output, standard_error)


class EvaluationRunner:
    """Запускает процессор оценки и разбирает его отчет."""

    def __init__(
        self,
        settings: ProcessorSettings,
        configuration_store: ConfigurationStore,
        parser: Optional[EvaluationReportParser] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            settings: Настройки (временная папка, имя процессора оценки)
            configuration_store: Конфигурации (псевдонимы аргументов оценки)
            parser: Парсер отчета (опционально)
            timeout: Ограничение времени процесса в секундах (None - без ограничения)
        """
        self.settings = settings
        self.configuration_store = configuration_store
        self.parser = parser or EvaluationReportParser()
        self.timeout = timeout

    def evaluate(self, folder: Optional[str], arguments: Optional[Sequence[str]]) -> EvaluationMeasure:
        """
        Выполняет оценку в папке folder (относительно временной папки).

        Raises:
            ConfigurationUnavailableError: Конфигурация оценки не загружена
            InvalidArgumentError: Папка не задана или выходит за временную папку
        """
        self.configuration_store.require(JobKind.EVALUATION)
        path = resolve_folder(self.settings.temporary_folder, folder, component="EvaluationRunner")
        values = list(self.configuration_store.expand(JobKind.EVALUATION, arguments) or [])

        command = [self.settings.evaluation_processor, *values]
        logger.debug(f"[EvaluationRunner] Запуск: {command} в {path}")

        try:
            completed = subprocess.run(
                command,
                cwd=path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.error(f"[EvaluationRunner] Процесс оценки не выполнен: {e}")
            return EvaluationMeasure(
                state=MeasureState.INTERRUPTED,
                message=f"{type(e).__name__}: {e}",
            )

        logger.info(f"[EvaluationRunner] Процесс оценки завершен с кодом {completed.returncode}")
        return measure_from_process(completed.returncode, completed.stdout, completed.stderr, self.parser)
