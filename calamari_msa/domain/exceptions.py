"""
Исключения для домена Processor.

Ошибки валидации запросов, конфигурации и запуска заданий движка.
Ошибки разбора отчёта оценки сюда не входят: они кодируются в EvaluationMeasure.
"""

from typing import Optional


class ProcessorError(Exception):
    """Базовое исключение для ошибок домена Processor."""

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Processor Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class InvalidArgumentError(ProcessorError):
    """Некорректный запрос: пустое поле, выход за корневую папку, пустой датасет."""
    pass


class ConfigurationUnavailableError(ProcessorError):
    """Конфигурация вида задания не загружена."""
    pass


class ConfigurationLoadError(ProcessorError):
    """Ошибка загрузки ресурса конфигурации."""
    pass


class ProcessorFileSystemError(ProcessorError):
    """Ошибка файловой системы в домене Processor."""
    pass


class ManifestWriteError(ProcessorFileSystemError):
    """Ошибка записи манифеста датасета."""
    pass


class EngineRecordWriteError(ProcessorFileSystemError):
    """Ошибка записи данных движка."""
    pass


class JobSubmissionError(ProcessorError):
    """Планировщик не принял задание."""
    pass
