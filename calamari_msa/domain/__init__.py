"""
Domain слой сервиса.

Содержит интерфейсы внешних зависимостей и исключения домена Processor.
"""

from .interfaces import (
    IJobScheduler,
    IEngineRecordStore,
)

from .exceptions import (
    ProcessorError,
    InvalidArgumentError,
    ConfigurationUnavailableError,
    ConfigurationLoadError,
    ProcessorFileSystemError,
    ManifestWriteError,
    EngineRecordWriteError,
    JobSubmissionError,
)

__all__ = [
    # Интерфейсы
    "IJobScheduler",
    "IEngineRecordStore",

    # Исключения
    "ProcessorError",
    "InvalidArgumentError",
    "ConfigurationUnavailableError",
    "ConfigurationLoadError",
    "ProcessorFileSystemError",
    "ManifestWriteError",
    "EngineRecordWriteError",
    "JobSubmissionError",
]
