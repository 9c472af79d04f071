"""
Интерфейсы (абстрактные классы) для домена Processor.

Внешние зависимости сервиса:
1. Планировщик заданий - запускает движок асинхронно
2. Хранилище записей движка - сохраняет данные запуска обучения
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from contracts.job_dto import EngineRecord, JobDescriptor


class IJobScheduler(ABC):
    """Интерфейс для планировщика заданий."""

    @abstractmethod
    def submit(self, descriptor: JobDescriptor) -> Any:
        """
        Ставит задание в очередь пула descriptor.pool.

        Args:
            descriptor: Готовый вызов движка

        Returns:
            Дескриптор задания планировщика (возвращается сразу, без ожидания)
        """
        pass


class IEngineRecordStore(ABC):
    """Интерфейс для хранилища записей движка."""

    @abstractmethod
    def persist(self, record: EngineRecord, folder: Path) -> Path:
        """
        Сохраняет запись движка.

        Args:
            record: Запись о запуске обучения
            folder: Папка модели

        Returns:
            Путь к сохраненной записи
        """
        pass
