"""
Хранилище записей движка в JSON файле внутри папки модели.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from contracts.job_dto import EngineRecord

from ..domain.interfaces import IEngineRecordStore
from .file_manager import ProcessorFileManager


class JsonEngineRecordStore(IEngineRecordStore):
    """Сохраняет EngineRecord в <папка модели>/<filename>."""

    def __init__(self, filename: str, file_manager: Optional[ProcessorFileManager] = None):
        self.filename = filename
        self.file_manager = file_manager or ProcessorFileManager()

    def persist(self, record: EngineRecord, folder: Path) -> Path:
        path = self.file_manager.save_json(record.model_dump(mode="json"), Path(folder) / self.filename)
        logger.info(f"[EngineRecordStore] Запись движка сохранена: {path}")
        return path
