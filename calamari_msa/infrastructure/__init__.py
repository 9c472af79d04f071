"""
Infrastructure слой: файловые операции и хранилище записей движка.
"""

from .file_manager import ProcessorFileManager
from .engine_store import JsonEngineRecordStore

__all__ = [
    "ProcessorFileManager",
    "JsonEngineRecordStore",
]
