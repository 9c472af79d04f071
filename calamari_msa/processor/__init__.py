"""
Домен Processor: сборка аргументов и запуск заданий движка.

Проверка папок, batch-аргументы, манифест датасета, ProcessorService.
"""

from .folder_resolver import resolve_folder
from .batch_resolver import resolve_batch_arguments, resolve_item_files
from .dataset_manifest import build_dataset_manifest
from .processor_service import ProcessorService

__all__ = [
    "resolve_folder",
    "resolve_batch_arguments",
    "resolve_item_files",
    "build_dataset_manifest",
    "ProcessorService",
]
