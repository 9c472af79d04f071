"""
Манифест датасета для обучения.

Формат: текст UTF-8, один абсолютный путь на строку, каждая строка
завершается переводом строки, без заголовка.
"""

from pathlib import Path
from typing import List, Optional

from contracts.job_dto import Dataset

from ..domain.exceptions import InvalidArgumentError
from .batch_resolver import resolve_item_files


def build_dataset_manifest(data_root: Path, dataset: Optional[Dataset]) -> List[str]:
    """
    Строит строки манифеста data_root/id/file.

    Raises:
        InvalidArgumentError: Если в датасете нет ни одного файла
    """
    lines = resolve_item_files(data_root, dataset.items if dataset is not None else None)

    if not lines:
        raise InvalidArgumentError(
            message="dataset can not be empty",
            component="DatasetManifest"
        )

    return lines
