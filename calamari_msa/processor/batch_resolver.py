"""
Разрешение batch-аргументов в токены командной строки.

Пример:
    --checkpoint [{id: m1, files: [best.ckpt]}, {id: m2, files: [best.ckpt]}]
    -> --checkpoint /assemble/m1/best.ckpt /assemble/m2/best.ckpt
"""

import os
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from contracts.job_dto import BatchArgument, BatchItem

from ..domain.exceptions import InvalidArgumentError


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def resolve_item_files(root: Path, items: Optional[Sequence[BatchItem]]) -> List[str]:
    """
    Возвращает пути root/id/file по порядку элементов, затем файлов.

    Элементы без id и пустые имена файлов пропускаются.

    Raises:
        InvalidArgumentError: Если путь выходит за root ('..' или абсолютный id)
    """
    root = Path(os.path.normpath(root))
    paths: List[str] = []
    for item in items or []:
        if item is None or _is_blank(item.id):
            continue

        prefix = root / item.id.strip()
        for file in item.files or []:
            if _is_blank(file):
                continue

            path = Path(os.path.normpath(prefix / file.strip()))
            if not path.is_relative_to(root) or path == root:
                raise InvalidArgumentError(
                    message=f"the file '{item.id.strip()}/{file.strip()}' is outside of its folder",
                    component="BatchResolver"
                )
            paths.append(str(path))

    return paths


def resolve_batch_arguments(root: Path, batch_arguments: Optional[Sequence[BatchArgument]]) -> List[str]:
    """
    Разворачивает batch-аргументы в токены: флаг и затем пути к файлам.

    Аргумент без файлов не добавляет ничего, даже свой флаг.

    Raises:
        InvalidArgumentError: Если путь к файлу выходит за root
    """
    tokens: List[str] = []
    for batch in batch_arguments or []:
        if batch is None or _is_blank(batch.argument) or not batch.items:
            continue

        paths = resolve_item_files(root, batch.items)
        if not paths:
            logger.debug(f"[BatchResolver] Аргумент '{batch.argument.strip()}' пропущен: нет файлов")
            continue

        tokens.append(batch.argument.strip())
        tokens.extend(paths)

    return tokens
