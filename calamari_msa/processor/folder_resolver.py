"""
Проверка папок запроса относительно корневых папок сервиса.

ЦКП: Абсолютный путь к существующей папке внутри корня или InvalidArgumentError.

Защита от выхода за корень: абсолютные пути и '..' отклоняются так же,
как несуществующие папки, до любых операций записи и запуска процессов.
"""

import os
from pathlib import Path
from typing import Optional

from ..domain.exceptions import InvalidArgumentError


def resolve_folder(root: Path, folder: Optional[str], component: str = "FolderResolver") -> Path:
    """
    Возвращает нормализованный путь root/folder.

    Args:
        root: Нормализованная корневая папка
        folder: Папка из запроса (относительно root)
        component: Имя компонента для сообщения об ошибке

    Raises:
        InvalidArgumentError: Папка не задана, выходит за root или не является директорией
    """
    if folder is None or not folder.strip():
        raise InvalidArgumentError(
            message="the folder parameter is not defined",
            component=component
        )

    root = Path(os.path.normpath(root))
    path = Path(os.path.normpath(root / os.path.normpath(folder.strip())))

    if not path.is_relative_to(root) or not path.is_dir():
        raise InvalidArgumentError(
            message="the folder is not a valid directory",
            component=component
        )

    return path
