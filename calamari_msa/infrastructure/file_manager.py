"""
Менеджер файлов для домена Processor.

Реализует файловые операции: манифест датасета и JSON записи движка.
"""

import json
from pathlib import Path
from typing import Any, Dict, Sequence

from loguru import logger

from ..domain.exceptions import EngineRecordWriteError, ManifestWriteError


class ProcessorFileManager:
    """Менеджер файлов для домена Processor."""

    def save_json(self, data: Dict[str, Any], file_path: Path) -> Path:
        """
        Сохраняет данные в JSON файл (перезаписывает существующий).

        Args:
            data: Данные для сохранения
            file_path: Путь для сохранения

        Returns:
            Путь к сохраненному файлу

        Raises:
            EngineRecordWriteError: Если не удалось сохранить файл
        """
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)

            logger.debug(f"[Processor] Файл сохранен: {file_path}")
            return file_path

        except (IOError, OSError, TypeError) as e:
            raise EngineRecordWriteError(
                message=f"Не удалось сохранить JSON файл: {file_path}",
                component="ProcessorFileManager",
                original_error=e
            )

    def write_lines(self, lines: Sequence[str], file_path: Path) -> Path:
        """
        Записывает строки в текстовый файл UTF-8, каждая строка завершается переводом строки.

        Args:
            lines: Строки без завершающего перевода строки
            file_path: Путь к файлу (перезаписывается)

        Returns:
            Путь к записанному файлу

        Raises:
            ManifestWriteError: Если не удалось записать файл
        """
        try:
            with open(file_path, 'w', encoding='utf-8', newline='\n') as f:
                for line in lines:
                    f.write(line + "\n")

            logger.debug(f"[Processor] Файл записан: {file_path} ({len(lines)} строк)")
            return file_path

        except (IOError, OSError) as e:
            raise ManifestWriteError(
                message=f"Не удалось записать файл: {file_path}",
                component="ProcessorFileManager",
                original_error=e
            )
