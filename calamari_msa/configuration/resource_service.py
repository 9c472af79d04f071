"""
Хранилище конфигураций процессоров.

Структура директории ресурсов:
resources/
  ├── evaluation.yaml
  ├── recognition.yaml
  └── training.yaml

ЦКП: Неизменяемая конфигурация и таблица псевдонимов для каждого вида задания.

Архитектурный принцип:
- Загрузка один раз при создании, далее только чтение (без блокировок)
- Ошибка загрузки ресурса делает вид задания недоступным, но не роняет сервис
- Экземпляр передается компонентам явно (без singleton)
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import yaml
from loguru import logger
from pydantic import ValidationError

from contracts.job_dto import JobKind

from ..domain.exceptions import ConfigurationLoadError, ConfigurationUnavailableError
from .argument_mapping import expand_arguments
from .configuration import Configuration


class ConfigurationStore:
    """
    Конфигурации видов заданий, загруженные из YAML ресурсов.

    Недоступный вид задания (нет файла, битый YAML, ошибка валидации)
    хранится как None: любой запрос к нему отклоняется.
    """

    SUFFIX = ".yaml"

    def __init__(self, resources_dir: Path):
        """
        Args:
            resources_dir: Директория с ресурсами <kind>.yaml
        """
        self.resources_dir = Path(resources_dir)

        self._configurations: Dict[JobKind, Optional[Configuration]] = {}
        self._mappings: Dict[JobKind, Dict[str, Tuple[str, ...]]] = {}

        for kind in JobKind:
            configuration = self._load(kind)
            self._configurations[kind] = configuration
            self._mappings[kind] = self._build_mappings(configuration, kind)

        logger.info(
            f"[ConfigurationStore] Загружены конфигурации: {[kind.value for kind in self.available_kinds()]}"
        )

    def resource_path(self, kind: JobKind) -> Path:
        return self.resources_dir / f"{kind.value}{self.SUFFIX}"

    def _load(self, kind: JobKind) -> Optional[Configuration]:
        """Загружает конфигурацию; при ошибке возвращает None."""
        try:
            return self._read(kind)
        except (OSError, yaml.YAMLError, ValidationError, ConfigurationLoadError) as e:
            logger.error(f"[ConfigurationStore] Не удалось загрузить ресурс {self.resource_path(kind)}: {e}")
            return None

    def _read(self, kind: JobKind) -> Configuration:
        config_file = self.resource_path(kind)

        if not config_file.exists():
            raise ConfigurationLoadError(
                message=f"ресурс не найден: {config_file}",
                component="ConfigurationStore"
            )

        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ConfigurationLoadError(
                message=f"ресурс должен содержать словарь: {config_file}",
                component="ConfigurationStore"
            )

        configuration = Configuration(**data)

        # Обучению нужны зарезервированные аргументы движка
        if kind == JobKind.TRAINING and configuration.framework is None:
            raise ConfigurationLoadError(
                message=f"отсутствует раздел framework: {config_file}",
                component="ConfigurationStore"
            )

        logger.debug(
            f"[ConfigurationStore] Загружен {kind.value}: "
            f"{len(configuration.steps)} steps, {len(configuration.mappings)} mappings"
        )
        return configuration

    @staticmethod
    def _build_mappings(
        configuration: Optional[Configuration],
        kind: JobKind
    ) -> Dict[str, Tuple[str, ...]]:
        """
        Строит таблицу псевдонимов.

        Повторный псевдоним - предупреждение, остается первое вхождение.
        """
        mappings: Dict[str, Tuple[str, ...]] = {}
        if configuration is None:
            return mappings

        for mapping in configuration.mappings:
            if mapping.argument is None:
                continue

            if mapping.argument in mappings:
                logger.warning(
                    f"[ConfigurationStore] Неоднозначный аргумент '{mapping.argument}' в ресурсе {kind.value}"
                )
                continue

            mappings[mapping.argument] = tuple(value for value in mapping.values if value is not None)

        return mappings

    def available_kinds(self) -> List[JobKind]:
        return [kind for kind in JobKind if self._configurations.get(kind) is not None]

    def is_available(self, kind: JobKind) -> bool:
        return self._configurations.get(kind) is not None

    def get(self, kind: JobKind) -> Optional[Configuration]:
        """Возвращает конфигурацию или None, если вид задания недоступен."""
        return self._configurations.get(kind)

    def require(self, kind: JobKind) -> Configuration:
        """
        Возвращает конфигурацию вида задания.

        Raises:
            ConfigurationUnavailableError: Если конфигурация не загружена
        """
        configuration = self._configurations.get(kind)
        if configuration is None:
            raise ConfigurationUnavailableError(
                message=f"конфигурация '{kind.value}' недоступна",
                component="ConfigurationStore"
            )
        return configuration

    def mappings(self, kind: JobKind) -> Dict[str, Tuple[str, ...]]:
        """Копия таблицы псевдонимов вида задания."""
        return dict(self._mappings.get(kind, {}))

    def expand(self, kind: JobKind, arguments: Optional[Sequence[str]]) -> Optional[List[str]]:
        """Раскрывает псевдонимы аргументов по таблице вида задания."""
        return expand_arguments(self._mappings.get(kind, {}), arguments)
