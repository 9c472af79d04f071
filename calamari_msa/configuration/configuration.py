"""
DTO для конфигурации процессора.

Одна модель на все виды заданий:
- Описание, категории и шаги для web-слоя
- Схема модели аргументов (передается клиенту как есть)
- Таблица псевдонимов аргументов (mappings)
- Framework: версия движка и зарезервированные аргументы (только обучение)

Использует Pydantic для валидации структуры конфигурации.
YAML null в списках читается как пустой список, числа в токенах - как строки.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _not_blank(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("значение не может быть пустым")
    return v.strip()


def _scalar_to_str(v: Any) -> Any:
    """Число или bool из YAML -> строка токена (10 -> "10", true -> "true")."""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    return v


def _none_to_list(v: Any) -> Any:
    return [] if v is None else v

class ArgumentMapping(BaseModel):
    """Псевдоним аргумента и его раскрытие в литеральные токены движка."""
    argument: Optional[str] = Field(None, description='Псевдоним (например, "confusion-matrix")')
    values: List[Optional[str]] = Field(
        default_factory=list,
        description='Токены движка (например, ["--n_confusions", "10"])'
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("argument", mode="before")
    @classmethod
    def coerce_argument(cls, v):
        return _scalar_to_str(v)

    @field_validator("values", mode="before")
    @classmethod
    def coerce_values(cls, v):
        v = _none_to_list(v)
        if isinstance(v, list):
            return [_scalar_to_str(value) for value in v]
        return v


class FrameworkArgument(BaseModel):
    """Зарезервированные аргументы движка, которые проставляет сервис."""
    images: str = Field(..., description="Флаг списка изображений (манифест датасета)")
    output: str = Field(..., description="Флаг выходной папки модели")
    train: Optional[str] = Field(None, description="Флаг типа генератора данных")
    train_value: Optional[str] = Field(None, description="Значение флага train")

    model_config = ConfigDict(frozen=True)

    @field_validator("images", "output", "train", "train_value", mode="before")
    @classmethod
    def coerce_scalars(cls, v):
        return _scalar_to_str(v)

    @field_validator("images", "output")
    @classmethod
    def validate_flags(cls, v):
        return _not_blank(v)

    @property
    def has_train(self) -> bool:
        return bool(self.train and self.train.strip() and self.train_value and self.train_value.strip())


class Framework(BaseModel):
    """Параметры движка."""
    version: str = Field(..., description="Версия движка")
    argument: FrameworkArgument

    model_config = ConfigDict(frozen=True)

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v):
        # version: 2.2 без кавычек
        return _scalar_to_str(v)

    @field_validator("version")
    @classmethod
    def validate_version(cls, v):
        return _not_blank(v)


class Configuration(BaseModel):
    """
    Конфигурация вида задания.

    Загружается один раз при старте и не изменяется.
    """
    description: str = Field(..., description="Описание процессора")
    categories: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    model: Dict[str, Any] = Field(..., description="Схема модели аргументов для клиента")
    mappings: List[ArgumentMapping] = Field(default_factory=list)
    framework: Optional[Framework] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return _not_blank(v)

    @field_validator("categories", "steps", mode="before")
    @classmethod
    def coerce_labels(cls, v):
        v = _none_to_list(v)
        if isinstance(v, list):
            return [_scalar_to_str(value) for value in v]
        return v

    @field_validator("mappings", mode="before")
    @classmethod
    def coerce_mappings(cls, v):
        return _none_to_list(v)
