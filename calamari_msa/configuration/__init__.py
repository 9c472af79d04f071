"""
Конфигурации процессоров: описание, псевдонимы аргументов, параметры движка.
"""

from .argument_mapping import AliasTable, expand_arguments
from .configuration import ArgumentMapping, Configuration, Framework, FrameworkArgument
from .resource_service import ConfigurationStore

__all__ = [
    "AliasTable",
    "expand_arguments",
    "ArgumentMapping",
    "Configuration",
    "Framework",
    "FrameworkArgument",
    "ConfigurationStore",
]
