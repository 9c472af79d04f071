"""
Application слой: фабрика компонентов сервиса.
"""

from .factory import ProcessorComponentFactory

__all__ = [
    "ProcessorComponentFactory",
]
