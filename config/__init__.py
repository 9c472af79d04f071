"""Настройки сервиса Calamari MSA."""
