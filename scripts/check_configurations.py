#!/usr/bin/env python3
"""
Проверка конфигураций процессоров и корневых папок.

Использование:
    python scripts/check_configurations.py
    python scripts/check_configurations.py --resources path/to/resources
"""

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import LOG_FORMAT, LOG_LEVEL, load_settings, validate_config
from calamari_msa.application.factory import ProcessorComponentFactory
from contracts.job_dto import JobKind


def main():
    parser = argparse.ArgumentParser(description="Calamari MSA configuration check")
    parser.add_argument("--resources", help="Папка ресурсов <kind>.yaml (по умолчанию из настроек)")
    args = parser.parse_args()

    settings = load_settings()
    if args.resources:
        settings = settings.model_copy(update={"resources_folder": Path(args.resources)})

    try:
        validate_config(settings)
        print("[OK] Папки проверены")
    except ValueError as e:
        print(f"[WARN] {e}")

    store = ProcessorComponentFactory.create_configuration_store(settings)
    info = ProcessorComponentFactory.get_service_info(settings, store)
    print(json.dumps(info, ensure_ascii=False, indent=2))

    for kind in JobKind:
        configuration = store.get(kind)
        if configuration is None:
            print(f"[ERROR] {kind.value}: недоступна ({store.resource_path(kind)})")
            continue

        print(f"[OK] {kind.value}: {configuration.description}")
        for alias, values in store.mappings(kind).items():
            print(f"    {alias} -> {' '.join(values)}")

    return 0 if len(store.available_kinds()) == len(JobKind) else 1


if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=LOG_LEVEL)

    sys.exit(main())
