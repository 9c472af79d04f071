#!/usr/bin/env python3
"""
Разбор отчета оценки Calamari в JSON.

Использование:
    # stdout calamari-eval из файла
    python scripts/parse_evaluation.py eval_stdout.txt

    # из stdin, вместе с stderr, с записью в файл
    calamari-eval ... | python scripts/parse_evaluation.py - --stderr eval_stderr.txt -o measure.json
"""

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import LOG_FORMAT, LOG_LEVEL
from calamari_msa.evaluation.report_parser import EvaluationReportParser
from contracts.evaluation_dto import MeasureState


def read_text(source: str) -> str:
    """Читает текст из файла или stdin ('-')."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main():
    parser = argparse.ArgumentParser(description="Calamari evaluation report parser")
    parser.add_argument("stdout", help="Файл со stdout calamari-eval ('-' для stdin)")
    parser.add_argument("--stderr", help="Файл со stderr calamari-eval")
    parser.add_argument("-o", "--output", help="Путь для сохранения JSON (по умолчанию stdout)")
    args = parser.parse_args()

    standard_output = read_text(args.stdout)
    standard_error = Path(args.stderr).read_text(encoding="utf-8") if args.stderr else None

    measure = EvaluationReportParser().parse(standard_output, standard_error)
    logger.info(f"[parse_evaluation] Состояние: {measure.state.value}, строк таблицы: {len(measure.details)}")

    data = json.dumps(measure.model_dump(mode="json"), ensure_ascii=False, indent=2)
    if args.output:
        Path(args.output).write_text(data + "\n", encoding="utf-8")
        logger.info(f"[parse_evaluation] Сохранено: {args.output}")
    else:
        print(data)

    return 0 if measure.state == MeasureState.COMPLETED else 1


if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=LOG_LEVEL)

    sys.exit(main())
