"""Раскрытие псевдонимов аргументов в литеральные токены движка."""

from typing import Dict, List, Optional, Sequence

AliasTable = Dict[str, Sequence[str]]


def expand_arguments(table: AliasTable, arguments: Optional[Sequence[str]]) -> Optional[List[str]]:
    """
    Заменяет каждый токен-псевдоним его раскрытием, остальные токены не трогает.

    Порядок токенов сохраняется. Раскрытие может быть пустым - тогда токен исчезает.
    Исходный список никогда не изменяется.
    """
    if arguments is None:
        return None

    if not table:
        return list(arguments)

    values: List[str] = []
    for argument in arguments:
        if argument is not None and argument in table:
            values.extend(table[argument])
        else:
            values.append(argument)

    return values
