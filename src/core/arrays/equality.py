"""
Equality Utilities — поиск элемента линейным проходом

- element_index: индекс первого вхождения или NOT_FOUND
- in_array: проверка принадлежности (аналог PHP in_array)

Используется только равенство (==), порядок и хэш не нужны.
O(n) по времени, O(1) по памяти.
"""

from collections.abc import Sequence
from typing import Final

from src.core.arrays.types import ScalarT

# Sentinel "не найдено" для element_index
NOT_FOUND: Final[int] = -1


def element_index(sequence: Sequence[ScalarT], target: ScalarT) -> int:
    """
    Индекс первого элемента, равного target.

    Args:
        sequence: Последовательность для поиска
        target: Искомое значение

    Returns:
        Позиция первого вхождения или NOT_FOUND (-1), если элемента нет

    Examples:
        >>> element_index([3, 1, 3], 3)
        0
        >>> element_index(["a", "b"], "b")
        1
        >>> element_index([1, 2], 5)
        -1
    """
    for i, value in enumerate(sequence):
        if value == target:
            return i
    return NOT_FOUND


def in_array(sequence: Sequence[ScalarT], target: ScalarT) -> bool:
    """
    Проверка, что target присутствует в sequence.

    Examples:
        >>> in_array([1, 2, 3], 2)
        True
        >>> in_array([], 2)
        False
    """
    return element_index(sequence, target) != NOT_FOUND
