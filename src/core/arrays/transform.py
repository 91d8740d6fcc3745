"""
Transform Utility — поэлементное преобразование последовательности
"""

from collections.abc import Callable, Sequence

from src.core.arrays.types import R, T


def array_map(sequence: Sequence[T], transform: Callable[[T, int], R]) -> list[R]:
    """
    Применяет transform(value, index) к каждому элементу.

    Индекс передаётся для преобразований, зависящих от позиции.
    Порядок и длина сохраняются: результат[i] == transform(sequence[i], i).
    Исключения из transform не перехватываются.

    Args:
        sequence: Исходная последовательность (не модифицируется)
        transform: Callback (value, index) -> новое значение

    Returns:
        Новый список той же длины

    Examples:
        >>> array_map([10, 20], lambda v, i: v + i)
        [10, 21]
        >>> array_map([1, 2], lambda v, i: str(v))
        ['1', '2']
    """
    return [transform(value, i) for i, value in enumerate(sequence)]
