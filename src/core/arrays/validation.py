"""
Array Validation — проверки предусловий

Модуль содержит исключения и validate_* функции для входных последовательностей.
Нарушение предусловия всегда приводит к исключению (fail fast), никаких
sentinel-значений и чтения за границами.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все исключения наследуют ValueError
2. Сообщение об ошибке содержит имя параметра
3. Проверки не модифицируют входные данные
"""

import math
from collections.abc import Sequence

# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptyInputError(ValueError):
    """
    Пустой вход там, где требуется хотя бы один элемент.

    Возникает:
    - find_median на пустой последовательности (нет элемента для seed min/max)
    - array_intersect без аргументов (нет последовательности для seed аккумулятора)
    """
    pass


class NonFiniteValueError(ValueError):
    """
    NaN или ±Inf во входе find_median.

    NaN нарушает полный порядок, на котором держится бисекция;
    одновременные -inf и +inf дают NaN в midpoint.
    """
    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_empty(values: Sequence, name: str) -> None:
    """
    Валидация, что последовательность не пустая.

    Args:
        values: Проверяемая последовательность
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        EmptyInputError: Если len(values) == 0
    """
    if len(values) == 0:
        raise EmptyInputError(f"{name} must contain at least one element, got empty sequence")


def validate_finite(values: Sequence, name: str) -> None:
    """
    Валидация, что все float элементы конечны (не NaN, не Inf).

    int элементы пропускаются: они всегда конечны.

    Args:
        values: Проверяемая последовательность
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        NonFiniteValueError: Если найден NaN или ±Inf
    """
    for i, value in enumerate(values):
        if isinstance(value, float) and not math.isfinite(value):
            raise NonFiniteValueError(
                f"{name} must contain only finite values (not NaN/Inf), got {value} at index {i}"
            )


def validate_sequences_given(sequences: Sequence[Sequence]) -> None:
    """
    Валидация, что передана хотя бы одна последовательность.

    Args:
        sequences: Кортеж последовательностей (*args)

    Raises:
        EmptyInputError: Если последовательностей нет
    """
    if len(sequences) == 0:
        raise EmptyInputError("at least one sequence is required, got none")
