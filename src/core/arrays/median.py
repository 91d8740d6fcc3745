"""
Median Selector — точная медиана без сортировки и копирования

Алгоритм Torben Mogensen (итеративная бисекция диапазона значений):
http://ndevilla.free.fr/median/median/index.html

Не самый быстрый способ найти медиану, но с важным свойством: входная
последовательность не модифицируется и не копируется. Рабочее состояние —
несколько скаляров. Это критично, когда данных много и копия массива
обходится дорого.

АЛГОРИТМ:
    1. Один проход: min_v, max_v
    2. Цикл уточнения:
       guess = midpoint(min_v, max_v)
       проход: less / greater / equal относительно guess,
               max_under_guess (seed min_v), min_above_guess (seed max_v)
       стоп, если less <= half и greater <= half, half = (n + 1) // 2
       иначе less > greater → max_v = max_under_guess
             иначе          → min_v = min_above_guess
    3. Разрешение:
       less >= half         → max_under_guess
       less + equal >= half → guess
       иначе                → min_above_guess

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Границы [min_v, max_v] после сужения — всегда реальные элементы data,
   поэтому диапазон строго сужается и цикл конечен
2. Для чётного n возвращается нижняя медиана (ранг ceil(n/2), 1-indexed)
3. Для двух int guess округляется вниз (к нижней границе)
4. Пустой вход и NaN/Inf → исключение (fail fast)

Сложность: O(n) на проход, O(n·k) всего, k ограничено числом различных значений.
"""

import logging
import math
from collections.abc import Sequence

from pydantic import BaseModel, Field

from src.core.arrays.types import NumericT
from src.core.arrays.validation import validate_finite, validate_non_empty

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


class MedianSearch(BaseModel):
    """
    Результат поиска медианы с диагностикой последнего прохода.

    Immutable модель (frozen=True).
    """

    value: int | float = Field(..., description="Нижняя медиана")
    size: int = Field(..., gt=0, description="Количество элементов n")
    iterations: int = Field(..., gt=0, description="Количество проходов уточнения")

    # Счётчики последнего прохода
    guess: int | float = Field(..., description="Последний guess")
    less: int = Field(..., ge=0, description="Элементов строго меньше guess")
    equal: int = Field(..., ge=0, description="Элементов равных guess")
    greater: int = Field(..., ge=0, description="Элементов строго больше guess")

    model_config = {"frozen": True}


# =============================================================================
# HELPERS
# =============================================================================


def _midpoint(low: int | float, high: int | float) -> int | float:
    """
    Середина [low, high].

    Для двух int — целочисленное деление с округлением вниз.
    Для float при переполнении суммы (|low + high| > max float) — low/2 + high/2.
    int вне диапазона float (смешанный вход) — целочисленная середина
    [ceil(low), floor(high)], она всегда внутри [low, high].
    """
    if isinstance(low, int) and isinstance(high, int):
        return (low + high) // 2

    try:
        guess = (low + high) / 2
    except OverflowError:
        return (math.ceil(low) + math.floor(high)) // 2

    if math.isinf(guess):
        guess = low / 2 + high / 2
    return guess


def _bounds(data: Sequence[NumericT]) -> tuple[NumericT, NumericT]:
    """Min и max за один проход."""
    min_v = data[0]
    max_v = data[0]

    for i in range(1, len(data)):
        if data[i] < min_v:
            min_v = data[i]
        if data[i] > max_v:
            max_v = data[i]

    return min_v, max_v


def _search(data: Sequence[NumericT], check_finite: bool) -> MedianSearch:
    validate_non_empty(data, "data")
    if check_finite:
        validate_finite(data, "data")

    n = len(data)
    half = (n + 1) // 2
    min_v, max_v = _bounds(data)

    iterations = 0

    while True:
        iterations += 1
        guess = _midpoint(min_v, max_v)
        less = greater = equal = 0
        max_under_guess = min_v
        min_above_guess = max_v

        for value in data:
            if value < guess:
                less += 1
                if value > max_under_guess:
                    max_under_guess = value
            elif value > guess:
                greater += 1
                if value < min_above_guess:
                    min_above_guess = value
            else:
                equal += 1

        logger.debug(
            "median pass %d: bracket=[%s, %s] guess=%s less=%d equal=%d greater=%d",
            iterations, min_v, max_v, guess, less, equal, greater,
        )

        # Значения распределены поровну ниже и выше guess.
        # Любая сторона может быть меньше половины: остаток — элементы, равные медиане.
        if less <= half and greater <= half:
            break
        elif less > greater:
            max_v = max_under_guess
        else:
            min_v = min_above_guess

    if less >= half:
        value = max_under_guess
    elif less + equal >= half:
        value = guess
    else:
        value = min_above_guess

    return MedianSearch(
        value=value,
        size=n,
        iterations=iterations,
        guess=guess,
        less=less,
        equal=equal,
        greater=greater,
    )


# =============================================================================
# PUBLIC API
# =============================================================================


def find_median(data: Sequence[NumericT], *, check_finite: bool = True) -> NumericT:
    """
    Точная (нижняя) медиана числовой последовательности.

    Для чётного n возвращается меньшее из двух центральных значений,
    то есть sorted(data)[(n + 1) // 2 - 1]. Усреднения нет.

    Args:
        data: Непустая последовательность int/float (не модифицируется и не копируется)
        check_finite: Проверять отсутствие NaN/Inf (default: True).
            При False поведение на NaN/Inf не определено.

    Returns:
        Значение медианы

    Raises:
        EmptyInputError: Если data пустая
        NonFiniteValueError: Если check_finite=True и data содержит NaN/Inf

    Examples:
        >>> find_median([5])
        5
        >>> find_median([1, 2, 3, 4])
        2
        >>> find_median([3, 1, 2])
        2
        >>> find_median([0.5, -1.5, 2.5, 10.0])
        0.5
    """
    return _search(data, check_finite).value


def find_median_detailed(data: Sequence[NumericT], *, check_finite: bool = True) -> MedianSearch:
    """
    То же, что find_median, но со счётчиками последнего прохода.

    Полезно для диагностики сходимости: iterations показывает, сколько
    линейных проходов по data потребовалось.

    Raises:
        EmptyInputError: Если data пустая
        NonFiniteValueError: Если check_finite=True и data содержит NaN/Inf
    """
    return _search(data, check_finite)
