"""
Set Algebra — множественные операции над последовательностями

Модуль реализует операции над последовательностями как над множествами:
- array_unique: дедупликация с сохранением порядка первого вхождения
- array_intersect: общие значения всех последовательностей
- array_subtract: unify(big) − set(small)
- is_array_in_array: проверка вложенности с перечнем недостающих элементов

Все операции — один проход с presence map (dict/set), O(n) амортизированно.
Элементы должны быть хэшируемыми; равенство и хэш — стандартные для Python:
0.0 и -0.0 совпадают, 1 и 1.0 совпадают, разные объекты NaN различны.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные последовательности не модифицируются
2. Результат — всегда новый list
3. Порядок результата array_intersect / array_subtract не является контрактом
   (фактически: порядок первого вхождения в первой / в big последовательности)
"""

from collections.abc import Sequence
from typing import Generic, NamedTuple

from src.core.arrays.types import ScalarT
from src.core.arrays.validation import validate_sequences_given

# =============================================================================
# TYPES
# =============================================================================


class SubsetCheck(NamedTuple, Generic[ScalarT]):
    """
    Результат is_array_in_array.

    Распаковывается как (is_subset, missing).
    """

    is_subset: bool  # True ⇔ missing пустой
    missing: list[ScalarT]  # Элементы small, отсутствующие в big (с дубликатами, в исходном порядке)


# =============================================================================
# DEDUP
# =============================================================================


def array_unique(sequence: Sequence[ScalarT]) -> list[ScalarT]:
    """
    Дедупликация с сохранением порядка первого вхождения.

    Каждое различное значение встречается в результате ровно один раз.
    Операция идемпотентна: array_unique(array_unique(s)) == array_unique(s).

    Examples:
        >>> array_unique([3, 1, 3, 2, 1])
        [3, 1, 2]
        >>> array_unique([])
        []
    """
    seen: set[ScalarT] = set()
    result: list[ScalarT] = []

    for value in sequence:
        if value not in seen:
            seen.add(value)
            result.append(value)

    return result


# =============================================================================
# INTERSECT / SUBTRACT
# =============================================================================


def array_intersect(*sequences: Sequence[ScalarT]) -> list[ScalarT]:
    """
    Значения, присутствующие в КАЖДОЙ из переданных последовательностей.

    Алгоритм:
    1. Presence map для каждой последовательности (value → 1, дубликаты схлопываются)
    2. Аккумулятор инициализируется presence map первой последовательности
    3. Для каждой следующей presence map: +1 к счётчику значений, уже бывших в аккумуляторе
    4. Значение попадает в результат ⇔ счётчик == количеству последовательностей

    Args:
        *sequences: Одна или более последовательностей

    Returns:
        Общие значения без дубликатов (порядок не гарантируется)

    Raises:
        EmptyInputError: Если не передано ни одной последовательности

    Examples:
        >>> sorted(array_intersect([1, 2, 2, 3], [2, 3, 4]))
        [2, 3]
        >>> array_intersect([1, 1, 2])
        [1, 2]
    """
    validate_sequences_given(sequences)

    presence_maps = [dict.fromkeys(sequence, 1) for sequence in sequences]

    counters = dict(presence_maps[0])

    for presence in presence_maps[1:]:
        for value in presence:
            if value in counters:
                counters[value] += 1

    # Значение присутствует хотя бы раз в каждой последовательности
    # ⇔ его счётчик равен числу последовательностей
    required = len(sequences)
    return [value for value, count in counters.items() if count == required]


def array_subtract(small: Sequence[ScalarT], big: Sequence[ScalarT]) -> list[ScalarT]:
    """
    Вычитание "small" из "big": элементы big, которых нет в small.

    "small" и "big" — только названия для наглядности: small может быть длиннее big.

    Побочные эффекты (документированные):
    1. Порядок элементов результата не гарантируется
    2. Дубликаты big схлопываются (результат — unify(big) − set(small))

    Examples:
        >>> sorted(array_subtract([2], [1, 2, 2, 3]))
        [1, 3]
        >>> array_subtract([1, 2, 3], [2])
        []
    """
    remaining = dict.fromkeys(big)

    for value in small:
        remaining.pop(value, None)

    return list(remaining)


# =============================================================================
# SUBSET CHECK
# =============================================================================


def is_array_in_array(small: Sequence[ScalarT], big: Sequence[ScalarT]) -> SubsetCheck[ScalarT]:
    """
    Проверка, что все элементы small присутствуют в big.

    Дубликаты small НЕ схлопываются: каждый отсутствующий элемент попадает
    в missing столько раз, сколько встречается в small, в исходном порядке.

    Returns:
        SubsetCheck(True, []) если small ⊆ big,
        иначе SubsetCheck(False, missing)

    Examples:
        >>> is_array_in_array([1, 2, 5], [1, 2, 3, 4])
        SubsetCheck(is_subset=False, missing=[5])
        >>> is_array_in_array([], [1])
        SubsetCheck(is_subset=True, missing=[])
    """
    present = set(big)
    missing = [value for value in small if value not in present]

    return SubsetCheck(len(missing) == 0, missing)
