"""
Array Types — ограничения на типы элементов

Два набора возможностей элементов, используемые во всём пакете:
- ScalarT: упорядочиваемый скаляр (int, float, str) — равенство, хэш, порядок
- NumericT: числовой скаляр (int, float) — дополнительно арифметика

Ограничения статические (constrained TypeVar): проверяются type checker'ом,
а не isinstance в runtime. find_median принимает только NumericT.
"""

from typing import TypeVar

# Упорядочиваемый скаляр: равенство + хэширование + полный порядок
ScalarT = TypeVar("ScalarT", int, float, str)

# Числовой скаляр: ScalarT без str, плюс +, -, /2
NumericT = TypeVar("NumericT", int, float)

# Без ограничений (array_map)
T = TypeVar("T")
R = TypeVar("R")
