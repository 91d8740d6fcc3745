"""
Core array modules

Множественные операции над последовательностями и точный поиск медианы
без сортировки и копирования входных данных.
"""

# Types
from src.core.arrays.types import (
    NumericT,
    ScalarT,
)

# Validation
from src.core.arrays.validation import (
    # Exceptions
    EmptyInputError,
    NonFiniteValueError,
    # Validators
    validate_finite,
    validate_non_empty,
    validate_sequences_given,
)

# Equality Utilities
from src.core.arrays.equality import (
    NOT_FOUND,
    element_index,
    in_array,
)

# Transform Utility
from src.core.arrays.transform import array_map

# Set Algebra
from src.core.arrays.set_algebra import (
    SubsetCheck,
    array_intersect,
    array_subtract,
    array_unique,
    is_array_in_array,
)

# Median Selector
from src.core.arrays.median import (
    MedianSearch,
    find_median,
    find_median_detailed,
)

__all__ = [
    # Types
    "NumericT",
    "ScalarT",
    # Validation — Exceptions
    "EmptyInputError",
    "NonFiniteValueError",
    # Validation — Validators
    "validate_finite",
    "validate_non_empty",
    "validate_sequences_given",
    # Equality Utilities
    "NOT_FOUND",
    "element_index",
    "in_array",
    # Transform Utility
    "array_map",
    # Set Algebra — Types
    "SubsetCheck",
    # Set Algebra — Functions
    "array_intersect",
    "array_subtract",
    "array_unique",
    "is_array_in_array",
    # Median Selector — Types
    "MedianSearch",
    # Median Selector — Functions
    "find_median",
    "find_median_detailed",
]
