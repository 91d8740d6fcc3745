"""
Тесты для модуля Array Validation
"""

import pytest

from src.core.arrays import (
    EmptyInputError,
    NonFiniteValueError,
    validate_finite,
    validate_non_empty,
    validate_sequences_given,
)


class TestValidateNonEmpty:
    """Тесты для validate_non_empty"""

    def test_non_empty_passes(self) -> None:
        """Непустая последовательность проходит"""
        validate_non_empty([0], "values")
        validate_non_empty("x", "values")

    def test_empty_raises_with_name(self) -> None:
        """Сообщение содержит имя параметра"""
        with pytest.raises(EmptyInputError, match="samples must contain at least one element"):
            validate_non_empty([], "samples")


class TestValidateFinite:
    """Тесты для validate_finite"""

    def test_finite_passes(self) -> None:
        """Конечные int/float проходят"""
        validate_finite([1, 2.5, -3, 1e308, 10**400], "values")
        validate_finite([], "values")

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_raises(self, bad: float) -> None:
        """NaN и ±Inf отклоняются"""
        with pytest.raises(NonFiniteValueError, match="index 2"):
            validate_finite([1.0, 2.0, bad], "values")

    def test_is_value_error(self) -> None:
        """NonFiniteValueError — подкласс ValueError"""
        assert issubclass(NonFiniteValueError, ValueError)
        assert issubclass(EmptyInputError, ValueError)


class TestValidateSequencesGiven:
    """Тесты для validate_sequences_given"""

    def test_at_least_one(self) -> None:
        """Одна пустая последовательность — уже не ошибка"""
        validate_sequences_given(([],))

    def test_none_raises(self) -> None:
        """Нет последовательностей → EmptyInputError"""
        with pytest.raises(EmptyInputError):
            validate_sequences_given(())
