"""
Invariants — предикаты инвариантов для value objects

Единый набор проверок, которые вызываются в каждой точке изменения
состояния (конструктор, setter, бизнес-метод) ДО присваивания полей.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка выполняется до любой мутации (атомарность: при ошибке объект не изменён)
2. NaN/Inf и bool никогда не принимаются как числа
3. Каждая ошибка несёт идентификатор инварианта (Invariant) и причину
"""

import math
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from pydantic_core import PydanticCustomError

from src.core.errors import InvalidArgumentError, Invariant


# =============================================================================
# ЧИСЛА
# =============================================================================


def is_valid_number(value: object) -> bool:
    """
    Проверка, что значение — конечное число (int или float, но не bool).

    Args:
        value: Проверяемое значение

    Returns:
        True если value конечное число

    Examples:
        >>> is_valid_number(1.5)
        True
        >>> is_valid_number(float("nan"))
        False
        >>> is_valid_number(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def require_number(value: object, name: str) -> None:
    """
    Валидация, что значение — конечное число.

    Raises:
        InvalidArgumentError: Если value не число, bool, NaN или Inf
    """
    if not is_valid_number(value):
        raise InvalidArgumentError(
            f"{name} must be a finite number, got {value!r}", Invariant.FINITE_NUMBER
        )


def require_integer(value: object, name: str) -> None:
    """
    Валидация, что значение — целое число (int, не bool).

    Raises:
        InvalidArgumentError: Если value не int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {value!r}", Invariant.INTEGRAL_NUMBER
        )


def require_positive(value: float, name: str, invariant: Invariant) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        invariant: Идентификатор инварианта, сообщаемый при нарушении

    Raises:
        InvalidArgumentError: Если value <= 0 или не конечное число
    """
    require_number(value, name)
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}", invariant)


def require_non_negative(value: float, name: str, invariant: Invariant) -> None:
    """
    Валидация, что значение неотрицательное.

    Raises:
        InvalidArgumentError: Если value < 0 или не конечное число
    """
    require_number(value, name)
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}", invariant)


def require_in_range(
    value: float,
    name: str,
    invariant: Invariant,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне (границы включительно).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        invariant: Идентификатор инварианта
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        InvalidArgumentError: Если value вне диапазона или не конечное число
    """
    require_number(value, name)

    if min_value is not None and value < min_value:
        raise InvalidArgumentError(f"{name} must be >= {min_value}, got {value}", invariant)

    if max_value is not None and value > max_value:
        raise InvalidArgumentError(f"{name} must be <= {max_value}, got {value}", invariant)


# =============================================================================
# СТРОКИ
# =============================================================================


def require_not_blank(value: object, name: str, invariant: Invariant) -> str:
    """
    Валидация, что строка непуста после удаления пробелов по краям.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        invariant: Идентификатор инварианта

    Returns:
        Строка без пробелов по краям (нормализованное значение для хранения)

    Raises:
        InvalidArgumentError: string_type если value не строка,
            invariant если строка пуста после strip()
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{name} must be a string, got {value!r}", Invariant.STRING_TYPE
        )

    stripped = value.strip()
    if not stripped:
        raise InvalidArgumentError(f"{name} must not be empty or blank", invariant)

    return stripped


def require_string_collection(value: object, name: str, invariant: Invariant) -> list[object]:
    """
    Валидация, что значение — коллекция (но не одиночная строка).

    Returns:
        Новый список с элементами коллекции (копия)

    Raises:
        InvalidArgumentError: Если value строка, bytes или не iterable
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise InvalidArgumentError(
            f"{name} must be a collection of strings, got {value!r}",
            invariant,
        )
    return list(value)


# =============================================================================
# ИНТЕГРАЦИЯ С PYDANTIC
# =============================================================================


@contextmanager
def pydantic_invariant() -> Iterator[None]:
    """
    Перевод InvalidArgumentError в PydanticCustomError внутри field_validator.

    Тип ошибки pydantic совпадает с идентификатором инварианта, поэтому
    ValidationError.errors()[i]["type"] можно сравнивать с Invariant.*.value.
    """
    try:
        yield
    except InvalidArgumentError as e:
        raise PydanticCustomError(e.invariant.value, "{reason}", {"reason": e.reason}) from e
