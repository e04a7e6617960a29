"""
Errors — таксономия ошибок валидации

Два вида ошибок, оба поднимаются синхронно в точке нарушения:
- InvalidArgumentError: значение не удовлетворяет предусловию конструктора или мутатора
- InvalidStateError: builder финализирован с неполным или несогласованным состоянием

Каждая ошибка несёт человекочитаемую причину (reason) и идентификатор
нарушенного инварианта (invariant), чтобы вызывающий код мог ветвиться
детерминированно, не разбирая текст сообщения.
"""

from enum import Enum


# =============================================================================
# ИДЕНТИФИКАТОРЫ ИНВАРИАНТОВ
# =============================================================================


class Invariant(str, Enum):
    """Идентификатор инварианта (стабильная строка, пригодная для сравнения)"""

    # Общие
    FINITE_NUMBER = "finite_number"  # NaN/Inf и bool не принимаются как числа
    INTEGRAL_NUMBER = "integral_number"
    STRING_TYPE = "string_type"  # значение не является строкой

    # Деньги
    AMOUNT_POSITIVE = "amount_positive"
    BALANCE_NON_NEGATIVE = "balance_non_negative"
    SUFFICIENT_FUNDS = "sufficient_funds"
    SALARY_NON_NEGATIVE = "salary_non_negative"
    RAISE_PERCENT_POSITIVE = "raise_percent_positive"

    # Тексты
    NAME_NOT_BLANK = "name_not_blank"
    MAKE_NOT_BLANK = "make_not_blank"
    MODEL_NOT_BLANK = "model_not_blank"
    HOBBY_NOT_BLANK = "hobby_not_blank"
    HOBBIES_COLLECTION = "hobbies_collection"  # коллекция строк, не одиночная строка

    # Диапазоны
    YEAR_MIN = "year_min"
    GRADE_RANGE = "grade_range"
    AGE_NON_NEGATIVE = "age_non_negative"
    YEARS_OF_SERVICE_NON_NEGATIVE = "years_of_service_non_negative"

    # Конфигурация
    CONFIG_POSITIVE = "config_positive"

    # Builder
    BUILDER_REQUIRED_FIELD = "builder_required_field"
    BUILDER_FINALIZED = "builder_finalized"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EncapsulationError(Exception):
    """
    Базовая ошибка нарушения инварианта.

    Attributes:
        reason: Описание нарушения (для человека)
        invariant: Идентификатор нарушенного инварианта (для кода)
    """

    def __init__(self, reason: str, invariant: Invariant):
        super().__init__(reason)
        self.reason = reason
        self.invariant = invariant

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reason!r}, invariant={self.invariant.value!r})"


class InvalidArgumentError(EncapsulationError, ValueError):
    """Аргумент конструктора или мутатора вне допустимой области."""

    pass


class InvalidStateError(EncapsulationError, RuntimeError):
    """Операция недопустима в текущем состоянии объекта (например, builder уже финализирован)."""

    pass
