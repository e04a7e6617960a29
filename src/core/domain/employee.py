"""
Employee — бизнес-логика внутри объекта

Зарплата и стаж закрыты и меняются только через бизнес-методы:
- give_raise(percent): повышение зарплаты на percent процентов (percent > 0)
- complete_service_year(): +1 год стажа; каждые raise_interval_years лет —
  автоматическое повышение на automatic_raise_percent
- calculate_bonus(): производная величина salary * years / bonus_years_divisor

Новые значения полей вычисляются и проверяются до присваивания:
при ошибке ни зарплата, ни стаж не меняются.
"""

import logging
from dataclasses import dataclass

from src.core.errors import InvalidArgumentError, Invariant
from src.core.invariants import (
    require_integer,
    require_non_negative,
    require_not_blank,
    require_number,
    require_positive,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EmployeeConfig:
    """
    Параметры автоматического повышения и бонуса.

    Raises:
        InvalidArgumentError: Если параметр не положительное конечное число
            (raise_interval_years — не положительное целое)
    """

    raise_interval_years: int = 5
    automatic_raise_percent: float = 5.0
    bonus_years_divisor: float = 10.0

    def __post_init__(self):
        require_integer(self.raise_interval_years, "raise_interval_years")
        require_positive(self.raise_interval_years, "raise_interval_years", Invariant.CONFIG_POSITIVE)
        require_positive(
            self.automatic_raise_percent, "automatic_raise_percent", Invariant.CONFIG_POSITIVE
        )
        require_positive(self.bonus_years_divisor, "bonus_years_divisor", Invariant.CONFIG_POSITIVE)


# =============================================================================
# EMPLOYEE
# =============================================================================


class Employee:
    """
    Сотрудник с зарплатой и стажем.

    Args:
        name: Имя (непустое после strip)
        salary: Зарплата (>= 0)
        years_of_service: Начальный стаж в годах (целое, >= 0)
        config: Параметры повышений (default EmployeeConfig())
    """

    def __init__(
        self,
        name: str,
        salary: float,
        years_of_service: int = 0,
        config: EmployeeConfig | None = None,
    ):
        # Валидация всех аргументов до присваивания
        stripped = require_not_blank(name, "name", Invariant.NAME_NOT_BLANK)
        require_non_negative(salary, "salary", Invariant.SALARY_NON_NEGATIVE)
        require_integer(years_of_service, "years_of_service")
        require_non_negative(
            years_of_service, "years_of_service", Invariant.YEARS_OF_SERVICE_NON_NEGATIVE
        )

        self._name = stripped
        self._salary = float(salary)
        self._years_of_service = years_of_service
        self._config = config or EmployeeConfig()

    @property
    def name(self) -> str:
        return self._name

    @property
    def salary(self) -> float:
        return self._salary

    @property
    def years_of_service(self) -> int:
        return self._years_of_service

    @property
    def config(self) -> EmployeeConfig:
        return self._config

    def _raised_salary(self, percent: float) -> float:
        """
        Зарплата после повышения на percent процентов (состояние не меняется).

        Raises:
            InvalidArgumentError: raise_percent_positive если percent <= 0,
                finite_number если результат переполняется до Inf
        """
        try:
            require_positive(percent, "raise percent", Invariant.RAISE_PERCENT_POSITIVE)
            new_salary = self._salary * (1 + percent / 100)
            require_number(new_salary, "salary")
        except InvalidArgumentError as e:
            logger.debug("raise for %r rejected: %s", self._name, e.reason)
            raise
        return new_salary

    def give_raise(self, percent: float) -> float:
        """
        Повышение зарплаты.

        Args:
            percent: Процент повышения (> 0), например 10.0 для +10%

        Returns:
            Новая зарплата

        Raises:
            InvalidArgumentError: raise_percent_positive если percent <= 0,
                finite_number если новая зарплата не конечна
        """
        self._salary = self._raised_salary(percent)
        logger.debug("raise %.2f%% for %r, salary %.2f", percent, self._name, self._salary)
        return self._salary

    def complete_service_year(self) -> bool:
        """
        Завершение года службы.

        Каждые config.raise_interval_years лет стажа применяется
        автоматическое повышение config.automatic_raise_percent.
        Если повышение невозможно, стаж тоже не меняется.

        Returns:
            True если в этом году было применено автоматическое повышение
        """
        next_years = self._years_of_service + 1

        if next_years % self._config.raise_interval_years != 0:
            self._years_of_service = next_years
            return False

        new_salary = self._raised_salary(self._config.automatic_raise_percent)
        self._years_of_service = next_years
        self._salary = new_salary
        logger.debug(
            "%r reached %d years of service, automatic raise to %.2f",
            self._name,
            self._years_of_service,
            self._salary,
        )
        return True

    def calculate_bonus(self) -> float:
        """
        Расчёт бонуса (состояние не меняется).

        Returns:
            salary * years_of_service / config.bonus_years_divisor
        """
        return self._salary * self._years_of_service / self._config.bonus_years_divisor

    def __repr__(self) -> str:
        return (
            f"Employee(name={self._name!r}, salary={self._salary:.2f}, "
            f"years_of_service={self._years_of_service})"
        )
