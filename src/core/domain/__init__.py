"""
Domain models and value objects.

Независимые примеры инкапсуляции: Counter, Person, Student, BankAccount,
Car, Employee, ImmutablePerson (+ ImmutablePersonBuilder).
"""

from src.core.domain.bank_account import BankAccount
from src.core.domain.base import FrozenValueModel
from src.core.domain.car import FIRST_CAR_YEAR, Car
from src.core.domain.counter import Counter
from src.core.domain.employee import Employee, EmployeeConfig
from src.core.domain.immutable_person import ImmutablePerson, ImmutablePersonBuilder
from src.core.domain.person import GRADE_MAX, GRADE_MIN, Person, Student

__all__ = [
    # Data hiding
    "Counter",
    # Getters/setters + validation
    "Person",
    "Student",
    "GRADE_MIN",
    "GRADE_MAX",
    # Business-logic methods
    "BankAccount",
    "Employee",
    "EmployeeConfig",
    # Constructor validation
    "Car",
    "FIRST_CAR_YEAR",
    # Builder / immutability
    "FrozenValueModel",
    "ImmutablePerson",
    "ImmutablePersonBuilder",
]
