"""
Person и Student — getters/setters и валидация в setter

Person: имя доступно через property name (чтение/запись без ограничений).
Student: оценка (grade) проверяется в setter до присваивания.
"""

import logging
from typing import Final

from src.core.errors import Invariant
from src.core.invariants import require_in_range, require_not_blank

logger = logging.getLogger(__name__)


# Границы оценки (включительно)
GRADE_MIN: Final[float] = 0
GRADE_MAX: Final[float] = 100


# =============================================================================
# PERSON
# =============================================================================


class Person:
    """Человек с именем, доступным через accessor."""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    def __repr__(self) -> str:
        return f"Person(name={self._name!r})"


# =============================================================================
# STUDENT
# =============================================================================


class Student:
    """
    Студент с оценкой в диапазоне [GRADE_MIN, GRADE_MAX].

    Имя нормализуется (strip) и не может быть пустым.
    """

    def __init__(self, name: str, grade: float = GRADE_MIN):
        # Валидация всех аргументов до присваивания
        stripped = require_not_blank(name, "name", Invariant.NAME_NOT_BLANK)
        self._check_grade(grade)

        self._name = stripped
        self._grade = grade

    @staticmethod
    def _check_grade(grade: float) -> None:
        require_in_range(grade, "grade", Invariant.GRADE_RANGE, GRADE_MIN, GRADE_MAX)

    @property
    def name(self) -> str:
        return self._name

    @property
    def grade(self) -> float:
        return self._grade

    @grade.setter
    def grade(self, value: float) -> None:
        try:
            self._check_grade(value)
        except ValueError:
            logger.debug("rejected grade %r for student %r", value, self._name)
            raise
        self._grade = value

    def __repr__(self) -> str:
        return f"Student(name={self._name!r}, grade={self._grade})"
