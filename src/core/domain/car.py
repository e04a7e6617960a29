"""
Car — валидация в конструкторе

Immutable Pydantic модель: все поля проверяются при создании,
после создания объект изменить нельзя (frozen=True).
"""

from typing import Final

from pydantic import Field, field_validator

from src.core.domain.base import FrozenValueModel
from src.core.errors import Invariant
from src.core.invariants import pydantic_invariant, require_integer, require_in_range, require_not_blank


# Год первого автомобиля (Benz Patent-Motorwagen)
FIRST_CAR_YEAR: Final[int] = 1886


class Car(FrozenValueModel):
    """
    Модель автомобиля.

    make/model хранятся без пробелов по краям и не могут быть пустыми;
    year >= FIRST_CAR_YEAR. model_copy(update=...) проверяет новые значения.
    """

    make: str = Field(..., description="Производитель (например, 'Ford')")
    model: str = Field(..., description="Модель (например, 'Mustang')")
    year: int = Field(..., description="Год выпуска")

    model_config = {"frozen": True}  # Immutable

    @field_validator("make", mode="before")
    @classmethod
    def validate_make(cls, v: object) -> str:
        with pydantic_invariant():
            return require_not_blank(v, "make", Invariant.MAKE_NOT_BLANK)

    @field_validator("model", mode="before")
    @classmethod
    def validate_model(cls, v: object) -> str:
        with pydantic_invariant():
            return require_not_blank(v, "model", Invariant.MODEL_NOT_BLANK)

    @field_validator("year", mode="before")
    @classmethod
    def validate_year(cls, v: object) -> int:
        """Проверка года выпуска (не раньше FIRST_CAR_YEAR)"""
        with pydantic_invariant():
            require_integer(v, "year")
            require_in_range(v, "year", Invariant.YEAR_MIN, min_value=FIRST_CAR_YEAR)
        return v

    def display_name(self) -> str:
        """
        Полное название автомобиля.

        Returns:
            Строка вида '1967 Ford Mustang'
        """
        return f"{self.year} {self.make} {self.model}"
