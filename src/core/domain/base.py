"""
FrozenValueModel — базовая immutable Pydantic модель для value objects

pydantic.BaseModel.model_copy(update=...) не запускает валидаторы, поэтому
копия с изменёнными полями могла бы нарушить инварианты модели.
Здесь update проходит полную валидацию, как при обычном создании.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


class FrozenValueModel(BaseModel):
    """Immutable модель, копии которой всегда проходят валидацию."""

    model_config = {"frozen": True}  # Immutable

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False):
        """
        Копия модели.

        Args:
            update: Новые значения полей (проверяются валидаторами модели)
            deep: Глубокое копирование (только без update)

        Raises:
            pydantic.ValidationError: Если update нарушает инварианты
        """
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**self.model_dump(), **update})
