"""
ImmutablePerson — неизменяемый объект и builder

Immutable Pydantic модель (frozen=True) с поэтапным созданием через
ImmutablePersonBuilder.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. name непустое после strip(); age >= 0; каждое хобби непустое
2. hobbies хранятся как tuple — копия коллекции, переданной при создании;
   изменение исходного списка не влияет на объект
3. build() проверяет все накопленные поля за один проход; при ошибке
   объект не создаётся
4. Успешный build() финализирует builder: дальнейшая настройка и
   повторный build() запрещены (InvalidStateError)
"""

from collections.abc import Iterable

from pydantic import Field, field_validator

from src.core.domain.base import FrozenValueModel
from src.core.errors import InvalidStateError, Invariant
from src.core.invariants import (
    pydantic_invariant,
    require_integer,
    require_non_negative,
    require_not_blank,
    require_string_collection,
)


# =============================================================================
# IMMUTABLE PERSON MODEL
# =============================================================================


class ImmutablePerson(FrozenValueModel):
    """
    Неизменяемая модель человека.

    Создаётся напрямую или через ImmutablePerson.builder().
    model_copy(update=...) проверяет новые значения.
    """

    name: str = Field(..., description="Имя (без пробелов по краям)")
    age: int = Field(..., description="Возраст в годах")
    hobbies: tuple[str, ...] = Field(default=(), description="Хобби (неизменяемая копия)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: object) -> str:
        with pydantic_invariant():
            return require_not_blank(v, "name", Invariant.NAME_NOT_BLANK)

    @field_validator("age", mode="before")
    @classmethod
    def validate_age(cls, v: object) -> int:
        with pydantic_invariant():
            require_integer(v, "age")
            require_non_negative(v, "age", Invariant.AGE_NON_NEGATIVE)
        return v

    @field_validator("hobbies", mode="before")
    @classmethod
    def copy_hobbies(cls, v: object) -> tuple[str, ...]:
        """Копирование коллекции хобби в tuple (без ссылки на исходный объект)"""
        with pydantic_invariant():
            items = require_string_collection(v, "hobbies", Invariant.HOBBIES_COLLECTION)
            return tuple(require_not_blank(h, "hobby", Invariant.HOBBY_NOT_BLANK) for h in items)

    @classmethod
    def builder(cls) -> "ImmutablePersonBuilder":
        return ImmutablePersonBuilder()

    def hobby_list(self) -> list[str]:
        """
        Хобби как список.

        Returns:
            Новый список при каждом вызове (изменения не влияют на объект)
        """
        return list(self.hobbies)

    def has_hobby(self, hobby: str) -> bool:
        return hobby.strip() in self.hobbies


# =============================================================================
# BUILDER
# =============================================================================


class ImmutablePersonBuilder:
    """
    Поэтапное создание ImmutablePerson.

    Каждый with_*/add_* возвращает тот же builder для цепочки вызовов.
    Значения не проверяются до build().

    Example:
        >>> person = (
        ...     ImmutablePerson.builder()
        ...     .with_name("Ada")
        ...     .with_age(36)
        ...     .add_hobby("mathematics")
        ...     .build()
        ... )
    """

    def __init__(self):
        self._name: str | None = None
        self._age: int | None = None
        self._hobbies: list[str] = []
        self._finalized = False

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def with_name(self, name: str) -> "ImmutablePersonBuilder":
        self._ensure_accumulating()
        self._name = name
        return self

    def with_age(self, age: int) -> "ImmutablePersonBuilder":
        self._ensure_accumulating()
        self._age = age
        return self

    def with_hobbies(self, hobbies: Iterable[str]) -> "ImmutablePersonBuilder":
        """
        Замена списка хобби копией переданной коллекции.

        Raises:
            InvalidArgumentError: hobbies_collection если передана строка или не коллекция
        """
        self._ensure_accumulating()
        self._hobbies = require_string_collection(hobbies, "hobbies", Invariant.HOBBIES_COLLECTION)
        return self

    def add_hobby(self, hobby: str) -> "ImmutablePersonBuilder":
        self._ensure_accumulating()
        self._hobbies.append(hobby)
        return self

    def build(self) -> ImmutablePerson:
        """
        Финализация: проверка всех накопленных полей и создание объекта.

        Returns:
            Новый ImmutablePerson

        Raises:
            InvalidStateError: builder_required_field если name или age не заданы,
                builder_finalized если build() уже был успешно вызван
            pydantic.ValidationError: Если накопленные значения нарушают инварианты
                (типы ошибок = идентификаторы инвариантов)
        """
        self._ensure_accumulating()

        missing = [field for field, value in (("name", self._name), ("age", self._age)) if value is None]
        if missing:
            raise InvalidStateError(
                f"cannot build ImmutablePerson: missing required field(s): {', '.join(missing)}",
                Invariant.BUILDER_REQUIRED_FIELD,
            )

        person = ImmutablePerson(name=self._name, age=self._age, hobbies=list(self._hobbies))
        self._finalized = True
        return person

    def _ensure_accumulating(self) -> None:
        if self._finalized:
            raise InvalidStateError(
                "builder already produced an ImmutablePerson and cannot be reused",
                Invariant.BUILDER_FINALIZED,
            )
