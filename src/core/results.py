"""
OperationResult — явный сигнал успеха/ошибки вместо исключения

Любой конструктор или мутатор можно выполнить через attempt():
ошибки инвариантов (InvalidArgumentError, InvalidStateError, pydantic
ValidationError) превращаются в OperationResult с ok=False, причиной и
списком идентификаторов нарушенных инвариантов. Остальные исключения
пробрасываются без изменений.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from src.core.errors import EncapsulationError


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """Результат операции над value object."""

    ok: bool
    value: Any
    reason: str

    # Идентификаторы нарушенных инвариантов (пусто при ok=True)
    invariants: tuple[str, ...]

    # Детали
    details: str

    def __bool__(self) -> bool:
        return self.ok


def _from_validation_error(e: ValidationError) -> OperationResult:
    errors = e.errors(include_url=False)
    invariants = tuple(err["type"] for err in errors)
    reasons = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" if err["loc"] else err["msg"]
        for err in errors
    ]
    return OperationResult(
        ok=False,
        value=None,
        reason=reasons[0] if reasons else str(e),
        invariants=invariants,
        details="; ".join(reasons),
    )


# =============================================================================
# ATTEMPT
# =============================================================================


def attempt(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> OperationResult:
    """
    Выполнение операции с переводом ошибок инвариантов в OperationResult.

    Args:
        operation: Конструктор, мутатор или build() builder'а
        *args, **kwargs: Аргументы операции

    Returns:
        OperationResult(ok=True, value=<результат>) при успехе,
        OperationResult(ok=False, invariants=(...)) при нарушении инварианта

    Examples:
        >>> account = BankAccount(initial_balance=10.0)
        >>> attempt(account.withdraw, 50.0).invariants
        ('sufficient_funds',)
    """
    try:
        value = operation(*args, **kwargs)
    except EncapsulationError as e:
        return OperationResult(
            ok=False,
            value=None,
            reason=e.reason,
            invariants=(e.invariant.value,),
            details=f"{type(e).__name__}: {e.reason}",
        )
    except ValidationError as e:
        return _from_validation_error(e)

    return OperationResult(ok=True, value=value, reason="", invariants=(), details="ok")
