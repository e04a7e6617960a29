"""
BankAccount — валидация в бизнес-методах

Баланс закрыт (_balance) и меняется только через deposit()/withdraw().

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. balance >= 0 и конечен после любой операции
2. amount > 0 для deposit и withdraw
3. При ошибке баланс не изменяется (новое значение проверяется до присваивания)

Экземпляр не потокобезопасен: конкурентные вызовы deposit/withdraw
требуют внешней синхронизации.
"""

import logging

from src.core.errors import InvalidArgumentError, Invariant
from src.core.invariants import require_non_negative, require_number, require_positive

logger = logging.getLogger(__name__)


class BankAccount:
    """
    Банковский счёт с неотрицательным балансом.

    Args:
        initial_balance: Начальный баланс (>= 0, default 0)
    """

    def __init__(self, initial_balance: float = 0.0):
        require_non_negative(initial_balance, "initial_balance", Invariant.BALANCE_NON_NEGATIVE)
        self._balance = float(initial_balance)

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> float:
        """
        Зачисление средств.

        Args:
            amount: Сумма зачисления (> 0)

        Returns:
            Новый баланс

        Raises:
            InvalidArgumentError: amount_positive если amount <= 0,
                finite_number если новый баланс переполняется до Inf
        """
        self._require_amount(amount, "deposit")

        new_balance = self._balance + amount
        try:
            require_number(new_balance, "balance")
        except InvalidArgumentError:
            logger.debug("deposit %r rejected: balance overflow", amount)
            raise

        self._balance = new_balance
        logger.debug("deposit %.2f, balance %.2f", amount, self._balance)
        return self._balance

    def withdraw(self, amount: float) -> float:
        """
        Списание средств.

        Args:
            amount: Сумма списания (> 0, <= balance)

        Returns:
            Новый баланс

        Raises:
            InvalidArgumentError: amount_positive если amount <= 0,
                sufficient_funds если amount > balance
        """
        self._require_amount(amount, "withdraw")

        if amount > self._balance:
            logger.debug(
                "withdraw %.2f rejected: insufficient funds (balance %.2f)", amount, self._balance
            )
            raise InvalidArgumentError(
                f"insufficient funds: cannot withdraw {amount:.2f} from balance {self._balance:.2f}",
                Invariant.SUFFICIENT_FUNDS,
            )

        self._balance -= amount
        logger.debug("withdraw %.2f, balance %.2f", amount, self._balance)
        return self._balance

    def _require_amount(self, amount: float, operation: str) -> None:
        try:
            require_positive(amount, "amount", Invariant.AMOUNT_POSITIVE)
        except InvalidArgumentError as e:
            logger.debug("%s rejected: %s (%s)", operation, e.reason, e.invariant.value)
            raise

    def __repr__(self) -> str:
        return f"BankAccount(balance={self._balance:.2f})"
