"""
Тесты для BankAccount

Проверяет:
1. deposit увеличивает баланс ровно на сумму
2. withdraw сверх баланса — ошибка, баланс не меняется
3. Неположительные суммы — ошибка для deposit и withdraw
4. Логирование отклонённых операций
5. Баланс не переполняется до Inf
"""

import logging
import math

import pytest

from src.core.domain import BankAccount
from src.core.errors import InvalidArgumentError, Invariant


@pytest.fixture
def account() -> BankAccount:
    """Счёт с балансом 100"""
    return BankAccount(initial_balance=100.0)


class TestBankAccountCreation:
    """Тесты создания счёта"""

    def test_default_balance_is_zero(self) -> None:
        assert BankAccount().balance == 0.0

    def test_initial_balance(self, account: BankAccount) -> None:
        assert account.balance == 100.0

    def test_negative_initial_balance_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            BankAccount(initial_balance=-0.01)
        assert exc_info.value.invariant == Invariant.BALANCE_NON_NEGATIVE

    def test_balance_is_read_only(self, account: BankAccount) -> None:
        with pytest.raises(AttributeError):
            account.balance = 1_000_000.0  # type: ignore
        assert account.balance == 100.0


class TestDeposit:
    """Тесты для deposit"""

    def test_deposit_increases_balance_exactly(self, account: BankAccount) -> None:
        assert account.deposit(50.0) == 150.0
        assert account.balance == 150.0

    @pytest.mark.parametrize("amount", [0, -10.0])
    def test_non_positive_deposit_rejected(self, account: BankAccount, amount: float) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            account.deposit(amount)
        assert exc_info.value.invariant == Invariant.AMOUNT_POSITIVE
        assert "amount must be positive" in exc_info.value.reason
        assert account.balance == 100.0

    @pytest.mark.parametrize("amount", [math.nan, math.inf, True])
    def test_non_finite_deposit_rejected(self, account: BankAccount, amount: float) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            account.deposit(amount)
        assert exc_info.value.invariant == Invariant.FINITE_NUMBER
        assert account.balance == 100.0


class TestWithdraw:
    """Тесты для withdraw"""

    def test_withdraw_decreases_balance(self, account: BankAccount) -> None:
        assert account.withdraw(30.0) == 70.0

    def test_withdraw_entire_balance(self, account: BankAccount) -> None:
        """Баланс может стать ровно нулём"""
        assert account.withdraw(100.0) == 0.0

    def test_overdraw_rejected(self, account: BankAccount) -> None:
        """Списание сверх баланса не меняет баланс"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            account.withdraw(100.01)
        assert exc_info.value.invariant == Invariant.SUFFICIENT_FUNDS
        assert "insufficient funds" in exc_info.value.reason
        assert account.balance == 100.0

    @pytest.mark.parametrize("amount", [0, -5.0])
    def test_non_positive_withdraw_rejected(self, account: BankAccount, amount: float) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            account.withdraw(amount)
        assert exc_info.value.invariant == Invariant.AMOUNT_POSITIVE
        assert account.balance == 100.0

    def test_sequence_of_operations(self) -> None:
        account = BankAccount()
        account.deposit(200.0)
        account.withdraw(50.0)
        account.deposit(25.0)
        assert account.balance == 175.0


class TestLogging:
    """Тесты логирования операций"""

    def test_rejected_withdraw_is_logged(self, account: BankAccount, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="src.core.domain.bank_account")
        with pytest.raises(InvalidArgumentError):
            account.withdraw(500.0)
        assert any("insufficient funds" in r.getMessage() for r in caplog.records)

    def test_deposit_is_logged(self, account: BankAccount, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="src.core.domain.bank_account")
        account.deposit(1.0)
        assert any("deposit" in r.getMessage() for r in caplog.records)


class TestOverflow:
    """Баланс остаётся конечным числом"""

    def test_deposit_overflow_rejected(self) -> None:
        """Переполнение до Inf отклоняется, баланс не меняется"""
        account = BankAccount()
        account.deposit(1e308)

        with pytest.raises(InvalidArgumentError) as exc_info:
            account.deposit(1e308)
        assert exc_info.value.invariant == Invariant.FINITE_NUMBER
        assert account.balance == 1e308
        assert math.isfinite(account.balance)

    def test_account_usable_after_rejected_overflow(self) -> None:
        account = BankAccount(initial_balance=1e308)
        with pytest.raises(InvalidArgumentError):
            account.deposit(1e308)
        assert account.withdraw(1e307) == pytest.approx(9e307)
