"""
Тесты для attempt() / OperationResult

Проверяет, что каждый вид ошибки инварианта превращается в OperationResult
с ok=False и идентификатором инварианта, а прочие исключения пробрасываются.
"""

import pytest

from src.core.domain import BankAccount, Car, Employee, ImmutablePerson
from src.core.errors import Invariant
from src.core.results import OperationResult, attempt


class TestAttempt:
    """Тесты attempt()"""

    def test_success_carries_value(self) -> None:
        account = BankAccount(initial_balance=10.0)
        result = attempt(account.deposit, 5.0)
        assert result.ok
        assert bool(result) is True
        assert result.value == 15.0
        assert result.invariants == ()

    def test_invalid_argument_becomes_failed_result(self) -> None:
        account = BankAccount(initial_balance=10.0)
        result = attempt(account.withdraw, 50.0)
        assert not result
        assert result.value is None
        assert result.invariants == (Invariant.SUFFICIENT_FUNDS.value,)
        assert "insufficient funds" in result.reason
        assert account.balance == 10.0

    def test_constructor_failure(self) -> None:
        result = attempt(Employee, "Alan", -1.0)
        assert result.invariants == (Invariant.SALARY_NON_NEGATIVE.value,)
        assert result.details.startswith("InvalidArgumentError")

    def test_pydantic_validation_error_lists_all_invariants(self) -> None:
        result = attempt(Car, make="", model="", year=1885)
        assert not result.ok
        assert set(result.invariants) == {
            Invariant.MAKE_NOT_BLANK.value,
            Invariant.MODEL_NOT_BLANK.value,
            Invariant.YEAR_MIN.value,
        }
        assert result.reason.startswith("make:")

    def test_invalid_state_becomes_failed_result(self) -> None:
        builder = ImmutablePerson.builder().with_age(3)
        result = attempt(builder.build)
        assert result.invariants == (Invariant.BUILDER_REQUIRED_FIELD.value,)
        assert result.details.startswith("InvalidStateError")

    def test_builder_collection_error_becomes_failed_result(self) -> None:
        builder = ImmutablePerson.builder()
        result = attempt(builder.with_hobbies, "chess")
        assert not result.ok
        assert result.invariants == (Invariant.HOBBIES_COLLECTION.value,)

    def test_successful_build(self) -> None:
        result = attempt(ImmutablePerson.builder().with_name("Ada").with_age(3).build)
        assert result.ok
        assert isinstance(result.value, ImmutablePerson)

    def test_unrelated_errors_propagate(self) -> None:
        def broken() -> None:
            raise KeyError("not an invariant")

        with pytest.raises(KeyError):
            attempt(broken)

    def test_result_is_frozen(self) -> None:
        result = attempt(BankAccount)
        assert isinstance(result, OperationResult)
        with pytest.raises(AttributeError):
            result.ok = False  # type: ignore
