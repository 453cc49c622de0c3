from datetime import date

import pytest

from hotel_reservation.accounting.domain import Account, TransactionType
from hotel_reservation.shared_kernel import InsufficientFundsError, ValidationError


def test_new_account_has_zero_balance():
    account = Account()
    assert account.balance == 0
    assert account.statement() == []


def test_deposit_and_withdraw():
    """Тест: операции меняют баланс и записываются в историю."""
    account = Account()

    account.deposit(1000, date(2012, 1, 10))
    account.deposit(2000, date(2012, 1, 13))
    withdrawal = account.withdraw(500, date(2012, 1, 14))

    assert account.balance == 2500
    assert withdrawal.type == TransactionType.WITHDRAWAL
    assert withdrawal.balance_after == 2500
    assert withdrawal.signed_amount == -500


def test_statement_is_newest_first():
    account = Account()
    account.deposit(1000, date(2012, 1, 10))
    account.withdraw(400, date(2012, 1, 11))

    statement = account.statement()

    assert [t.on for t in statement] == [date(2012, 1, 11), date(2012, 1, 10)]
    assert [t.balance_after for t in statement] == [600, 1000]


@pytest.mark.parametrize("amount", [0, -100])
def test_non_positive_amounts_are_rejected(amount):
    account = Account()
    with pytest.raises(ValidationError, match="должна быть положительной"):
        account.deposit(amount, date(2012, 1, 10))
    with pytest.raises(ValidationError):
        account.withdraw(amount, date(2012, 1, 10))
    assert account.transactions == []


def test_missing_date_is_rejected():
    with pytest.raises(ValidationError, match="Дата операции"):
        Account().deposit(100, None)


def test_withdraw_more_than_balance_fails():
    account = Account()
    account.deposit(300, date(2012, 1, 10))

    with pytest.raises(InsufficientFundsError):
        account.withdraw(1000, date(2012, 1, 11))

    assert account.balance == 300
    assert len(account.transactions) == 1
