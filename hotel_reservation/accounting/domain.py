"""
Доменная модель контекста учета.

Счет (Account) с операциями пополнения и снятия и историей транзакций.
Контекст не разделяет состояние с контекстом бронирования.
"""

from datetime import date
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from ..shared_kernel import InsufficientFundsError, ValidationError


class TransactionType(str, Enum):
    """Типы транзакций."""

    DEPOSIT = "deposit"  # Пополнение
    WITHDRAWAL = "withdrawal"  # Снятие


class Transaction(BaseModel):
    """Проведенная операция по счету."""

    model_config = ConfigDict(frozen=True)

    on: date
    amount: int = Field(..., gt=0)
    type: TransactionType
    balance_after: int = Field(..., ge=0)

    @property
    def signed_amount(self) -> int:
        """Сумма со знаком: пополнения положительные, снятия отрицательные."""
        return self.amount if self.type == TransactionType.DEPOSIT else -self.amount


class Account(BaseModel):
    """Банковский счет. Баланс при открытии равен нулю."""

    id: UUID = Field(default_factory=uuid4)
    balance: int = Field(0, ge=0)
    transactions: List[Transaction] = Field(default_factory=list)

    @staticmethod
    def _validate(amount: int, on: Optional[date], operation: str) -> None:
        if amount <= 0:
            raise ValidationError(
                f"Сумма операции '{operation}' должна быть положительной: {amount}"
            )
        if on is None:
            raise ValidationError("Дата операции не может быть пустой")

    def deposit(self, amount: int, on: date) -> Transaction:
        """Пополняет счет."""
        self._validate(amount, on, "пополнение")
        self.balance += amount
        return self._record(amount, on, TransactionType.DEPOSIT)

    def withdraw(self, amount: int, on: date) -> Transaction:
        """Снимает деньги со счета."""
        self._validate(amount, on, "снятие")
        if amount > self.balance:
            raise InsufficientFundsError(required=amount, available=self.balance)
        self.balance -= amount
        return self._record(amount, on, TransactionType.WITHDRAWAL)

    def _record(self, amount: int, on: date, type_: TransactionType) -> Transaction:
        transaction = Transaction(
            on=on, amount=amount, type=type_, balance_after=self.balance
        )
        self.transactions.append(transaction)
        return transaction

    def statement(self) -> List[Transaction]:
        """История операций, сначала новые."""
        return list(reversed(self.transactions))
