"""
Прикладной слой контекста учета.
"""

from typing import Any, List, Optional
from uuid import UUID

from ..shared_kernel import (
    DEFAULT_DATE_FORMAT,
    ConsoleLogger,
    ILogger,
    NotFoundError,
    format_calendar_date,
    to_calendar_date,
)
from . import interfaces as ports
from .domain import Account, Transaction, TransactionType

STATEMENT_HEADER = "Date       | Amount | Balance"


def format_statement_line(transaction: Transaction, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Строка выписки вида ``14-01-2012 | -500 | 2500``."""
    sign = "+" if transaction.type == TransactionType.DEPOSIT else "-"
    return (
        f"{format_calendar_date(transaction.on, date_format)} | "
        f"{sign}{transaction.amount} | {transaction.balance_after}"
    )


class AccountApplicationService:
    """Сервис приложения для операций со счетами."""

    def __init__(
        self,
        repository: ports.IAccountRepository,
        logger: Optional[ILogger] = None,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        self._repository = repository
        self._logger = logger or ConsoleLogger()
        self._date_format = date_format

    def open_account(self) -> UUID:
        """Открывает новый счет с нулевым балансом."""
        account = Account()
        self._repository.save(account)
        self._logger.info("Account opened", account_id=account.id)
        return account.id

    def _get(self, account_id: UUID) -> Account:
        account = self._repository.get_by_id(account_id)
        if account is None:
            raise NotFoundError(f"Счет {account_id} не найден")
        return account

    def deposit(self, account_id: UUID, amount: int, on: Any) -> int:
        """Пополняет счет и возвращает новый баланс."""
        account = self._get(account_id)
        on = None if on is None else to_calendar_date(on, self._date_format)
        account.deposit(amount, on)
        self._repository.save(account)
        self._logger.info(
            f"Deposit successful: {amount} on {format_calendar_date(on, self._date_format)}"
        )
        return account.balance

    def withdraw(self, account_id: UUID, amount: int, on: Any) -> int:
        """Снимает деньги со счета и возвращает новый баланс."""
        account = self._get(account_id)
        on = None if on is None else to_calendar_date(on, self._date_format)
        account.withdraw(amount, on)
        self._repository.save(account)
        self._logger.info(
            f"Withdrawal successful: {amount} on {format_calendar_date(on, self._date_format)}"
        )
        return account.balance

    def get_balance(self, account_id: UUID) -> int:
        return self._get(account_id).balance

    def statement_lines(self, account_id: UUID) -> List[str]:
        """Строки выписки без заголовка, сначала новые операции."""
        return [
            format_statement_line(transaction, self._date_format)
            for transaction in self._get(account_id).statement()
        ]

    def print_statement(self, account_id: UUID) -> str:
        """Выписка со заголовком в текстовом виде."""
        return "\n".join([STATEMENT_HEADER, *self.statement_lines(account_id)])
