"""
Инфраструктурный слой контекста учета.
"""

from typing import Dict, Optional
from uuid import UUID

from . import interfaces as ports
from .domain import Account


class InMemoryAccountRepository(ports.IAccountRepository):
    """Реализация репозитория счетов в памяти."""

    def __init__(self) -> None:
        self._accounts: Dict[UUID, Account] = {}

    def save(self, account: Account) -> None:
        self._accounts[account.id] = account

    def get_by_id(self, account_id: UUID) -> Optional[Account]:
        return self._accounts.get(account_id)
