"""
Интерфейсы (порты) для контекста учета.
"""

from __future__ import annotations

from typing import Optional, Protocol
from uuid import UUID

from .domain import Account


class IAccountRepository(Protocol):
    """Интерфейс репозитория для счетов."""

    def save(self, account: Account) -> None: ...
    def get_by_id(self, account_id: UUID) -> Optional[Account]: ...
