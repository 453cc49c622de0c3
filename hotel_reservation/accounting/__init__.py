"""
Модуль контекста учета (Accounting Context).

Отвечает за простые банковские счета:
- Пополнение и снятие средств
- Историю операций и печать выписки
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
