"""
Общее ядро (Shared Kernel) для системы бронирования отеля.

Содержит общие типы данных и утилиты, используемые в различных ограниченных контекстах.
"""

from .dates import DEFAULT_DATE_FORMAT, format_calendar_date, to_calendar_date
from .domain import (
    DateRange,
    # Исключения
    DomainException,
    InsufficientFundsError,
    NotFoundError,
    # Перечисления
    RoomType,
    UnavailableError,
    ValidationError,
)
from .infrastructure import ConsoleLogger, configure_logging
from .interfaces import ILogger

__all__ = [
    # Основные классы
    "DateRange",
    # Перечисления
    "RoomType",
    # Исключения
    "DomainException",
    "ValidationError",
    "NotFoundError",
    "UnavailableError",
    "InsufficientFundsError",
    # Утилиты
    "DEFAULT_DATE_FORMAT",
    "to_calendar_date",
    "format_calendar_date",
    # Логирование
    "ILogger",
    "ConsoleLogger",
    "configure_logging",
]
