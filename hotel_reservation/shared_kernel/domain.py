"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class RoomType(str, Enum):
    """Типы номеров в отеле."""

    STANDARD = "STANDARD"
    JUNIOR = "JUNIOR"
    MASTER = "MASTER"


class DateRange(BaseModel):
    """Диапазон дат проживания [check_in, check_out)."""

    model_config = ConfigDict(frozen=True)

    check_in: date
    check_out: date

    @field_validator("check_out")
    @classmethod
    def check_out_after_check_in(cls, v, info):
        check_in = info.data.get("check_in")
        if check_in is not None and v <= check_in:
            raise ValueError("Дата выезда должна быть позже даты заезда")
        return v

    @property
    def nights(self) -> int:
        """Количество ночей в бронировании (день выезда не оплачивается)."""
        return (self.check_out - self.check_in).days

    def overlaps(self, other: "DateRange") -> bool:
        """
        Проверяет пересечение двух периодов.

        Соприкосновение границ (выезд в день чужого заезда) тоже считается
        пересечением: в один день номер не передается другому гостю.
        """
        return not (
            self.check_out < other.check_in or self.check_in > other.check_out
        )


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    kind = "domain_error"


class ValidationError(DomainException, ValueError):
    """Некорректные входные данные (отрицательная цена, неверные даты и т.д.)."""

    kind = "validation_error"


class NotFoundError(DomainException, LookupError):
    """Номер или пользователь с указанным идентификатором не найден."""

    kind = "not_found"


class UnavailableError(DomainException):
    """Номер уже забронирован на пересекающиеся даты."""

    kind = "unavailable"


class InsufficientFundsError(DomainException):
    """Баланса недостаточно для оплаты."""

    kind = "insufficient_funds"

    def __init__(self, required: int, available: int):
        super().__init__(
            f"Недостаточно средств. Требуется: {required}, доступно: {available}"
        )
        self.required = required
        self.available = available
