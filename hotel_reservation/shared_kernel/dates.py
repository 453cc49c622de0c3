"""
Преобразование внешних представлений дат в календарную дату.

Внутри системы используется только ``datetime.date`` (год, месяц, день),
время суток отбрасывается.
"""

from datetime import date, datetime
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .domain import ValidationError

DEFAULT_DATE_FORMAT = "%d-%m-%Y"

_date_adapter = TypeAdapter(date)


def to_calendar_date(value: Any, date_format: str = DEFAULT_DATE_FORMAT) -> date:
    """
    Приводит значение к календарной дате.

    Args:
        value: ``date``, ``datetime`` или строка в формате ``date_format``
            (по умолчанию "30-06-2026") либо ISO-8601 ("2026-06-30").
        date_format: Формат строки день-месяц-год.

    Raises:
        ValidationError: Если дата не указана или не распознана.
    """
    if value is None:
        raise ValidationError("Дата не может быть пустой")

    # datetime - подкласс date, поэтому проверяем его первым
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.strptime(text, date_format).date()
        except ValueError:
            pass
        try:
            return _date_adapter.validate_python(text)
        except PydanticValidationError:
            raise ValidationError(f"Некорректная дата: {value!r}") from None

    raise ValidationError(f"Неподдерживаемый тип даты: {type(value).__name__}")


def format_calendar_date(value: date, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Форматирует дату для отчетов."""
    return value.strftime(date_format)
