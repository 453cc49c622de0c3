"""
Модуль контекста бронирования (Booking Context).

Отвечает за бронирование номеров в отеле, включая:
- Каталог номеров и учет балансов пользователей
- Проверку доступности номеров и расчет стоимости
- Снимки условий на момент бронирования
- Отчеты по номерам, бронированиям и пользователям
"""

from . import application, domain, infrastructure, interfaces, reporting

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
    "reporting",
]
