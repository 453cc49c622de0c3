"""
Сервис бронирования номеров отеля.

Номера, пользователи и бронирования хранятся в памяти; бронирование
проверяет пересечение дат и баланс пользователя и сохраняет снимок
условий номера на момент бронирования.
"""

from .bootstrap import bootstrap_app
from .config import Settings

__all__ = ["bootstrap_app", "Settings"]
