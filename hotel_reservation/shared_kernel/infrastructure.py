"""
Инфраструктура общего ядра: реализация логгера поверх модуля ``logging``.
"""

import json
import logging
from typing import Any, Optional

from .interfaces import ILogger

DEFAULT_LOGGER_NAME = "hotel_reservation"


class ConsoleLogger(ILogger):
    """Логгер, передающий сообщения в стандартный ``logging``.

    Дополнительный контекст (kwargs) дописывается к сообщению в виде JSON.
    """

    def __init__(self, name: str = DEFAULT_LOGGER_NAME, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(name)

    @staticmethod
    def _format(message: str, context: dict) -> str:
        if not context:
            return message
        return f"{message} | {json.dumps(context, default=str, ensure_ascii=False)}"

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))


def configure_logging(level: str = "INFO") -> None:
    """Настраивает вывод логов в консоль (используется демонстрацией)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(levelname)s] %(message)s",
    )
