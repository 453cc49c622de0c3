from typing import Any, Dict, Optional

from .accounting.application import AccountApplicationService
from .accounting.infrastructure import InMemoryAccountRepository
from .booking.application import HotelService
from .booking.infrastructure import BookingIdSequence, BookingUnitOfWork
from .config import Settings
from .shared_kernel import ConsoleLogger


def bootstrap_app(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or Settings()
    logger = ConsoleLogger(settings.logger_name)

    # 1. Счетчик бронирований создается один раз на все время работы сервиса
    booking_ids = BookingIdSequence(start=settings.first_booking_id)

    # 2. Создаем Unit of Work для контекста бронирования
    booking_uow = BookingUnitOfWork(booking_ids=booking_ids, logger=logger)

    # 3. Создаем сервисы, передавая им зависимости
    hotel_service = HotelService(booking_uow, logger=logger, date_format=settings.date_format)
    account_service = AccountApplicationService(
        InMemoryAccountRepository(), logger=logger, date_format=settings.date_format
    )

    return {
        "settings": settings,
        "booking_uow": booking_uow,
        "hotel_service": hotel_service,
        "account_service": account_service,
    }
