"""
Прикладной слой контекста бронирования.

Содержит сервисы приложения, которые координируют
взаимодействие между внешними интерфейсами и доменной моделью:
каталог номеров, учет пользователей, бронирование и отчеты.
"""

from datetime import date
from typing import Any, List, Optional

from pydantic import BaseModel

from ..shared_kernel import (
    DEFAULT_DATE_FORMAT,
    ConsoleLogger,
    DomainException,
    ILogger,
    RoomType,
    ValidationError,
    to_calendar_date,
)
from . import interfaces as ports
from . import reporting
from .domain import Booking, BookingResult, BookingService, Room, User

# DTO для исходящих данных


class RoomDTO(BaseModel):
    """DTO для представления номера."""

    room_number: int
    room_type: RoomType
    price_per_night: int

    @classmethod
    def from_domain(cls, room: Room) -> "RoomDTO":
        """Создает DTO из доменной модели."""
        return cls(
            room_number=room.room_number,
            room_type=room.room_type,
            price_per_night=room.price_per_night,
        )


class UserDTO(BaseModel):
    """DTO для представления пользователя."""

    user_id: int
    balance: int

    @classmethod
    def from_domain(cls, user: User) -> "UserDTO":
        """Создает DTO из доменной модели."""
        return cls(user_id=user.user_id, balance=user.balance)


class BookingDTO(BaseModel):
    """DTO для представления бронирования вместе со снимком условий."""

    booking_id: int
    user_id: int
    user_balance_at_booking: int
    room_number: int
    room_type: RoomType
    price_per_night: int
    check_in: date
    check_out: date
    nights: int
    total_cost: int

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingDTO":
        """Создает DTO из доменной модели."""
        return cls(
            booking_id=booking.booking_id,
            user_id=booking.user.user_id,
            user_balance_at_booking=booking.user.balance,
            room_number=booking.room.room_number,
            room_type=booking.room.room_type,
            price_per_night=booking.room.price_per_night,
            check_in=booking.check_in,
            check_out=booking.check_out,
            nights=booking.nights,
            total_cost=booking.total_cost,
        )


# Сервисы приложения


class RoomApplicationService:
    """Каталог номеров: создание и обновление номеров."""

    def __init__(self, uow: ports.IBookingUnitOfWork, logger: Optional[ILogger] = None):
        """Инициализирует сервис."""
        self._uow = uow
        self._logger = logger or ConsoleLogger()

    def set_room(self, room_number: int, room_type: RoomType, price_per_night: int) -> RoomDTO:
        """
        Создает номер или обновляет тип и цену существующего.

        Raises:
            ValidationError: Если цена отрицательная или тип номера неизвестен.
        """
        with self._uow:
            room = self._uow.rooms.get_by_number(room_number)
            if room is not None:
                room.update(room_type, price_per_night)
                self._logger.info(f"Room {room_number} updated successfully")
            else:
                room = Room.create(room_number, room_type, price_per_night)
                self._uow.rooms.add(room)
                self._logger.info(f"Room {room_number} created successfully")
            return RoomDTO.from_domain(room)

    def get_room(self, room_number: int) -> Optional[RoomDTO]:
        """Возвращает информацию о номере."""
        room = self._uow.rooms.get_by_number(room_number)
        return None if room is None else RoomDTO.from_domain(room)


class UserApplicationService:
    """Учет пользователей и их балансов."""

    def __init__(self, uow: ports.IBookingUnitOfWork, logger: Optional[ILogger] = None):
        """Инициализирует сервис."""
        self._uow = uow
        self._logger = logger or ConsoleLogger()

    def set_user(self, user_id: int, balance: int) -> UserDTO:
        """
        Создает пользователя, если его еще нет.

        Повторный вызов для существующего пользователя ничего не меняет
        и возвращает его текущее состояние.

        Raises:
            ValidationError: Если новый пользователь создается с отрицательным балансом.
        """
        with self._uow:
            user = self._uow.users.get_by_id(user_id)
            if user is not None:
                self._logger.info(f"User {user_id} already exists")
                return UserDTO.from_domain(user)

            user = User.create(user_id, balance)
            self._uow.users.add(user)
            self._logger.info(f"User {user_id} created successfully")
            return UserDTO.from_domain(user)

    def get_user(self, user_id: int) -> Optional[UserDTO]:
        """Возвращает информацию о пользователе."""
        user = self._uow.users.get_by_id(user_id)
        return None if user is None else UserDTO.from_domain(user)


class BookingApplicationService:
    """Сервис приложения для бронирования номеров."""

    def __init__(
        self,
        uow: ports.IBookingUnitOfWork,
        logger: Optional[ILogger] = None,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        """Инициализирует сервис."""
        self._uow = uow
        self._logger = logger or ConsoleLogger()
        self._date_format = date_format
        self._booking_service = BookingService(
            rooms=uow.rooms,
            users=uow.users,
            bookings=uow.bookings,
            booking_ids=uow.booking_ids,
        )

    def book_room(self, user_id: int, room_number: int, check_in: Any, check_out: Any) -> BookingResult:
        """
        Бронирует номер для пользователя.

        Даты могут быть переданы как ``date``, ``datetime`` или строка.
        Доменные ошибки не выбрасываются, а возвращаются в результате.
        """
        try:
            check_in = to_calendar_date(check_in, self._date_format)
            check_out = to_calendar_date(check_out, self._date_format)
        except ValidationError as error:
            return self._report_failure(user_id, room_number, error)

        with self._uow:
            result = self._booking_service.book_room(user_id, room_number, check_in, check_out)

        if not result.is_success:
            return self._report_failure(user_id, room_number, result.error)

        booking = result.booking
        self._logger.info(
            f"Booking successful! User {user_id} booked Room {room_number} "
            f"for {booking.nights} nights. Total cost: {booking.total_cost}",
            booking_id=booking.booking_id,
        )
        return result

    def _report_failure(
        self, user_id: int, room_number: int, error: DomainException
    ) -> BookingResult:
        self._logger.warning(
            f"Booking failed: {error}",
            kind=error.kind,
            user_id=user_id,
            room_number=room_number,
        )
        return BookingResult.failure(error)

    def get_booking(self, booking_id: int) -> Optional[BookingDTO]:
        """Возвращает информацию о бронировании."""
        booking = self._uow.bookings.get_by_id(booking_id)
        return None if booking is None else BookingDTO.from_domain(booking)


class ReportingService:
    """Чтение коллекций в обратном порядке добавления (сначала новые)."""

    def __init__(self, uow: ports.IBookingUnitOfWork, date_format: str = DEFAULT_DATE_FORMAT):
        self._uow = uow
        self._date_format = date_format

    def list_rooms(self) -> List[RoomDTO]:
        return [RoomDTO.from_domain(room) for room in reversed(self._uow.rooms.list_all())]

    def list_bookings(self) -> List[BookingDTO]:
        return [
            BookingDTO.from_domain(booking)
            for booking in reversed(self._uow.bookings.list_all())
        ]

    def list_users(self) -> List[UserDTO]:
        return [UserDTO.from_domain(user) for user in reversed(self._uow.users.list_all())]

    def print_all(self) -> str:
        """Номера и бронирования в текстовом виде."""
        return "\n\n".join(
            [
                reporting.render_rooms(self.list_rooms()),
                reporting.render_bookings(self.list_bookings(), self._date_format),
            ]
        )

    def print_all_users(self) -> str:
        return reporting.render_users(self.list_users())


class HotelService:
    """
    Внешняя точка входа сервиса бронирования.

    Объединяет сервисы приложения и гарантирует, что ожидаемые ошибки
    (ValidationError и т.д.) только сообщаются в лог и не прерывают работу.
    """

    def __init__(
        self,
        uow: ports.IBookingUnitOfWork,
        logger: Optional[ILogger] = None,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        self._logger = logger or ConsoleLogger()
        self.rooms = RoomApplicationService(uow, self._logger)
        self.users = UserApplicationService(uow, self._logger)
        self.bookings = BookingApplicationService(uow, self._logger, date_format)
        self.reports = ReportingService(uow, date_format)

    def set_room(self, room_number: int, room_type: RoomType, price_per_night: int) -> bool:
        """Создает или обновляет номер. Возвращает False, если данные некорректны."""
        try:
            self.rooms.set_room(room_number, room_type, price_per_night)
        except DomainException as e:
            self._logger.error(f"Error setting room: {e}", kind=e.kind)
            return False
        return True

    def set_user(self, user_id: int, balance: int) -> bool:
        """Создает пользователя. Возвращает False, если данные некорректны."""
        try:
            self.users.set_user(user_id, balance)
        except DomainException as e:
            self._logger.error(f"Error creating user: {e}", kind=e.kind)
            return False
        return True

    def book_room(self, user_id: int, room_number: int, check_in: Any, check_out: Any) -> BookingResult:
        return self.bookings.book_room(user_id, room_number, check_in, check_out)

    def list_rooms(self) -> List[RoomDTO]:
        return self.reports.list_rooms()

    def list_bookings(self) -> List[BookingDTO]:
        return self.reports.list_bookings()

    def list_users(self) -> List[UserDTO]:
        return self.reports.list_users()

    def print_all(self) -> str:
        return self.reports.print_all()

    def print_all_users(self) -> str:
        return self.reports.print_all_users()
