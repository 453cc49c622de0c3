"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев в памяти (хранилище сущностей),
генератор идентификаторов бронирований и Unit of Work.
"""

import itertools
import threading
from typing import Dict, List, Optional

from ..shared_kernel import ConsoleLogger, DateRange, ILogger
from . import interfaces as ports
from .domain import Booking, Room, User


class InMemoryRoomRepository(ports.IRoomRepository):
    """Реализация репозитория номеров в памяти."""

    def __init__(self) -> None:
        # Порядок вставки сохраняется: обновление номера не меняет его позицию
        self._rooms: Dict[int, Room] = {}

    def add(self, room: Room) -> None:
        if room.room_number in self._rooms:
            raise ValueError(f"Room {room.room_number} already exists")
        self._rooms[room.room_number] = room

    def get_by_number(self, room_number: int) -> Optional[Room]:
        return self._rooms.get(room_number)

    def list_all(self) -> List[Room]:
        return list(self._rooms.values())


class InMemoryUserRepository(ports.IUserRepository):
    """Реализация репозитория пользователей в памяти."""

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}

    def add(self, user: User) -> None:
        if user.user_id in self._users:
            raise ValueError(f"User {user.user_id} already exists")
        self._users[user.user_id] = user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def list_all(self) -> List[User]:
        return list(self._users.values())


class InMemoryBookingRepository(ports.IBookingRepository):
    """Реализация репозитория бронирований в памяти."""

    def __init__(self) -> None:
        self._bookings: List[Booking] = []

    def add(self, booking: Booking) -> None:
        if self.get_by_id(booking.booking_id) is not None:
            raise ValueError(f"Booking with id {booking.booking_id} already exists")
        self._bookings.append(booking)

    def get_by_id(self, booking_id: int) -> Optional[Booking]:
        for booking in self._bookings:
            if booking.booking_id == booking_id:
                return booking
        return None

    def find_by_room(self, room_number: int) -> List[Booking]:
        return [
            booking for booking in self._bookings
            if booking.room_number == room_number
        ]

    def find_overlapping(self, room_number: int, period: DateRange) -> List[Booking]:
        return [
            booking for booking in self.find_by_room(room_number)
            if booking.conflicts_with(period)
        ]

    def list_all(self) -> List[Booking]:
        return list(self._bookings)


class BookingIdSequence(ports.IBookingIdSequence):
    """Монотонный счетчик идентификаторов. Создается один раз и не сбрасывается."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


class BookingUnitOfWork(ports.IBookingUnitOfWork):
    """
    Единица работы для контекста бронирования.

    Пока единица работы открыта, она удерживает блокировку, поэтому
    проверка доступности и фиксация бронирования не перемежаются
    с другими операциями.
    """

    def __init__(
        self,
        rooms_repo: Optional[ports.IRoomRepository] = None,
        users_repo: Optional[ports.IUserRepository] = None,
        bookings_repo: Optional[ports.IBookingRepository] = None,
        booking_ids: Optional[ports.IBookingIdSequence] = None,
        logger: Optional[ILogger] = None,
    ):
        self._rooms = rooms_repo or InMemoryRoomRepository()
        self._users = users_repo or InMemoryUserRepository()
        self._bookings = bookings_repo or InMemoryBookingRepository()
        self._booking_ids = booking_ids or BookingIdSequence()
        self._logger = logger or ConsoleLogger()
        self._lock = threading.RLock()

    @property
    def rooms(self) -> ports.IRoomRepository:
        return self._rooms

    @property
    def users(self) -> ports.IUserRepository:
        return self._users

    @property
    def bookings(self) -> ports.IBookingRepository:
        return self._bookings

    @property
    def booking_ids(self) -> ports.IBookingIdSequence:
        return self._booking_ids

    def commit(self) -> None:
        """Фиксирует все изменения."""
        # Данные уже лежат в памяти, фиксировать нечего
        self._logger.debug("BookingUnitOfWork committed")

    def rollback(self) -> None:
        """Откатывает все изменения."""
        # Мутации выполняются только после всех проверок, откатывать нечего
        self._logger.debug("BookingUnitOfWork rolled back")

    def __enter__(self) -> "BookingUnitOfWork":
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self._lock.release()
