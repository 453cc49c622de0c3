"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from ..shared_kernel import DateRange
from .domain import Booking, Room, User


class IRoomRepository(Protocol):
    """Интерфейс репозитория для номеров."""

    def add(self, room: Room) -> None: ...
    def get_by_number(self, room_number: int) -> Optional[Room]: ...
    def list_all(self) -> List[Room]: ...


class IUserRepository(Protocol):
    """Интерфейс репозитория для пользователей."""

    def add(self, user: User) -> None: ...
    def get_by_id(self, user_id: int) -> Optional[User]: ...
    def list_all(self) -> List[User]: ...


class IBookingRepository(Protocol):
    """Интерфейс репозитория для бронирований."""

    def add(self, booking: Booking) -> None: ...
    def get_by_id(self, booking_id: int) -> Optional[Booking]: ...
    def find_by_room(self, room_number: int) -> List[Booking]: ...
    def find_overlapping(self, room_number: int, period: DateRange) -> List[Booking]: ...
    def list_all(self) -> List[Booking]: ...


class IBookingIdSequence(Protocol):
    """Источник последовательных идентификаторов бронирований."""

    def next_id(self) -> int: ...


class IBookingUnitOfWork(Protocol):
    """Интерфейс Unit of Work для контекста Booking."""

    @property
    def rooms(self) -> IRoomRepository: ...
    @property
    def users(self) -> IUserRepository: ...
    @property
    def bookings(self) -> IBookingRepository: ...
    @property
    def booking_ids(self) -> IBookingIdSequence: ...

    def __enter__(self) -> IBookingUnitOfWork: ...
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
