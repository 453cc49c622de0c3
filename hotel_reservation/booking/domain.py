"""
Доменная модель контекста бронирования.

Содержит сущности Room, User и Booking, снимки коммерческих условий
и доменный сервис, проводящий бронирование через цепочку проверок.
"""

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..shared_kernel import (
    DateRange,
    DomainException,
    InsufficientFundsError,
    NotFoundError,
    RoomType,
    UnavailableError,
    ValidationError,
)

if TYPE_CHECKING:
    from .interfaces import (
        IBookingIdSequence,
        IBookingRepository,
        IRoomRepository,
        IUserRepository,
    )


def _require_non_negative(value: int, field_name: str) -> None:
    # bool - подкласс int, но суммой не является
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} должна быть целым числом: {value!r}")
    if value < 0:
        raise ValidationError(f"{field_name} не может быть отрицательной: {value}")


def _build(model_cls, **data: Any):
    """Создает модель, переводя ошибки pydantic в доменную ValidationError."""
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(str(exc)) from exc


class RoomSnapshot(BaseModel):
    """Условия номера на момент бронирования."""

    model_config = ConfigDict(frozen=True)

    room_number: int
    room_type: RoomType
    price_per_night: int


class UserSnapshot(BaseModel):
    """Состояние пользователя на момент бронирования."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    balance: int


class Room(BaseModel):
    """Номер в отеле. Тип и цена могут меняться, номер комнаты - нет."""

    model_config = ConfigDict(validate_assignment=True)

    room_number: int = Field(..., frozen=True)
    room_type: RoomType
    price_per_night: int = Field(..., ge=0)

    @classmethod
    def create(cls, room_number: int, room_type: RoomType, price_per_night: int) -> "Room":
        """Создает новый номер."""
        _require_non_negative(price_per_night, "Цена за ночь")
        return _build(
            cls,
            room_number=room_number,
            room_type=room_type,
            price_per_night=price_per_night,
        )

    def update(self, room_type: RoomType, price_per_night: int) -> None:
        """Обновляет тип и цену номера. Существующие бронирования не затрагиваются."""
        _require_non_negative(price_per_night, "Цена за ночь")
        # Оба значения проверяются до присваивания, иначе номер изменился бы частично
        candidate = _build(
            type(self),
            **{**self.model_dump(), "room_type": room_type, "price_per_night": price_per_night},
        )
        self.room_type = candidate.room_type
        self.price_per_night = candidate.price_per_night

    def snapshot(self) -> RoomSnapshot:
        return RoomSnapshot(
            room_number=self.room_number,
            room_type=self.room_type,
            price_per_night=self.price_per_night,
        )


class User(BaseModel):
    """Пользователь с балансом. Баланс только уменьшается при бронировании."""

    model_config = ConfigDict(validate_assignment=True)

    user_id: int = Field(..., frozen=True)
    balance: int = Field(..., ge=0)

    @classmethod
    def create(cls, user_id: int, balance: int) -> "User":
        """Создает нового пользователя."""
        _require_non_negative(balance, "Сумма баланса")
        return _build(cls, user_id=user_id, balance=balance)

    def can_afford(self, amount: int) -> bool:
        return amount <= self.balance

    def deduct(self, amount: int) -> None:
        """Списывает сумму с баланса."""
        _require_non_negative(amount, "Сумма списания")
        if not self.can_afford(amount):
            raise InsufficientFundsError(required=amount, available=self.balance)
        self.balance -= amount

    def snapshot(self) -> UserSnapshot:
        return UserSnapshot(user_id=self.user_id, balance=self.balance)


def calculate_total_cost(period: DateRange, price_per_night: int) -> int:
    """Стоимость проживания: число ночей, умноженное на цену за ночь."""
    return period.nights * price_per_night


class Booking(BaseModel):
    """
    Бронирование номера.

    Хранит не ссылки на Room и User, а неизменяемые снимки их данных,
    поэтому последующее изменение каталога не влияет на историю.
    """

    model_config = ConfigDict(frozen=True)

    booking_id: int = Field(..., ge=1)
    user: UserSnapshot
    room: RoomSnapshot
    period: DateRange
    total_cost: int = Field(..., ge=0)

    @property
    def user_id(self) -> int:
        return self.user.user_id

    @property
    def room_number(self) -> int:
        return self.room.room_number

    @property
    def check_in(self) -> date:
        return self.period.check_in

    @property
    def check_out(self) -> date:
        return self.period.check_out

    @property
    def nights(self) -> int:
        return self.period.nights

    def conflicts_with(self, period: DateRange) -> bool:
        """Проверяет, пересекается ли бронирование с указанным периодом."""
        return self.period.overlaps(period)

    @classmethod
    def create(cls, booking_id: int, user: User, room: Room, period: DateRange) -> "Booking":
        """Создает бронирование, фиксируя снимки пользователя и номера."""
        return cls(
            booking_id=booking_id,
            user=user.snapshot(),
            room=room.snapshot(),
            period=period,
            total_cost=calculate_total_cost(period, room.price_per_night),
        )


@dataclass
class BookingDraft:
    """Заявка на бронирование, дополняемая по мере прохождения проверок."""

    user_id: int
    room_number: int
    check_in: date
    check_out: date
    period: Optional[DateRange] = None
    user: Optional[User] = None
    room: Optional[Room] = None
    total_cost: int = 0


@dataclass(frozen=True)
class BookingResult:
    """Итог попытки бронирования: либо бронирование, либо одна ошибка."""

    booking: Optional[Booking] = None
    error: Optional[DomainException] = None

    @classmethod
    def success(cls, booking: Booking) -> "BookingResult":
        return cls(booking=booking)

    @classmethod
    def failure(cls, error: DomainException) -> "BookingResult":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        return None if self.error is None else self.error.kind


Guard = Callable[[BookingDraft], Optional[DomainException]]


class BookingService:
    """
    Доменный сервис бронирования.

    Проверки выполняются строго по порядку: даты, пользователь, номер,
    доступность, стоимость, баланс. Каждая проверка возвращает ошибку или
    None и ничего не изменяет. Состояние меняется только в ``_commit``,
    который вызывается после прохождения всех проверок и сам отказать
    уже не может.
    """

    def __init__(
        self,
        rooms: "IRoomRepository",
        users: "IUserRepository",
        bookings: "IBookingRepository",
        booking_ids: "IBookingIdSequence",
    ):
        self._rooms = rooms
        self._users = users
        self._bookings = bookings
        self._booking_ids = booking_ids

    @property
    def guards(self) -> Tuple[Guard, ...]:
        return (
            self.check_period,
            self.check_user_exists,
            self.check_room_exists,
            self.check_availability,
            self.price_stay,
            self.check_funds,
        )

    def check_period(self, draft: BookingDraft) -> Optional[DomainException]:
        if draft.check_in >= draft.check_out:
            return ValidationError(
                "Некорректные даты: дата заезда должна быть раньше даты выезда"
            )
        draft.period = DateRange(check_in=draft.check_in, check_out=draft.check_out)
        return None

    def check_user_exists(self, draft: BookingDraft) -> Optional[DomainException]:
        draft.user = self._users.get_by_id(draft.user_id)
        if draft.user is None:
            return NotFoundError(f"Пользователь {draft.user_id} не найден")
        return None

    def check_room_exists(self, draft: BookingDraft) -> Optional[DomainException]:
        draft.room = self._rooms.get_by_number(draft.room_number)
        if draft.room is None:
            return NotFoundError(f"Номер {draft.room_number} не найден")
        return None

    def check_availability(self, draft: BookingDraft) -> Optional[DomainException]:
        if self._bookings.find_overlapping(draft.room_number, draft.period):
            return UnavailableError(
                f"Номер {draft.room_number} недоступен на выбранные даты"
            )
        return None

    def price_stay(self, draft: BookingDraft) -> Optional[DomainException]:
        draft.total_cost = calculate_total_cost(draft.period, draft.room.price_per_night)
        return None

    def check_funds(self, draft: BookingDraft) -> Optional[DomainException]:
        if not draft.user.can_afford(draft.total_cost):
            return InsufficientFundsError(
                required=draft.total_cost, available=draft.user.balance
            )
        return None

    def evaluate(self, draft: BookingDraft) -> Optional[DomainException]:
        """Прогоняет заявку через все проверки и возвращает первую ошибку."""
        for guard in self.guards:
            error = guard(draft)
            if error is not None:
                return error
        return None

    def book_room(
        self, user_id: int, room_number: int, check_in: date, check_out: date
    ) -> BookingResult:
        """Бронирует номер, если все проверки пройдены."""
        draft = BookingDraft(
            user_id=user_id,
            room_number=room_number,
            check_in=check_in,
            check_out=check_out,
        )
        error = self.evaluate(draft)
        if error is not None:
            return BookingResult.failure(error)
        return BookingResult.success(self._commit(draft))

    def _commit(self, draft: BookingDraft) -> Booking:
        # Снимок баланса берется до списания
        booking = Booking.create(
            booking_id=self._booking_ids.next_id(),
            user=draft.user,
            room=draft.room,
            period=draft.period,
        )
        draft.user.deduct(booking.total_cost)
        self._bookings.add(booking)
        return booking
