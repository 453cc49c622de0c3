import logging
from datetime import date

import pytest

from hotel_reservation import Settings, bootstrap_app
from hotel_reservation.booking.application import HotelService
from hotel_reservation.shared_kernel import (
    InsufficientFundsError,
    NotFoundError,
    RoomType,
    UnavailableError,
    ValidationError,
)


@pytest.fixture
def hotel() -> HotelService:
    """Фикстура, предоставляющая сервис с чистым хранилищем."""
    return bootstrap_app()["hotel_service"]


@pytest.fixture
def seeded_hotel(hotel: HotelService) -> HotelService:
    """Номера и пользователи из демонстрационного сценария."""
    hotel.set_room(1, RoomType.STANDARD, 1000)
    hotel.set_room(2, RoomType.JUNIOR, 2000)
    hotel.set_room(3, RoomType.MASTER, 3000)
    hotel.set_user(1, 5000)
    hotel.set_user(2, 10000)
    return hotel


def _balance(hotel: HotelService, user_id: int) -> int:
    return hotel.users.get_user(user_id).balance


def test_set_room_creates_and_updates_without_duplicates(hotel: HotelService):
    """Тест: повторный set_room обновляет номер, а не создает новый."""
    assert hotel.set_room(5, RoomType.STANDARD, 1200)
    rooms = hotel.list_rooms()
    assert len(rooms) == 1
    assert rooms[0].room_type == RoomType.STANDARD
    assert rooms[0].price_per_night == 1200

    assert hotel.set_room(5, RoomType.MASTER, 0)
    rooms = hotel.list_rooms()
    assert len(rooms) == 1
    assert rooms[0].room_type == RoomType.MASTER
    assert rooms[0].price_per_night == 0


def test_set_room_rejects_negative_price(hotel: HotelService):
    with pytest.raises(ValidationError):
        hotel.rooms.set_room(5, RoomType.STANDARD, -1)

    assert hotel.set_room(5, RoomType.STANDARD, -1) is False
    assert hotel.list_rooms() == []


def test_set_room_update_with_negative_price_keeps_room(hotel: HotelService):
    hotel.set_room(5, RoomType.STANDARD, 1200)

    assert hotel.set_room(5, RoomType.MASTER, -1) is False

    room = hotel.rooms.get_room(5)
    assert room.room_type == RoomType.STANDARD
    assert room.price_per_night == 1200


def test_set_room_with_invalid_price_is_reported_and_keeps_room(hotel: HotelService):
    """Тест: некорректная цена при обновлении не меняет номер и не роняет сервис."""
    hotel.set_room(1, RoomType.STANDARD, 1000)

    assert hotel.set_room(1, RoomType.MASTER, 1.5) is False
    assert hotel.set_room(1, "PENTHOUSE", 2000) is False

    room = hotel.rooms.get_room(1)
    assert room.room_type == RoomType.STANDARD
    assert room.price_per_night == 1000


@pytest.mark.parametrize("amount", ["100", 1.5, None])
def test_non_integer_amounts_are_reported(hotel: HotelService, amount):
    assert hotel.set_user(1, amount) is False
    assert hotel.set_room(1, RoomType.STANDARD, amount) is False

    assert hotel.list_users() == []
    assert hotel.list_rooms() == []


def test_set_user_is_idempotent(hotel: HotelService):
    """Тест: повторное создание пользователя не меняет баланс."""
    assert hotel.set_user(1, 5000)
    assert hotel.set_user(1, 99999)
    assert hotel.set_user(1, -1)

    users = hotel.list_users()
    assert len(users) == 1
    assert users[0].balance == 5000


def test_set_user_rejects_negative_balance(hotel: HotelService):
    with pytest.raises(ValidationError):
        hotel.users.set_user(1, -1)
    assert hotel.set_user(1, -1) is False
    assert hotel.list_users() == []


def test_booking_succeeds_and_deducts_balance(seeded_hotel: HotelService):
    result = seeded_hotel.book_room(1, 1, date(2026, 7, 7), date(2026, 7, 8))

    assert result.is_success
    assert result.booking.total_cost == 1000
    assert _balance(seeded_hotel, 1) == 4000
    assert len(seeded_hotel.list_bookings()) == 1


def test_booking_accepts_string_dates(seeded_hotel: HotelService):
    result = seeded_hotel.book_room(1, 1, "07-07-2026", "2026-07-08")
    assert result.is_success
    assert result.booking.check_in == date(2026, 7, 7)


def test_insufficient_funds_leaves_state_unchanged(seeded_hotel: HotelService):
    """Тест: 7 ночей по 2000 стоят 14000, у пользователя только 5000."""
    result = seeded_hotel.book_room(1, 2, date(2026, 6, 30), date(2026, 7, 7))

    assert not result.is_success
    assert isinstance(result.error, InsufficientFundsError)
    assert result.error.required == 14000
    assert _balance(seeded_hotel, 1) == 5000
    assert seeded_hotel.list_bookings() == []


def test_overlapping_booking_is_rejected(seeded_hotel: HotelService):
    seeded_hotel.book_room(1, 1, date(2026, 7, 7), date(2026, 7, 8))

    result = seeded_hotel.book_room(2, 1, date(2026, 7, 7), date(2026, 7, 9))

    assert isinstance(result.error, UnavailableError)
    assert _balance(seeded_hotel, 2) == 10000
    assert len(seeded_hotel.list_bookings()) == 1


def test_touching_stays_conflict(seeded_hotel: HotelService):
    """Тест: заезд в день выезда предыдущего гостя отклоняется."""
    seeded_hotel.book_room(1, 1, date(2026, 7, 7), date(2026, 7, 8))

    after = seeded_hotel.book_room(2, 1, date(2026, 7, 8), date(2026, 7, 9))
    before = seeded_hotel.book_room(2, 1, date(2026, 7, 6), date(2026, 7, 7))

    assert after.error_kind == "unavailable"
    assert before.error_kind == "unavailable"
    assert len(seeded_hotel.list_bookings()) == 1


def test_same_dates_on_other_room_are_allowed(seeded_hotel: HotelService):
    seeded_hotel.book_room(1, 1, date(2026, 7, 7), date(2026, 7, 8))
    result = seeded_hotel.book_room(2, 3, date(2026, 7, 7), date(2026, 7, 8))
    assert result.is_success


@pytest.mark.parametrize(
    "check_in, check_out",
    [
        (date(2026, 7, 7), date(2026, 6, 30)),
        (date(2026, 7, 7), date(2026, 7, 7)),
        (None, date(2026, 7, 7)),
        ("garbage", date(2026, 7, 7)),
    ],
)
def test_invalid_dates_are_reported(seeded_hotel: HotelService, check_in, check_out):
    result = seeded_hotel.book_room(1, 2, check_in, check_out)

    assert isinstance(result.error, ValidationError)
    assert _balance(seeded_hotel, 1) == 5000
    assert seeded_hotel.list_bookings() == []


@pytest.mark.parametrize("user_id, room_number", [(99, 1), (1, 99)])
def test_unknown_user_or_room(seeded_hotel: HotelService, user_id, room_number):
    result = seeded_hotel.book_room(user_id, room_number, date(2026, 7, 7), date(2026, 7, 8))

    assert isinstance(result.error, NotFoundError)
    assert result.error_kind == "not_found"
    assert seeded_hotel.list_bookings() == []


def test_room_update_does_not_change_existing_booking(seeded_hotel: HotelService):
    """Тест: изменение цены номера не влияет на уже созданное бронирование."""
    seeded_hotel.book_room(1, 1, date(2026, 7, 7), date(2026, 7, 8))

    seeded_hotel.set_room(1, RoomType.MASTER, 10000)

    booking = seeded_hotel.list_bookings()[0]
    assert booking.total_cost == 1000
    assert booking.room_type == RoomType.STANDARD
    assert booking.price_per_night == 1000
    assert seeded_hotel.rooms.get_room(1).price_per_night == 10000


def test_balance_equals_initial_minus_costs(seeded_hotel: HotelService):
    stays = [
        (1, date(2026, 8, 1), date(2026, 8, 2)),
        (1, date(2026, 8, 5), date(2026, 8, 7)),
        (2, date(2026, 8, 1), date(2026, 8, 2)),
        # Пересекается с первым бронированием
        (1, date(2026, 8, 1), date(2026, 8, 3)),
        # Не хватает средств
        (3, date(2026, 9, 1), date(2026, 9, 5)),
    ]
    results = [
        seeded_hotel.book_room(2, room, check_in, check_out)
        for room, check_in, check_out in stays
    ]

    spent = sum(r.booking.total_cost for r in results if r.is_success)
    assert [r.is_success for r in results] == [True, True, True, False, False]
    assert spent == 1000 + 2000 + 2000
    assert _balance(seeded_hotel, 2) == 10000 - spent
    assert _balance(seeded_hotel, 2) >= 0


def test_get_booking_returns_snapshot(seeded_hotel: HotelService):
    result = seeded_hotel.book_room(1, 1, date(2026, 7, 7), date(2026, 7, 9))

    booking = seeded_hotel.bookings.get_booking(result.booking.booking_id)

    assert booking.user_id == 1
    assert booking.user_balance_at_booking == 5000
    assert booking.nights == 2
    assert booking.total_cost == 2000
    assert seeded_hotel.bookings.get_booking(999) is None


def test_lists_are_newest_first(seeded_hotel: HotelService):
    seeded_hotel.book_room(1, 1, date(2026, 7, 7), date(2026, 7, 8))
    seeded_hotel.book_room(2, 3, date(2026, 7, 7), date(2026, 7, 8))

    assert [r.room_number for r in seeded_hotel.list_rooms()] == [3, 2, 1]
    assert [u.user_id for u in seeded_hotel.list_users()] == [2, 1]
    assert [b.booking_id for b in seeded_hotel.list_bookings()] == [2, 1]


def test_room_update_keeps_insertion_position(seeded_hotel: HotelService):
    seeded_hotel.set_room(1, RoomType.MASTER, 10000)
    assert [r.room_number for r in seeded_hotel.list_rooms()] == [3, 2, 1]


def test_booking_outcomes_are_logged(seeded_hotel: HotelService, caplog):
    caplog.set_level(logging.INFO, logger="hotel_reservation")

    seeded_hotel.book_room(1, 1, date(2026, 7, 7), date(2026, 7, 8))
    seeded_hotel.book_room(2, 1, date(2026, 7, 7), date(2026, 7, 9))

    messages = [record.getMessage() for record in caplog.records]
    assert any("Booking successful! User 1 booked Room 1" in m for m in messages)
    failures = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(failures) == 1
    assert '"kind": "unavailable"' in failures[0].getMessage()


def test_first_booking_id_comes_from_settings():
    hotel = bootstrap_app(Settings(first_booking_id=100))["hotel_service"]
    hotel.set_room(1, RoomType.STANDARD, 1000)
    hotel.set_user(1, 5000)

    result = hotel.book_room(1, 1, date(2026, 7, 7), date(2026, 7, 8))

    assert result.booking.booking_id == 100
