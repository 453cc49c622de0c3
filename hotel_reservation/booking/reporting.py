"""
Текстовое представление списков номеров, бронирований и пользователей.

Функции только читают переданные DTO и ничего не изменяют.
"""

from typing import Callable, List, Sequence, TypeVar

from ..shared_kernel import DEFAULT_DATE_FORMAT, format_calendar_date

T = TypeVar("T")


def _render_section(
    title: str, items: Sequence[T], empty_message: str, render: Callable[[T], str]
) -> str:
    lines: List[str] = [f"========== {title} (Latest to Oldest) =========="]
    if not items:
        lines.append(empty_message)
    else:
        lines.extend(render(item) for item in items)
    return "\n".join(lines)


def render_room(room) -> str:
    return (
        f"Room{{Number={room.room_number}, Type={room.room_type.value}, "
        f"Price/Night={room.price_per_night}}}"
    )


def render_user(user) -> str:
    return f"User{{ID={user.user_id}, Balance={user.balance}}}"


def render_booking(booking, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    return (
        f"Booking{{ID={booking.booking_id}, "
        f"User{{ID={booking.user_id}, Balance={booking.user_balance_at_booking}}}, "
        f"Room{{Number={booking.room_number}, Type={booking.room_type.value}, "
        f"Price={booking.price_per_night}}}, "
        f"CheckIn={format_calendar_date(booking.check_in, date_format)}, "
        f"CheckOut={format_calendar_date(booking.check_out, date_format)}, "
        f"Nights={booking.nights}, TotalCost={booking.total_cost}}}"
    )


def render_rooms(rooms: Sequence) -> str:
    """Список номеров, rooms уже упорядочены от новых к старым."""
    return _render_section("ALL ROOMS", rooms, "No rooms available", render_room)


def render_bookings(bookings: Sequence, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    return _render_section(
        "ALL BOOKINGS",
        bookings,
        "No bookings available",
        lambda booking: render_booking(booking, date_format),
    )


def render_users(users: Sequence) -> str:
    return _render_section("ALL USERS", users, "No users available", render_user)
