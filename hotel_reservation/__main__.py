"""
Демонстрация работы сервиса: python -m hotel_reservation
"""

from datetime import date

from .bootstrap import bootstrap_app
from .shared_kernel import RoomType, configure_logging


def run_hotel_demo(hotel) -> None:
    print("========== CREATING ROOMS ==========")
    hotel.set_room(1, RoomType.STANDARD, 1000)
    hotel.set_room(2, RoomType.JUNIOR, 2000)
    hotel.set_room(3, RoomType.MASTER, 3000)

    print("\n========== CREATING USERS ==========")
    hotel.set_user(1, 5000)
    hotel.set_user(2, 10000)

    print("\n========== BOOKING ATTEMPTS ==========")
    # 7 ночей по 2000 - у пользователя 1 не хватит средств
    hotel.book_room(1, 2, "30-06-2026", "07-07-2026")
    # Дата выезда раньше даты заезда
    hotel.book_room(1, 2, "07-07-2026", "30-06-2026")
    hotel.book_room(1, 1, "07-07-2026", "08-07-2026")
    # Пересекается с предыдущим бронированием номера 1
    hotel.book_room(2, 1, "07-07-2026", "09-07-2026")
    hotel.book_room(2, 3, "07-07-2026", "08-07-2026")

    print("\n========== UPDATING ROOM 1 ==========")
    hotel.set_room(1, RoomType.MASTER, 10000)

    print()
    print(hotel.print_all())
    print()
    print(hotel.print_all_users())


def run_ledger_demo(accounts) -> None:
    print("\n========== BANKING SERVICE ==========")
    account_id = accounts.open_account()
    accounts.deposit(account_id, 1000, date(2012, 1, 10))
    accounts.deposit(account_id, 2000, date(2012, 1, 13))
    accounts.withdraw(account_id, 500, date(2012, 1, 14))
    print(accounts.print_statement(account_id))


def main() -> None:
    app = bootstrap_app()
    configure_logging(app["settings"].log_level)
    run_hotel_demo(app["hotel_service"])
    run_ledger_demo(app["account_service"])


if __name__ == "__main__":
    main()
